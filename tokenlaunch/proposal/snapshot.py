from eth_abi import decode
from eth_utils import to_hex
from web3 import Web3

from tokenlaunch.deploy import SIGNATURES, encode_function_data, multisend
from tokenlaunch.models import Bytes32, EthereumAddress, MetaTransaction
from tokenlaunch.queries import call


def group_multiple_transactions(
    steps: list[list[MetaTransaction]], multisend_address: EthereumAddress
) -> list[MetaTransaction]:
    """
    One transaction per batch: a batch of a single transaction is kept as is,
    larger batches are executed through multisend.
    """
    grouped = []
    for batch in steps:
        if len(batch) == 0:
            raise ValueError("Cannot group an empty batch of transactions")
        if len(batch) == 1:
            grouped.append(batch[0])
        else:
            grouped.append(multisend(batch, multisend_address))
    return grouped


def get_transaction_hash(
    node: Web3, reality_module: EthereumAddress, transaction: MetaTransaction, index: int
) -> Bytes32:
    """Hash the reality module expects for the `index`-th transaction of a proposal"""
    data = encode_function_data(
        SIGNATURES.GET_TRANSACTION_HASH,
        [
            transaction.to,
            transaction.value,
            transaction.data_bytes,
            int(transaction.operation),
            index,
        ],
    )
    (tx_hash,) = decode(["bytes32"], call(node, reality_module, data))
    return to_hex(tx_hash)


def get_snapshot_transaction_hashes(
    steps: list[list[MetaTransaction]],
    multisend_address: EthereumAddress,
    reality_module: EthereumAddress,
    node: Web3,
) -> list[Bytes32]:
    """The hashes to attach to a snapshot proposal executing `steps`"""
    grouped = group_multiple_transactions(steps, multisend_address)
    return [
        get_transaction_hash(node, reality_module, tx, index)
        for index, tx in enumerate(grouped)
    ]
