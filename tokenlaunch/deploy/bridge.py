from typing import NamedTuple

from tokenlaunch.deploy.abi import SIGNATURES, encode_function_data
from tokenlaunch.errors import UnsupportedBridgeTransactionError
from tokenlaunch.models import EthereumAddress, MetaTransaction, SafeOperation


class BridgingTransactions(NamedTuple):
    approve: MetaTransaction
    relay: MetaTransaction


def prepare_bridging_tokens(
    token: EthereumAddress,
    receiver: EthereumAddress,
    atoms: int,
    multi_token_mediator: EthereumAddress,
) -> BridgingTransactions:
    """
    Sends `atoms` of `token` through the omnibridge to `receiver` on gnosis chain.
    The approval must be executed first.
    """
    approve = MetaTransaction(
        to=token,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(SIGNATURES.APPROVE, [multi_token_mediator, atoms]),
    )
    relay = MetaTransaction(
        to=multi_token_mediator,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(SIGNATURES.RELAY_TOKENS, [token, receiver, atoms]),
    )
    return BridgingTransactions(approve, relay)


def transfer(token: EthereumAddress, receiver: EthereumAddress, atoms: int) -> MetaTransaction:
    return MetaTransaction(
        to=token,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(SIGNATURES.TRANSFER, [receiver, atoms]),
    )


def relay_through_amb(
    arbitrary_message_bridge: EthereumAddress,
    transaction: MetaTransaction,
    gas_limit: int,
) -> MetaTransaction:
    """
    Asks the arbitrary message bridge to execute `transaction` on gnosis chain.
    On the other side the call comes from the bridge, so only plain calls without
    value can be relayed.
    """
    if transaction.operation != SafeOperation.CALL or transaction.value != 0:
        raise UnsupportedBridgeTransactionError(
            "Only calls with no value can be relayed through the message bridge"
        )
    return MetaTransaction(
        to=arbitrary_message_bridge,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(
            SIGNATURES.REQUIRE_TO_PASS_MESSAGE,
            [transaction.to, transaction.data_bytes, gas_limit],
        ),
    )
