from typing import NamedTuple, Optional

from eth_abi import encode
from eth_abi.packed import encode_packed
from eth_utils import keccak, to_bytes
from web3 import Web3

from tokenlaunch.constants import (
    SAFE_SUPPORTED_CHAINS,
    SAFE_V130_CREATE_CALL,
    SAFE_V130_FALLBACK_HANDLER,
    SAFE_V130_MULTISEND_CALL_ONLY,
    SAFE_V130_PROXY_FACTORY,
    SAFE_V130_SINGLETON,
    ZERO_ADDRESS,
)
from tokenlaunch.deploy.abi import SIGNATURES, encode_function_data
from tokenlaunch.deploy.create2 import create2_address
from tokenlaunch.errors import UnsupportedChainError
from tokenlaunch.models import (
    ChainId,
    EthereumAddress,
    HexStr,
    MetaTransaction,
    SafeDeploymentAddresses,
    SafeOperation,
)
from tokenlaunch.queries import proxy_creation_code


class PreparedSafe(NamedTuple):
    to: EthereumAddress
    data: HexStr
    address: EthereumAddress


class SafeCreation(NamedTuple):
    to: EthereumAddress
    data: HexStr


def is_chain_id_supported(chain_id: ChainId) -> bool:
    return chain_id in SAFE_SUPPORTED_CHAINS


def default_safe_deployment_addresses(chain_id: ChainId) -> SafeDeploymentAddresses:
    """The official Safe v1.3.0 deployments"""
    if not is_chain_id_supported(chain_id):
        raise UnsupportedChainError(f"No Safe deployment known for chain {chain_id}")
    return SafeDeploymentAddresses(
        singleton=SAFE_V130_SINGLETON,
        factory=SAFE_V130_PROXY_FACTORY,
        fallbackHandler=SAFE_V130_FALLBACK_HANDLER,
        createCall=SAFE_V130_CREATE_CALL,
        multisendCallOnly=SAFE_V130_MULTISEND_CALL_ONLY,
    )


def safe_setup_data(
    owners: list[EthereumAddress],
    threshold: int,
    fallback_handler: Optional[EthereumAddress] = None,
) -> HexStr:
    """Initializer of a new Safe: no module setup, no payment"""
    return encode_function_data(
        SIGNATURES.SAFE_SETUP,
        [
            owners,
            threshold,
            ZERO_ADDRESS,
            b"",
            fallback_handler or ZERO_ADDRESS,
            ZERO_ADDRESS,
            0,
            ZERO_ADDRESS,
        ],
    )


def proxy_salt(setup: HexStr, nonce: int) -> bytes:
    """The factory salts CREATE2 with the initializer hash and the nonce"""
    return keccak(keccak(hexstr=setup) + encode(["uint256"], [nonce]))


def calculate_proxy_address(
    factory: EthereumAddress,
    singleton: EthereumAddress,
    setup: HexStr,
    nonce: int,
    creation_code: bytes,
) -> EthereumAddress:
    """
    Address of the proxy created by `createProxyWithNonce(singleton, setup, nonce)`.
    `creation_code` is the factory's `proxyCreationCode()`: the proxy init code is that
    code followed by the singleton as constructor argument.
    """
    init_code = creation_code + encode(["address"], [singleton])
    return create2_address(factory, proxy_salt(setup, nonce), init_code)


def prepare_deterministic_safe_with_owners(
    owners: list[EthereumAddress],
    threshold: int,
    addresses: SafeDeploymentAddresses,
    nonce: int,
    node: Web3,
) -> PreparedSafe:
    """
    Creation data of a Safe through `createProxyWithNonce`, and the address the
    proxy gets. Only the proxy creation code is read from `node`, so the address is
    the same before and after the Safe is deployed.
    Same owners, threshold, nonce and deployment addresses give the same Safe on
    every chain.
    """
    setup = safe_setup_data(owners, threshold, addresses.fallbackHandler)
    data = encode_function_data(
        SIGNATURES.CREATE_PROXY_WITH_NONCE,
        [addresses.singleton, to_bytes(hexstr=setup), nonce],
    )
    address = calculate_proxy_address(
        addresses.factory,
        addresses.singleton,
        setup,
        nonce,
        proxy_creation_code(node, addresses.factory),
    )
    return PreparedSafe(addresses.factory, data, address)


def prepare_safe_with_owners(
    owners: list[EthereumAddress],
    threshold: int,
    addresses: SafeDeploymentAddresses,
) -> SafeCreation:
    """Like `prepare_deterministic_safe_with_owners` with an address only known after execution"""
    setup = safe_setup_data(owners, threshold, addresses.fallbackHandler)
    data = encode_function_data(
        SIGNATURES.CREATE_PROXY, [addresses.singleton, to_bytes(hexstr=setup)]
    )
    return SafeCreation(addresses.factory, data)


def encode_multisend(transactions: list[MetaTransaction]) -> bytes:
    """Packed concatenation of (operation, to, value, data length, data)"""
    encoded = b""
    for tx in transactions:
        data = tx.data_bytes
        encoded += encode_packed(
            ["uint8", "address", "uint256", "uint256", "bytes"],
            [int(tx.operation), tx.to, tx.value, len(data), data],
        )
    return encoded


def multisend(
    transactions: list[MetaTransaction], multisend_address: EthereumAddress
) -> MetaTransaction:
    """A single delegatecall to the multisend contract executing all transactions in order"""
    return MetaTransaction(
        to=multisend_address,
        value=0,
        operation=SafeOperation.DELEGATE_CALL,
        data=encode_function_data(SIGNATURES.MULTISEND, [encode_multisend(transactions)]),
    )


def create_transaction(
    deployment_data: HexStr, create_call: EthereumAddress
) -> MetaTransaction:
    """Deploys a contract with CREATE through the CreateCall library"""
    return MetaTransaction(
        to=create_call,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(
            SIGNATURES.PERFORM_CREATE, [0, to_bytes(hexstr=deployment_data)]
        ),
    )
