from typing import Optional

from eth_abi import decode
from eth_utils import function_signature_to_4byte_selector, to_hex
from web3 import Web3

from tokenlaunch.env import rpc_url
from tokenlaunch.models import EthereumAddress, HexStr

PROXY_CREATION_CODE_SIGNATURE = "proxyCreationCode()"


def get_node(url: Optional[str] = None) -> Web3:
    """Connects to `url`, or to the RPC_URL in the environment"""
    return Web3(Web3.HTTPProvider(url or rpc_url()))


def call(node: Web3, to: EthereumAddress, data: HexStr) -> bytes:
    """Read only `eth_call` at the latest block, the raw return data"""
    return bytes(node.eth.call({"to": to, "data": data}))


def has_code(node: Web3, address: EthereumAddress) -> bool:
    return len(node.eth.get_code(address)) > 0


def proxy_creation_code(node: Web3, factory: EthereumAddress) -> bytes:
    """
    Creation code of the proxies deployed by a Safe proxy factory, without the
    singleton argument. Does not depend on the proxies the factory already created.
    """
    selector = function_signature_to_4byte_selector(PROXY_CREATION_CODE_SIGNATURE)
    (code,) = decode(["bytes"], call(node, factory, to_hex(selector)))
    return code
