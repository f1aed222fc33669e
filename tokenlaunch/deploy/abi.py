from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_hex

from tokenlaunch.models import HexStr


class SIGNATURES:
    """Canonical signatures of every contract function the proposals call"""

    # Safe v1.3.0
    SAFE_SETUP = "setup(address[],uint256,address,bytes,address,address,uint256,address)"
    CREATE_PROXY = "createProxy(address,bytes)"
    CREATE_PROXY_WITH_NONCE = "createProxyWithNonce(address,bytes,uint256)"
    PERFORM_CREATE = "performCreate(uint256,bytes)"
    MULTISEND = "multiSend(bytes)"

    FORWARD_CALL_IF_NO_CODE_AT = "forwardCallIfNoCodeAt(address,bytes,address)"

    # ERC20
    APPROVE = "approve(address,uint256)"
    TRANSFER = "transfer(address,uint256)"

    # omnibridge and arbitrary message bridge
    RELAY_TOKENS = "relayTokens(address,address,uint256)"
    REQUIRE_TO_PASS_MESSAGE = "requireToPassMessage(address,bytes,uint256)"

    BRIDGED_TOKEN_DEPLOYER_DEPLOY = "deploy()"

    # virtual token
    CLAIM = "claim(uint256,uint8,address,uint256,uint256,bytes32[])"
    CLAIM_MANY = "claimMany(uint256[],uint8[],address[],uint256[],uint256[],bytes32[][],uint256[])"
    SWAP = "swap(uint256)"

    # zodiac reality module
    GET_TRANSACTION_HASH = "getTransactionHash(address,uint256,bytes,uint8,uint256)"


def argument_types(signature: str) -> list[str]:
    """
    Splits the top level argument types of a signature.
    Tuple arguments are not supported, none of the signatures above use them.
    """
    inner = signature[signature.index("(") + 1 : signature.rindex(")")]
    return inner.split(",") if inner else []


def encode_function_data(signature: str, args: list) -> HexStr:
    """Calldata for `signature`: the 4 byte selector followed by the abi encoded arguments"""
    selector = function_signature_to_4byte_selector(signature)
    return to_hex(selector + encode(argument_types(signature), args))
