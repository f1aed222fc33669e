from typing import Optional

from eth_utils import keccak, to_bytes, to_checksum_address, to_hex

from tokenlaunch.errors import InvalidSaltError
from tokenlaunch.models import (
    SALT_LENGTH,
    EthereumAddress,
    HexStr,
    MetaTransaction,
    SafeOperation,
    check_salt,
)

# Arachnid's deterministic deployment proxy, deployed at the same address on every chain
# https://github.com/Arachnid/deterministic-deployment-proxy
DEPLOYER_CONTRACT: EthereumAddress = to_checksum_address(
    "0x4e59b44847b379578588920ca78fbf26c0b4956c"
)


def salt_bytes(salt: Optional[HexStr] = None) -> bytes:
    """The zero word if no salt is given"""
    if salt is None:
        return bytes(SALT_LENGTH)
    return to_bytes(hexstr=check_salt(salt))


def create2_address_from_code_hash(
    deployer: EthereumAddress, salt: bytes, init_code_hash: bytes
) -> EthereumAddress:
    """keccak256(0xff ++ deployer ++ salt ++ init_code_hash)[12:]"""
    preimage = b"\xff" + to_bytes(hexstr=deployer) + salt + init_code_hash
    return to_checksum_address(keccak(preimage)[12:])


def create2_address(
    deployer: EthereumAddress, salt: bytes, init_code: bytes
) -> EthereumAddress:
    return create2_address_from_code_hash(deployer, salt, keccak(init_code))


def deterministic_deployment_address(
    deployment_bytecode: HexStr, salt: Optional[HexStr] = None
) -> EthereumAddress:
    """Where the deterministic deployer puts a contract, on any chain"""
    return create2_address(
        DEPLOYER_CONTRACT, salt_bytes(salt), to_bytes(hexstr=deployment_bytecode)
    )


def deterministic_deployment_transaction(
    deployment_bytecode: HexStr, salt: Optional[HexStr] = None
) -> MetaTransaction:
    """The deployer reads the salt from the first word of the calldata"""
    return MetaTransaction(
        to=DEPLOYER_CONTRACT,
        value=0,
        operation=SafeOperation.CALL,
        data=to_hex(salt_bytes(salt) + to_bytes(hexstr=deployment_bytecode)),
    )


def format_bytes32_string(text: str) -> HexStr:
    """utf-8 bytes of `text`, right padded to a word. Leaves room for a null terminator"""
    raw = text.encode("utf-8")
    if len(raw) > SALT_LENGTH - 1:
        raise InvalidSaltError(f"String too long to fit in a salt: {text}")
    return to_hex(raw.ljust(SALT_LENGTH, b"\x00"))


# the salt used for our own deterministic deployments, such as the forwarder
SALT: HexStr = format_bytes32_string("Mattresses in Berlin!")
