import eth_utils as eth

from tokenlaunch.errors import InvalidSaltError

# type aliases for clarity
EthereumAddress = str
HexStr = str
Bytes32 = str
BigNumber = str
ChainId = int
FirstAddress = str
LastAddress = str

UINT256_MAX = 2**256 - 1

SALT_LENGTH = 32


def check_uint256(amount: int) -> int:
    if amount < 0 or amount > UINT256_MAX:
        raise ValueError(f"Amount {amount} does not fit in a uint256")
    return amount


def check_bytes32(value: str) -> str:
    if not eth.is_hex(value) or len(eth.remove_0x_prefix(value)) != 64:
        raise ValueError(f"Expected a 0x-prefixed 32 byte hex string, got {value}")
    return eth.add_0x_prefix(value.lower())


def check_salt(salt: str) -> str:
    """Raises `InvalidSaltError` unless `salt` is exactly 32 bytes of hex"""
    try:
        raw = eth.to_bytes(hexstr=salt)
    except ValueError as e:
        raise InvalidSaltError(f"Salt is not hex: {salt}") from e
    if len(raw) != SALT_LENGTH:
        raise InvalidSaltError(f"Salt must be {SALT_LENGTH} bytes, got {len(raw)}: {salt}")
    return eth.to_hex(raw)
