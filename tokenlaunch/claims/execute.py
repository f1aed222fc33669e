from eth_utils import to_bytes

from tokenlaunch.deploy.abi import SIGNATURES, encode_function_data
from tokenlaunch.models import ExecutableClaim, HexStr


def claim_input(claim: ExecutableClaim) -> list:
    """Arguments of `claim` on the virtual token, in order"""
    return [
        claim.index,
        int(claim.type),
        claim.account,
        claim.claimableAmount,
        claim.claimedAmount,
        [to_bytes(hexstr=p) for p in claim.proof],
    ]


def claim_many_input(claims: list[ExecutableClaim]) -> list:
    """
    Arguments of `claimMany`: one array per field of the claims, in the same
    order as the input. A missing `value` is sent as zero.
    """
    return [
        [c.index for c in claims],
        [int(c.type) for c in claims],
        [c.account for c in claims],
        [c.claimableAmount for c in claims],
        [c.claimedAmount for c in claims],
        [[to_bytes(hexstr=p) for p in c.proof] for c in claims],
        [c.value or 0 for c in claims],
    ]


def encode_claim(claim: ExecutableClaim) -> HexStr:
    return encode_function_data(SIGNATURES.CLAIM, claim_input(claim))


def encode_claim_many(claims: list[ExecutableClaim]) -> HexStr:
    return encode_function_data(SIGNATURES.CLAIM_MANY, claim_many_input(claims))
