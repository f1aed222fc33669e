from eth_abi.packed import encode_packed
from eth_utils import keccak

from tokenlaunch.models import Claim

# must match the encoding of the claim in the virtual token contract
CLAIM_LEAF_TYPES = ["uint256", "uint8", "address", "uint256"]


def claim_hash(index: int, claim: Claim) -> bytes:
    """
    Collision free identifier of the pair (index, claim), used as merkle leaf:
    keccak256(abi.encodePacked(index, type, account, claimableAmount))
    """
    return keccak(
        encode_packed(
            CLAIM_LEAF_TYPES,
            [index, int(claim.type), claim.account, claim.claimableAmount],
        )
    )
