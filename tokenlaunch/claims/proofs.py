from eth_utils import to_bytes

from tokenlaunch.claims.hashing import claim_hash
from tokenlaunch.claims.merkle_tree import MerkleTree
from tokenlaunch.errors import EmptyClaimsError
from tokenlaunch.models import Claim, ProvenClaim, ProvenClaims


def compute_proofs(claims: list[Claim]) -> ProvenClaims:
    """
    Computes a merkle root that identifies all and only the input claims, along
    with the proof each user needs to redeem their claims.

    Claims are stably sorted by lowercase account and the position in the sorted
    list is the `index` hashed in the leaf. The result only depends on the order of
    the input through the relative order of the claims of a same account.
    Claims are returned in the input order.

    Zero amount claims must be filtered out by the caller.
    """
    if len(claims) == 0:
        raise EmptyClaimsError("Cannot compute the merkle root of an empty list of claims")

    # Sorting by address so that different claims for the same account are close
    # together in the claimed bitmap, so that claiming many in the same transaction
    # touches less storage slots.
    sorted_claims = sorted(enumerate(claims), key=lambda c: c[1].account.lower())

    tree = MerkleTree([claim_hash(index, c) for index, (_, c) in enumerate(sorted_claims)])

    proven_claims = [
        (
            index_before_sorting,
            ProvenClaim(
                **claim.model_dump(),
                index=index,
                proof=tree.hex_proof(index),
            ),
        )
        for index, (index_before_sorting, claim) in enumerate(sorted_claims)
    ]
    proven_claims.sort(key=lambda c: c[0])

    return ProvenClaims(
        claims=[claim for _, claim in proven_claims],
        merkleRoot=tree.hex_root,
    )


def verify_proof(claim: ProvenClaim, merkle_root: str) -> bool:
    """Replays the proof of the claim the way the on chain verifier does"""
    return MerkleTree.verify(
        claim_hash(claim.index, claim),
        [to_bytes(hexstr=p) for p in claim.proof],
        to_bytes(hexstr=merkle_root),
    )
