import bisect
from typing import Optional, TypedDict

from tokenlaunch.models import (
    EthereumAddress,
    FirstAddress,
    LastAddress,
    ProvenClaim,
    claim_type_name,
)

# the frontend downloads one chunk per user, this keeps every chunk small
DEFAULT_COHORT_SIZE = 70


class StringifiedProvenClaim(TypedDict):
    type: str
    amount: str
    index: int
    proof: list[str]


ClaimChunk = dict[EthereumAddress, list[StringifiedProvenClaim]]
AddressRange = tuple[FirstAddress, LastAddress]
SplitClaims = list[tuple[AddressRange, ClaimChunk]]


def stringify_proven_claim(claim: ProvenClaim) -> StringifiedProvenClaim:
    return {
        "type": claim_type_name(claim.type),
        "amount": str(claim.claimableAmount),
        "index": claim.index,
        "proof": list(claim.proof),
    }


def split_claims(
    claims: list[ProvenClaim], cohort_size: int = DEFAULT_COHORT_SIZE
) -> SplitClaims:
    """
    Groups the claims by account into chunks of at most `cohort_size` accounts.

    Accounts are compared and stored lowercase and chunks cover consecutive,
    non overlapping ranges of the sorted accounts, so a user can find the chunk
    containing their claims knowing only the first address of each chunk.
    Claims of the same account keep their input order.
    """
    if cohort_size < 1:
        raise ValueError(f"Cohort size must be positive, got {cohort_size}")

    claims_by_account: dict[str, list[StringifiedProvenClaim]] = {}
    for claim in claims:
        claims_by_account.setdefault(claim.account.lower(), []).append(
            stringify_proven_claim(claim)
        )

    accounts = sorted(claims_by_account)
    split: SplitClaims = []
    for start in range(0, len(accounts), cohort_size):
        cohort = accounts[start : start + cohort_size]
        chunk = {account: claims_by_account[account] for account in cohort}
        split.append(((cohort[0], cohort[-1]), chunk))
    return split


def address_chunks(split: SplitClaims) -> dict[FirstAddress, LastAddress]:
    """Index of the chunks, published next to them"""
    return {first: last for (first, last), _ in split}


def find_cohort(split: SplitClaims, account: EthereumAddress) -> Optional[ClaimChunk]:
    """The chunk whose address range contains `account`, if any"""
    key = account.lower()
    firsts = [first for (first, _), _ in split]
    position = bisect.bisect_right(firsts, key) - 1
    if position < 0:
        return None
    (_, last), chunk = split[position]
    if key > last:
        return None
    return chunk
