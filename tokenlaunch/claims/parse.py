from typing import Iterable, Mapping, Optional

from tokenlaunch.errors import DuplicateClaimError, MissingAccountColumnError
from tokenlaunch.models import CLAIM_TYPES_BY_NAME, Claim, ClaimType

ACCOUNT_COLUMN = "Account"


def _parse_amount(cell: Optional[str]) -> int:
    cell = (cell or "").strip()
    return int(cell) if cell else 0


def parse_claim_rows(rows: Iterable[Mapping[str, Optional[str]]]) -> list[Claim]:
    """
    Reads claims from table rows, such as the ones of a `csv.DictReader`.

    Each row must have an `Account` column. Columns named after a claim type
    ("Airdrop", "GnoOption", ...) hold the claimable amount in atoms, blank and
    zero cells are skipped, other columns are ignored.
    An account can appear in more than one row, but only once per claim type.
    """
    claims: list[Claim] = []
    seen: set[tuple[str, ClaimType]] = set()
    for row in rows:
        if ACCOUNT_COLUMN not in row or not (row[ACCOUNT_COLUMN] or "").strip():
            raise MissingAccountColumnError(f"Row without account: {dict(row)}")
        account = row[ACCOUNT_COLUMN].strip()
        for column, cell in row.items():
            if column not in CLAIM_TYPES_BY_NAME:
                continue
            amount = _parse_amount(cell)
            if amount == 0:
                continue
            claim = Claim(
                account=account,
                type=CLAIM_TYPES_BY_NAME[column],
                claimableAmount=amount,
            )
            key = (claim.account, claim.type)
            if key in seen:
                raise DuplicateClaimError(
                    f"Account {claim.account} has more than one {column} claim"
                )
            seen.add(key)
            claims.append(claim)
    return claims
