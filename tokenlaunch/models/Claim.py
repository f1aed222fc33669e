from __future__ import annotations

from enum import IntEnum
from typing import Optional

import eth_utils as eth
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from tokenlaunch.models.types import (
    Bytes32,
    EthereumAddress,
    check_bytes32,
    check_uint256,
)


class ClaimType(IntEnum):
    """
    Category of a claim. The integer value is what the virtual token contract
    expects as `uint8` and what is hashed into the merkle leaf, so it must never change.
    """

    AIRDROP = 0
    GNO_OPTION = 1
    USER_OPTION = 2
    INVESTOR = 3
    TEAM = 4
    ADVISOR = 5


# display names, used as csv headers and in the claim chunks read by the frontend
CLAIM_TYPE_NAMES: dict[ClaimType, str] = {
    ClaimType.AIRDROP: "Airdrop",
    ClaimType.GNO_OPTION: "GnoOption",
    ClaimType.USER_OPTION: "UserOption",
    ClaimType.INVESTOR: "Investor",
    ClaimType.TEAM: "Team",
    ClaimType.ADVISOR: "Advisor",
}
CLAIM_TYPES_BY_NAME: dict[str, ClaimType] = {v: k for k, v in CLAIM_TYPE_NAMES.items()}

ALL_CLAIM_TYPES: list[ClaimType] = list(ClaimType)


def claim_type_name(claim_type: ClaimType) -> str:
    return CLAIM_TYPE_NAMES[ClaimType(claim_type)]


def claim_type_from_name(name: str) -> ClaimType:
    if name not in CLAIM_TYPES_BY_NAME:
        raise ValueError(f"Unknown claim type {name}")
    return CLAIM_TYPES_BY_NAME[name]


class Claim(BaseModel):
    """
    Entitlement of a single account to an amount of token for one claim type.
    :param `account`: checksummed on read, a malformed address is rejected
    :param `type`: the claim category
    :param `claimableAmount`: maximum amount of token that can be claimed, in atoms
    """

    model_config = ConfigDict(frozen=True)

    account: EthereumAddress
    type: ClaimType
    claimableAmount: int

    @field_validator("account")
    @classmethod
    def checksum_account(cls, account: str) -> str:
        return eth.to_checksum_address(account)

    @field_validator("claimableAmount")
    @classmethod
    def check_claimable_amount(cls, amount: int) -> int:
        return check_uint256(amount)


class ProvenClaim(Claim):
    """
    A claim together with what is needed to prove it on chain.
    :param `index`: position of the claim in the sorted leaves, *not* in the input
    :param `proof`: sibling hashes from the leaf up to the root
    """

    index: int
    proof: list[Bytes32]

    @field_validator("index")
    @classmethod
    def check_index(cls, index: int) -> int:
        if index < 0:
            raise ValueError("Claim index cannot be negative")
        return index

    @field_validator("proof")
    @classmethod
    def check_proof(cls, proof: list[str]) -> list[str]:
        return [check_bytes32(p) for p in proof]


class ProvenClaims(BaseModel):
    """
    All proven claims in the order in which they were input, alongside the merkle root.
    The root is the only value published on chain.
    """

    model_config = ConfigDict(frozen=True)

    claims: list[ProvenClaim]
    merkleRoot: Bytes32

    @field_validator("merkleRoot")
    @classmethod
    def check_root(cls, root: str) -> str:
        return check_bytes32(root)


class ExecutableClaim(ProvenClaim):
    """
    A request to redeem (part of) a proven claim.
    :param `claimedAmount`: amount to claim now, at most `claimableAmount`
    :param `value`: native token sent along with the claim, only used by paid options
    """

    claimedAmount: int
    value: Optional[int] = None

    @model_validator(mode="after")
    def check_claimed_amount(self) -> ExecutableClaim:
        check_uint256(self.claimedAmount)
        if self.claimedAmount > self.claimableAmount:
            raise ValueError(
                f"Claimed amount {self.claimedAmount} exceeds claimable amount {self.claimableAmount}"
            )
        if self.value is not None:
            check_uint256(self.value)
        return self
