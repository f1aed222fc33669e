import pytest
from eth_utils import keccak, to_bytes, to_hex

from tokenlaunch.claims import claim_hash
from tokenlaunch.models import Claim, ClaimType


def test_claim_hash_is_keccak_of_packed_claim(ADDRESSES):
    claim = Claim(account=ADDRESSES[0], type=ClaimType.INVESTOR, claimableAmount=1337)

    preimage = (
        (7).to_bytes(32, "big")
        + bytes([3])
        + to_bytes(hexstr=ADDRESSES[0])
        + (1337).to_bytes(32, "big")
    )

    assert len(preimage) == 85
    assert claim_hash(7, claim) == keccak(preimage)


def test_claim_hash_ignores_address_case(ADDRESSES):
    checksummed = Claim(account=ADDRESSES[1], type=ClaimType.TEAM, claimableAmount=1)
    lowercase = Claim(account=ADDRESSES[1].lower(), type=ClaimType.TEAM, claimableAmount=1)

    assert claim_hash(0, checksummed) == claim_hash(0, lowercase)


@pytest.mark.parametrize(
    "index, claim_type, amount",
    [
        (1, ClaimType.AIRDROP, 100),
        (0, ClaimType.GNO_OPTION, 100),
        (0, ClaimType.AIRDROP, 101),
    ],
)
def test_claim_hash_depends_on_every_field(ADDRESSES, index, claim_type, amount):
    base = Claim(account=ADDRESSES[2], type=ClaimType.AIRDROP, claimableAmount=100)
    other = Claim(account=ADDRESSES[2], type=claim_type, claimableAmount=amount)

    assert claim_hash(0, base) != claim_hash(index, other)


def test_claim_hash_depends_on_account(ADDRESSES):
    first = Claim(account=ADDRESSES[0], type=ClaimType.AIRDROP, claimableAmount=100)
    second = Claim(account=ADDRESSES[1], type=ClaimType.AIRDROP, claimableAmount=100)

    assert claim_hash(0, first) != claim_hash(0, second)


@pytest.mark.parametrize(
    "index, account, claim_type, amount, expected",
    [
        (
            0,
            "0x1111111111111111111111111111111111111111",
            ClaimType.AIRDROP,
            1337,
            "0x7250394b004fff4ebd232b8198f29e8c1eff83e60d67e60a53c126c262663520",
        ),
        (
            1,
            "0x2222222222222222222222222222222222222222",
            ClaimType.USER_OPTION,
            42,
            "0x394c5706ce404afe3c880012fdb0b9d1d0c1978483e8c5725116ab463e98b4ce",
        ),
        (
            4,
            "0x4444444444444444444444444444444444444444",
            ClaimType.ADVISOR,
            42,
            "0xf9d9b2985d656d9320a4bd4e392e3ce285491ef8c943f6f42f14eb4d759a1f79",
        ),
    ],
)
def test_claim_hash_vectors(index, account, claim_type, amount, expected):
    claim = Claim(account=account, type=claim_type, claimableAmount=amount)

    assert to_hex(claim_hash(index, claim)) == expected
