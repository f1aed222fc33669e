import pytest

from tokenlaunch.claims import address_chunks, compute_proofs, find_cohort, split_claims
from tokenlaunch.models import Claim, ClaimType, claim_type_name


def many_claims(n: int) -> list[Claim]:
    return [
        Claim(
            account="0x" + f"{i + 1:040x}",
            type=ClaimType(i % 6),
            claimableAmount=i + 1,
        )
        for i in range(n)
    ]


def flatten(split) -> list[tuple[str, str, str, int]]:
    return [
        (account, entry["type"], entry["amount"], entry["index"])
        for _, chunk in split
        for account, entries in chunk.items()
        for entry in entries
    ]


def test_no_claims():
    assert split_claims([]) == []


@pytest.mark.parametrize("cohort_size", [1, 2, 3, 100])
def test_every_claim_appears_once(claims, cohort_size):
    proven = compute_proofs(claims)
    split = split_claims(proven.claims, cohort_size)

    expected = sorted(
        (c.account.lower(), claim_type_name(c.type), str(c.claimableAmount), c.index)
        for c in proven.claims
    )
    assert sorted(flatten(split)) == expected


@pytest.mark.parametrize("cohort_size", [1, 2, 3, 100])
def test_cohorts_respect_size(claims, cohort_size):
    split = split_claims(compute_proofs(claims).claims, cohort_size)
    accounts = {c.account.lower() for c in claims}

    assert all(0 < len(chunk) <= cohort_size for _, chunk in split)
    assert len(split) == -(-len(accounts) // cohort_size)


def test_ranges_are_sorted_and_disjoint():
    split = split_claims(compute_proofs(many_claims(200)).claims, 70)

    assert [len(chunk) for _, chunk in split] == [70, 70, 60]
    ranges = [r for r, _ in split]
    for first, last in ranges:
        assert first <= last
    for (_, last), (next_first, _) in zip(ranges, ranges[1:]):
        assert last < next_first


def test_range_keys_are_first_and_last_account():
    split = split_claims(compute_proofs(many_claims(5)).claims, 2)

    for (first, last), chunk in split:
        assert first == min(chunk)
        assert last == max(chunk)


def test_claims_of_one_account_are_joined(ADDRESSES):
    claims = [
        Claim(account=ADDRESSES[0], type=ClaimType.ADVISOR, claimableAmount=1),
        Claim(account=ADDRESSES[1], type=ClaimType.AIRDROP, claimableAmount=2),
        Claim(account=ADDRESSES[0].lower(), type=ClaimType.AIRDROP, claimableAmount=3),
    ]
    proven = compute_proofs(claims)
    [(_, chunk)] = split_claims(proven.claims)

    entries = chunk[ADDRESSES[0].lower()]
    assert [e["type"] for e in entries] == ["Advisor", "Airdrop"]
    assert [e["amount"] for e in entries] == ["1", "3"]
    assert entries[0]["proof"] == proven.claims[0].proof


def test_stringified_claim(ADDRESSES):
    claims = [Claim(account=ADDRESSES[2], type=ClaimType.GNO_OPTION, claimableAmount=10**24)]
    [(_, chunk)] = split_claims(compute_proofs(claims).claims)

    assert chunk == {
        ADDRESSES[2].lower(): [
            {"type": "GnoOption", "amount": str(10**24), "index": 0, "proof": []}
        ]
    }


def test_invalid_cohort_size(claims):
    with pytest.raises(ValueError):
        split_claims(compute_proofs(claims).claims, 0)


def test_address_chunks():
    split = split_claims(compute_proofs(many_claims(5)).claims, 2)

    chunks = address_chunks(split)
    assert list(chunks) == [r[0] for r, _ in split]
    assert list(chunks.values()) == [r[1] for r, _ in split]


def test_find_cohort():
    claims = many_claims(10)
    split = split_claims(compute_proofs(claims).claims, 3)

    for claim in claims:
        cohort = find_cohort(split, claim.account)
        assert cohort is not None
        assert claim.account.lower() in cohort


def test_find_cohort_missing_account():
    split = split_claims(compute_proofs(many_claims(10)).claims, 3)

    assert find_cohort(split, "0x" + "0" * 40) is None
    assert find_cohort(split, "0x" + "f" * 40) is None
