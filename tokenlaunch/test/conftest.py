from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from eth_abi import decode, encode
from eth_utils import (
    function_signature_to_4byte_selector,
    is_address,
    keccak,
    to_bytes,
    to_checksum_address,
)
from web3.exceptions import ContractLogicError

from tokenlaunch.claims import compute_proofs
from tokenlaunch.config import build_settings, load_artifacts, load_settings
from tokenlaunch.constants import MAINNET_CHAIN_ID
from tokenlaunch.deploy import argument_types
from tokenlaunch.models import (
    Artifacts,
    Claim,
    ClaimType,
    DeploymentAddresses,
    DeploymentProposalSettings,
    InputSettings,
)

STUBS = Path(__file__).parent / "stubs"

CREATE_PROXY_WITH_NONCE_SELECTOR = function_signature_to_4byte_selector(
    "createProxyWithNonce(address,bytes,uint256)"
)
PROXY_CREATION_CODE_SELECTOR = function_signature_to_4byte_selector("proxyCreationCode()")

# stands in for the creation code of the Safe proxy
PROXY_CREATION_CODE = bytes.fromhex("608060405234801561001057600080fd5b50")


def checksum_addresses(value):
    if isinstance(value, str) and is_address(value):
        return to_checksum_address(value)
    if isinstance(value, (list, tuple)):
        return tuple(checksum_addresses(v) for v in value)
    return value


def decode_call(signature: str, data: str) -> tuple:
    """Arguments of a call to `signature`, with checksummed addresses"""
    raw = to_bytes(hexstr=data)
    assert raw[:4] == function_signature_to_4byte_selector(signature)
    return checksum_addresses(decode(argument_types(signature), raw[4:]))


@dataclass
class MockEth:
    """
    Answers `eth_call` without a network. The factory returns a fixed proxy creation
    code, proxy creations revert as if the Safe was already deployed, anything else
    returns the hash of the call.
    """

    chain_id: int = MAINNET_CHAIN_ID
    calls: list[dict[str, Any]] = field(default_factory=list)
    codes: dict[str, bytes] = field(default_factory=dict)

    def call(self, transaction: dict[str, Any]) -> bytes:
        self.calls.append(transaction)
        to = to_bytes(hexstr=transaction["to"])
        data = to_bytes(hexstr=transaction["data"])
        if data[:4] == PROXY_CREATION_CODE_SELECTOR:
            return encode(["bytes"], [PROXY_CREATION_CODE])
        if data[:4] == CREATE_PROXY_WITH_NONCE_SELECTOR:
            raise ContractLogicError("execution reverted: Create2 call failed")
        return keccak(to + data)

    def get_code(self, address: str) -> bytes:
        return self.codes.get(to_checksum_address(address), b"")


@dataclass
class MockNode:
    eth: MockEth = field(default_factory=MockEth)


@pytest.fixture
def node() -> MockNode:
    return MockNode()


@pytest.fixture()
def ADDRESSES():
    addresses = [
        "0x9bc33f6155eFAcc290c3C50E9B5b24b668562732",
        "0xfDe38ad4bBbeC867e6cb4Bb31FbFB2074c959A83",
        "0x8BB4C0b502f869af3B25166930507a6E8c3038D4",
        "0x7Ac54A0406FA2B465E0D57C66597BE83A4b149fC",
        "0xdeA708968f8dd520f5e2F0aB6785F28c98521ca8",
    ]
    return [to_checksum_address(a) for a in addresses]


@pytest.fixture
def claims(ADDRESSES) -> list[Claim]:
    return [
        Claim(account=ADDRESSES[0], type=ClaimType.AIRDROP, claimableAmount=1000),
        Claim(account=ADDRESSES[1], type=ClaimType.GNO_OPTION, claimableAmount=2000),
        Claim(account=ADDRESSES[2], type=ClaimType.USER_OPTION, claimableAmount=3000),
        Claim(account=ADDRESSES[3], type=ClaimType.INVESTOR, claimableAmount=4000),
        Claim(account=ADDRESSES[3], type=ClaimType.TEAM, claimableAmount=5000),
        Claim(account=ADDRESSES[1], type=ClaimType.ADVISOR, claimableAmount=42),
    ]


@pytest.fixture
def artifacts() -> Artifacts:
    return load_artifacts(str(STUBS / "artifacts"))


@pytest.fixture
def input_settings() -> InputSettings:
    return load_settings(str(STUBS / "settings.json"))


@pytest.fixture
def settings(input_settings, claims) -> DeploymentProposalSettings:
    return build_settings(
        input_settings, compute_proofs(claims).merkleRoot, MAINNET_CHAIN_ID
    )


@pytest.fixture
def deployment_addresses() -> DeploymentAddresses:
    return DeploymentAddresses(
        singleton="0xd9Db270c1B5E3Bd161E8c8503c55cEABeE709552",
        factory="0xa6B71E26C5e0845f74c812102Ca7114b6a896AB2",
        fallbackHandler="0xf48f2B2d2a534e402487b3ee7C18c33Aec0Fe5e4",
        createCall="0x7cbB62EaA69F79e6873cD1ecB2392971036cFAa4",
        multisendCallOnly="0x40A2aCCbd92BCA938b02010E17A5b8929b49130D",
        forwarder="0x1111111111111111111111111111111111111111",
    )
