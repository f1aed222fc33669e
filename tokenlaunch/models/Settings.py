from __future__ import annotations

from typing import Optional

import eth_utils as eth
from pydantic import BaseModel, field_validator, model_validator

from tokenlaunch.errors import BadConfigException
from tokenlaunch.models.types import (
    Bytes32,
    EthereumAddress,
    HexStr,
    check_bytes32,
    check_salt,
)


class ERROR_MESSAGES:
    DUPLICATE_OWNERS = "Passed Duplicate Safe Owners"
    NO_OWNERS = "A Safe needs at least one owner"
    THRESHOLD_OUT_OF_RANGE = "Safe threshold out of range"
    NEGATIVE_PRICE = "Token prices cannot be negative"


def _checksum_optional(address: Optional[str]) -> Optional[str]:
    if address is None:
        return None
    return eth.to_checksum_address(address)


class SafeCreationSettings(BaseModel):
    """
    How to create a Safe deterministically.
    :param `owners`: checksummed on read, must be unique
    :param `threshold`: number of owner signatures needed, between 1 and the number of owners
    :param `nonce`: the salt nonce given to the proxy factory, defaults to zero
    :param `expectedAddress`: if set, the computed address must match it
    """

    owners: list[EthereumAddress]
    threshold: int
    nonce: Optional[int] = None
    expectedAddress: Optional[EthereumAddress] = None

    @field_validator("owners")
    @classmethod
    def checksum_owners(cls, owners: list[str]) -> list[str]:
        if len(owners) == 0:
            raise BadConfigException(ERROR_MESSAGES.NO_OWNERS)
        checksummed = [eth.to_checksum_address(o) for o in owners]
        if len(set(checksummed)) != len(checksummed):
            raise BadConfigException(ERROR_MESSAGES.DUPLICATE_OWNERS)
        return checksummed

    @field_validator("expectedAddress")
    @classmethod
    def checksum_expected(cls, address: Optional[str]) -> Optional[str]:
        return _checksum_optional(address)

    @model_validator(mode="after")
    def check_threshold(self) -> SafeCreationSettings:
        if self.threshold < 1 or self.threshold > len(self.owners):
            raise BadConfigException(
                f"{ERROR_MESSAGES.THRESHOLD_OUT_OF_RANGE}: {self.threshold} of {len(self.owners)}"
            )
        return self


class RealTokenCreationSettings(BaseModel):
    """
    :param `salt`: CREATE2 salt, must be 32 bytes. Defaults to the zero word.
    """

    salt: Optional[HexStr] = None
    expectedAddress: Optional[EthereumAddress] = None

    @field_validator("salt")
    @classmethod
    def validate_salt(cls, salt: Optional[str]) -> Optional[str]:
        if salt is None:
            return None
        return check_salt(salt)

    @field_validator("expectedAddress")
    @classmethod
    def checksum_expected(cls, address: Optional[str]) -> Optional[str]:
        return _checksum_optional(address)


class ReducedVirtualTokenSettings(BaseModel):
    """
    Prices are fixed point ratios: atoms of the collateral token paid per whole COW
    """

    gnoPrice: int
    nativeTokenPrice: int

    @field_validator("gnoPrice", "nativeTokenPrice")
    @classmethod
    def check_price(cls, price: int) -> int:
        if price < 0:
            raise BadConfigException(ERROR_MESSAGES.NEGATIVE_PRICE)
        return price


class VirtualTokenCreationSettings(ReducedVirtualTokenSettings):
    """Reduced settings completed with the merkle root and the chain's token addresses"""

    merkleRoot: Bytes32
    usdcToken: EthereumAddress
    gnoToken: EthereumAddress
    wrappedNativeToken: EthereumAddress

    @field_validator("merkleRoot")
    @classmethod
    def check_root(cls, root: str) -> str:
        return check_bytes32(root)

    @field_validator("usdcToken", "gnoToken", "wrappedNativeToken")
    @classmethod
    def checksum_tokens(cls, address: str) -> str:
        return eth.to_checksum_address(address)


class BridgeParameter(BaseModel):
    """
    :param `multiTokenMediatorGnosisChain`: omnibridge mediator on gnosis chain
    :param `multiTokenMediatorETH`: omnibridge mediator on the deployment chain
    :param `arbitraryMessageBridgeETH`: AMB used to relay calls to gnosis chain
    :param `amountToRelay`: token atoms bridged to the DAO at deployment time
    """

    multiTokenMediatorGnosisChain: EthereumAddress
    multiTokenMediatorETH: EthereumAddress
    arbitraryMessageBridgeETH: EthereumAddress
    amountToRelay: Optional[int] = None

    @field_validator(
        "multiTokenMediatorGnosisChain",
        "multiTokenMediatorETH",
        "arbitraryMessageBridgeETH",
    )
    @classmethod
    def checksum_bridges(cls, address: str) -> str:
        return eth.to_checksum_address(address)

    @field_validator("amountToRelay")
    @classmethod
    def check_amount(cls, amount: Optional[int]) -> Optional[int]:
        if amount is not None and amount <= 0:
            raise BadConfigException("Amount to relay must be positive")
        return amount


class _BaseProposalSettings(BaseModel):
    gnosisDao: EthereumAddress
    cowDao: SafeCreationSettings
    teamController: SafeCreationSettings
    cowToken: RealTokenCreationSettings = RealTokenCreationSettings()
    bridge: BridgeParameter
    bridgedTokenDeployer: Optional[EthereumAddress] = None

    @field_validator("gnosisDao")
    @classmethod
    def checksum_gnosis_dao(cls, address: str) -> str:
        return eth.to_checksum_address(address)

    @field_validator("bridgedTokenDeployer")
    @classmethod
    def checksum_deployer(cls, address: Optional[str]) -> Optional[str]:
        return _checksum_optional(address)


class InputSettings(_BaseProposalSettings):
    """
    The settings as written by hand in the settings file. The virtual token settings
    only carry prices, everything else is computed or depends on the chain.
    :param `multisend`: if set, batches are also grouped into single transactions
    :param `realityModule`: if set with `multisend`, snapshot transaction hashes are computed
    """

    virtualCowToken: ReducedVirtualTokenSettings
    multisend: Optional[EthereumAddress] = None
    realityModule: Optional[EthereumAddress] = None

    @field_validator("multisend", "realityModule")
    @classmethod
    def checksum_optional(cls, address: Optional[str]) -> Optional[str]:
        return _checksum_optional(address)


class DeploymentProposalSettings(_BaseProposalSettings):
    virtualCowToken: VirtualTokenCreationSettings


class MakeSwappableSettings(BaseModel):
    virtualCowToken: EthereumAddress
    cowToken: EthereumAddress
    atomsToTransfer: int
    multisend: Optional[EthereumAddress] = None

    @field_validator("virtualCowToken", "cowToken")
    @classmethod
    def checksum_tokens(cls, address: str) -> str:
        return eth.to_checksum_address(address)

    @field_validator("multisend")
    @classmethod
    def checksum_multisend(cls, address: Optional[str]) -> Optional[str]:
        return _checksum_optional(address)

    @field_validator("atomsToTransfer")
    @classmethod
    def check_atoms(cls, atoms: int) -> int:
        if atoms <= 0:
            raise BadConfigException("Atoms to transfer must be positive")
        return atoms
