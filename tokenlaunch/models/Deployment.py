from __future__ import annotations

from enum import Enum
from typing import Any, Union

import eth_utils as eth
from pydantic import BaseModel, ConfigDict, field_validator

from tokenlaunch.models.types import Bytes32, EthereumAddress, HexStr, check_bytes32


class ContractName(str, Enum):
    """Values are the names of the compiled artifacts"""

    REAL_TOKEN = "CowProtocolToken"
    VIRTUAL_TOKEN = "CowProtocolVirtualToken"
    BRIDGED_TOKEN_DEPLOYER = "BridgedTokenDeployer"
    FORWARDER = "Forwarder"


class ContractArtifact(BaseModel):
    """
    The subset of a hardhat artifact needed to deploy a contract.
    :param `bytecode`: the *creation* bytecode, without constructor arguments
    """

    contractName: str
    abi: list[dict[str, Any]] = []
    bytecode: HexStr

    @field_validator("bytecode")
    @classmethod
    def check_bytecode(cls, bytecode: str) -> str:
        if not eth.is_hex(bytecode) or bytecode in ("", "0x"):
            raise ValueError("Artifact bytecode must be non-empty hex")
        return eth.add_0x_prefix(bytecode.lower())


Artifacts = dict[ContractName, ContractArtifact]


class _Addresses(BaseModel):
    model_config = ConfigDict(frozen=True)


class RealTokenDeployParams(_Addresses):
    initialTokenHolder: EthereumAddress
    cowDao: EthereumAddress
    totalSupply: int

    @field_validator("initialTokenHolder", "cowDao")
    @classmethod
    def checksum_addresses(cls, address: str) -> str:
        return eth.to_checksum_address(address)


class VirtualTokenDeployParams(_Addresses):
    merkleRoot: Bytes32
    realToken: EthereumAddress
    communityFundsTarget: EthereumAddress
    investorFundsTarget: EthereumAddress
    usdcToken: EthereumAddress
    usdcPrice: int
    gnoToken: EthereumAddress
    gnoPrice: int
    wrappedNativeToken: EthereumAddress
    nativeTokenPrice: int
    teamController: EthereumAddress

    @field_validator(
        "realToken",
        "communityFundsTarget",
        "investorFundsTarget",
        "usdcToken",
        "gnoToken",
        "wrappedNativeToken",
        "teamController",
    )
    @classmethod
    def checksum_addresses(cls, address: str) -> str:
        return eth.to_checksum_address(address)

    @field_validator("merkleRoot")
    @classmethod
    def check_root(cls, root: str) -> str:
        return check_bytes32(root)


class BridgedTokenDeployerDeployParams(_Addresses):
    """Deploys the virtual token on gnosis chain once the bridged token exists"""

    foreignToken: EthereumAddress
    multiTokenMediatorHome: EthereumAddress
    merkleRoot: Bytes32
    communityFundsTarget: EthereumAddress
    gnoToken: EthereumAddress
    gnoPrice: int
    wrappedNativeToken: EthereumAddress
    nativeTokenPrice: int

    @field_validator(
        "foreignToken",
        "multiTokenMediatorHome",
        "communityFundsTarget",
        "gnoToken",
        "wrappedNativeToken",
    )
    @classmethod
    def checksum_addresses(cls, address: str) -> str:
        return eth.to_checksum_address(address)

    @field_validator("merkleRoot")
    @classmethod
    def check_root(cls, root: str) -> str:
        return check_bytes32(root)


class ForwarderDeployParams(_Addresses):
    """The forwarder has no constructor arguments"""

    pass


DeployParams = Union[
    RealTokenDeployParams,
    VirtualTokenDeployParams,
    BridgedTokenDeployerDeployParams,
    ForwarderDeployParams,
]

DEPLOY_PARAMS: dict[ContractName, type[BaseModel]] = {
    ContractName.REAL_TOKEN: RealTokenDeployParams,
    ContractName.VIRTUAL_TOKEN: VirtualTokenDeployParams,
    ContractName.BRIDGED_TOKEN_DEPLOYER: BridgedTokenDeployerDeployParams,
    ContractName.FORWARDER: ForwarderDeployParams,
}

# constructor argument names and their solidity types, in the order of the constructor
CONSTRUCTOR_INPUTS: dict[ContractName, list[tuple[str, str]]] = {
    ContractName.REAL_TOKEN: [
        ("initialTokenHolder", "address"),
        ("cowDao", "address"),
        ("totalSupply", "uint256"),
    ],
    ContractName.VIRTUAL_TOKEN: [
        ("merkleRoot", "bytes32"),
        ("realToken", "address"),
        ("communityFundsTarget", "address"),
        ("investorFundsTarget", "address"),
        ("usdcToken", "address"),
        ("usdcPrice", "uint256"),
        ("gnoToken", "address"),
        ("gnoPrice", "uint256"),
        ("wrappedNativeToken", "address"),
        ("nativeTokenPrice", "uint256"),
        ("teamController", "address"),
    ],
    ContractName.BRIDGED_TOKEN_DEPLOYER: [
        ("foreignToken", "address"),
        ("multiTokenMediatorHome", "address"),
        ("merkleRoot", "bytes32"),
        ("communityFundsTarget", "address"),
        ("gnoToken", "address"),
        ("gnoPrice", "uint256"),
        ("wrappedNativeToken", "address"),
        ("nativeTokenPrice", "uint256"),
    ],
    ContractName.FORWARDER: [],
}


class SafeDeploymentAddresses(_Addresses):
    """
    Chain specific addresses of the Safe support contracts. These are not deployed
    by us, we only point to them.
    """

    singleton: EthereumAddress
    factory: EthereumAddress
    fallbackHandler: EthereumAddress
    createCall: EthereumAddress
    multisendCallOnly: EthereumAddress

    @field_validator(
        "singleton", "factory", "fallbackHandler", "createCall", "multisendCallOnly"
    )
    @classmethod
    def checksum_addresses(cls, address: str) -> str:
        return eth.to_checksum_address(address)


class DeploymentAddresses(SafeDeploymentAddresses):
    forwarder: EthereumAddress

    @field_validator("forwarder")
    @classmethod
    def checksum_forwarder(cls, address: str) -> str:
        return eth.to_checksum_address(address)
