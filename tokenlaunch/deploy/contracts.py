from typing import NamedTuple, Optional

from eth_abi import encode
from eth_utils import to_bytes, to_hex
from pydantic import BaseModel

from tokenlaunch.deploy.create2 import (
    deterministic_deployment_address,
    deterministic_deployment_transaction,
)
from tokenlaunch.deploy.safe import create_transaction
from tokenlaunch.errors import BadConfigException, MissingArtifactError
from tokenlaunch.models import (
    CONSTRUCTOR_INPUTS,
    DEPLOY_PARAMS,
    Artifacts,
    BridgedTokenDeployerDeployParams,
    Bytes32,
    ContractArtifact,
    ContractName,
    EthereumAddress,
    HexStr,
    MetaTransaction,
)


class DeterministicDeployment(NamedTuple):
    transaction: MetaTransaction
    address: EthereumAddress


def get_artifact(artifacts: Artifacts, contract: ContractName) -> ContractArtifact:
    if contract not in artifacts:
        raise MissingArtifactError(f"No compiled artifact for {contract.value}")
    return artifacts[contract]


def constructor_input(contract: ContractName, params: BaseModel) -> list:
    """Constructor arguments of `contract`, in order and ready for abi encoding"""
    expected = DEPLOY_PARAMS[contract]
    if not isinstance(params, expected):
        raise BadConfigException(
            f"{contract.value} is deployed with {expected.__name__}, got {type(params).__name__}"
        )
    values = params.model_dump()
    return [
        to_bytes(hexstr=values[name]) if abi_type == "bytes32" else values[name]
        for name, abi_type in CONSTRUCTOR_INPUTS[contract]
    ]


def deployment_bytecode(
    contract: ContractName, params: BaseModel, artifact: ContractArtifact
) -> HexStr:
    """Creation code followed by the abi encoded constructor arguments"""
    types = [abi_type for _, abi_type in CONSTRUCTOR_INPUTS[contract]]
    arguments = encode(types, constructor_input(contract, params))
    return to_hex(to_bytes(hexstr=artifact.bytecode) + arguments)


def get_deterministic_deployment_transaction(
    contract: ContractName,
    params: BaseModel,
    artifacts: Artifacts,
    salt: Optional[HexStr] = None,
) -> DeterministicDeployment:
    bytecode = deployment_bytecode(contract, params, get_artifact(artifacts, contract))
    return DeterministicDeployment(
        deterministic_deployment_transaction(bytecode, salt),
        deterministic_deployment_address(bytecode, salt),
    )


def get_non_deterministic_deployment_transaction(
    contract: ContractName,
    params: BaseModel,
    artifacts: Artifacts,
    create_call: EthereumAddress,
) -> MetaTransaction:
    bytecode = deployment_bytecode(contract, params, get_artifact(artifacts, contract))
    return create_transaction(bytecode, create_call)


def bridged_token_deployer_params(
    foreign_token: EthereumAddress,
    multi_token_mediator_home: EthereumAddress,
    merkle_root: Bytes32,
    community_funds_target: EthereumAddress,
    gno_token: EthereumAddress,
    gno_price: int,
    wrapped_native_token: EthereumAddress,
    native_token_price: int,
) -> BridgedTokenDeployerDeployParams:
    """
    Parameters of the contract that deploys the virtual token on gnosis chain once
    the real token has been bridged there. Tokens and prices are the ones of gnosis chain.
    """
    return BridgedTokenDeployerDeployParams(
        foreignToken=foreign_token,
        multiTokenMediatorHome=multi_token_mediator_home,
        merkleRoot=merkle_root,
        communityFundsTarget=community_funds_target,
        gnoToken=gno_token,
        gnoPrice=gno_price,
        wrappedNativeToken=wrapped_native_token,
        nativeTokenPrice=native_token_price,
    )
