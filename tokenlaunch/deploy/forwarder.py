from typing import Optional

from web3 import Web3

from tokenlaunch.deploy.abi import SIGNATURES, encode_function_data
from tokenlaunch.deploy.contracts import (
    DeterministicDeployment,
    get_deterministic_deployment_transaction,
)
from tokenlaunch.deploy.create2 import DEPLOYER_CONTRACT, SALT
from tokenlaunch.errors import AlreadyDeployedError, ForwarderError, MissingDeployerError
from tokenlaunch.models import (
    Artifacts,
    ContractName,
    EthereumAddress,
    ForwarderDeployParams,
    HexStr,
    MetaTransaction,
    SafeOperation,
)
from tokenlaunch.queries import has_code


def forward_call_input(address_to_test: EthereumAddress, transaction: MetaTransaction) -> list:
    return [address_to_test, transaction.data_bytes, transaction.to]


def forward_if_no_code_at(
    address_to_test: EthereumAddress,
    transaction: MetaTransaction,
    forwarder: EthereumAddress,
) -> MetaTransaction:
    """
    Wraps `transaction` so that it is executed only if there is no code at
    `address_to_test`, and is a no-op otherwise.
    Makes a deployment idempotent: if the contract was already deployed (by anyone)
    the rest of the proposal can still be executed.
    """
    if transaction.operation != SafeOperation.CALL:
        raise ForwarderError("Forwarder can only forward pure calls")
    if transaction.value != 0:
        raise ForwarderError("Forwarder cannot forward any ETH value")
    return MetaTransaction(
        to=forwarder,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(
            SIGNATURES.FORWARD_CALL_IF_NO_CODE_AT,
            forward_call_input(address_to_test, transaction),
        ),
    )


def forwarder_deployment(
    artifacts: Artifacts, salt: Optional[HexStr] = SALT
) -> DeterministicDeployment:
    """The forwarder is deployed deterministically, at the same address on every chain"""
    return get_deterministic_deployment_transaction(
        ContractName.FORWARDER, ForwarderDeployParams(), artifacts, salt
    )


def prepare_forwarder_deployment(
    artifacts: Artifacts, node: Web3, salt: Optional[HexStr] = SALT
) -> DeterministicDeployment:
    """
    The transaction deploying the forwarder on the network of `node`. Any account can
    send it. Fails if the deterministic deployer is missing or if the forwarder
    already exists.
    """
    if not has_code(node, DEPLOYER_CONTRACT):
        raise MissingDeployerError(
            f"Deterministic deployer not available at {DEPLOYER_CONTRACT}, deploy it first"
        )
    deployment = forwarder_deployment(artifacts, salt)
    if has_code(node, deployment.address):
        raise AlreadyDeployedError(f"Forwarder already deployed at {deployment.address}")
    return deployment
