from typing import NamedTuple

from web3 import Web3

from tokenlaunch.config import default_token
from tokenlaunch.constants import (
    BRIDGED_NATIVE_TOKEN_PRICE,
    GNOSIS_CHAIN_ID,
    ZERO_ADDRESS,
    ZERO_HASH,
)
from tokenlaunch.deploy import (
    bridged_token_deployer_params,
    default_safe_deployment_addresses,
    deployment_bytecode,
    get_artifact,
    get_non_deterministic_deployment_transaction,
)
from tokenlaunch.errors import UnsupportedChainError
from tokenlaunch.models import (
    Artifacts,
    BridgedTokenDeployerDeployParams,
    Bytes32,
    ChainId,
    ContractName,
    DeploymentAddresses,
    DeploymentProposalSettings,
    FinalAddresses,
    HexStr,
    InputSettings,
    MetaTransaction,
    VirtualTokenCreationSettings,
)
from tokenlaunch.proposal.deployment import generate_deployment_proposal_as_struct


class BridgedTokenDeployerDeployment(NamedTuple):
    """
    :param `creation_data`: data of a contract creation transaction, for any account
    :param `transaction`: the same deployment from a Safe, through CreateCall
    """

    params: BridgedTokenDeployerDeployParams
    creation_data: HexStr
    transaction: MetaTransaction


def with_placeholder_virtual_token(
    input_settings: InputSettings,
) -> DeploymentProposalSettings:
    """
    Proposal settings where everything about the virtual token is zero. The addresses
    of the cowDao and of the cowToken do not depend on the virtual token.
    """
    virtual_token = VirtualTokenCreationSettings(
        merkleRoot=ZERO_HASH,
        usdcToken=ZERO_ADDRESS,
        gnoToken=ZERO_ADDRESS,
        gnoPrice=0,
        wrappedNativeToken=ZERO_ADDRESS,
        nativeTokenPrice=0,
    )
    base = input_settings.model_dump(
        exclude={"virtualCowToken", "multisend", "realityModule"}
    )
    return DeploymentProposalSettings(**base, virtualCowToken=virtual_token)


def compute_addresses_on_gnosis_chain(
    input_settings: InputSettings,
    artifacts: Artifacts,
    node: Web3,
) -> FinalAddresses:
    """
    The addresses the mainnet proposal deploys to, computed with the Safe deployment
    of gnosis chain. Expected addresses in the settings are checked.
    """
    deployment_addresses = DeploymentAddresses(
        **default_safe_deployment_addresses(GNOSIS_CHAIN_ID).model_dump(),
        forwarder=ZERO_ADDRESS,
    )
    proposal = generate_deployment_proposal_as_struct(
        with_placeholder_virtual_token(input_settings),
        deployment_addresses,
        deployment_addresses,
        artifacts,
        GNOSIS_CHAIN_ID,
        node,
    )
    return proposal.addresses


def generate_bridged_token_deployer_deployment(
    input_settings: InputSettings,
    merkle_root: Bytes32,
    artifacts: Artifacts,
    chain_id: ChainId,
    node: Web3,
) -> BridgedTokenDeployerDeployment:
    """
    Deployment of the contract that creates the virtual token on gnosis chain once
    the real token has been bridged there. It must happen on gnosis chain before the
    mainnet proposal is executed, since the proposal triggers it.
    """
    if chain_id != GNOSIS_CHAIN_ID:
        raise UnsupportedChainError(
            f"The bridged token deployer is deployed on gnosis chain, not on chain {chain_id}"
        )

    addresses = compute_addresses_on_gnosis_chain(input_settings, artifacts, node)
    params = bridged_token_deployer_params(
        foreign_token=addresses.cowToken,
        multi_token_mediator_home=input_settings.bridge.multiTokenMediatorGnosisChain,
        merkle_root=merkle_root,
        community_funds_target=addresses.cowDao,
        gno_token=default_token("gno", chain_id),
        gno_price=input_settings.virtualCowToken.gnoPrice,
        wrapped_native_token=default_token("weth", chain_id),
        native_token_price=BRIDGED_NATIVE_TOKEN_PRICE,
    )

    contract = ContractName.BRIDGED_TOKEN_DEPLOYER
    creation_data = deployment_bytecode(contract, params, get_artifact(artifacts, contract))
    transaction = get_non_deterministic_deployment_transaction(
        contract,
        params,
        artifacts,
        default_safe_deployment_addresses(chain_id).createCall,
    )
    return BridgedTokenDeployerDeployment(params, creation_data, transaction)
