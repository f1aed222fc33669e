from typing import NamedTuple, Optional

from web3 import Web3

from tokenlaunch.constants import (
    AMOUNT_TO_RELAY,
    BRIDGED_TOKEN_DEPLOYER_GAS_LIMIT,
    GNOSIS_CHAIN_ID,
    SAFE_RELAY_GAS_LIMIT,
    TOTAL_SUPPLY,
    USDC_PRICE,
    ZERO_ADDRESS,
)
from tokenlaunch.deploy import (
    SIGNATURES,
    encode_function_data,
    forward_if_no_code_at,
    get_deterministic_deployment_transaction,
    get_non_deterministic_deployment_transaction,
    is_chain_id_supported,
    prepare_bridging_tokens,
    prepare_deterministic_safe_with_owners,
    relay_through_amb,
    salt_bytes,
    transfer,
)
from tokenlaunch.errors import (
    BadConfigException,
    CrossChainAddressMismatchError,
    UnexpectedAddressError,
    UnsupportedChainError,
)
from tokenlaunch.models import (
    Artifacts,
    ChainId,
    ContractName,
    DeploymentAddresses,
    DeploymentProposal,
    DeploymentProposalAsStruct,
    DeploymentProposalSettings,
    DeploymentSteps,
    EthereumAddress,
    FinalAddresses,
    MetaTransaction,
    RealTokenCreationSettings,
    RealTokenDeployParams,
    SafeCreationSettings,
    SafeOperation,
    VirtualTokenDeployParams,
    deployment_steps_into_array,
)


class Deployed(NamedTuple):
    address: EthereumAddress
    transaction: MetaTransaction


def setup_deterministic_safe(
    settings: SafeCreationSettings,
    deployment_addresses: DeploymentAddresses,
    node: Web3,
) -> Deployed:
    """Creation of a Safe, skipped at execution time if the Safe already exists"""
    to, data, address = prepare_deterministic_safe_with_owners(
        settings.owners,
        settings.threshold,
        deployment_addresses,
        settings.nonce or 0,
        node,
    )
    creation = MetaTransaction(to=to, value=0, data=data, operation=SafeOperation.CALL)
    return Deployed(
        address,
        forward_if_no_code_at(address, creation, deployment_addresses.forwarder),
    )


def setup_real_token(
    settings: RealTokenCreationSettings,
    deployment_addresses: DeploymentAddresses,
    params: RealTokenDeployParams,
    artifacts: Artifacts,
) -> Deployed:
    transaction, address = get_deterministic_deployment_transaction(
        ContractName.REAL_TOKEN, params, artifacts, settings.salt
    )
    return Deployed(
        address,
        forward_if_no_code_at(address, transaction, deployment_addresses.forwarder),
    )


def setup_virtual_token(
    params: VirtualTokenDeployParams,
    deployment_addresses: DeploymentAddresses,
    artifacts: Artifacts,
) -> MetaTransaction:
    return get_non_deterministic_deployment_transaction(
        ContractName.VIRTUAL_TOKEN, params, artifacts, deployment_addresses.createCall
    )


def check_same_safe_deployment(
    deployment_addresses_eth: DeploymentAddresses,
    deployment_addresses_gnosis_chain: DeploymentAddresses,
) -> None:
    """
    A Safe lands at the same address on both chains only if it is created by the same
    factory, from the same singleton and with the same setup data.
    """
    for field in ("singleton", "factory", "fallbackHandler"):
        eth_address = getattr(deployment_addresses_eth, field)
        gnosis_address = getattr(deployment_addresses_gnosis_chain, field)
        if eth_address != gnosis_address:
            raise CrossChainAddressMismatchError(
                f"Safe {field} differs between the two networks: {eth_address} != {gnosis_address}"
            )


def create_tx_for_bridged_safe_setup(
    cow_dao: EthereumAddress,
    arbitrary_message_bridge: EthereumAddress,
    safe_settings: SafeCreationSettings,
    deployment_addresses: DeploymentAddresses,
    node: Web3,
) -> MetaTransaction:
    """Creates the same cowDao Safe on gnosis chain through the message bridge"""
    address, transaction = setup_deterministic_safe(safe_settings, deployment_addresses, node)
    if address != cow_dao:
        raise CrossChainAddressMismatchError(
            f"Unexpected address for the cowDao on gnosis chain: {address} != {cow_dao}"
        )
    return relay_through_amb(arbitrary_message_bridge, transaction, SAFE_RELAY_GAS_LIMIT)


def create_tx_triggering_bridged_token_deployer(
    arbitrary_message_bridge: EthereumAddress,
    bridged_token_deployer: Optional[EthereumAddress],
    chain_id: ChainId,
) -> MetaTransaction:
    if bridged_token_deployer is None:
        if chain_id != GNOSIS_CHAIN_ID:
            raise BadConfigException(
                f"A bridgedTokenDeployer must be defined on chain {chain_id}"
            )
        # On gnosis chain the proposal is only generated to compute the addresses,
        # this transaction is never executed.
        bridged_token_deployer = ZERO_ADDRESS
    trigger = MetaTransaction(
        to=bridged_token_deployer,
        value=0,
        operation=SafeOperation.CALL,
        data=encode_function_data(SIGNATURES.BRIDGED_TOKEN_DEPLOYER_DEPLOY, []),
    )
    return relay_through_amb(
        arbitrary_message_bridge, trigger, BRIDGED_TOKEN_DEPLOYER_GAS_LIMIT
    )


def check_expected_addresses(
    settings: DeploymentProposalSettings, addresses: FinalAddresses
) -> None:
    expected = {
        "cowDao": settings.cowDao.expectedAddress,
        "teamController": settings.teamController.expectedAddress,
        "cowToken": settings.cowToken.expectedAddress,
    }
    for name, expected_address in expected.items():
        actual = getattr(addresses, name)
        if expected_address is not None and expected_address != actual:
            raise UnexpectedAddressError(
                f"{name} would be deployed at {actual}, expected {expected_address}"
            )


def generate_deployment_proposal_as_struct(
    settings: DeploymentProposalSettings,
    deployment_addresses_eth: DeploymentAddresses,
    deployment_addresses_gnosis_chain: DeploymentAddresses,
    artifacts: Artifacts,
    chain_id: ChainId,
    node: Web3,
) -> DeploymentProposalAsStruct:
    """
    Every transaction of the deployment, by name, and the addresses of the contracts
    that are known before execution. Nothing is sent to the network: `node` is only
    used to simulate Safe creations.
    """
    if not is_chain_id_supported(chain_id):
        raise UnsupportedChainError(
            f"Cannot generate a deployment proposal on chain {chain_id}"
        )
    # malformed salts fail before any call to the node
    salt_bytes(settings.cowToken.salt)

    cow_dao, cow_dao_creation = setup_deterministic_safe(
        settings.cowDao, deployment_addresses_eth, node
    )
    team_controller, team_controller_creation = setup_deterministic_safe(
        settings.teamController, deployment_addresses_eth, node
    )
    investor_funds_target, investor_funds_target_creation = setup_deterministic_safe(
        SafeCreationSettings(owners=[cow_dao], threshold=1),
        deployment_addresses_eth,
        node,
    )

    real_token_params = RealTokenDeployParams(
        initialTokenHolder=settings.gnosisDao,
        cowDao=cow_dao,
        totalSupply=TOTAL_SUPPLY,
    )
    cow_token, cow_token_creation = setup_real_token(
        settings.cowToken, deployment_addresses_eth, real_token_params, artifacts
    )

    virtual_token = settings.virtualCowToken
    virtual_token_params = VirtualTokenDeployParams(
        merkleRoot=virtual_token.merkleRoot,
        realToken=cow_token,
        communityFundsTarget=cow_dao,
        investorFundsTarget=investor_funds_target,
        usdcToken=virtual_token.usdcToken,
        usdcPrice=USDC_PRICE,
        gnoToken=virtual_token.gnoToken,
        gnoPrice=virtual_token.gnoPrice,
        wrappedNativeToken=virtual_token.wrappedNativeToken,
        nativeTokenPrice=virtual_token.nativeTokenPrice,
        teamController=team_controller,
    )
    virtual_token_creation = setup_virtual_token(
        virtual_token_params, deployment_addresses_eth, artifacts
    )

    amount_to_relay = settings.bridge.amountToRelay or AMOUNT_TO_RELAY
    approve, relay = prepare_bridging_tokens(
        cow_token, cow_dao, amount_to_relay, settings.bridge.multiTokenMediatorETH
    )
    transfer_to_cow_dao = transfer(cow_token, cow_dao, TOTAL_SUPPLY - amount_to_relay)

    check_same_safe_deployment(deployment_addresses_eth, deployment_addresses_gnosis_chain)
    relay_cow_dao_deployment = create_tx_for_bridged_safe_setup(
        cow_dao,
        settings.bridge.arbitraryMessageBridgeETH,
        settings.cowDao,
        deployment_addresses_gnosis_chain,
        node,
    )

    bridged_token_deployer_triggering = create_tx_triggering_bridged_token_deployer(
        settings.bridge.arbitraryMessageBridgeETH,
        settings.bridgedTokenDeployer,
        chain_id,
    )

    addresses = FinalAddresses(
        cowDao=cow_dao,
        teamController=team_controller,
        investorFundsTarget=investor_funds_target,
        cowToken=cow_token,
    )
    check_expected_addresses(settings, addresses)

    return DeploymentProposalAsStruct(
        steps=DeploymentSteps(
            cowDaoCreationTransaction=cow_dao_creation,
            teamControllerCreationTransaction=team_controller_creation,
            investorFundsTargetCreationTransaction=investor_funds_target_creation,
            cowTokenCreationTransaction=cow_token_creation,
            virtualCowTokenCreationTransaction=virtual_token_creation,
            approvalOmniBridgeTx=approve,
            relayTestFundsToOmniBridgeTx=relay,
            transferCowTokenToCowDao=transfer_to_cow_dao,
            relayCowDaoDeployment=relay_cow_dao_deployment,
            bridgedTokenDeployerTriggering=bridged_token_deployer_triggering,
        ),
        addresses=addresses,
    )


def generate_deployment_proposal(
    settings: DeploymentProposalSettings,
    deployment_addresses_eth: DeploymentAddresses,
    deployment_addresses_gnosis_chain: DeploymentAddresses,
    artifacts: Artifacts,
    chain_id: ChainId,
    node: Web3,
) -> DeploymentProposal:
    """The deployment as five batches of transactions, to be executed in order"""
    proposal = generate_deployment_proposal_as_struct(
        settings,
        deployment_addresses_eth,
        deployment_addresses_gnosis_chain,
        artifacts,
        chain_id,
        node,
    )
    return DeploymentProposal(
        steps=deployment_steps_into_array(proposal.steps),
        addresses=proposal.addresses,
    )
