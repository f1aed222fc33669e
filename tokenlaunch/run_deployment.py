import csv
from typing import NamedTuple, Optional

from web3 import Web3

from tokenlaunch.claims import SplitClaims, compute_proofs, parse_claim_rows, split_claims
from tokenlaunch.config import (
    build_settings,
    default_deployment_addresses,
    load_artifacts,
    load_settings,
)
from tokenlaunch.constants import GNOSIS_CHAIN_ID
from tokenlaunch.deploy import DeterministicDeployment, prepare_forwarder_deployment
from tokenlaunch.env import ARTIFACTS_PATH
from tokenlaunch.models import (
    Artifacts,
    Bytes32,
    ChainId,
    Claim,
    DeploymentProposal,
    DeploymentProposalSettings,
    InputSettings,
    MetaTransaction,
    ProvenClaims,
)
from tokenlaunch.proposal import (
    BridgedTokenDeployerDeployment,
    generate_bridged_token_deployer_deployment,
    generate_deployment_proposal,
    get_snapshot_transaction_hashes,
    group_multiple_transactions,
)
from tokenlaunch.queries import get_node


class DeploymentOutput(NamedTuple):
    settings: DeploymentProposalSettings
    proven_claims: ProvenClaims
    split_claims: SplitClaims
    proposal: DeploymentProposal
    grouped_steps: Optional[list[MetaTransaction]]
    snapshot_hashes: Optional[list[Bytes32]]


class GnosisChainDeploymentOutput(NamedTuple):
    proven_claims: ProvenClaims
    split_claims: SplitClaims
    bridged_token_deployer: BridgedTokenDeployerDeployment


def run_deployment(
    claims: list[Claim],
    input_settings: InputSettings,
    artifacts: Artifacts,
    chain_id: ChainId,
    node: Web3,
) -> DeploymentOutput:
    """
    Everything needed to launch the token: the merkle commitment to the claims,
    the per user claim chunks and the deployment proposal.
    """

    print("🌳 Generating Merkle proofs...")
    proven_claims = compute_proofs(claims)
    print(f"🌳 Merkle root {proven_claims.merkleRoot} for {len(claims)} claims")

    settings = build_settings(input_settings, proven_claims.merkleRoot, chain_id)

    print("📝 Generating the deployment proposal...")
    proposal = generate_deployment_proposal(
        settings,
        default_deployment_addresses(chain_id, artifacts),
        default_deployment_addresses(GNOSIS_CHAIN_ID, artifacts),
        artifacts,
        chain_id,
        node,
    )
    for name, address in proposal.addresses.model_dump().items():
        print(f"📬 {name}: {address}")

    grouped_steps = None
    snapshot_hashes = None
    if input_settings.multisend is not None:
        grouped_steps = group_multiple_transactions(proposal.steps, input_settings.multisend)
        if input_settings.realityModule is not None:
            print("📸 Computing snapshot transaction hashes...")
            snapshot_hashes = get_snapshot_transaction_hashes(
                proposal.steps,
                input_settings.multisend,
                input_settings.realityModule,
                node,
            )

    print("✂️ Splitting claims in chunks...")
    split = split_claims(proven_claims.claims)
    print(f"✂️ {len(split)} chunks")

    return DeploymentOutput(
        settings,
        proven_claims,
        split,
        proposal,
        grouped_steps,
        snapshot_hashes,
    )


def run_bridged_token_deployer_deployment(
    claims: list[Claim],
    input_settings: InputSettings,
    artifacts: Artifacts,
    chain_id: ChainId,
    node: Web3,
) -> GnosisChainDeploymentOutput:
    """
    The deployment of the bridged token deployer on gnosis chain, together with the
    claims of gnosis chain users.
    """

    print("🌳 Generating Merkle proofs for gnosis chain...")
    proven_claims = compute_proofs(claims)
    print(f"🌳 Merkle root {proven_claims.merkleRoot} for {len(claims)} claims")

    if input_settings.cowToken.expectedAddress is None:
        print("⚠️ No expected address for the cowToken in the settings")
    if input_settings.cowDao.expectedAddress is None:
        print("⚠️ No expected address for the cowDao in the settings")

    deployment = generate_bridged_token_deployer_deployment(
        input_settings, proven_claims.merkleRoot, artifacts, chain_id, node
    )
    for name, value in deployment.params.model_dump().items():
        print(f"🌉 {name}: {value}")

    print("✂️ Splitting claims in chunks...")
    split = split_claims(proven_claims.claims)
    print(f"✂️ {len(split)} chunks")

    return GnosisChainDeploymentOutput(proven_claims, split, deployment)


def run_forwarder_deployment(artifacts: Artifacts, node: Web3) -> DeterministicDeployment:
    deployment = prepare_forwarder_deployment(artifacts, node)
    print(f"📬 Forwarder will be deployed at {deployment.address}")
    return deployment


def _load_inputs(
    claims_csv: str, settings_json: str, artifacts_path: str
) -> tuple[list[Claim], InputSettings, Artifacts]:
    print("📂 Processing input files...")
    input_settings = load_settings(settings_json)
    with open(claims_csv, newline="") as f:
        claims = parse_claim_rows(csv.DictReader(f))
    return claims, input_settings, load_artifacts(artifacts_path)


def main(
    claims_csv: str,
    settings_json: str,
    artifacts_path: str = ARTIFACTS_PATH,
    rpc: Optional[str] = None,
) -> DeploymentOutput:
    claims, input_settings, artifacts = _load_inputs(
        claims_csv, settings_json, artifacts_path
    )

    node = get_node(rpc)
    chain_id = node.eth.chain_id
    print(f"🔗 Connected to chain {chain_id}")

    return run_deployment(claims, input_settings, artifacts, chain_id, node)


def main_gnosis_chain(
    claims_csv: str,
    settings_json: str,
    artifacts_path: str = ARTIFACTS_PATH,
    rpc: Optional[str] = None,
) -> GnosisChainDeploymentOutput:
    claims, input_settings, artifacts = _load_inputs(
        claims_csv, settings_json, artifacts_path
    )

    node = get_node(rpc)
    chain_id = node.eth.chain_id
    print(f"🔗 Connected to chain {chain_id}")

    return run_bridged_token_deployer_deployment(
        claims, input_settings, artifacts, chain_id, node
    )
