import json
from pathlib import Path

from tokenlaunch.constants import DEFAULT_TOKENS
from tokenlaunch.deploy import default_safe_deployment_addresses, forwarder_deployment
from tokenlaunch.errors import MissingArtifactError, MissingDefaultTokenError
from tokenlaunch.models import (
    Artifacts,
    Bytes32,
    ChainId,
    ContractArtifact,
    ContractName,
    DeploymentAddresses,
    DeploymentProposalSettings,
    EthereumAddress,
    InputSettings,
    VirtualTokenCreationSettings,
)


def load_settings(path: str) -> InputSettings:
    """Loads the hand written deployment settings"""
    return InputSettings.model_validate_json(Path(path).read_text())


def default_token(token: str, chain_id: ChainId) -> EthereumAddress:
    if token not in DEFAULT_TOKENS or chain_id not in DEFAULT_TOKENS[token]:
        raise MissingDefaultTokenError(f"No default address for {token} on chain {chain_id}")
    return DEFAULT_TOKENS[token][chain_id]


def build_settings(
    input_settings: InputSettings, merkle_root: Bytes32, chain_id: ChainId
) -> DeploymentProposalSettings:
    """Completes the input settings with the merkle root and the tokens of the chain"""
    virtual_token = VirtualTokenCreationSettings(
        **input_settings.virtualCowToken.model_dump(),
        merkleRoot=merkle_root,
        usdcToken=default_token("usdc", chain_id),
        gnoToken=default_token("gno", chain_id),
        wrappedNativeToken=default_token("weth", chain_id),
    )
    base = input_settings.model_dump(
        exclude={"virtualCowToken", "multisend", "realityModule"}
    )
    return DeploymentProposalSettings(**base, virtualCowToken=virtual_token)


def _find_artifact_file(path: Path, contract: ContractName) -> Path:
    # hardhat nests artifacts as contracts/<Name>.sol/<Name>.json next to debug files
    for candidate in sorted(path.rglob(f"{contract.value}.json")):
        return candidate
    raise MissingArtifactError(f"No artifact for {contract.value} under {path}")


def load_artifacts(path: str) -> Artifacts:
    """Reads the compiled artifact of every contract the deployment needs"""
    artifacts: Artifacts = {}
    for contract in ContractName:
        with open(_find_artifact_file(Path(path), contract)) as j:
            artifacts[contract] = ContractArtifact.model_validate(json.load(j))
    return artifacts


def forwarder_address(artifacts: Artifacts) -> EthereumAddress:
    return forwarder_deployment(artifacts).address


def default_deployment_addresses(
    chain_id: ChainId, artifacts: Artifacts
) -> DeploymentAddresses:
    return DeploymentAddresses(
        **default_safe_deployment_addresses(chain_id).model_dump(),
        forwarder=forwarder_address(artifacts),
    )
