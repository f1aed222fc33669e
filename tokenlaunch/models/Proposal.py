from __future__ import annotations

import eth_utils as eth
from pydantic import BaseModel, field_validator

from tokenlaunch.models.Transaction import JsonMetaTransaction, MetaTransaction
from tokenlaunch.models.types import EthereumAddress

DETERMINISTICALLY_COMPUTED_ADDRESSES = (
    "cowDao",
    "teamController",
    "investorFundsTarget",
    "cowToken",
)


class FinalAddresses(BaseModel):
    """Addresses known before any transaction of the proposal is executed"""

    cowDao: EthereumAddress
    teamController: EthereumAddress
    investorFundsTarget: EthereumAddress
    cowToken: EthereumAddress

    @field_validator(*DETERMINISTICALLY_COMPUTED_ADDRESSES)
    @classmethod
    def checksum_addresses(cls, address: str) -> str:
        return eth.to_checksum_address(address)


class DeploymentSteps(BaseModel):
    """Every transaction of the deployment, by name"""

    cowDaoCreationTransaction: MetaTransaction
    teamControllerCreationTransaction: MetaTransaction
    investorFundsTargetCreationTransaction: MetaTransaction
    cowTokenCreationTransaction: MetaTransaction
    virtualCowTokenCreationTransaction: MetaTransaction
    approvalOmniBridgeTx: MetaTransaction
    relayTestFundsToOmniBridgeTx: MetaTransaction
    transferCowTokenToCowDao: MetaTransaction
    relayCowDaoDeployment: MetaTransaction
    bridgedTokenDeployerTriggering: MetaTransaction


class DeploymentProposalAsStruct(BaseModel):
    steps: DeploymentSteps
    addresses: FinalAddresses


def deployment_steps_into_array(steps: DeploymentSteps) -> list[list[MetaTransaction]]:
    """
    Groups the steps in batches. Each batch is executed as a single Safe transaction
    and batches must be executed in order: later ones use contracts or balances
    created by earlier ones.
    """
    return [
        [
            steps.cowDaoCreationTransaction,
            steps.teamControllerCreationTransaction,
            steps.investorFundsTargetCreationTransaction,
        ],
        [
            steps.cowTokenCreationTransaction,
            steps.approvalOmniBridgeTx,
            steps.relayTestFundsToOmniBridgeTx,
            steps.transferCowTokenToCowDao,
        ],
        [steps.virtualCowTokenCreationTransaction],
        [steps.relayCowDaoDeployment],
        [steps.bridgedTokenDeployerTriggering],
    ]


class DeploymentProposal(BaseModel):
    steps: list[list[MetaTransaction]]
    addresses: FinalAddresses

    def to_json(self) -> dict:
        return {
            "steps": [[tx.to_json() for tx in batch] for batch in self.steps],
            "addresses": self.addresses.model_dump(),
        }


class MakeSwappableProposal(BaseModel):
    steps: list[list[MetaTransaction]]

    def to_json(self) -> dict[str, list[list[JsonMetaTransaction]]]:
        return {"steps": [[tx.to_json() for tx in batch] for batch in self.steps]}
