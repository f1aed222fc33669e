import pytest
from eth_abi import decode
from eth_utils import to_bytes, to_checksum_address

from tokenlaunch.config import default_deployment_addresses
from tokenlaunch.constants import (
    BRIDGED_NATIVE_TOKEN_PRICE,
    DEFAULT_TOKENS,
    GNOSIS_CHAIN_ID,
    MAINNET_CHAIN_ID,
)
from tokenlaunch.deploy import SIGNATURES, deployment_bytecode
from tokenlaunch.errors import UnexpectedAddressError, UnsupportedChainError
from tokenlaunch.models import CONSTRUCTOR_INPUTS, ContractName
from tokenlaunch.proposal import (
    compute_addresses_on_gnosis_chain,
    generate_bridged_token_deployer_deployment,
    generate_deployment_proposal_as_struct,
)
from tokenlaunch.test.conftest import checksum_addresses, decode_call

MERKLE_ROOT = "0x" + "cd" * 32


@pytest.fixture
def deployment(input_settings, artifacts, node):
    return generate_bridged_token_deployer_deployment(
        input_settings, MERKLE_ROOT, artifacts, GNOSIS_CHAIN_ID, node
    )


def test_addresses_match_the_mainnet_proposal(input_settings, settings, artifacts, node):
    mainnet_addresses = default_deployment_addresses(MAINNET_CHAIN_ID, artifacts)
    mainnet = generate_deployment_proposal_as_struct(
        settings,
        mainnet_addresses,
        default_deployment_addresses(GNOSIS_CHAIN_ID, artifacts),
        artifacts,
        MAINNET_CHAIN_ID,
        node,
    )

    addresses = compute_addresses_on_gnosis_chain(input_settings, artifacts, node)

    assert addresses.cowDao == mainnet.addresses.cowDao
    assert addresses.cowToken == mainnet.addresses.cowToken


def test_params(input_settings, artifacts, node, deployment):
    addresses = compute_addresses_on_gnosis_chain(input_settings, artifacts, node)
    params = deployment.params

    assert params.foreignToken == addresses.cowToken
    assert params.communityFundsTarget == addresses.cowDao
    assert params.multiTokenMediatorHome == input_settings.bridge.multiTokenMediatorGnosisChain
    assert params.merkleRoot == MERKLE_ROOT
    assert params.gnoToken == to_checksum_address(DEFAULT_TOKENS["gno"][GNOSIS_CHAIN_ID])
    assert params.gnoPrice == input_settings.virtualCowToken.gnoPrice
    assert params.wrappedNativeToken == to_checksum_address(
        DEFAULT_TOKENS["weth"][GNOSIS_CHAIN_ID]
    )
    assert params.nativeTokenPrice == BRIDGED_NATIVE_TOKEN_PRICE


def test_creation_data(artifacts, deployment):
    artifact = artifacts[ContractName.BRIDGED_TOKEN_DEPLOYER]
    code = to_bytes(hexstr=artifact.bytecode)
    data = to_bytes(hexstr=deployment.creation_data)

    assert data[: len(code)] == code
    types = [abi_type for _, abi_type in CONSTRUCTOR_INPUTS[ContractName.BRIDGED_TOKEN_DEPLOYER]]
    foreign_token, mediator, root, *_ = checksum_addresses(decode(types, data[len(code) :]))
    assert foreign_token == deployment.params.foreignToken
    assert mediator == deployment.params.multiTokenMediatorHome
    assert root == to_bytes(hexstr=MERKLE_ROOT)


def test_transaction_goes_through_create_call(artifacts, deployment_addresses, deployment):
    transaction = deployment.transaction

    assert transaction.to == deployment_addresses.createCall
    assert transaction.value == 0
    value, code = decode_call(SIGNATURES.PERFORM_CREATE, transaction.data)
    assert value == 0
    assert code == to_bytes(
        hexstr=deployment_bytecode(
            ContractName.BRIDGED_TOKEN_DEPLOYER,
            deployment.params,
            artifacts[ContractName.BRIDGED_TOKEN_DEPLOYER],
        )
    )
    assert code == to_bytes(hexstr=deployment.creation_data)


@pytest.mark.parametrize("chain_id", [1, 4])
def test_only_on_gnosis_chain(input_settings, artifacts, node, chain_id):
    with pytest.raises(UnsupportedChainError):
        generate_bridged_token_deployer_deployment(
            input_settings, MERKLE_ROOT, artifacts, chain_id, node
        )
    assert node.eth.calls == []


def test_unexpected_cow_token(input_settings, artifacts, node):
    cow_token = input_settings.cowToken.model_copy(
        update={"expectedAddress": "0x4444444444444444444444444444444444444444"}
    )
    wrong = input_settings.model_copy(update={"cowToken": cow_token})

    with pytest.raises(UnexpectedAddressError, match="cowToken"):
        generate_bridged_token_deployer_deployment(
            wrong, MERKLE_ROOT, artifacts, GNOSIS_CHAIN_ID, node
        )


def test_expected_addresses_are_accepted(input_settings, artifacts, node):
    addresses = compute_addresses_on_gnosis_chain(input_settings, artifacts, node)
    expecting = input_settings.model_copy(
        update={
            "cowDao": input_settings.cowDao.model_copy(
                update={"expectedAddress": addresses.cowDao}
            ),
            "cowToken": input_settings.cowToken.model_copy(
                update={"expectedAddress": addresses.cowToken}
            ),
        }
    )

    deployment = generate_bridged_token_deployer_deployment(
        expecting, MERKLE_ROOT, artifacts, GNOSIS_CHAIN_ID, node
    )

    assert deployment.params.foreignToken == addresses.cowToken
