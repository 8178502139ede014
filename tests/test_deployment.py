import pytest

from flowkit.config.deployment import (
    CadenceValue,
    ContractDeployment,
    Deployment,
    Deployments,
)


@pytest.fixture
def contracts():
    return [
        ContractDeployment(name="contract-1", args=[CadenceValue("Int", 5)]),
        ContractDeployment(name="contract-2", args=[CadenceValue("Int", 15)]),
    ]


def test_adding_deployments(contracts):
    network = "test-network"
    deployments = Deployments()
    deployments.add_or_update(
        Deployment(network=network, account="test-account", contracts=[contracts[0]])
    )
    assert deployments[0].contracts == [contracts[0]]

    deployments.add_or_update(
        Deployment(network=network, account="test-account", contracts=list(contracts))
    )
    assert deployments[0].contracts == contracts

    deployments.add_or_update(
        Deployment(network=network, account="test-account-2", contracts=[contracts[0]])
    )
    assert len(deployments) == 2
    assert deployments[1].contracts == [contracts[0]]


def test_remove_deployment(contracts):
    deployments = Deployments(
        [Deployment(network="test-network", account="test-account", contracts=list(contracts))]
    )
    deployments.remove("test-account", "test-network")
    assert len(deployments) == 0


def test_remove_deployment_contract(contracts):
    deployments = Deployments(
        [Deployment(network="testnet", account="test", contracts=list(contracts))]
    )
    deployments.by_account_and_network("test", "testnet").remove_contract(contracts[0].name)

    assert len(deployments) == 1
    assert len(deployments[0].contracts) == 1
    assert deployments[0].contracts[0] == contracts[1]


def test_deployment_by_network():
    deployments = Deployments(
        [
            Deployment(network="net", account="acc"),
            Deployment(network="net", account="acc2"),
            Deployment(network="net2", account="acc2"),
        ]
    )
    network = deployments.by_network("net")
    assert len(network) == 2
    assert network[0].account == "acc"
    assert network[1].account == "acc2"
    assert len(deployments.by_network("none")) == 0


def test_remove_non_existing_deployment():
    deployments = Deployments([Deployment(network="test", account="acc")])
    with pytest.raises(LookupError) as info:
        deployments.remove("acc", "no")
    assert (
        str(info.value)
        == "deployment for account acc on network no does not exist in configuration"
    )
    assert len(deployments) == 1


def test_add_deployment_contract(contracts):
    deployments = Deployments([Deployment(network="testnet", account="test")])
    deployments.by_account_and_network("test", "testnet").add_contract(contracts[0])
    deployments.by_account_and_network("test", "testnet").add_contract(contracts[1])

    assert len(deployments) == 1
    assert len(deployments[0].contracts) == 2
    assert deployments[0].contracts[1] == contracts[1]
    assert deployments[0].contracts[0] == contracts[0]


def test_add_contract_ignores_duplicates(contracts):
    deployment = Deployment(network="testnet", account="test")
    deployment.add_contract(contracts[0])
    deployment.add_contract(ContractDeployment(name="contract-1"))
    assert deployment.contracts == [contracts[0]]


def test_by_account_and_network_missing():
    deployments = Deployments([Deployment(network="net", account="acc")])
    assert deployments.by_account_and_network("acc", "other") is None


def test_cadence_value_rendering():
    assert str(CadenceValue("String", "Hello World")) == '"Hello World"'
    assert str(CadenceValue("Int8", 10)) == "10"
    assert str(CadenceValue("Bool", False)) == "false"
    assert CadenceValue("Bool", False).type_id() == "Bool"