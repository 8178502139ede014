import pytest

from flowkit.config.account import hex_to_address
from flowkit.config.contract import Aliases, Contract, Contracts
from flowkit.config.jsonformat.contract import contracts_from_json, contracts_to_json


def test_simple_contract():
    contracts = contracts_from_json({"NFT": "./NFT.cdc"})
    nft = contracts.by_name("NFT")
    assert nft.location == "./NFT.cdc"
    assert not nft.is_aliased()


def test_advanced_contract_with_alias():
    contracts = contracts_from_json(
        {"Kibble": {"source": "./Kibble.cdc", "aliases": {"testnet": "0xabcdef"}}}
    )
    kibble = contracts.by_name("Kibble")
    assert kibble.location == "./Kibble.cdc"
    assert kibble.aliases.by_network("testnet").address == hex_to_address("0xabcdef")
    assert kibble.aliases.by_network("mainnet") is None


@pytest.mark.parametrize("alias", ["", "0x0", "0xzz"])
def test_invalid_alias_address(alias):
    with pytest.raises(ValueError, match="invalid alias address for a contract"):
        contracts_from_json({"Kibble": {"source": "./Kibble.cdc", "aliases": {"testnet": alias}}})


@pytest.mark.parametrize("entry", [5, [1, 2], True])
def test_invalid_entry(entry):
    with pytest.raises(ValueError):
        contracts_from_json({"Kibble": entry})


def test_invalid_section():
    with pytest.raises(ValueError):
        contracts_from_json(["Kibble"])


def test_to_json_simple_and_advanced():
    aliases = Aliases()
    aliases.add("testnet", hex_to_address("0xabcdef"))
    contracts = Contracts(
        [
            Contract(name="NFT", location="./NFT.cdc"),
            Contract(name="Kibble", location="./Kibble.cdc", aliases=aliases),
        ]
    )
    result = contracts_to_json(contracts)
    assert result["NFT"] == "./NFT.cdc"
    assert result["Kibble"] == {
        "source": "./Kibble.cdc",
        "aliases": {"testnet": hex_to_address("0xabcdef").hex()},
    }


def test_round_trip():
    data = {
        "A": "./A.cdc",
        "B": {
            "source": "./B.cdc",
            "aliases": {"emulator": "f8d6e0586b0a20c7", "testnet": "0000000123123123"},
        },
    }
    assert contracts_to_json(contracts_from_json(data)) == data


def test_to_json_sorted_by_name():
    contracts = Contracts([Contract(name="Z", location="z"), Contract(name="A", location="a")])
    assert list(contracts_to_json(contracts)) == ["A", "Z"]