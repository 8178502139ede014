"""JSON form of the contracts section."""

from __future__ import annotations

from typing import Any

from flowkit.config.account import EMPTY_ADDRESS, hex_to_address
from flowkit.config.contract import Contract, Contracts


def _text_field(entry: dict[str, Any], key: str, contract_name: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"contract {contract_name} field {key} must be a string")
    return value


def _advanced_contract(name: str, entry: dict[str, Any]) -> Contract:
    contract = Contract(name=name, location=_text_field(entry, "source", name))
    aliases = entry.get("aliases")
    if aliases is None:
        return contract
    if not isinstance(aliases, dict):
        raise ValueError(f"contract {name} aliases must be an object")
    for network, alias in aliases.items():
        if not isinstance(alias, str):
            raise ValueError(f"contract {name} alias for {network} must be a string")
        address = hex_to_address(alias)
        if address == EMPTY_ADDRESS:
            raise ValueError("invalid alias address for a contract")
        contract.aliases.add(network, address)
    return contract


def contracts_from_json(data: Any) -> Contracts:
    """Build contracts from the decoded ``contracts`` section.

    Each entry is either a source location or an object with ``source``
    and ``aliases`` (network name to address).
    """
    if not isinstance(data, dict):
        raise ValueError("contracts must be an object")
    contracts = Contracts()
    for name, entry in data.items():
        if entry is None:
            entry = ""
        if isinstance(entry, str):
            contracts.append(Contract(name=name, location=entry))
        elif isinstance(entry, dict):
            contracts.append(_advanced_contract(name, entry))
        else:
            raise ValueError(f"contract {name} must be a string or an object")
    return contracts


def contracts_to_json(contracts: Contracts) -> dict[str, Any]:
    """The ``contracts`` section for the given contracts, keyed by name."""
    result: dict[str, Any] = {}
    for contract in contracts:
        if not contract.is_aliased() and contract.location:
            result[contract.name] = contract.location
        elif not contract.is_aliased():
            result[contract.name] = {"source": contract.location, "aliases": None}
        else:
            aliases = {alias.network: alias.address.hex() for alias in contract.aliases}
            result[contract.name] = {
                "source": contract.location,
                "aliases": {key: aliases[key] for key in sorted(aliases)},
            }
    return {key: result[key] for key in sorted(result)}