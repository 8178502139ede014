"""JSON form of the deployments section and its Cadence arguments."""

from __future__ import annotations

import re
from typing import Any

from flowkit.config.account import Address, hex_to_address
from flowkit.config.deployment import (
    CadenceValue,
    ContractDeployment,
    Deployment,
    Deployments,
)

_INTEGER_BOUNDS: dict[str, tuple[int | None, int | None]] = {
    "Int": (None, None),
    "UInt": (0, None),
}
for _bits in (8, 16, 32, 64, 128, 256):
    _INTEGER_BOUNDS[f"Int{_bits}"] = (-(1 << (_bits - 1)), (1 << (_bits - 1)) - 1)
    _INTEGER_BOUNDS[f"UInt{_bits}"] = (0, (1 << _bits) - 1)
for _bits in (8, 16, 32, 64):
    _INTEGER_BOUNDS[f"Word{_bits}"] = (0, (1 << _bits) - 1)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FIXED_POINT = {
    "Fix64": re.compile(r"-?[0-9]+(\.[0-9]{1,8})?"),
    "UFix64": re.compile(r"[0-9]+(\.[0-9]{1,8})?"),
}
_ADDRESS = re.compile(r"0x[0-9a-fA-F]{1,16}")


def _expect_string(type_id: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"value of {type_id} must be a string")
    return value


def _decode_integer(type_id: str, value: Any) -> int:
    text = _expect_string(type_id, value)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid {type_id} value {text}")
    number = int(text)
    low, high = _INTEGER_BOUNDS[type_id]
    if (low is not None and number < low) or (high is not None and number > high):
        raise ValueError(f"{type_id} value {text} is out of range")
    return number


def decode_cadence_argument(data: Any) -> CadenceValue:
    """Decode a JSON-Cadence value such as ``{"type": "Int8", "value": "10"}``."""
    if not isinstance(data, dict):
        raise ValueError("cadence argument must be an object")
    type_id = data.get("type")
    if not isinstance(type_id, str):
        raise ValueError("cadence argument is missing its type")
    value = data.get("value")

    if type_id == "Void":
        return CadenceValue(type_id, None)
    if type_id == "Optional":
        return CadenceValue(type_id, None if value is None else decode_cadence_argument(value))
    if type_id == "Bool":
        if not isinstance(value, bool):
            raise ValueError("value of Bool must be a boolean")
        return CadenceValue(type_id, value)
    if type_id in ("String", "Character"):
        return CadenceValue(type_id, _expect_string(type_id, value))
    if type_id == "Address":
        text = _expect_string(type_id, value)
        if not _ADDRESS.fullmatch(text):
            raise ValueError(f"invalid Address value {text}")
        return CadenceValue(type_id, hex_to_address(text))
    if type_id in _INTEGER_BOUNDS:
        return CadenceValue(type_id, _decode_integer(type_id, value))
    if type_id in _FIXED_POINT:
        text = _expect_string(type_id, value)
        if not _FIXED_POINT[type_id].fullmatch(text):
            raise ValueError(f"invalid {type_id} value {text}")
        return CadenceValue(type_id, text)
    if type_id == "Array":
        if not isinstance(value, list):
            raise ValueError("value of Array must be a list")
        return CadenceValue(type_id, [decode_cadence_argument(item) for item in value])
    if type_id == "Dictionary":
        if not isinstance(value, list):
            raise ValueError("value of Dictionary must be a list")
        entries = []
        for entry in value:
            if not isinstance(entry, dict) or "key" not in entry or "value" not in entry:
                raise ValueError("dictionary entries must hold a key and a value")
            entries.append(
                (decode_cadence_argument(entry["key"]), decode_cadence_argument(entry["value"]))
            )
        return CadenceValue(type_id, entries)
    raise ValueError(f"unsupported cadence type {type_id}")


def _contract_from_json(entry: Any) -> ContractDeployment:
    if entry is None or isinstance(entry, str):
        return ContractDeployment(name=entry or "")
    if not isinstance(entry, dict):
        raise ValueError("deployed contract must be a name or an object")
    name = entry.get("name")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise ValueError("deployed contract name must be a string")
    args = entry.get("args")
    if args is None:
        args = []
    if not isinstance(args, list):
        raise ValueError(f"arguments of contract {name} must be a list")
    return ContractDeployment(name=name, args=[decode_cadence_argument(arg) for arg in args])


def deployments_from_json(data: Any) -> Deployments:
    """Build deployments from the decoded ``deployments`` section.

    The section maps network names to account names to lists of contracts,
    each a name or an object with ``name`` and ``args``.
    """
    if not isinstance(data, dict):
        raise ValueError("deployments must be an object")
    deployments = Deployments()
    for network, accounts in data.items():
        if accounts is None:
            continue
        if not isinstance(accounts, dict):
            raise ValueError(f"deployments for network {network} must be an object")
        for account, entries in accounts.items():
            if entries is None:
                entries = []
            if not isinstance(entries, list):
                raise ValueError(
                    f"deployment for account {account} on network {network} "
                    "must be a list of contracts"
                )
            deployments.append(
                Deployment(
                    network=network,
                    account=account,
                    contracts=[_contract_from_json(entry) for entry in entries],
                )
            )
    return deployments


def _go_format(value: Any) -> str:
    if isinstance(value, CadenceValue):
        if value.type == "Dictionary":
            pairs = " ".join(f"{_go_format(k)}:{_go_format(v)}" for k, v in value.value)
            return f"map[{pairs}]"
        return _go_format(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, Address):
        return "[" + " ".join(str(byte) for byte in value.value) + "]"
    if isinstance(value, list):
        return "[" + " ".join(_go_format(item) for item in value) + "]"
    return str(value)


def _argument_to_json(arg: CadenceValue) -> dict[str, Any]:
    if arg.type_id() == "Bool":
        return {"type": arg.type_id(), "value": arg.value}
    return {"type": arg.type_id(), "value": _go_format(arg)}


def _contract_to_json(contract: ContractDeployment) -> Any:
    if not contract.args:
        return contract.name
    return {
        "name": contract.name,
        "args": [_argument_to_json(arg) for arg in contract.args],
    }


def deployments_to_json(deployments: Deployments) -> dict[str, dict[str, list[Any]]]:
    """The ``deployments`` section, with networks and accounts in sorted order."""
    grouped: dict[str, dict[str, list[Any]]] = {}
    for deployment in deployments:
        grouped.setdefault(deployment.network, {})[deployment.account] = [
            _contract_to_json(contract) for contract in deployment.contracts
        ]
    return {
        network: {account: grouped[network][account] for account in sorted(grouped[network])}
        for network in sorted(grouped)
    }