"""Contract deployment configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CadenceValue:
    """A typed Cadence value used as a contract initialisation argument."""

    type: str
    value: Any

    def type_id(self) -> str:
        return self.type

    def __str__(self) -> str:
        return _render(self.type, self.value)


def _render(type_id: str, value: Any) -> str:
    if isinstance(value, CadenceValue):
        return str(value)
    if type_id == "String" and isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_render("", item) for item in value) + "]"
    return str(value)


@dataclass
class ContractDeployment:
    """A contract to deploy, with its initialisation arguments."""

    name: str
    args: list[CadenceValue] = field(default_factory=list)


@dataclass
class Deployment:
    """Contracts deployed to one account on one network."""

    network: str
    account: str
    contracts: list[ContractDeployment] = field(default_factory=list)

    def add_contract(self, contract: ContractDeployment) -> None:
        """Add a contract unless one with the same name is already listed."""
        if all(existing.name != contract.name for existing in self.contracts):
            self.contracts.append(contract)

    def remove_contract(self, contract_name: str) -> None:
        self.contracts = [c for c in self.contracts if c.name != contract_name]


class Deployments(list):
    """An ordered collection of deployments keyed by account and network."""

    def by_network(self, network: str) -> Deployments:
        return Deployments(d for d in self if d.network == network)

    def by_account_and_network(self, account: str, network: str) -> Deployment | None:
        return next(
            (d for d in self if d.network == network and d.account == account),
            None,
        )

    def add_or_update(self, deployment: Deployment) -> None:
        """Replace the deployment for the same account and network or append it."""
        for position, existing in enumerate(self):
            if (
                existing.account == deployment.account
                and existing.network == deployment.network
            ):
                self[position] = deployment
                return
        self.append(deployment)

    def remove(self, account: str, network: str) -> None:  # type: ignore[override]
        """Remove the deployment; raise LookupError if it does not exist."""
        if self.by_account_and_network(account, network) is None:
            raise LookupError(
                f"deployment for account {account} on network {network} "
                "does not exist in configuration"
            )
        self[:] = [
            d for d in self if not (d.network == network and d.account == account)
        ]