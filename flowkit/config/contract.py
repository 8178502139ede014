"""Contract configuration and network aliases."""

from __future__ import annotations

from dataclasses import dataclass, field

from flowkit.config.account import Address


@dataclass(frozen=True)
class Alias:
    """A pre-deployed contract address on a specific network."""

    network: str
    address: Address


class Aliases(list):
    """Aliases of a contract, at most one per network."""

    def by_network(self, network: str) -> Alias | None:
        return next((alias for alias in self if alias.network == network), None)

    def add(self, network: str, address: Address) -> None:
        """Add an alias unless the network already has one."""
        if self.by_network(network) is None:
            self.append(Alias(network=network, address=address))


@dataclass
class Contract:
    """Configuration for a Cadence contract."""

    name: str
    location: str = ""
    aliases: Aliases = field(default_factory=Aliases)

    def is_aliased(self) -> bool:
        return len(self.aliases) > 0


class Contracts(list):
    """An ordered collection of contracts addressed by name."""

    def by_name(self, name: str) -> Contract:
        """Return the first contract called ``name``; raise LookupError if absent."""
        for contract in self:
            if contract.name == name:
                return contract
        raise LookupError(f"contract {name} does not exist")

    def add_or_update(self, contract: Contract) -> None:
        """Replace the contract with the same name or append it."""
        for position, existing in enumerate(self):
            if existing.name == contract.name:
                self[position] = contract
                return
        self.append(contract)

    def remove(self, name: str) -> None:  # type: ignore[override]
        """Remove the contract called ``name``; raise LookupError if absent."""
        self.by_name(name)
        self[:] = [contract for contract in self if contract.name != name]