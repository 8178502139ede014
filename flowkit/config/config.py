"""The full configuration and default locations of configuration files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from flowkit.config.account import Accounts
from flowkit.config.contract import Contracts
from flowkit.config.deployment import Deployments
from flowkit.config.emulator import DEFAULT_EMULATORS, Emulators
from flowkit.config.network import DEFAULT_NETWORKS, Networks

DEFAULT_PATH = "flow.json"


class OutdatedFormatError(ValueError):
    """Raised when a configuration uses the old, unsupported format."""

    def __init__(self, message: str = "you are using old configuration format") -> None:
        super().__init__(message)


@dataclass
class Config:
    """All configuration, independent of the format it was read from."""

    emulators: Emulators = field(default_factory=Emulators)
    contracts: Contracts = field(default_factory=Contracts)
    networks: Networks = field(default_factory=Networks)
    accounts: Accounts = field(default_factory=Accounts)
    deployments: Deployments = field(default_factory=Deployments)

    def validate(self) -> None:
        """Check cross references; raise ValueError on the first broken one."""
        for contract in self.contracts:
            for alias in contract.aliases:
                if alias.network and not _present(self.networks.by_name, alias.network):
                    raise ValueError(
                        f"contract {contract.name} alias contains nonexisting "
                        f"network {alias.network}"
                    )

        for emulator in self.emulators:
            if not _present(self.accounts.by_name, emulator.service_account):
                raise ValueError(
                    f"emulator {emulator.name} contains nonexisting service "
                    f"account {emulator.service_account}"
                )

        for deployment in self.deployments:
            if not _present(self.networks.by_name, deployment.network):
                raise ValueError(
                    f"deployment contains nonexisting network {deployment.network}"
                )
            for contract in deployment.contracts:
                if not _present(self.contracts.by_name, contract.name):
                    raise ValueError(
                        f"deployment contains nonexisting contract {contract.name}"
                    )
            if not _present(self.accounts.by_name, deployment.account):
                raise ValueError(
                    f"deployment contains nonexisting account {deployment.account}"
                )


def _present(lookup, name: str) -> bool:
    try:
        lookup(name)
    except LookupError:
        return False
    return True


def default() -> Config:
    """A configuration holding the default emulator and networks."""
    return Config(
        emulators=Emulators(DEFAULT_EMULATORS),
        networks=Networks(DEFAULT_NETWORKS),
    )


def global_path() -> str:
    """The configuration path in the user's home directory, or "" if unknown."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return ""
    return f"{home}/{DEFAULT_PATH}"


def default_paths() -> list[str]:
    """The global path followed by the local default path."""
    return [global_path(), DEFAULT_PATH]


def is_default_path(paths: Sequence[str]) -> bool:
    """True when ``paths`` are exactly the default configuration paths."""
    return len(paths) == 2 and paths[0] == global_path() and paths[1] == DEFAULT_PATH