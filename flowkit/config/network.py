"""Network configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    """Configuration for a Flow network."""

    name: str = ""
    host: str = ""
    key: str = ""


EMPTY_NETWORK = Network()
EMULATOR_NETWORK = Network(name="emulator", host="127.0.0.1:3569")
TESTNET_NETWORK = Network(name="testnet", host="access.devnet.nodes.onflow.org:9000")
SANDBOX_NETWORK = Network(name="sandboxnet", host="access.sandboxnet.nodes.onflow.org:9000")
MAINNET_NETWORK = Network(name="mainnet", host="access.mainnet.nodes.onflow.org:9000")


class Networks(list):
    """An ordered collection of networks addressed by name."""

    def by_name(self, name: str) -> Network:
        """Return the network called ``name``; raise LookupError if absent."""
        for network in self:
            if network.name == name:
                return network
        raise LookupError(f"network named {name} does not exist in configuration")

    def add_or_update(self, network: Network) -> None:
        """Replace the network with the same name or append it."""
        for position, existing in enumerate(self):
            if existing.name == network.name:
                self[position] = network
                return
        self.append(network)

    def remove(self, name: str) -> None:  # type: ignore[override]
        """Remove the network called ``name``; raise LookupError if absent."""
        self.by_name(name)
        self[:] = [network for network in self if network.name != name]


DEFAULT_NETWORKS = Networks(
    [EMULATOR_NETWORK, TESTNET_NETWORK, SANDBOX_NETWORK, MAINNET_NETWORK]
)