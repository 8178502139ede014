"""Emulator configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Emulator:
    """Configuration for a Flow Emulator instance."""

    name: str = ""
    port: int = 0
    service_account: str = ""


DEFAULT_EMULATOR = Emulator(name="default", service_account="emulator-account", port=3569)


class Emulators(list):
    """An ordered collection of emulators addressed by name."""

    def default(self) -> Emulator | None:
        """Return the emulator named like the default one, if present."""
        return next((em for em in self if em.name == DEFAULT_EMULATOR.name), None)

    def add_or_update(self, name: str, emulator: Emulator) -> None:
        """Replace the emulator called ``name`` or append a new one."""
        for position, existing in enumerate(self):
            if existing.name == name:
                self[position] = emulator
                return
        self.append(emulator)


DEFAULT_EMULATORS = Emulators([DEFAULT_EMULATOR])