"""JSON form of the emulators section."""

from __future__ import annotations

from typing import Any

from flowkit.config.emulator import DEFAULT_EMULATOR, Emulator, Emulators


def _emulator_from_json(name: str, entry: Any) -> Emulator:
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise ValueError(f"emulator {name} must be an object")
    port = entry.get("port")
    if port is None:
        port = 0
    if not isinstance(port, int) or isinstance(port, bool):
        raise ValueError(f"port of emulator {name} must be an integer")
    service_account = entry.get("serviceAccount")
    if service_account is None:
        service_account = ""
    if not isinstance(service_account, str):
        raise ValueError(f"service account of emulator {name} must be a string")
    if port < 0 or port > 65535:
        raise ValueError("invalid port value")
    return Emulator(name=name, port=port, service_account=service_account)


def emulators_from_json(data: Any) -> Emulators:
    """Build emulators from the decoded ``emulators`` section."""
    if not isinstance(data, dict):
        raise ValueError("emulators must be an object")
    return Emulators(_emulator_from_json(name, entry) for name, entry in data.items())


def emulators_to_json(emulators: Emulators) -> dict[str, dict[str, Any]]:
    """The ``emulators`` section, leaving out the default emulator."""
    result = {
        emulator.name: {"port": emulator.port, "serviceAccount": emulator.service_account}
        for emulator in emulators
        if emulator != DEFAULT_EMULATOR
    }
    return {name: result[name] for name in sorted(result)}