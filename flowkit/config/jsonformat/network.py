"""JSON form of the networks section."""

from __future__ import annotations

import binascii
from typing import Any

from cryptography.hazmat.primitives.asymmetric import ec

from flowkit.config.network import Network, Networks

_ECDSA_P256_PUBLIC_KEY_LENGTH = 64


def validate_ecdsa_p256_public_key(key: str) -> bytes:
    """Decode a hex ECDSA P-256 public key (X then Y) and check it is on the curve.

    Returns the raw 64 key bytes; raises ValueError when the key is invalid.
    """
    try:
        raw = binascii.unhexlify(key.removeprefix("0x"))
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"failed to decode public key hex string: {exc}") from exc
    if len(raw) != _ECDSA_P256_PUBLIC_KEY_LENGTH:
        raise ValueError(
            "failed to decode public key: input has incorrect ECDSA_P256 key size"
        )
    try:
        ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), b"\x04" + raw)
    except ValueError as exc:
        raise ValueError(f"failed to decode public key: {exc}") from exc
    return raw


def _text(entry: dict[str, Any], key: str, name: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"network {name} field {key} must be a string")
    return value


def networks_from_json(data: Any) -> Networks:
    """Build networks from the decoded ``networks`` section.

    Each entry is a host, or an object with ``host`` and a public ``key``;
    other fields of the object are ignored.
    """
    if not isinstance(data, dict):
        raise ValueError("networks must be an object")
    networks = Networks()
    for name, entry in data.items():
        if entry is None or isinstance(entry, str):
            simple_host, host, key = entry or "", "", ""
        elif isinstance(entry, dict):
            simple_host, host, key = "", _text(entry, "host", name), _text(entry, "key", name)
        else:
            raise ValueError(f"network {name} must be a string or an object")

        if key and host:
            try:
                validate_ecdsa_p256_public_key(key)
            except ValueError as exc:
                raise ValueError(f"invalid key {key} for network with name {name}") from exc
            networks.append(Network(name=name, host=host, key=key))
        elif simple_host:
            networks.append(Network(name=name, host=simple_host))
        else:
            raise ValueError("failed to transform networks configuration")
    return networks


def networks_to_json(networks: Networks) -> dict[str, Any]:
    """The ``networks`` section: plain hosts, or objects where a key is set."""
    result: dict[str, Any] = {}
    for network in networks:
        if network.key or not network.host:
            result[network.name] = {"host": network.host, "key": network.key}
        else:
            result[network.name] = network.host
    return {name: result[name] for name in sorted(result)}