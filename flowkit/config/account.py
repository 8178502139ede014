"""Account configuration: addresses, keys and named accounts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ADDRESS_LENGTH = 8

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class Address:
    """An 8-byte Flow account address."""

    value: bytes = bytes(ADDRESS_LENGTH)

    def __post_init__(self) -> None:
        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError(f"address must be {ADDRESS_LENGTH} bytes long")

    @classmethod
    def from_hex(cls, value: str) -> Address:
        """Build an address from hex, left-padding short values with zeros.

        Only the valid leading hex digits are decoded; values longer than
        eight bytes keep their last eight bytes.
        """
        digits = value.removeprefix("0x")
        if len(digits) % 2:
            digits = "0" + digits
        valid = _HEX_DIGITS.match(digits).group()
        valid = valid[: len(valid) - len(valid) % 2]
        raw = bytes.fromhex(valid)[-ADDRESS_LENGTH:]
        return cls(raw.rjust(ADDRESS_LENGTH, b"\x00"))

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


EMPTY_ADDRESS = Address()


def hex_to_address(value: str) -> Address:
    """Shorthand for :meth:`Address.from_hex`."""
    return Address.from_hex(value)


class KeyType(str, Enum):
    HEX = "hex"
    GOOGLE_KMS = "google-kms"
    BIP44 = "bip44"
    FILE = "file"


class SignatureAlgorithm(str, Enum):
    UNKNOWN = "unknown"
    ECDSA_P256 = "ECDSA_P256"
    ECDSA_SECP256K1 = "ECDSA_secp256k1"


class HashAlgorithm(str, Enum):
    UNKNOWN = "unknown"
    SHA2_256 = "SHA2_256"
    SHA2_384 = "SHA2_384"
    SHA3_256 = "SHA3_256"
    SHA3_384 = "SHA3_384"
    KECCAK_256 = "Keccak_256"


DEFAULT_HASH_ALGO = HashAlgorithm.SHA3_256
DEFAULT_SIG_ALGO = SignatureAlgorithm.ECDSA_P256


@dataclass
class AccountKey:
    """An account key in any of its configuration formats."""

    type: KeyType | None = None
    index: int = 0
    sig_algo: SignatureAlgorithm = SignatureAlgorithm.UNKNOWN
    hash_algo: HashAlgorithm = HashAlgorithm.UNKNOWN
    resource_id: str = ""
    mnemonic: str = ""
    derivation_path: str = ""
    private_key: Any = None
    location: str = ""
    env: str = ""

    def is_default(self) -> bool:
        """True when the key uses index 0, hex type and the default algorithms."""
        return (
            self.index == 0
            and self.type == KeyType.HEX
            and self.sig_algo == DEFAULT_SIG_ALGO
            and self.hash_algo == DEFAULT_HASH_ALGO
        )


def new_default_account_key(private_key: Any) -> AccountKey:
    """A hex key with the default signature and hash algorithms."""
    return AccountKey(
        type=KeyType.HEX,
        sig_algo=DEFAULT_SIG_ALGO,
        hash_algo=DEFAULT_HASH_ALGO,
        private_key=private_key,
    )


@dataclass
class Account:
    """Configuration for a Flow account."""

    name: str
    address: Address = EMPTY_ADDRESS
    key: AccountKey = field(default_factory=AccountKey)


class Accounts(list):
    """An ordered collection of accounts addressed by name."""

    def by_name(self, name: str) -> Account:
        """Return the account called ``name``; raise LookupError if absent."""
        for account in self:
            if account.name == name:
                return account
        raise LookupError(f"account with name {name} is not present in configuration")

    def add_or_update(self, name: str, account: Account) -> None:
        """Replace the account called ``name`` or append a new one."""
        for position, existing in enumerate(self):
            if existing.name == name:
                self[position] = account
                return
        self.append(account)

    def remove(self, name: str) -> None:  # type: ignore[override]
        """Remove accounts called ``name``; absent names are ignored."""
        self[:] = [account for account in self if account.name != name]