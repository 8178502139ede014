"""Events emitted by transactions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from flowkit.config.account import Address

EVENT_ACCOUNT_CREATED = "flow.AccountCreated"


@dataclass
class Event:
    """An event type with its field values keyed by field name."""

    type: str
    values: dict[str, Any] = field(default_factory=dict)

    def get_address(self) -> Address | None:
        """The value of the ``address`` field, if it holds an address."""
        address = self.values.get("address")
        return address if isinstance(address, Address) else None


def new_event(
    event_type: str, field_names: Sequence[str], field_values: Sequence[Any]
) -> Event:
    """Build an event from its type and parallel field names and values."""
    try:
        values = dict(zip(field_names, field_values, strict=True))
    except ValueError as exc:
        raise ValueError("event field names and values differ in length") from exc
    return Event(type=event_type, values=values)


class Events(list):
    """A list of events."""

    def get_created_addresses(self) -> list[Address | None]:
        """Addresses carried by the account-created events, in order."""
        return [event.get_address() for event in self if event.type == EVENT_ACCOUNT_CREATED]


def events_from_transaction(
    transaction_events: Iterable[tuple[str, Sequence[str], Sequence[Any]]],
) -> Events:
    """Build events from ``(type, field names, field values)`` triples."""
    return Events(new_event(*raw) for raw in transaction_events)