"""Sample value graph used by the ``demo`` CLI command.

The samples cover every strategy, nested composites, collections, maps, and a
self-referencing object so the demo shows the full rendering contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any

from lib_log_mask.application.ports.console import ConsolePort
from lib_log_mask.domain import MaskStrategy, Sensitive, sensitive


class TildeMasker:
    """Custom masker keeping the text length but hiding its content."""

    def mask(self, text: str, mask_char: str) -> str:
        return mask_char * (len(text) - 1) + "~" if text else text


@dataclass
class Address:
    street: str
    city: str
    postcode: str = sensitive(strategy=MaskStrategy.FIRST_LAST)


@dataclass
class User:
    username: str
    password: str = sensitive()
    email: str = sensitive(strategy=MaskStrategy.FIRST_LAST)
    address: Address | None = None


class Account:
    """Plain class marked through ``Annotated`` hints."""

    iban: Annotated[str, Sensitive(strategy=MaskStrategy.LAST_FOUR, mask_char="#")]
    pin: Annotated[str, Sensitive(strategy=MaskStrategy.CUSTOM, custom_masker=TildeMasker)]

    def __init__(self, owner: User, iban: str, pin: str) -> None:
        self.owner = owner
        self.iban = iban
        self.pin = pin
        self.linked: list[Account] = []


@dataclass
class Team:
    name: str
    members: list[User] = field(default_factory=list)


def sample_values() -> list[tuple[str, Any]]:
    """Return ``(label, value)`` pairs rendered by the demo."""
    john = User("john", "secret123", "john@example.com", Address("Main St 1", "Springfield", "12345"))
    jane = User("jane", "hunter2", "jane@example.org")
    account = Account(john, "DE89370400440532013000", "4711")
    account.linked.append(account)
    return [
        ("user", john),
        ("users", [john, jane]),
        ("directory", {"john": john}),
        ("team", Team("ops", [jane])),
        ("account", account),
        ("empty", {}),
    ]


def run_demo(render: Any, console: ConsolePort, *, colorize: bool) -> int:
    """Render every sample with ``render`` and emit it; return the sample count."""
    samples = sample_values()
    for label, value in samples:
        console.emit(label, render(value), colorize=colorize)
    return len(samples)


__all__ = ["Account", "Address", "TildeMasker", "Team", "User", "run_demo", "sample_values"]
