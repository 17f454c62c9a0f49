"""Search criteria for client lookups."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from crm.domain.entities import Client


@dataclass(frozen=True)
class ByNameSubstring:
    """Case-insensitive substring match on the client name."""

    text: str


@dataclass(frozen=True)
class ByEmailDomain:
    """Exact (case-insensitive) match on the part after '@'."""

    domain: str


@dataclass(frozen=True)
class ById:
    id: int


Criterion = Union[ByNameSubstring, ByEmailDomain, ById]
ClientPredicate = Callable[[Client], bool]


def email_domain(email: str | None) -> str:
    value = (email or "").strip().lower()
    if "@" not in value:
        return ""
    return value.rsplit("@", 1)[1]


def matches(criterion: Criterion, client: Client) -> bool:
    """Return True when client satisfies the criterion."""
    if isinstance(criterion, ByNameSubstring):
        return criterion.text.casefold() in (client.name or "").casefold()
    if isinstance(criterion, ByEmailDomain):
        wanted = (criterion.domain or "").strip().lower().lstrip("@")
        return bool(wanted) and email_domain(client.email) == wanted
    if isinstance(criterion, ById):
        return client.id == criterion.id
    raise TypeError(f"Unsupported search criterion: {criterion!r}")


def as_predicate(criterion: Criterion | ClientPredicate) -> ClientPredicate:
    """Accept either a criterion variant or a plain callable."""
    if isinstance(criterion, (ByNameSubstring, ByEmailDomain, ById)):
        return lambda client: matches(criterion, client)
    if callable(criterion):
        return criterion
    raise TypeError(f"Unsupported search criterion: {criterion!r}")
