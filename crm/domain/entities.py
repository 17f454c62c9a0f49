"""Client and order records plus their JSON field mapping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class Order:
    id: int
    client_id: int
    description: str
    amount: Decimal
    due_date: date


def _int_field(value: Any) -> int:
    # bool is an int subclass; Decimal ids like 1.5 must not be truncated.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _json_number(value: Decimal) -> int | float:
    # Integral amounts stay integers on disk ("100", not "100.0").
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def client_to_dict(client: Client) -> dict[str, Any]:
    return {
        "id": client.id,
        "name": client.name,
        "email": client.email,
        "createdAt": client.created_at.isoformat(),
    }


def client_from_dict(data: Mapping[str, Any]) -> Client:
    """Build a Client from a stored record. Missing keys raise KeyError."""
    return Client(
        id=_int_field(data["id"]),
        name=str(data["name"]),
        email=str(data["email"]),
        created_at=datetime.fromisoformat(str(data["createdAt"])),
    )


def order_to_dict(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "clientId": order.client_id,
        "description": order.description,
        "amount": _json_number(order.amount),
        "dueDate": order.due_date.isoformat(),
    }


def order_from_dict(data: Mapping[str, Any]) -> Order:
    """Build an Order from a stored record. Missing keys raise KeyError."""
    return Order(
        id=_int_field(data["id"]),
        client_id=_int_field(data["clientId"]),
        description=str(data["description"]),
        amount=Decimal(str(data["amount"])),
        due_date=date.fromisoformat(str(data["dueDate"])[:10]),
    )
