"""Combined registration flow (client plus first order)."""
from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from crm.domain.entities import Client, Order


class ClientWriter(Protocol):
    def add_client(self, name: str, email: str) -> Client: ...


class OrderWriter(Protocol):
    def add_order_for_client(self, client_id: int, description: str, amount: Decimal | int | float | str) -> Order: ...


class CrmFacade:
    def __init__(self, client_writer: ClientWriter, order_writer: OrderWriter) -> None:
        self.client_writer = client_writer
        self.order_writer = order_writer

    def register_new_client_with_first_order(
        self,
        name: str,
        email: str,
        description: str,
        amount: Decimal | int | float | str,
    ) -> tuple[Client, Order]:
        client = self.client_writer.add_client(name, email)
        order = self.order_writer.add_order_for_client(client.id, description, amount)
        return client, order
