"""
Client/order use cases: registration, order placement, search and the
"client added" notification.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Union

from crm.core.config import Settings, get_settings
from crm.core.utils import local_now
from crm.domain.entities import (
    Client,
    Order,
    client_from_dict,
    client_to_dict,
    order_from_dict,
    order_to_dict,
)
from crm.domain.search import ClientPredicate, Criterion, as_predicate
from crm.repositories.cached_repository import CachedRepository
from crm.repositories.json_storage import JsonFileStorage, StorageWriteError
from crm.repositories.repository import OrderRepository, Repository

logger = logging.getLogger(__name__)

ClientListener = Callable[[Client], None]
ClientRepository = Union[Repository[Client], CachedRepository[Client]]


class CrmError(Exception):
    """Base class for CRM use-case errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmountError(CrmError):
    pass


def _to_amount(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return amount


class CrmService:
    """Composes one client repository and one order repository."""

    def __init__(
        self,
        clients: ClientRepository,
        orders: OrderRepository,
        *,
        order_due_days: int = 14,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self.clients = clients
        self.orders = orders
        self.order_due_days = order_due_days
        self._clock = clock
        self._listeners: list[ClientListener] = []

    # -------------------------------------- listeners --------------------------------------
    def subscribe(self, listener: ClientListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ClientListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def _notify_client_added(self, client: Client) -> None:
        # Snapshot so a listener may unsubscribe itself while being called.
        for listener in list(self._listeners):
            listener(client)

    # -------------------------------------- clients --------------------------------------
    def add_client(self, name: str, email: str) -> Client:
        """
        Register a client and persist the whole client file before notifying
        listeners. On StorageWriteError the client is dropped from memory again,
        its id stays free and listeners are not called.
        """
        created_at = self._clock()
        with self.clients.lock:
            client = self.clients.create(
                lambda next_id: Client(id=next_id, name=name, email=email, created_at=created_at)
            )
            try:
                self.clients.save()
            except StorageWriteError:
                self.clients.discard(client)
                raise
        logger.info("Client %d added (%s)", client.id, client.email)
        self._notify_client_added(client)
        return client

    def get_all_clients(self) -> list[Client]:
        return self.clients.get_all()

    def get_client(self, client_id: int) -> Optional[Client]:
        return self.clients.get_by_id(client_id)

    def find_clients(self, criterion: Criterion | ClientPredicate) -> list[Client]:
        return self.clients.find(as_predicate(criterion))

    # -------------------------------------- orders --------------------------------------
    def add_order_for_client(self, client_id: int, description: str, amount: Decimal | int | float | str) -> Order:
        """The client id is stored as given; it is not checked against existing clients."""
        value = _to_amount(amount)
        due_date = self._clock().date() + timedelta(days=self.order_due_days)
        with self.orders.lock:
            order = self.orders.create(
                lambda next_id: Order(
                    id=next_id,
                    client_id=client_id,
                    description=description,
                    amount=value,
                    due_date=due_date,
                )
            )
            try:
                self.orders.save()
            except StorageWriteError:
                self.orders.discard(order)
                raise
        logger.info("Order %d added for client %d (due %s)", order.id, client_id, due_date.isoformat())
        return order

    def get_all_orders(self) -> list[Order]:
        return self.orders.get_all()

    def get_orders_for_client(self, client_id: int) -> list[Order]:
        return self.orders.get_by_client_id(client_id)


def create_service(settings: Settings | None = None) -> CrmService:
    """Composition root: build repositories from configured paths."""
    settings = settings or get_settings()
    client_storage = JsonFileStorage(
        settings.clients_path, client_from_dict, client_to_dict, strict=settings.strict_storage
    )
    order_storage = JsonFileStorage(
        settings.orders_path, order_from_dict, order_to_dict, strict=settings.strict_storage
    )
    clients: ClientRepository = Repository(client_storage)
    if settings.client_cache_enabled:
        clients = CachedRepository(clients)
    return CrmService(clients, OrderRepository(order_storage), order_due_days=settings.order_due_days)
