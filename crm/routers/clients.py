from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from crm.domain.entities import client_to_dict, order_to_dict
from crm.domain.search import ByEmailDomain, ByNameSubstring, matches
from crm.routers import get_crm_service

router = APIRouter(prefix="/clients", tags=["clients"])


class ClientIn(BaseModel):
    name: str
    email: str


class OrderIn(BaseModel):
    description: str
    amount: Decimal


@router.get("")
def list_clients(request: Request, name: str = "", domain: str = ""):
    svc = get_crm_service(request)
    criteria = []
    if name:
        criteria.append(ByNameSubstring(name))
    if domain:
        criteria.append(ByEmailDomain(domain))
    if not criteria:
        clients = svc.get_all_clients()
    else:
        clients = svc.find_clients(lambda c: all(matches(crit, c) for crit in criteria))
    return [client_to_dict(c) for c in clients]


@router.post("", status_code=201)
def create_client(payload: ClientIn, request: Request):
    svc = get_crm_service(request)
    client = svc.add_client(payload.name.strip(), payload.email.strip())
    return client_to_dict(client)


@router.get("/{client_id}")
def get_client(client_id: int, request: Request):
    client = get_crm_service(request).get_client(client_id)
    if not client:
        raise HTTPException(404, "Client not found")
    return client_to_dict(client)


@router.get("/{client_id}/orders")
def list_client_orders(client_id: int, request: Request):
    svc = get_crm_service(request)
    return [order_to_dict(o) for o in svc.get_orders_for_client(client_id)]


@router.post("/{client_id}/orders", status_code=201)
def create_client_order(client_id: int, payload: OrderIn, request: Request):
    svc = get_crm_service(request)
    # The service itself accepts unknown client ids; the HTTP surface does not.
    if not svc.get_client(client_id):
        raise HTTPException(404, "Client not found")
    order = svc.add_order_for_client(client_id, payload.description, payload.amount)
    return order_to_dict(order)
