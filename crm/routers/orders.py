from fastapi import APIRouter, Request

from crm.domain.entities import order_to_dict
from crm.routers import get_crm_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("")
def list_orders(request: Request):
    return [order_to_dict(o) for o in get_crm_service(request).get_all_orders()]
