from fastapi import APIRouter, Depends

from marketplace.schemas import OrderCreate, OrderUpdate
from marketplace.schemas.order import OrderResponse
from marketplace.services import OrderService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_storage

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderResponse)
def create_order(payload: OrderCreate, storage: Storage = Depends(get_storage)):
    return OrderResponse(order=OrderService(storage).create_order(payload))


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: str, storage: Storage = Depends(get_storage)):
    return OrderResponse(order=OrderService(storage).get_order(order_id))


@router.patch("/{order_id}", response_model=OrderResponse)
def update_order(order_id: str, payload: OrderUpdate, storage: Storage = Depends(get_storage)):
    """Status changes and driver dispatch"""
    return OrderResponse(order=OrderService(storage).update_order(order_id, payload))
