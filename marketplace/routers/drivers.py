from fastapi import APIRouter, Depends

from marketplace.schemas import DriverCreate, DriverUpdate
from marketplace.schemas.driver import DriverResponse
from marketplace.schemas.order import OrderListResponse
from marketplace.services import DriverService, OrderService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_storage

router = APIRouter(prefix="/api/drivers", tags=["drivers"])


@router.post("", response_model=DriverResponse)
def create_driver(payload: DriverCreate, storage: Storage = Depends(get_storage)):
    """Driver onboarding: profile plus the owner's onboarding flag."""
    return DriverResponse(driver=DriverService(storage).onboard_driver(payload))


@router.get("/{driver_id}", response_model=DriverResponse)
def get_driver(driver_id: str, storage: Storage = Depends(get_storage)):
    return DriverResponse(driver=DriverService(storage).get_driver(driver_id))


@router.patch("/{driver_id}", response_model=DriverResponse)
def update_driver(driver_id: str, update: DriverUpdate, storage: Storage = Depends(get_storage)):
    """Availability toggles and earnings updates land here."""
    return DriverResponse(driver=DriverService(storage).update_driver(driver_id, update))


@router.get("/{driver_id}/orders", response_model=OrderListResponse)
def get_driver_orders(driver_id: str, storage: Storage = Depends(get_storage)):
    """Orders dispatched to this driver"""
    return OrderListResponse(orders=OrderService(storage).get_driver_orders(driver_id))
