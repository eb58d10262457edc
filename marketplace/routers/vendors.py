from fastapi import APIRouter, Depends

from marketplace.schemas import VendorCreate, VendorUpdate
from marketplace.schemas.order import OrderListResponse
from marketplace.schemas.product import ProductListResponse
from marketplace.schemas.vendor import VendorResponse
from marketplace.services import OrderService, ProductService, VendorService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_storage

router = APIRouter(prefix="/api/vendors", tags=["vendors"])


@router.post("", response_model=VendorResponse)
def create_vendor(payload: VendorCreate, storage: Storage = Depends(get_storage)):
    """Vendor onboarding: profile, starting catalogue and the owner's onboarding flag."""
    vendor, _ = VendorService(storage).onboard_vendor(payload)
    return VendorResponse(vendor=vendor)


@router.get("/{vendor_id}", response_model=VendorResponse)
def get_vendor(vendor_id: str, storage: Storage = Depends(get_storage)):
    return VendorResponse(vendor=VendorService(storage).get_vendor(vendor_id))


@router.patch("/{vendor_id}", response_model=VendorResponse)
def update_vendor(vendor_id: str, update: VendorUpdate, storage: Storage = Depends(get_storage)):
    return VendorResponse(vendor=VendorService(storage).update_vendor(vendor_id, update))


@router.get("/{vendor_id}/products", response_model=ProductListResponse)
def get_vendor_products(vendor_id: str, storage: Storage = Depends(get_storage)):
    """All products for a vendor; an unknown vendor just has none."""
    return ProductListResponse(products=ProductService(storage).get_vendor_products(vendor_id))


@router.get("/{vendor_id}/orders", response_model=OrderListResponse)
def get_vendor_orders(vendor_id: str, storage: Storage = Depends(get_storage)):
    return OrderListResponse(orders=OrderService(storage).get_vendor_orders(vendor_id))
