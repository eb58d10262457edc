"""
Vendor service layer: onboarding and profile maintenance.
"""
from typing import List, Optional, Tuple

from marketplace.core.config import settings
from marketplace.core.logging import get_logger, log_business_event
from marketplace.schemas import Product, UserRole, Vendor, VendorCreate, VendorUpdate
from marketplace.services.auth_service import AuthService
from marketplace.services.product_service import ProductService
from marketplace.storage import Storage
from marketplace.utils.exceptions import BadRequestError, ConflictError, NotFoundError

logger = get_logger(__name__)


class VendorService:
    """Service class for vendor-related business logic."""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.product_service = ProductService(storage)
        self.auth_service = AuthService(storage)

    def onboard_vendor(self, payload: VendorCreate) -> Tuple[Vendor, List[Product]]:
        """
        Create the vendor profile and its starting catalogue, then flag the
        owner as onboarded.

        The flag is a second, independent write. If it raises, the vendor
        and products already exist and the error surfaces as a 500.
        """
        owner = self.storage.get_user(payload.user_id)
        if owner is not None and owner.role != UserRole.vendor:
            raise BadRequestError("Only vendor accounts can create a vendor profile")
        if self.storage.get_vendor_by_user_id(payload.user_id) is not None:
            raise ConflictError("Vendor profile already exists")

        vendor = self.storage.create_vendor({
            "user_id": payload.user_id,
            "brand_name": payload.brand_name,
            "category": payload.category,
            "description": payload.description or None,
            "logo_url": payload.logo_url or None,
            "cover_url": payload.cover_url or None,
            "rating": settings.ONBOARDING_VENDOR_RATING,
            "delivery_time": settings.ONBOARDING_DELIVERY_TIME,
            "is_popular": False,
        })

        products = [
            self.product_service.add_to_catalogue(vendor.id, seed)
            for seed in payload.products or []
        ]

        if self.auth_service.mark_onboarded(payload.user_id) is None:
            logger.warning("Onboarded vendor for unknown user", user_id=payload.user_id, vendor_id=vendor.id)

        log_business_event(
            "vendor_onboarded", payload.user_id,
            vendor_id=vendor.id, products_count=len(products),
        )
        return vendor, products

    def get_vendor(self, vendor_id: str) -> Vendor:
        """Get vendor by ID or raise NotFoundError."""
        vendor = self.storage.get_vendor(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor")
        return vendor

    def get_vendor_for_user(self, user_id: str) -> Optional[Vendor]:
        return self.storage.get_vendor_by_user_id(user_id)

    def update_vendor(self, vendor_id: str, update_data: VendorUpdate) -> Vendor:
        vendor = self.storage.update_vendor(vendor_id, update_data.changes())
        if vendor is None:
            raise NotFoundError("Vendor")
        return vendor
