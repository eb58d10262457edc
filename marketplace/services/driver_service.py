"""
Driver service layer: onboarding and availability/earnings updates.
"""
from typing import Optional

from marketplace.core.logging import get_logger, log_business_event
from marketplace.schemas import Driver, DriverCreate, DriverUpdate, UserRole
from marketplace.services.auth_service import AuthService
from marketplace.storage import Storage
from marketplace.utils.exceptions import BadRequestError, ConflictError, NotFoundError

logger = get_logger(__name__)


class DriverService:
    """Service class for driver-related business logic."""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.auth_service = AuthService(storage)

    def onboard_driver(self, payload: DriverCreate) -> Driver:
        """Create the driver profile, then flag the owner as onboarded."""
        owner = self.storage.get_user(payload.user_id)
        if owner is not None and owner.role != UserRole.driver:
            raise BadRequestError("Only driver accounts can create a driver profile")
        if self.storage.get_driver_by_user_id(payload.user_id) is not None:
            raise ConflictError("Driver profile already exists")

        driver = self.storage.create_driver({
            **payload.model_dump(),
            "is_available": True,
            "total_earnings": 0,
        })

        if self.auth_service.mark_onboarded(payload.user_id) is None:
            logger.warning("Onboarded driver for unknown user", user_id=payload.user_id, driver_id=driver.id)

        log_business_event("driver_onboarded", payload.user_id, driver_id=driver.id)
        return driver

    def get_driver(self, driver_id: str) -> Driver:
        """Get driver by ID or raise NotFoundError."""
        driver = self.storage.get_driver(driver_id)
        if driver is None:
            raise NotFoundError("Driver")
        return driver

    def get_driver_for_user(self, user_id: str) -> Optional[Driver]:
        return self.storage.get_driver_by_user_id(user_id)

    def update_driver(self, driver_id: str, update_data: DriverUpdate) -> Driver:
        driver = self.storage.update_driver(driver_id, update_data.changes())
        if driver is None:
            raise NotFoundError("Driver")
        return driver
