"""
Order service layer.
"""
from typing import List

from marketplace.core.logging import get_logger, log_business_event
from marketplace.schemas import Order, OrderCreate, OrderStatus, OrderUpdate
from marketplace.schemas.order import DISPATCHED_STATUSES
from marketplace.storage import Storage
from marketplace.utils.exceptions import BadRequestError, NotFoundError

logger = get_logger(__name__)


class OrderService:
    """Service class for order-related business logic."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def create_order(self, order_data: OrderCreate) -> Order:
        """Store a new, undispatched order."""
        order = self.storage.create_order({
            "vendor_id": order_data.vendor_id,
            "customer_name": order_data.customer_name,
            "customer_address": order_data.customer_address,
            "items": order_data.items,
            "total_amount": order_data.total_amount,
            "status": order_data.status or OrderStatus.pending,
        })
        log_business_event(
            "order_created",
            order_id=order.id, vendor_id=order.vendor_id,
            total_amount=order.total_amount, items_count=len(order.items),
        )
        return order

    def get_order(self, order_id: str) -> Order:
        order = self.storage.get_order(order_id)
        if order is None:
            raise NotFoundError("Order")
        return order

    def get_vendor_orders(self, vendor_id: str) -> List[Order]:
        return self.storage.get_orders_by_vendor(vendor_id)

    def get_driver_orders(self, driver_id: str) -> List[Order]:
        return self.storage.get_orders_by_driver(driver_id)

    def update_order(self, order_id: str, update_data: OrderUpdate) -> Order:
        """
        Merge the supplied fields. An order may only hold a driver while it is
        in a dispatched status (ready, delivering, completed).

        Cancelling releases the driver unless the same request names one.
        """
        changes = update_data.changes()

        if "driver_id" in changes or "status" in changes:
            current = self.get_order(order_id)
            resulting_status = changes.get("status", current.status)
            if resulting_status == OrderStatus.cancelled and "driver_id" not in changes:
                changes["driver_id"] = None
            resulting_driver = changes.get("driver_id", current.driver_id)
            if resulting_driver is not None and resulting_status not in DISPATCHED_STATUSES:
                raise BadRequestError(
                    f"A driver can only be assigned to a dispatched order (status: {resulting_status.value})"
                )

        order = self.storage.update_order(order_id, changes)
        if order is None:
            raise NotFoundError("Order")

        if "status" in changes or "driver_id" in changes:
            logger.info("Order updated", order_id=order.id, status=order.status.value, driver_id=order.driver_id)
        return order
