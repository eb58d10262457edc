import enum
from typing import List, Optional

from pydantic import Field

from marketplace.schemas.base import CamelModel, PartialUpdate, RequestModel
from marketplace.schemas.product import ProductAddon


class OrderStatus(str, enum.Enum):
    pending = "pending"
    preparing = "preparing"
    ready = "ready"
    delivering = "delivering"
    completed = "completed"
    cancelled = "cancelled"


# A driver may only be attached once the order has left the kitchen
DISPATCHED_STATUSES = frozenset({OrderStatus.ready, OrderStatus.delivering, OrderStatus.completed})


class OrderItem(CamelModel):
    product_id: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)
    addons: Optional[List[ProductAddon]] = None


class Order(CamelModel):
    id: str
    vendor_id: str
    driver_id: Optional[str] = None
    customer_name: str
    customer_address: str
    items: List[OrderItem]
    total_amount: float
    status: OrderStatus = OrderStatus.pending


class OrderCreate(RequestModel):
    vendor_id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    customer_address: str = Field(..., min_length=1)
    items: List[OrderItem] = Field(..., min_length=1, description="Order must contain at least one item")
    total_amount: float = Field(..., gt=0)
    status: Optional[OrderStatus] = None


class OrderUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"customer_name", "customer_address", "items", "total_amount", "status"})

    driver_id: Optional[str] = Field(None, min_length=1)
    customer_name: Optional[str] = Field(None, min_length=1)
    customer_address: Optional[str] = Field(None, min_length=1)
    items: Optional[List[OrderItem]] = Field(None, min_length=1)
    total_amount: Optional[float] = Field(None, gt=0)
    status: Optional[OrderStatus] = None


class OrderResponse(CamelModel):
    order: Order


class OrderListResponse(CamelModel):
    orders: List[Order]
