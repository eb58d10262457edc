"""
Entity store contract shared by the in-memory and SQL backends.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

from marketplace.schemas import Driver, Order, Product, User, Vendor

EntityT = TypeVar("EntityT", bound=BaseModel)


def new_id() -> str:
    return str(uuid.uuid4())


def build_entity(model: Type[EntityT], data: Dict[str, Any]) -> EntityT:
    """Assign an id and let the model fill declared defaults for omitted fields."""
    values = {key: value for key, value in data.items() if value is not None and key != "id"}
    return model(id=new_id(), **values)


def merge_entity(entity: EntityT, updates: Dict[str, Any]) -> EntityT:
    """Shallow merge: each supplied field replaces the stored value wholesale."""
    updates = {key: value for key, value in updates.items() if key != "id"}
    return type(entity).model_validate({**entity.model_dump(), **updates})


class Storage(ABC):
    """Keyed storage and lookup for every entity kind."""

    # --- users ---

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: Dict[str, Any]) -> User: ...

    @abstractmethod
    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]: ...

    @abstractmethod
    def count_users(self) -> int: ...

    # --- vendors ---

    @abstractmethod
    def get_vendor(self, vendor_id: str) -> Optional[Vendor]: ...

    @abstractmethod
    def get_vendor_by_user_id(self, user_id: str) -> Optional[Vendor]: ...

    @abstractmethod
    def create_vendor(self, data: Dict[str, Any]) -> Vendor: ...

    @abstractmethod
    def update_vendor(self, vendor_id: str, updates: Dict[str, Any]) -> Optional[Vendor]: ...

    # --- products ---

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]: ...

    @abstractmethod
    def get_products_by_vendor(self, vendor_id: str) -> List[Product]: ...

    @abstractmethod
    def create_product(self, data: Dict[str, Any]) -> Product: ...

    @abstractmethod
    def update_product(self, product_id: str, updates: Dict[str, Any]) -> Optional[Product]: ...

    @abstractmethod
    def delete_product(self, product_id: str) -> bool: ...

    # --- drivers ---

    @abstractmethod
    def get_driver(self, driver_id: str) -> Optional[Driver]: ...

    @abstractmethod
    def get_driver_by_user_id(self, user_id: str) -> Optional[Driver]: ...

    @abstractmethod
    def create_driver(self, data: Dict[str, Any]) -> Driver: ...

    @abstractmethod
    def update_driver(self, driver_id: str, updates: Dict[str, Any]) -> Optional[Driver]: ...

    # --- orders ---

    @abstractmethod
    def get_order(self, order_id: str) -> Optional[Order]: ...

    @abstractmethod
    def get_orders_by_vendor(self, vendor_id: str) -> List[Order]: ...

    @abstractmethod
    def get_orders_by_driver(self, driver_id: str) -> List[Order]: ...

    @abstractmethod
    def create_order(self, data: Dict[str, Any]) -> Order: ...

    @abstractmethod
    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Optional[Order]: ...

    @abstractmethod
    def delete_order(self, order_id: str) -> bool: ...

    def close(self) -> None:
        """Release backend resources; nothing to do for most stores."""
