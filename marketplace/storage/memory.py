from typing import Any, Dict, List, Optional

from marketplace.schemas import Driver, Order, Product, User, Vendor
from marketplace.storage.base import Storage, build_entity, merge_entity


class MemStorage(Storage):
    """One dict per entity kind, keyed by id. Lives as long as the instance."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.vendors: Dict[str, Vendor] = {}
        self.products: Dict[str, Product] = {}
        self.drivers: Dict[str, Driver] = {}
        self.orders: Dict[str, Order] = {}

    @staticmethod
    def _update(collection: Dict[str, Any], entity_id: str, updates: Dict[str, Any]):
        current = collection.get(entity_id)
        if current is None:
            return None
        updated = merge_entity(current, updates)
        collection[entity_id] = updated
        return updated

    # --- users ---

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.email == email), None)

    def create_user(self, data: Dict[str, Any]) -> User:
        user = build_entity(User, data)
        self.users[user.id] = user
        return user

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        return self._update(self.users, user_id, updates)

    def count_users(self) -> int:
        return len(self.users)

    # --- vendors ---

    def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        return self.vendors.get(vendor_id)

    def get_vendor_by_user_id(self, user_id: str) -> Optional[Vendor]:
        return next((vendor for vendor in self.vendors.values() if vendor.user_id == user_id), None)

    def create_vendor(self, data: Dict[str, Any]) -> Vendor:
        vendor = build_entity(Vendor, data)
        self.vendors[vendor.id] = vendor
        return vendor

    def update_vendor(self, vendor_id: str, updates: Dict[str, Any]) -> Optional[Vendor]:
        return self._update(self.vendors, vendor_id, updates)

    # --- products ---

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    def get_products_by_vendor(self, vendor_id: str) -> List[Product]:
        return [product for product in self.products.values() if product.vendor_id == vendor_id]

    def create_product(self, data: Dict[str, Any]) -> Product:
        product = build_entity(Product, data)
        self.products[product.id] = product
        return product

    def update_product(self, product_id: str, updates: Dict[str, Any]) -> Optional[Product]:
        return self._update(self.products, product_id, updates)

    def delete_product(self, product_id: str) -> bool:
        return self.products.pop(product_id, None) is not None

    # --- drivers ---

    def get_driver(self, driver_id: str) -> Optional[Driver]:
        return self.drivers.get(driver_id)

    def get_driver_by_user_id(self, user_id: str) -> Optional[Driver]:
        return next((driver for driver in self.drivers.values() if driver.user_id == user_id), None)

    def create_driver(self, data: Dict[str, Any]) -> Driver:
        driver = build_entity(Driver, data)
        self.drivers[driver.id] = driver
        return driver

    def update_driver(self, driver_id: str, updates: Dict[str, Any]) -> Optional[Driver]:
        return self._update(self.drivers, driver_id, updates)

    # --- orders ---

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def get_orders_by_vendor(self, vendor_id: str) -> List[Order]:
        return [order for order in self.orders.values() if order.vendor_id == vendor_id]

    def get_orders_by_driver(self, driver_id: str) -> List[Order]:
        return [order for order in self.orders.values() if order.driver_id == driver_id]

    def create_order(self, data: Dict[str, Any]) -> Order:
        order = build_entity(Order, data)
        self.orders[order.id] = order
        return order

    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Optional[Order]:
        return self._update(self.orders, order_id, updates)

    def delete_order(self, order_id: str) -> bool:
        return self.orders.pop(order_id, None) is not None
