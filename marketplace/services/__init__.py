"""
Service layer package initialization.
"""
from .auth_service import AuthService
from .driver_service import DriverService
from .order_service import OrderService
from .product_service import ProductService
from .vendor_service import VendorService

__all__ = ["AuthService", "DriverService", "OrderService", "ProductService", "VendorService"]
