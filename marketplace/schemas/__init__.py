"""
Request, response and entity models shared by the store and the API.
"""
from .driver import Driver, DriverCreate, DriverUpdate, VehicleType
from .order import Order, OrderCreate, OrderItem, OrderStatus, OrderUpdate
from .product import Product, ProductCreate, ProductCustomOptions, ProductSeed, ProductUpdate
from .user import SignInRequest, SignUpRequest, User, UserOut, UserRole
from .vendor import Vendor, VendorCreate, VendorUpdate

__all__ = [
    "Driver", "DriverCreate", "DriverUpdate", "VehicleType",
    "Order", "OrderCreate", "OrderItem", "OrderStatus", "OrderUpdate",
    "Product", "ProductCreate", "ProductCustomOptions", "ProductSeed", "ProductUpdate",
    "SignInRequest", "SignUpRequest", "User", "UserOut", "UserRole",
    "Vendor", "VendorCreate", "VendorUpdate",
]
