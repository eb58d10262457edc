"""
Product service layer for business logic separation.
"""
from typing import List

from marketplace.core.logging import log_business_event
from marketplace.schemas import Product, ProductCreate, ProductSeed, ProductUpdate
from marketplace.storage import Storage
from marketplace.utils.exceptions import NotFoundError


class ProductService:
    """Service class for product-related business logic."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def add_to_catalogue(self, vendor_id: str, seed: ProductSeed) -> Product:
        """Store one catalogue entry under ``vendor_id``."""
        return self.storage.create_product({
            "vendor_id": vendor_id,
            "name": seed.name,
            "price": seed.price,
            "category": seed.category,
            "description": seed.description or None,
            "image_url": seed.image_url or None,
            "in_stock": True if seed.in_stock is None else seed.in_stock,
            "custom_options": seed.custom_options,
        })

    def create_product(self, product_data: ProductCreate) -> Product:
        product = self.add_to_catalogue(product_data.vendor_id, product_data)
        log_business_event("product_created", vendor_id=product.vendor_id, product_id=product.id)
        return product

    def get_product(self, product_id: str) -> Product:
        """Get product by ID or raise NotFoundError."""
        product = self.storage.get_product(product_id)
        if product is None:
            raise NotFoundError("Product")
        return product

    def get_vendor_products(self, vendor_id: str) -> List[Product]:
        """All products listed by a vendor; empty for an unknown vendor."""
        return self.storage.get_products_by_vendor(vendor_id)

    def update_product(self, product_id: str, update_data: ProductUpdate) -> Product:
        product = self.storage.update_product(product_id, update_data.changes())
        if product is None:
            raise NotFoundError("Product")
        return product

    def delete_product(self, product_id: str) -> None:
        if not self.storage.delete_product(product_id):
            raise NotFoundError("Product")
        log_business_event("product_deleted", product_id=product_id)
