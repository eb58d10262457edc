from typing import List, Optional

from pydantic import Field, field_validator

from marketplace.schemas.base import CamelModel, PartialUpdate, RequestModel


class ProductAddon(CamelModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class ProductCustomOptions(CamelModel):
    addons: Optional[List[ProductAddon]] = None


class Product(CamelModel):
    id: str
    vendor_id: str
    name: str
    price: float
    category: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    in_stock: bool = True
    custom_options: Optional[ProductCustomOptions] = None


class ProductSeed(RequestModel):
    """A catalogue entry without an owner, as submitted during vendor onboarding."""
    name: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., gt=0, description="Price must be greater than 0")
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    in_stock: Optional[bool] = None
    custom_options: Optional[ProductCustomOptions] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('Product name cannot be empty or whitespace only')
        return v


class ProductCreate(ProductSeed):
    vendor_id: str = Field(..., min_length=1)


class ProductUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"name", "price", "category", "in_stock"})

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, gt=0)
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    in_stock: Optional[bool] = None
    custom_options: Optional[ProductCustomOptions] = None


class ProductResponse(CamelModel):
    product: Product


class ProductListResponse(CamelModel):
    products: List[Product]


class DeleteResponse(CamelModel):
    success: bool = True
