from typing import List, Optional

from pydantic import Field, field_validator

from marketplace.schemas.base import CamelModel, PartialUpdate, RequestModel
from marketplace.schemas.product import ProductSeed


class Vendor(CamelModel):
    id: str
    user_id: str
    brand_name: str
    category: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    cover_url: Optional[str] = None
    rating: float = 0.0
    delivery_time: str = "15-30 min"
    is_popular: bool = False


class VendorCreate(RequestModel):
    # the owning user is passed explicitly until onboarding is token-gated
    user_id: str = Field(..., min_length=1)
    brand_name: str = Field(..., min_length=2, description="Brand name must be at least 2 characters")
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    logo_url: Optional[str] = None
    cover_url: Optional[str] = None
    products: Optional[List[ProductSeed]] = None

    @field_validator('brand_name')
    @classmethod
    def brand_name_must_not_be_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('Brand name cannot be empty')
        return v


class VendorUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"brand_name", "category", "rating", "delivery_time", "is_popular"})

    brand_name: Optional[str] = Field(None, min_length=2)
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    logo_url: Optional[str] = None
    cover_url: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    delivery_time: Optional[str] = Field(None, min_length=1)
    is_popular: Optional[bool] = None


class VendorResponse(CamelModel):
    vendor: Vendor
