# marketplace/routers/products.py
from fastapi import APIRouter, Depends

from marketplace.schemas import ProductCreate, ProductUpdate
from marketplace.schemas.product import DeleteResponse, ProductResponse
from marketplace.services import ProductService
from marketplace.storage import Storage
from marketplace.utils.dependencies import get_storage

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("", response_model=ProductResponse)
def create_product(payload: ProductCreate, storage: Storage = Depends(get_storage)):
    return ProductResponse(product=ProductService(storage).create_product(payload))


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, storage: Storage = Depends(get_storage)):
    return ProductResponse(product=ProductService(storage).get_product(product_id))


@router.patch("/{product_id}", response_model=ProductResponse)
def update_product(product_id: str, payload: ProductUpdate, storage: Storage = Depends(get_storage)):
    return ProductResponse(product=ProductService(storage).update_product(product_id, payload))


@router.delete("/{product_id}", response_model=DeleteResponse)
def delete_product(product_id: str, storage: Storage = Depends(get_storage)):
    ProductService(storage).delete_product(product_id)
    return DeleteResponse(success=True)
