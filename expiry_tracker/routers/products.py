# routers/products.py
"""
Products CRUD Router

Every route requires a bearer token and only ever sees the caller's own products.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List

from expiry_tracker.dependencies import CurrentUser, get_current_user, get_product_service
from expiry_tracker.schemas.product import Product, ProductCreate, ProductUpdate
from expiry_tracker.services.product_service import ProductService

router = APIRouter(
    prefix="/products",
    tags=["products"],
)


def parse_product_id(product_id: str) -> int:
    try:
        return int(product_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Product id must be a valid integer")


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    current_user: CurrentUser = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
):
    return products.create(payload.product_name, payload.expiration_date, current_user.id)


@router.get("", response_model=List[Product])
def get_all_products(
    current_user: CurrentUser = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
):
    """All of the caller's products ordered by expiration date"""
    return products.find_all(current_user.id)


@router.get("/{product_id}", response_model=Product)
def get_product_by_id(
    product_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
):
    product = products.find_by_id(parse_product_id(product_id), current_user.id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
):
    """Update productName and/or expirationDate"""
    updated_product = products.update(parse_product_id(product_id), payload, current_user.id)
    if not updated_product:
        raise HTTPException(status_code=404, detail="Product not found")
    return updated_product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
):
    if not products.remove(parse_product_id(product_id), current_user.id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
