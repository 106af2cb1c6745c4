from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import date

class ProductSchema(BaseModel):
    """Products travel as camelCase JSON (productName, expirationDate, ownerId)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ProductCreate(ProductSchema):
    # Left optional so the service reports missing fields as validation errors
    product_name: Optional[str] = None
    expiration_date: Optional[str] = None

class ProductUpdate(ProductSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    product_name: Optional[str] = None
    expiration_date: Optional[str] = None

class Product(ProductSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    product_name: str
    expiration_date: date
    owner_id: int
