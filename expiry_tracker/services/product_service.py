# services/product_service.py
"""
Product rules live here: a name of at least three characters, an expiration
date in YYYY-MM-DD form that is not before today, and visibility limited to
the product's owner. The CRUD layer only stores what this service approved.
"""

from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from expiry_tracker.crud import product as product_crud
from expiry_tracker.errors import ValidationError
from expiry_tracker.models.product import Product
from expiry_tracker.schemas.product import ProductUpdate
from expiry_tracker.utils.helpers import validate_expiration_date

MIN_NAME_LENGTH = 3


class ProductService:

    def __init__(self, db: Session, today: Optional[Callable[[], date]] = None):
        self.db = db
        self.today = today or date.today

    def create(self, product_name: Optional[str], expiration_date: Optional[str], owner_id: int) -> Product:
        if not product_name or not expiration_date:
            raise ValidationError("Product name and expiration date are required")
        if len(product_name) < MIN_NAME_LENGTH:
            raise ValidationError(f"Product name must be at least {MIN_NAME_LENGTH} characters long")

        parsed = validate_expiration_date(expiration_date, today=self.today())
        return product_crud.create_product(self.db, product_name, parsed, owner_id)

    def find_all(self, owner_id: int) -> List[Product]:
        """Owner's products, soonest to expire first"""
        return product_crud.get_products(self.db, owner_id)

    def find_by_id(self, product_id: int, owner_id: int) -> Optional[Product]:
        return product_crud.get_product(self.db, product_id, owner_id)

    def update(self, product_id: int, patch: ProductUpdate, owner_id: int) -> Optional[Product]:
        if not product_crud.get_product(self.db, product_id, owner_id):
            return None

        provided = patch.model_fields_set
        values = {}

        if "product_name" in provided:
            if patch.product_name is None or not patch.product_name.strip():
                raise ValidationError("Product name cannot be empty")
            values[Product.product_name] = patch.product_name

        if "expiration_date" in provided:
            if patch.expiration_date is None:
                raise ValidationError("Expiration date cannot be empty")
            values[Product.expiration_date] = validate_expiration_date(
                patch.expiration_date, today=self.today()
            )

        if not values:
            return product_crud.get_product(self.db, product_id, owner_id)
        return product_crud.update_product(self.db, product_id, owner_id, values)

    def remove(self, product_id: int, owner_id: int) -> bool:
        return product_crud.delete_product(self.db, product_id, owner_id)
