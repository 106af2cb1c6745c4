from datetime import date
from sqlalchemy.orm import Session
from expiry_tracker.models.product import Product
from typing import Any, Dict, Optional, List
from expiry_tracker.utils.logger import logger

# Every lookup and mutation here is scoped by owner: a product that belongs to
# someone else is indistinguishable from one that does not exist.

def get_product(db: Session, product_id: int, owner_id: int) -> Optional[Product]:
    return db.query(Product).filter(
        Product.id == product_id,
        Product.owner_id == owner_id,
    ).first()

def get_products(db: Session, owner_id: int) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.owner_id == owner_id)
        .order_by(Product.expiration_date.asc(), Product.id.asc())
        .all()
    )

def create_product(db: Session, product_name: str, expiration_date: date, owner_id: int) -> Product:
    try:
        db_product = Product(
            product_name=product_name,
            expiration_date=expiration_date,
            owner_id=owner_id,
        )
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
        return db_product
    except Exception as e:
        logger.error(f"Error creating product: {e}")
        db.rollback()
        raise

def update_product(db: Session, product_id: int, owner_id: int, values: Dict[str, Any]) -> Optional[Product]:
    """Conditional UPDATE on (id, owner_id); None when no row matched"""
    try:
        updated = db.query(Product).filter(
            Product.id == product_id,
            Product.owner_id == owner_id,
        ).update(values, synchronize_session=False)
        db.commit()
        if not updated:
            return None
        db.expire_all()
        return get_product(db, product_id, owner_id)
    except Exception as e:
        logger.error(f"Error updating product {product_id}: {e}")
        db.rollback()
        raise

def delete_product(db: Session, product_id: int, owner_id: int) -> bool:
    """Conditional DELETE on (id, owner_id); False when no row matched"""
    try:
        deleted = db.query(Product).filter(
            Product.id == product_id,
            Product.owner_id == owner_id,
        ).delete(synchronize_session=False)
        db.commit()
        return deleted > 0
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        db.rollback()
        raise
