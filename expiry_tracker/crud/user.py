from datetime import datetime
from sqlalchemy.orm import Session
from expiry_tracker.models.user import User
from typing import Optional
from expiry_tracker.utils.logger import logger

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_user_by_reset_token(db: Session, token_hash: str, now: datetime) -> Optional[User]:
    """User holding this reset-token hash whose expiry has not passed yet"""
    return db.query(User).filter(
        User.password_reset_token == token_hash,
        User.password_reset_expires >= now,
    ).first()

def create_user(db: Session, email: str, password_hash: str) -> User:
    try:
        db_user = User(email=email, password=password_hash)
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        db.rollback()
        raise

def set_reset_token(db: Session, db_user: User, token_hash: str, expires: datetime) -> User:
    try:
        db_user.password_reset_token = token_hash
        db_user.password_reset_expires = expires
        db.commit()
        db.refresh(db_user)
        return db_user
    except Exception as e:
        logger.error(f"Error storing reset token for user {db_user.id}: {e}")
        db.rollback()
        raise

def consume_reset_token(db: Session, token_hash: str, now: datetime, password_hash: str) -> bool:
    """
    Swap in the new password and clear both reset fields in one conditional
    UPDATE, so a token can only ever be redeemed once.
    """
    try:
        updated = db.query(User).filter(
            User.password_reset_token == token_hash,
            User.password_reset_expires >= now,
        ).update(
            {
                User.password: password_hash,
                User.password_reset_token: None,
                User.password_reset_expires: None,
            },
            synchronize_session=False,
        )
        db.commit()
        return updated > 0
    except Exception as e:
        logger.error(f"Error resetting password: {e}")
        db.rollback()
        raise

def delete_user(db: Session, user_id: int) -> bool:
    try:
        db_user = db.query(User).filter(User.id == user_id).first()
        if db_user:
            db.delete(db_user)
            db.commit()
            return True
        return False
    except Exception as e:
        logger.error(f"Error deleting user {user_id}: {e}")
        db.rollback()
        raise
