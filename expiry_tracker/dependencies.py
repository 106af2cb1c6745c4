from typing import Optional

from fastapi import Depends, Header
from pydantic import BaseModel
from sqlalchemy.orm import Session

from expiry_tracker.config import Settings, settings
from expiry_tracker.database import get_db
from expiry_tracker.errors import UnauthenticatedError
from expiry_tracker.services.auth_service import AuthService
from expiry_tracker.services.email_service import EmailService
from expiry_tracker.services.product_service import ProductService
from expiry_tracker.utils.security import decode_access_token


class CurrentUser(BaseModel):
    """Identity decoded from the bearer token"""
    id: int
    email: str


def get_settings() -> Settings:
    return settings


def get_authorization_header(authorization: Optional[str] = Header(default=None, alias="Authorization")) -> Optional[str]:
    return authorization


def get_current_user(
    authorization: Optional[str] = Depends(get_authorization_header),
    cfg: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Gate for protected routes. Expects 'Bearer <token>'; a missing header, a
    bad signature and an expired token all end in the same 401.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthenticatedError("Access denied. No token provided")

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise UnauthenticatedError("Access denied. No token provided")

    identity = decode_access_token(token, cfg.jwt_secret, algorithm=cfg.jwt_algorithm)
    return CurrentUser(**identity)


def get_email_service(cfg: Settings = Depends(get_settings)) -> EmailService:
    return EmailService(cfg)


def get_auth_service(db: Session = Depends(get_db), cfg: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(db, cfg)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
