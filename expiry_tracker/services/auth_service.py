# services/auth_service.py
from datetime import timedelta
from functools import lru_cache
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expiry_tracker.config import Settings, settings as default_settings
from expiry_tracker.crud import user as user_crud
from expiry_tracker.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidOrExpiredTokenError,
    NotFoundError,
    ValidationError,
)
from expiry_tracker.schemas.user import User as UserPublic
from expiry_tracker.utils import security
from expiry_tracker.utils.helpers import utcnow
from expiry_tracker.utils.logger import logger

# Called with (email address, reset link)
ResetNotifier = Callable[[str, str], None]


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int) -> str:
    return security.hash_password(security.generate_reset_token(), rounds=rounds)


class AuthService:
    """Registration, login and password recovery over the user store"""

    def __init__(self, db: Session, cfg: Optional[Settings] = None):
        self.db = db
        self.cfg = cfg or default_settings

    def register(self, email: str, password: str) -> UserPublic:
        if user_crud.get_user_by_email(self.db, email):
            raise DuplicateEmailError()

        password_hash = security.hash_password(password, rounds=self.cfg.bcrypt_rounds)
        try:
            db_user = user_crud.create_user(self.db, email, password_hash)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            raise DuplicateEmailError()

        logger.info(f"Registered user {db_user.id}")
        return UserPublic.model_validate(db_user)

    def login(self, email: str, password: str) -> str:
        db_user = user_crud.get_user_by_email(self.db, email)
        # Unknown emails are checked against a throwaway hash as well
        password_hash = db_user.password if db_user else dummy_password_hash(self.cfg.bcrypt_rounds)
        if not security.verify_password(password, password_hash) or not db_user:
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()

        return security.create_access_token(
            {"id": db_user.id, "email": db_user.email},
            self.cfg.jwt_secret,
            algorithm=self.cfg.jwt_algorithm,
            expires_delta=timedelta(days=self.cfg.jwt_expires_days),
        )

    def forgot_password(self, email: str, notify: ResetNotifier) -> None:
        """
        Issue a reset token for a registered email. Unknown emails return
        silently so callers cannot probe which addresses exist.
        """
        db_user = user_crud.get_user_by_email(self.db, email)
        if not db_user:
            return

        raw_token = security.generate_reset_token()
        expires = utcnow() + timedelta(minutes=self.cfg.reset_token_ttl_minutes)
        user_crud.set_reset_token(self.db, db_user, security.hash_reset_token(raw_token), expires)
        logger.info(f"Issued password reset token for user {db_user.id}")

        notify(db_user.email, self.reset_link(raw_token))

    def reset_password(self, raw_token: str, new_password: Optional[str]) -> None:
        if not new_password or not new_password.strip():
            raise ValidationError("New password is required")

        token_hash = security.hash_reset_token(raw_token)
        now = utcnow()
        if not user_crud.get_user_by_reset_token(self.db, token_hash, now):
            raise InvalidOrExpiredTokenError()

        password_hash = security.hash_password(new_password, rounds=self.cfg.bcrypt_rounds)
        if not user_crud.consume_reset_token(self.db, token_hash, now, password_hash):
            # Redeemed by a concurrent request between the lookup and the update
            raise InvalidOrExpiredTokenError()
        logger.info("Password reset completed")

    def delete_account(self, user_id: int) -> None:
        if not user_crud.delete_user(self.db, user_id):
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {user_id}")

    def reset_link(self, raw_token: str) -> str:
        return f"{self.cfg.reset_url_base.rstrip('/')}/{raw_token}"
