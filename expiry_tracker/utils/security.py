import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from expiry_tracker.errors import UnauthenticatedError, ValidationError

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    """Salted bcrypt hash of a plaintext password"""
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes long")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    identity: Dict[str, Any],
    secret: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a bearer token carrying {id, email}"""
    now = datetime.now(timezone.utc)
    claims = {
        "id": identity["id"],
        "email": identity["email"],
        "iat": now,
        "exp": now + (expires_delta or timedelta(days=7)),
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Verify signature and expiry and return the {id, email} identity.
    Every failure collapses into UnauthenticatedError.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        raise UnauthenticatedError()

    user_id = payload.get("id")
    email = payload.get("email")
    if not isinstance(user_id, int) or not isinstance(email, str):
        raise UnauthenticatedError()
    return {"id": user_id, "email": email}


def generate_reset_token() -> str:
    return secrets.token_hex(32)


def hash_reset_token(raw_token: str) -> str:
    """One-way digest stored in place of the raw reset token"""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()
