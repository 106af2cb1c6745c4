from pydantic import BaseModel
from typing import Optional

from expiry_tracker.schemas.user import UserCredentials

class LoginRequest(UserCredentials):
    pass

class TokenResponse(BaseModel):
    message: str
    token: str

class ForgotPasswordRequest(BaseModel):
    email: str

class ResetPasswordRequest(BaseModel):
    password: Optional[str] = None

class MessageResponse(BaseModel):
    message: str
