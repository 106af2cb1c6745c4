# routers/auth.py
from fastapi import APIRouter, BackgroundTasks, Depends, Response, status

from expiry_tracker.dependencies import (
    CurrentUser,
    get_auth_service,
    get_current_user,
    get_email_service,
)
from expiry_tracker.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    ResetPasswordRequest,
    TokenResponse,
)
from expiry_tracker.schemas.user import User, UserCreate
from expiry_tracker.services.auth_service import AuthService
from expiry_tracker.services.email_service import EmailService

router = APIRouter(prefix="/auth", tags=["auth"])

FORGOT_PASSWORD_MESSAGE = "If this email is registered, a password reset link has been sent"


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, auth: AuthService = Depends(get_auth_service)):
    """Create an account"""
    return auth.register(payload.email, payload.password)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Exchange email and password for a bearer token"""
    token = auth.login(payload.email, payload.password)
    return TokenResponse(message="Login successful", token=token)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    payload: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    auth: AuthService = Depends(get_auth_service),
    mailer: EmailService = Depends(get_email_service),
):
    """Email a reset link; the answer is the same whether or not the email exists"""
    def notify(to_address: str, reset_link: str) -> None:
        background_tasks.add_task(mailer.send_password_reset, to_address, reset_link)

    auth.forgot_password(payload.email, notify)
    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password(
    token: str,
    payload: ResetPasswordRequest,
    auth: AuthService = Depends(get_auth_service),
):
    auth.reset_password(token, payload.password)
    return MessageResponse(message="Password has been reset")


@router.delete("/account", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    current_user: CurrentUser = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """Delete the caller's account together with all of their products"""
    auth.delete_account(current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
