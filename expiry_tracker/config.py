import os
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

DEV_JWT_SECRET = "change-me-dev-secret"

class Settings(BaseSettings):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./expiry_tracker.db")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    debug: bool = os.getenv("DEBUG", "True").lower() == "true"
    environment: str = os.getenv("ENVIRONMENT", "development")
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "*")
    log_level: str = "INFO"

    # Bearer tokens
    jwt_secret: str = os.getenv("JWT_SECRET", DEV_JWT_SECRET)
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7

    # Passwords and reset tokens
    bcrypt_rounds: int = 10
    reset_token_ttl_minutes: int = 10
    reset_url_base: str = os.getenv("RESET_URL_BASE", "http://localhost:3000/auth/reset-password")

    # Outbound mail
    smtp_host: str = os.getenv("SMTP_HOST", "")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_user: str = os.getenv("SMTP_USER", "")
    smtp_password: str = os.getenv("SMTP_PASSWORD", "")
    smtp_use_tls: bool = os.getenv("SMTP_USE_TLS", "True").lower() == "true"
    mail_from: str = os.getenv("MAIL_FROM", "no-reply@expiry-tracker.local")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def require_real_secret(self):
        if self.environment != "development" and self.jwt_secret == DEV_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set outside the development environment")
        return self

settings = Settings()
