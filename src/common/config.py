import os
from typing import List
from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "production"
    LOG_LEVEL: str = "info"
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Email delivery
    EMAIL_PROVIDER: str = "resend"  # "resend" or "smtp"
    CONTACT_RECIPIENT: str = "contact@example.com"
    RESEND_API_KEY: str = ""
    EMAIL_SENDER: str = Field(
        default="onboarding@resend.dev",
        validation_alias=AliasChoices("EMAIL_SENDER", "RESEND_FROM_EMAIL"),
    )
    RESEND_API_URL: str = "https://api.resend.com"
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USE_TLS: bool = False
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""

    # Cloudflare Turnstile
    TURNSTILE_SECRET_KEY: str = ""
    PUBLIC_TURNSTILE_SITE_KEY: str = ""
    TURNSTILE_VERIFY_URL: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
    TURNSTILE_BYPASS_TOKEN: str = "dev-mode-bypass"  # empty string disables the bypass

    CONTACT_RATE_LIMIT: str = "5/minute"

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"

    @property
    def captcha_enabled(self) -> bool:
        """Whether submissions are checked against the Turnstile verifier."""
        return not self.is_development and bool(self.TURNSTILE_SECRET_KEY)

settings = Settings()
