from pydantic_settings import BaseSettings
from typing import List
import os
import logging
import boto3
from functools import lru_cache

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_telegram_bot_token() -> str:
    """Get Telegram bot token from environment or SSM Parameter Store (cached)"""
    token = os.getenv("TELEGRAM_BOT_TOKEN") or settings.TELEGRAM_BOT_TOKEN
    if token:
        return token

    # Lambda deployments keep the token in SSM
    param_name = os.getenv("TELEGRAM_BOT_TOKEN_PARAM")
    if param_name:
        try:
            ssm = boto3.client('ssm', config=boto3.session.Config(
                retries={'max_attempts': 2, 'mode': 'standard'},
                read_timeout=10,
                connect_timeout=5
            ))
            response = ssm.get_parameter(Name=param_name, WithDecryption=True)
            return response['Parameter']['Value']
        except Exception as e:
            logger.error(f"Failed to load Telegram bot token from SSM: {e}")
            return ""

    return ""


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = ""  # Resolved by core.database_url when empty

    # JWT Authentication
    JWT_SECRET_KEY: str = "your-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # Debug mode
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Application
    APP_NAME: str = "МойДокумент"
    VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # Telegram bot
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_WEBHOOK_SECRET: str = ""
    WEBHOOK_URL: str = ""

    # Notifications
    RESEND_API_KEY: str = ""
    EMAIL_FROM: str = "noreply@goszayavleniya.ru"
    EMAIL_REPLY_TO: str = "support@mydocuments.ru"
    SMTP_USER: str = ""  # Takes precedence over Resend when set with SMTP_PASSWORD
    SMTP_PASSWORD: str = ""
    SMTP_SENDER_NAME: str = "МойДокумент Support"
    SMS_RU_API_KEY: str = ""
    NOTIFICATION_TIMEOUT: float = 15.0
    VERIFICATION_CODE_TTL_MINUTES: int = 10

    # HTML -> PDF renderer (headless Chromium, Gotenberg API)
    PDF_RENDERER_URL: str = ""
    PDF_RENDER_TIMEOUT: float = 30.0

    # Template catalog
    TEMPLATES_PAGE_SIZE: int = 12

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"


settings = Settings()
