from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from docforms.database import get_db
from docforms.services.auth import AuthService
from docforms.models.user import UserDB
from docforms.bot.telegram import TelegramClient
from docforms.services.notifications import NotificationService
from docforms.services.renderer import PdfRenderer

security = HTTPBearer()


async def get_bearer_token(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    db: AsyncSession = Depends(get_db)
) -> UserDB:
    """Dependency to get current authenticated user"""
    auth_service = AuthService(db)
    user = await auth_service.get_current_user(token)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Outbound clients; overridden in tests
def get_pdf_renderer() -> PdfRenderer:
    return PdfRenderer()


def get_notification_service() -> NotificationService:
    return NotificationService()


def get_telegram_client() -> TelegramClient:
    return TelegramClient()
