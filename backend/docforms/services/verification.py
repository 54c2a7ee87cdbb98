import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docforms.core.config import settings
from docforms.core.security import SecurityService
from docforms.repositories.verification import VerificationCodeRepository

logger = logging.getLogger(__name__)

MSG_WRONG_CODE = "Неверный код подтверждения"
MSG_EXPIRED_CODE = "Срок действия кода истек"


def _naive_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes, PostgreSQL aware ones
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class VerificationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.code_repo = VerificationCodeRepository()
        self.security = SecurityService()

    @property
    def ttl(self) -> timedelta:
        return timedelta(minutes=settings.VERIFICATION_CODE_TTL_MINUTES)

    async def create_code(self, identifier: str, code_type: str) -> str:
        """Issue a fresh code, replacing any unused ones for the identifier"""
        code = self.security.generate_verification_code()
        await self.code_repo.replace_pending(
            self.db,
            identifier=identifier,
            code=code,
            code_type=code_type,
            expires_at=datetime.utcnow() + self.ttl
        )
        logger.info(f"Issued {code_type} verification code for {identifier}")
        return code

    async def verify_code(self, identifier: str, code: str, now: Optional[datetime] = None) -> str:
        """
        Mark a pending code as used

        Returns:
            The code's type ('email' or 'phone')

        Raises:
            ValueError: unknown, already used or expired code
        """
        record = await self.code_repo.get_latest(self.db, identifier, code, verified=False)
        if record is None:
            raise ValueError(MSG_WRONG_CODE)

        if _naive_utc(record.expires_at) < (now or datetime.utcnow()):
            raise ValueError(MSG_EXPIRED_CODE)

        await self.code_repo.update(self.db, record.id, verified=True)
        return record.type

    async def is_email_verified(self, email: str, code: str) -> bool:
        """Registration requires the e-mail code to have been verified already"""
        record = await self.code_repo.get_latest(self.db, email, code, verified=True, code_type="email")
        return record is not None

    async def discard_codes(self, identifier: str) -> int:
        return await self.code_repo.delete_for_identifier(self.db, identifier)

    async def cleanup_expired_codes(self) -> int:
        deleted = await self.code_repo.delete_expired(self.db)
        logger.info(f"Removed {deleted} expired verification codes")
        return deleted
