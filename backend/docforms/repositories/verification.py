from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from datetime import datetime

from .base import BaseRepository
from docforms.models.user import VerificationCodeDB


class VerificationCodeRepository(BaseRepository[VerificationCodeDB]):
    def __init__(self):
        super().__init__(VerificationCodeDB)

    async def replace_pending(
        self,
        db: AsyncSession,
        identifier: str,
        code: str,
        code_type: str,
        expires_at: datetime
    ) -> VerificationCodeDB:
        """Drop unused codes for the identifier and store a fresh one"""
        await self.delete_where(
            db,
            VerificationCodeDB.identifier == identifier,
            VerificationCodeDB.verified == False
        )
        return await self.add(db, VerificationCodeDB(
            identifier=identifier,
            code=code,
            type=code_type,
            expires_at=expires_at,
            verified=False
        ))

    async def get_latest(
        self,
        db: AsyncSession,
        identifier: str,
        code: str,
        verified: bool,
        code_type: Optional[str] = None
    ) -> Optional[VerificationCodeDB]:
        query = select(VerificationCodeDB).where(
            VerificationCodeDB.identifier == identifier,
            VerificationCodeDB.code == code,
            VerificationCodeDB.verified == verified
        )
        if code_type:
            query = query.where(VerificationCodeDB.type == code_type)
        result = await db.execute(query.order_by(desc(VerificationCodeDB.created_at)).limit(1))
        return result.scalar_one_or_none()

    async def delete_for_identifier(self, db: AsyncSession, identifier: str) -> int:
        return await self.delete_where(db, VerificationCodeDB.identifier == identifier)

    async def delete_expired(self, db: AsyncSession, now: Optional[datetime] = None) -> int:
        return await self.delete_where(db, VerificationCodeDB.expires_at < (now or datetime.utcnow()))
