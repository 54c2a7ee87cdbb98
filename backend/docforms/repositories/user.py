from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from datetime import datetime

from .base import BaseRepository
from docforms.models.user import UserDB, AuthSessionDB


class UserRepository(BaseRepository[UserDB]):
    def __init__(self):
        super().__init__(UserDB)

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[UserDB]:
        """Get user by email"""
        result = await db.execute(
            select(UserDB).where(UserDB.email == email, UserDB.is_active == True)
        )
        return result.scalar_one_or_none()

    async def get_by_phone(self, db: AsyncSession, phone: str) -> Optional[UserDB]:
        """Get user by phone"""
        result = await db.execute(
            select(UserDB).where(UserDB.phone == phone, UserDB.is_active == True)
        )
        return result.scalar_one_or_none()

    async def get_by_identifier(self, db: AsyncSession, identifier: str) -> Optional[UserDB]:
        """Look up by e-mail when the identifier contains '@', otherwise by phone"""
        if "@" in identifier:
            return await self.get_by_email(db, identifier)
        return await self.get_by_phone(db, identifier)

    async def get_by_telegram_id(self, db: AsyncSession, telegram_id: str) -> Optional[UserDB]:
        result = await db.execute(
            select(UserDB).where(UserDB.telegram_id == telegram_id, UserDB.is_active == True)
        )
        return result.scalar_one_or_none()

    async def create_user(
        self,
        db: AsyncSession,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        telegram_id: Optional[str] = None,
        email_verified: Optional[datetime] = None
    ) -> UserDB:
        """Create a new user"""
        return await self.add(db, UserDB(
            email=email,
            phone=phone,
            telegram_id=telegram_id,
            name=name,
            password_hash=password_hash,
            email_verified=email_verified
        ))

    async def get_or_create_telegram_user(self, db: AsyncSession, telegram_id: str, name: str) -> UserDB:
        """Find the user bound to a Telegram account, registering it on first contact"""
        user = await self.get_by_telegram_id(db, telegram_id)
        if user:
            return user
        return await self.create_user(db, telegram_id=telegram_id, name=name)


class AuthSessionRepository(BaseRepository[AuthSessionDB]):
    def __init__(self):
        super().__init__(AuthSessionDB)

    async def get_by_token_hash(self, db: AsyncSession, token_hash: str) -> Optional[AuthSessionDB]:
        """Get live session by token hash"""
        result = await db.execute(
            select(AuthSessionDB)
            .where(
                AuthSessionDB.token_hash == token_hash,
                AuthSessionDB.expires_at > datetime.utcnow(),
                AuthSessionDB.is_revoked == False
            )
        )
        return result.scalar_one_or_none()

    async def create_session(
        self,
        db: AsyncSession,
        user_id: str,
        token_hash: str,
        expires_at: datetime,
        user_agent: Optional[str] = None,
        ip_address: Optional[str] = None
    ) -> AuthSessionDB:
        """Create new authentication session"""
        return await self.add(db, AuthSessionDB(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            user_agent=user_agent,
            ip_address=ip_address
        ))

    async def revoke_session(self, db: AsyncSession, token_hash: str) -> bool:
        revoked = await self.update_where(
            db,
            AuthSessionDB.token_hash == token_hash,
            AuthSessionDB.is_revoked == False,
            is_revoked=True
        )
        return revoked > 0
