from sqlalchemy.ext.asyncio import AsyncSession
from docforms.repositories.user import UserRepository, AuthSessionRepository
from docforms.core.config import settings
from docforms.core.security import SecurityService
from docforms.models.api import LoginRequest, RegisterRequest, LoginResponse, RegisterResponse
from docforms.models.user import UserDB
from docforms.services.verification import VerificationService
from datetime import datetime, timedelta
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository()
        self.auth_session_repo = AuthSessionRepository()
        self.verification = VerificationService(db)
        self.security = SecurityService()

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Register a web user whose e-mail code was verified beforehand"""
        if not await self.verification.is_email_verified(request.email, request.verification_code):
            raise ValueError("Неверный или неподтвержденный код")

        existing_user = await self.user_repo.get_by_email(self.db, request.email)
        if existing_user:
            raise ValueError("Пользователь с таким email уже существует")

        user = await self.user_repo.create_user(
            self.db,
            email=request.email,
            name=request.name,
            password_hash=self.security.hash_password(request.password),
            email_verified=datetime.utcnow()
        )
        await self.verification.discard_codes(request.email)
        logger.info(f"Registered user {user.id}")

        return RegisterResponse(user_id=user.id, email=user.email, name=user.name)

    async def login_user(
        self,
        request: LoginRequest,
        user_agent: Optional[str] = None,
        ip_address: Optional[str] = None
    ) -> LoginResponse:
        """Authenticate by e-mail or phone and create a session"""
        user = await self.user_repo.get_by_identifier(self.db, request.identifier)
        if not user or not user.password_hash:
            raise ValueError("Неверный логин или пароль")

        if not self.security.verify_password(request.password, user.password_hash):
            raise ValueError("Неверный логин или пароль")

        expires_delta = timedelta(hours=settings.JWT_ACCESS_TOKEN_EXPIRE_HOURS)
        access_token = self.security.create_access_token(
            user_id=str(user.id),
            subject_name=user.name or user.email or user.phone or "",
            expires_delta=expires_delta
        )

        await self.auth_session_repo.create_session(
            self.db,
            user_id=user.id,
            token_hash=self.security.hash_token(access_token),
            expires_at=datetime.utcnow() + expires_delta,
            user_agent=user_agent,
            ip_address=ip_address
        )

        return LoginResponse(
            access_token=access_token,
            expires_in=int(expires_delta.total_seconds()),
            user_id=user.id,
            name=user.name
        )

    async def logout_user(self, token: str) -> bool:
        """Logout user by revoking session"""
        return await self.auth_session_repo.revoke_session(self.db, self.security.hash_token(token))

    async def get_current_user(self, token: str) -> Optional[UserDB]:
        """Get current user from token"""
        payload = self.security.decode_token(token)
        if not payload:
            return None

        # A revoked or expired session invalidates an otherwise valid JWT
        session = await self.auth_session_repo.get_by_token_hash(self.db, self.security.hash_token(token))
        if not session:
            return None

        user_id = payload.get("sub")
        if not user_id:
            return None

        user = await self.user_repo.get_by_id(self.db, user_id)
        if not user or not user.is_active:
            return None
        return user
