from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import TimestampedModel


class UserDB(TimestampedModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=True, index=True)
    phone = Column(String(20), unique=True, nullable=True, index=True)
    telegram_id = Column(String(32), unique=True, nullable=True, index=True)
    name = Column(String(255), nullable=True)
    # Bot-only users never set a password
    password_hash = Column(String(255), nullable=True)
    email_verified = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    documents = relationship("DocumentDB", back_populates="user", cascade="all, delete-orphan")
    auth_sessions = relationship("AuthSessionDB", back_populates="user")


class AuthSessionDB(TimestampedModel):
    __tablename__ = "auth_sessions"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    token_hash = Column(String(255), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    is_revoked = Column(Boolean, default=False, nullable=False)
    user_agent = Column(Text, nullable=True)
    ip_address = Column(String(45), nullable=True)  # IPv6 compatible

    # Relationships
    user = relationship("UserDB", back_populates="auth_sessions")

    # Indexes
    __table_args__ = (
        Index("idx_auth_sessions_user_expires", "user_id", "expires_at"),
    )


class VerificationCodeDB(TimestampedModel):
    __tablename__ = "verification_codes"

    identifier = Column(String(255), nullable=False)  # e-mail or phone
    code = Column(String(6), nullable=False)
    type = Column(String(10), nullable=False)  # 'email', 'phone'
    expires_at = Column(DateTime(timezone=True), nullable=False)
    verified = Column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("idx_verification_codes_identifier_code", "identifier", "code"),
        Index("idx_verification_codes_expires", "expires_at"),
    )
