from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.ext.asyncio import AsyncSession
from docforms.database import get_db
from docforms.services.auth import AuthService
from docforms.models.api import (
    LoginRequest, LoginResponse,
    RegisterRequest, RegisterResponse,
    UserProfileResponse
)
from docforms.core.deps import get_bearer_token, get_current_user
from docforms.models.user import UserDB

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """Register a new user with a verified e-mail code"""
    auth_service = AuthService(db)
    try:
        return await auth_service.register_user(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Authenticate by e-mail or phone and return access token"""
    auth_service = AuthService(db)

    user_agent = http_request.headers.get("user-agent")
    ip_address = http_request.client.host if http_request.client else None

    try:
        return await auth_service.login_user(request, user_agent, ip_address)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )


@router.post("/logout")
async def logout(
    token: str = Depends(get_bearer_token),
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Revoke the session behind the presented token"""
    await AuthService(db).logout_user(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    current_user: UserDB = Depends(get_current_user)
):
    """Get current user profile"""
    return UserProfileResponse(
        user_id=current_user.id,
        email=current_user.email,
        phone=current_user.phone,
        name=current_user.name,
        email_verified=current_user.email_verified,
        created_at=current_user.created_at
    )
