"""Verification code API endpoints"""
import re
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ....database import get_db
from ....core.deps import get_notification_service
from ....core.exceptions import NotificationError
from ....models.api import SendCodeRequest, SendCodeResponse, VerifyCodeRequest, VerifyCodeResponse
from ....services.notifications import NotificationService, clean_phone
from ....services.verification import VerificationService

router = APIRouter()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@router.post("/send", response_model=SendCodeResponse)
async def send_code(
    request: SendCodeRequest,
    db: AsyncSession = Depends(get_db),
    notifications: NotificationService = Depends(get_notification_service)
):
    """Issue a verification code and deliver it by e-mail or SMS"""
    if request.type == "email" and not EMAIL_PATTERN.match(request.identifier):
        raise HTTPException(status_code=400, detail="Неверный формат email")
    if request.type == "phone" and not 10 <= len(clean_phone(request.identifier)) <= 15:
        raise HTTPException(status_code=400, detail="Неверный формат номера телефона")

    verification = VerificationService(db)
    code = await verification.create_code(request.identifier, request.type)

    try:
        if request.type == "email":
            await notifications.send_verification_email(request.identifier, code)
        else:
            await notifications.send_verification_sms(request.identifier, code)
    except NotificationError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Ошибка при отправке кода"
        )

    return SendCodeResponse(expires_in=int(verification.ttl.total_seconds()))


@router.post("/verify", response_model=VerifyCodeResponse)
async def verify_code(
    request: VerifyCodeRequest,
    db: AsyncSession = Depends(get_db)
):
    try:
        code_type = await VerificationService(db).verify_code(request.identifier, request.code)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return VerifyCodeResponse(type=code_type)
