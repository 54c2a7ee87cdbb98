"""Telegram webhook intake and webhook management"""
import logging
import secrets
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ....database import get_db
from ....bot.dispatcher import BotContext
from ....bot.handlers import dispatcher
from ....bot.models import Update
from ....bot.telegram import TelegramClient
from ....core.config import settings
from ....core.deps import get_pdf_renderer, get_telegram_client
from ....core.exceptions import TelegramAPIError
from ....services.renderer import PdfRenderer

logger = logging.getLogger(__name__)

router = APIRouter()

WEBHOOK_PATH = "/api/v1/bot/webhook"


def webhook_url() -> Optional[str]:
    base = settings.WEBHOOK_URL.rstrip("/")
    if not base:
        return None
    if not base.startswith("http"):
        base = f"https://{base}"
    return f"{base}{WEBHOOK_PATH}"


@router.post("/webhook")
async def webhook(
    update: Update,
    x_telegram_bot_api_secret_token: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
    telegram: TelegramClient = Depends(get_telegram_client),
    renderer: PdfRenderer = Depends(get_pdf_renderer)
):
    """Handle one Telegram update"""
    secret = settings.TELEGRAM_WEBHOOK_SECRET
    if secret and not secrets.compare_digest(x_telegram_bot_api_secret_token or "", secret):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid secret token")

    logger.debug(f"Received Telegram update {update.update_id}")
    handled = await dispatcher.dispatch(BotContext(update=update, db=db, telegram=telegram, renderer=renderer))
    return {"ok": True, "handled": handled}


@router.get("/webhook")
async def webhook_probe():
    return {"message": "Telegram bot webhook endpoint"}


@router.post("/setup")
async def set_webhook(telegram: TelegramClient = Depends(get_telegram_client)):
    """Point Telegram at this deployment's webhook"""
    if not telegram.is_configured:
        raise HTTPException(status_code=400, detail="TELEGRAM_BOT_TOKEN is not set")
    url = webhook_url()
    if not url:
        raise HTTPException(status_code=400, detail="WEBHOOK_URL is not set")

    try:
        await telegram.set_webhook(url, secret_token=settings.TELEGRAM_WEBHOOK_SECRET or None)
    except TelegramAPIError as e:
        logger.error(f"Error setting webhook: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Failed to set webhook")

    logger.info(f"Telegram webhook set to {url}")
    return {"ok": True, "message": "Webhook set successfully", "url": url}


@router.get("/setup")
async def get_webhook(telegram: TelegramClient = Depends(get_telegram_client)):
    try:
        info = await telegram.get_webhook_info()
    except TelegramAPIError as e:
        logger.error(f"Error getting webhook info: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Failed to get webhook info")
    return {"ok": True, "webhook": info}


@router.delete("/setup")
async def delete_webhook(telegram: TelegramClient = Depends(get_telegram_client)):
    try:
        await telegram.delete_webhook()
    except TelegramAPIError as e:
        logger.error(f"Error deleting webhook: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Failed to delete webhook")
    return {"ok": True, "message": "Webhook deleted successfully"}


@router.get("/test")
async def bot_diagnostics(telegram: TelegramClient = Depends(get_telegram_client)):
    """Configuration check without revealing the token"""
    configured = telegram.is_configured
    return {
        "hasToken": configured,
        "tokenPrefix": f"{telegram.token[:10]}..." if configured else "not set",
        "webhookUrl": webhook_url(),
        "env": settings.APP_ENV
    }
