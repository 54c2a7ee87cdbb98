import json
import logging
from typing import Any, Dict, Optional

import httpx

from docforms.core.config import get_telegram_bot_token
from docforms.core.exceptions import TelegramAPIError

logger = logging.getLogger(__name__)


class TelegramClient:
    """Thin async client for the Telegram Bot API methods the bot uses"""

    API_BASE = "https://api.telegram.org"

    def __init__(self, token: Optional[str] = None, timeout: float = 10.0):
        self.token = token if token is not None else get_telegram_bot_token()
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.token)

    async def send_message(self, chat_id: int, text: str, reply_markup: Optional[Dict] = None) -> Dict:
        payload = {"chat_id": chat_id, "text": text}
        if reply_markup:
            payload["reply_markup"] = reply_markup
        return await self._call("sendMessage", payload)

    async def edit_message_text(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        reply_markup: Optional[Dict] = None
    ) -> Dict:
        payload = {"chat_id": chat_id, "message_id": message_id, "text": text}
        if reply_markup:
            payload["reply_markup"] = reply_markup
        return await self._call("editMessageText", payload)

    async def answer_callback_query(self, callback_query_id: str, text: Optional[str] = None) -> bool:
        payload = {"callback_query_id": callback_query_id}
        if text:
            payload["text"] = text
        return await self._call("answerCallbackQuery", payload)

    async def send_document(
        self,
        chat_id: int,
        filename: str,
        content: bytes,
        caption: Optional[str] = None
    ) -> Dict:
        data = {"chat_id": str(chat_id)}
        if caption:
            data["caption"] = caption
        files = {"document": (filename, content, "application/pdf")}
        return await self._call("sendDocument", data, files=files)

    async def set_webhook(self, url: str, secret_token: Optional[str] = None) -> bool:
        payload = {"url": url, "allowed_updates": ["message", "callback_query"]}
        if secret_token:
            payload["secret_token"] = secret_token
        return await self._call("setWebhook", payload)

    async def get_webhook_info(self) -> Dict:
        return await self._call("getWebhookInfo")

    async def delete_webhook(self) -> bool:
        return await self._call("deleteWebhook")

    async def _call(self, method: str, payload: Optional[Dict] = None, files: Optional[Dict] = None) -> Any:
        if not self.token:
            raise TelegramAPIError("TELEGRAM_BOT_TOKEN is not configured")

        url = f"{self.API_BASE}/bot{self.token}/{method}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if files:
                    response = await client.post(url, data=payload, files=files)
                else:
                    response = await client.post(url, json=payload or {})
            data = response.json()
        except (httpx.HTTPError, json.JSONDecodeError) as e:
            logger.error(f"Telegram {method} request failed: {e}")
            raise TelegramAPIError(f"Telegram {method} request failed") from e

        if not data.get("ok"):
            description = data.get("description", f"HTTP {response.status_code}")
            logger.warning(f"Telegram {method} returned an error: {description}")
            raise TelegramAPIError(f"Telegram {method} failed: {description}")

        return data.get("result")
