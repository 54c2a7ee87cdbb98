"""
Routes a Telegram update to the handler registered for it.

Callbacks match exact data first, then the longest registered prefix.
Messages starting with '/' go to command handlers; anything else (including
unknown commands) goes to the text handler.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docforms.bot.keyboards import InlineKeyboard
from docforms.bot.models import TelegramUser, Update
from docforms.bot.telegram import TelegramClient
from docforms.services.renderer import PdfRenderer

logger = logging.getLogger(__name__)

MSG_GENERIC_ERROR = "Произошла ошибка. Попробуйте позже."


@dataclass
class BotContext:
    update: Update
    db: AsyncSession
    telegram: TelegramClient
    renderer: PdfRenderer

    @property
    def from_user(self) -> Optional[TelegramUser]:
        if self.update.callback_query:
            return self.update.callback_query.from_user
        if self.update.message:
            return self.update.message.from_user
        return None

    @property
    def user_key(self) -> Optional[str]:
        user = self.from_user
        return str(user.id) if user else None

    @property
    def chat_id(self) -> Optional[int]:
        message = self.update.message
        if self.update.callback_query:
            message = self.update.callback_query.message
        if message:
            return message.chat.id
        user = self.from_user
        return user.id if user else None

    @property
    def text(self) -> str:
        return (self.update.message.text or "") if self.update.message else ""

    @property
    def callback_data(self) -> str:
        return (self.update.callback_query.data or "") if self.update.callback_query else ""

    async def reply(self, text: str, keyboard: Optional[InlineKeyboard] = None):
        markup = keyboard.to_markup() if keyboard else None
        return await self.telegram.send_message(self.chat_id, text, reply_markup=markup)

    async def edit(self, text: str, keyboard: Optional[InlineKeyboard] = None):
        """Replace the message the pressed button belongs to, or reply when there is none"""
        query = self.update.callback_query
        if not query or not query.message:
            return await self.reply(text, keyboard)
        markup = keyboard.to_markup() if keyboard else None
        return await self.telegram.edit_message_text(
            query.message.chat.id, query.message.message_id, text, reply_markup=markup
        )

    async def answer(self, text: Optional[str] = None):
        if self.update.callback_query:
            return await self.telegram.answer_callback_query(self.update.callback_query.id, text)


Handler = Callable[[BotContext], Awaitable[None]]


class Dispatcher:
    def __init__(self):
        self._commands: Dict[str, Handler] = {}
        self._callbacks: Dict[str, Handler] = {}
        self._callback_prefixes: Dict[str, Handler] = {}
        self._text_handler: Optional[Handler] = None

    def command(self, name: str):
        def register(handler: Handler) -> Handler:
            self._commands[name] = handler
            return handler
        return register

    def callback(self, data: str):
        def register(handler: Handler) -> Handler:
            self._callbacks[data] = handler
            return handler
        return register

    def callback_prefix(self, prefix: str):
        def register(handler: Handler) -> Handler:
            self._callback_prefixes[prefix] = handler
            return handler
        return register

    def text(self):
        def register(handler: Handler) -> Handler:
            self._text_handler = handler
            return handler
        return register

    def resolve(self, update: Update) -> Optional[Handler]:
        if update.callback_query:
            data = update.callback_query.data or ""
            if data in self._callbacks:
                return self._callbacks[data]
            for prefix in sorted(self._callback_prefixes, key=len, reverse=True):
                if data.startswith(prefix):
                    return self._callback_prefixes[prefix]
            return None

        if update.message and update.message.text is not None:
            text = update.message.text.strip()
            if text.startswith("/"):
                # "/start@MyBot payload" -> "start"
                name = text.split()[0][1:].split("@")[0]
                if name in self._commands:
                    return self._commands[name]
            return self._text_handler

        return None

    async def dispatch(self, ctx: BotContext) -> bool:
        """Run the matching handler; False when nothing handles the update"""
        handler = self.resolve(ctx.update)
        if handler is None:
            logger.debug(f"No handler for update {ctx.update.update_id}")
            return False

        try:
            await handler(ctx)
        except Exception as e:
            logger.error(f"Bot handler {handler.__name__} failed for update {ctx.update.update_id}: {e}", exc_info=True)
            await self._report_failure(ctx)
        return True

    async def _report_failure(self, ctx: BotContext) -> None:
        try:
            if ctx.update.callback_query:
                await ctx.answer("Произошла ошибка")
            elif ctx.chat_id is not None:
                await ctx.reply(MSG_GENERIC_ERROR)
        except Exception as e:
            logger.error(f"Could not report handler failure to the user: {e}")
