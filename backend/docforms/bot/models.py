"""Subset of the Telegram Bot API update objects the bot reads"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class TelegramModel(BaseModel):
    # Telegram sends many more fields than we read
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TelegramUser(TelegramModel):
    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: Optional[str] = None
    username: Optional[str] = None

    @property
    def display_name(self) -> str:
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full_name or self.username or "Пользователь"


class Chat(TelegramModel):
    id: int
    type: str = "private"


class Message(TelegramModel):
    message_id: int
    chat: Chat
    from_user: Optional[TelegramUser] = Field(None, alias="from")
    date: int = 0
    text: Optional[str] = None


class CallbackQuery(TelegramModel):
    id: str
    from_user: TelegramUser = Field(..., alias="from")
    message: Optional[Message] = None
    data: Optional[str] = None


class Update(TelegramModel):
    update_id: int
    message: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None
