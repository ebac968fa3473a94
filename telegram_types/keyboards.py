"""Inline keyboard objects attached to messages and inline query results."""

from __future__ import annotations

from typing import List, Optional

from telegram_types.base import TelegramType
from telegram_types.registry import registry


@registry.register
class LoginUrl(TelegramType):
    """A parameter of the inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


@registry.register
class CallbackGame(TelegramType):
    """A placeholder, currently holds no information."""


@registry.register
class InlineKeyboardButton(TelegramType):
    """One button of an inline keyboard. You **must** use exactly one of the optional fields."""

    text: str
    url: Optional[str] = None
    login_url: Optional["LoginUrl"] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional["CallbackGame"] = None
    pay: Optional[bool] = None


@registry.register
class InlineKeyboardMarkup(TelegramType):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]
