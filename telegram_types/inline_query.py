"""Incoming inline queries and the results users pick from them."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from telegram_types.base import TelegramType
from telegram_types.common import Location, User
from telegram_types.registry import registry


@registry.register
class InlineQuery(TelegramType):
    """An incoming inline query. When the user sends an empty query, your bot could return some default or trending results."""

    id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    offset: str
    location: Optional["Location"] = None


@registry.register
class ChosenInlineResult(TelegramType):
    """A result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    location: Optional["Location"] = None
    inline_message_id: Optional[str] = None
