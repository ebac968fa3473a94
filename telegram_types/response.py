"""Response metadata returned by the Bot API when a request fails."""

from __future__ import annotations

from typing import Optional

from telegram_types.base import TelegramType
from telegram_types.registry import registry


@registry.register
class ResponseParameters(TelegramType):
    """Contains information about why a request was unsuccessful.

    ``migrate_to_chat_id`` may exceed 32 bits; Python ints hold it exactly.
    """

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


@registry.register
class Error(TelegramType):
    """Error envelope of an unsuccessful Bot API call."""

    ok: bool = False
    error_code: int
    description: str
    parameters: Optional["ResponseParameters"] = None
