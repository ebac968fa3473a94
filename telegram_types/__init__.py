"""Telegram Bot API types — Pydantic models with a flat wire representation.

Every concrete type subclasses :class:`TelegramType` and offers
``property_names()``, ``to_raw_data()``, ``to_json()`` and ``from_raw_data()``.
Polymorphic slots (inline query results, input message contents, passport
element errors) are typed as closed unions of their variants.

Usage::

    from telegram_types import InlineQueryResultCachedAudio

    result = InlineQueryResultCachedAudio(id="abc123", audio_file_id="FILE1")
    result.to_raw_data()
    # {"type": "audio", "id": "abc123", "audio_file_id": "FILE1"}
"""

from telegram_types.base import TelegramType
from telegram_types.common import Location, MessageEntity, User
from telegram_types.exceptions import TelegramTypesError, UnknownTypeError
from telegram_types.inline_query import ChosenInlineResult, InlineQuery
from telegram_types.inline_query_result import (
    AnyInlineQueryResult,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultAudio,
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultContact,
    InlineQueryResultDocument,
    InlineQueryResultGame,
    InlineQueryResultGif,
    InlineQueryResultLocation,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
    InlineQueryResultVideo,
    InlineQueryResultVoice,
    inline_query_result_from_raw_data,
)
from telegram_types.input_message_content import (
    AnyInputMessageContent,
    InputContactMessageContent,
    InputLocationMessageContent,
    InputMessageContent,
    InputTextMessageContent,
    InputVenueMessageContent,
    input_message_content_from_raw_data,
)
from telegram_types.keyboards import (
    CallbackGame,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    LoginUrl,
)
from telegram_types.passport import (
    AnyPassportElementError,
    PassportElementError,
    PassportElementErrorDataField,
    PassportElementErrorFile,
    PassportElementErrorFiles,
    PassportElementErrorFrontSide,
    PassportElementErrorReverseSide,
    PassportElementErrorSelfie,
    PassportElementErrorTranslationFile,
    PassportElementErrorTranslationFiles,
    PassportElementErrorUnspecified,
    passport_element_error_from_raw_data,
)
from telegram_types.registry import TypeRegistry, registry
from telegram_types.response import Error, ResponseParameters

__all__ = [
    "TelegramType",
    "TypeRegistry",
    "registry",
    "TelegramTypesError",
    "UnknownTypeError",
    # common
    "User",
    "MessageEntity",
    "Location",
    # keyboards
    "LoginUrl",
    "CallbackGame",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    # response
    "ResponseParameters",
    "Error",
    # inline queries
    "InlineQuery",
    "ChosenInlineResult",
    "InlineQueryResult",
    "AnyInlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultPhoto",
    "InlineQueryResultGif",
    "InlineQueryResultMpeg4Gif",
    "InlineQueryResultVideo",
    "InlineQueryResultAudio",
    "InlineQueryResultVoice",
    "InlineQueryResultDocument",
    "InlineQueryResultLocation",
    "InlineQueryResultVenue",
    "InlineQueryResultContact",
    "InlineQueryResultGame",
    "InlineQueryResultCachedPhoto",
    "InlineQueryResultCachedGif",
    "InlineQueryResultCachedMpeg4Gif",
    "InlineQueryResultCachedSticker",
    "InlineQueryResultCachedDocument",
    "InlineQueryResultCachedVideo",
    "InlineQueryResultCachedVoice",
    "InlineQueryResultCachedAudio",
    "inline_query_result_from_raw_data",
    # input message content
    "InputMessageContent",
    "AnyInputMessageContent",
    "InputTextMessageContent",
    "InputLocationMessageContent",
    "InputVenueMessageContent",
    "InputContactMessageContent",
    "input_message_content_from_raw_data",
    # passport
    "PassportElementError",
    "AnyPassportElementError",
    "PassportElementErrorDataField",
    "PassportElementErrorFrontSide",
    "PassportElementErrorReverseSide",
    "PassportElementErrorSelfie",
    "PassportElementErrorFile",
    "PassportElementErrorFiles",
    "PassportElementErrorTranslationFile",
    "PassportElementErrorTranslationFiles",
    "PassportElementErrorUnspecified",
    "passport_element_error_from_raw_data",
]
