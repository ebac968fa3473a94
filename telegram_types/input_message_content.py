"""Content of a message to be sent as the result of an inline query.

:class:`InputMessageContent` is a marker base; the four concrete variants
below are the only values accepted where an ``input_message_content`` slot
appears (see :data:`AnyInputMessageContent`).
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import TypeAdapter

from telegram_types.base import TelegramType, variant_from_raw_data
from telegram_types.common import MessageEntity
from telegram_types.registry import registry


class InputMessageContent(TelegramType):
    """This object represents the content of a message to be sent as a result of an inline query."""


@registry.register
class InputTextMessageContent(InputMessageContent):
    """Represents the content of a text message to be sent as the result of an inline query."""

    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    disable_web_page_preview: Optional[bool] = None


@registry.register
class InputLocationMessageContent(InputMessageContent):
    """Represents the content of a location message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


@registry.register
class InputVenueMessageContent(InputMessageContent):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


@registry.register
class InputContactMessageContent(InputMessageContent):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


# Venue precedes Location: a venue payload also satisfies the location schema.
AnyInputMessageContent = Union[
    InputTextMessageContent,
    InputVenueMessageContent,
    InputLocationMessageContent,
    InputContactMessageContent,
]

_content_adapter = TypeAdapter(AnyInputMessageContent)


def input_message_content_from_raw_data(data: Mapping[str, Any]) -> InputMessageContent:
    """Hydrate *data* into whichever input message content variant it describes."""
    return variant_from_raw_data(_content_adapter, data, "InputMessageContent")
