"""Shared base model for every Telegram Bot API type.

Each concrete type declares its fields in wire order.  The base turns the
declarations into the operations every type offers:

* :meth:`TelegramType.property_names`: the ordered wire names, no instance needed.
* :meth:`TelegramType.to_raw_data`: an ordered ``dict`` ready for JSON encoding,
  with absent (``None``) fields dropped and nested types flattened recursively.
* :meth:`TelegramType.from_raw_data`: the reverse direction, validated by Pydantic.

:func:`variant_from_raw_data` does the same for a polymorphic slot, picking
the concrete variant out of a closed ``Union``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, TypeAdapter, ValidationError

from telegram_types.logger import TypesLogger

logger = TypesLogger.get_logger()


def _raw_value(value: Any) -> Any:
    """Flatten *value* for the wire: nested types become dicts, lists are walked."""
    if isinstance(value, TelegramType):
        return value.to_raw_data()
    if isinstance(value, (list, tuple)):
        return [_raw_value(item) for item in value]
    return value


class TelegramType(BaseModel):
    """Base class of every Telegram Bot API object."""

    model_config = {"populate_by_name": True}

    @classmethod
    def property_names(cls) -> List[str]:
        """Return the wire names of the declared fields, in serialization order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def to_raw_data(self) -> Dict[str, Any]:
        """Return the wire representation of this object.

        Fields holding ``None`` are omitted.  Nested Telegram types (including
        ones inside lists, and lists of lists) are replaced by their own
        :meth:`to_raw_data` output.
        """
        result: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name, None)
            if value is None:
                continue
            result[field.alias or name] = _raw_value(value)
        return result

    def to_json(self) -> str:
        """Return :meth:`to_raw_data` encoded as a JSON string."""
        return json.dumps(self.to_raw_data(), ensure_ascii=False)

    @classmethod
    def from_raw_data(cls, data: Mapping[str, Any]) -> "TelegramType":
        """Build an instance from its wire representation.

        Raises:
            pydantic.ValidationError: If *data* does not match the schema.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "Raw data rejected",
                extra={"type_name": cls.__name__, "error_count": exc.error_count()},
            )
            raise


def variant_from_raw_data(adapter: TypeAdapter, data: Mapping[str, Any], slot: str) -> TelegramType:
    """Hydrate *data* into whichever variant of a polymorphic *slot* matches it.

    *adapter* wraps the closed ``Union`` of variants that may fill the slot.

    Raises:
        pydantic.ValidationError: If no variant accepts *data*.
    """
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        logger.warning(
            "Raw data matches no variant",
            extra={"type_name": slot, "error_count": exc.error_count()},
        )
        raise
