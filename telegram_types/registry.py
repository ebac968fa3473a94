"""Type registry — single source of truth for name → model class lookups.

Every concrete Telegram type is decorated with ``@registry.register`` in the
module that defines it.  Generic tooling can then enumerate the schema
(:meth:`TypeRegistry.schema`), list the variants that may fill a polymorphic
slot (:meth:`TypeRegistry.variants_of`), or hydrate raw data by type name
without importing the concrete class.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from telegram_types.base import TelegramType
from telegram_types.exceptions import UnknownTypeError
from telegram_types.logger import TypesLogger

logger = TypesLogger.get_logger()

T = TypeVar("T", bound=TelegramType)


class TypeRegistry:
    """Singleton registry of concrete Telegram types, keyed by class name.

    Usage::

        @registry.register
        class ResponseParameters(TelegramType):
            ...

        cls = registry.require("ResponseParameters")
        cls.property_names()
    """

    _instance: TypeRegistry | None = None
    _entries: dict[str, Type[TelegramType]]

    def __new__(cls) -> TypeRegistry:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            cls._instance = inst
        return cls._instance

    # ── decorator ────────────────────────────────────────────────────────

    def register(self, model: Type[T]) -> Type[T]:
        """Class decorator that records *model* under its class name."""
        self._entries[model.__name__] = model
        logger.debug("Registered type", extra={"type_name": model.__name__})
        return model

    # ── lookup helpers ───────────────────────────────────────────────────

    def get(self, name: str) -> Optional[Type[TelegramType]]:
        """Return the class registered as *name*, or ``None``."""
        return self._entries.get(name)

    def require(self, name: str) -> Type[TelegramType]:
        """Return the class registered as *name*.

        Raises:
            UnknownTypeError: If nothing is registered under *name*.
        """
        model = self._entries.get(name)
        if model is None:
            logger.warning("Unknown type requested", extra={"type_name": name})
            raise UnknownTypeError(name)
        return model

    def entries(self) -> dict[str, Type[TelegramType]]:
        """Return a copy of all registered types."""
        return dict(self._entries)

    def property_names(self, name: str) -> List[str]:
        """Return the ordered wire names of the type registered as *name*."""
        return self.require(name).property_names()

    def schema(self) -> Dict[str, List[str]]:
        """Return ``{type name: [wire names]}`` for every registered type."""
        return {name: model.property_names() for name, model in self._entries.items()}

    def variants_of(self, base: Type[TelegramType]) -> List[Type[TelegramType]]:
        """Return the registered subclasses of *base*, in registration order."""
        return [
            model for model in self._entries.values()
            if model is not base and issubclass(model, base)
        ]

    def from_raw_data(self, name: str, data: Mapping[str, Any]) -> TelegramType:
        """Hydrate *data* into an instance of the type registered as *name*."""
        return self.require(name).from_raw_data(data)


# Module-level singleton, import this everywhere.
registry = TypeRegistry()
