"""Exception hierarchy for the telegram_types model library."""


class TelegramTypesError(Exception):
    """Base exception for every error raised by this library."""


class UnknownTypeError(TelegramTypesError, KeyError):
    """Raised when a type name is not present in the type registry.

    Attributes:
        type_name: The name that was looked up.
    """

    def __init__(self, type_name: str) -> None:
        """Initialise with the missing type name."""
        self.type_name = type_name
        super().__init__(f"Unknown Telegram type: {type_name}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
