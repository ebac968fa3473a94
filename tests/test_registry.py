"""Tests for the TypeRegistry singleton."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_types import (
    InlineQueryResult,
    InlineQueryResultCachedAudio,
    InputMessageContent,
    PassportElementError,
    ResponseParameters,
    TelegramType,
    TypeRegistry,
    UnknownTypeError,
    registry,
)


@pytest.fixture()
def scratch_type():
    """Register a throwaway type and remove it again after the test."""

    @registry.register
    class ScratchType(TelegramType):
        name: str

    yield ScratchType
    registry._entries.pop("ScratchType", None)


class TestRegistry:
    def test_singleton(self) -> None:
        assert TypeRegistry() is registry

    def test_get_known_type(self) -> None:
        assert registry.get("InlineQueryResultCachedAudio") is InlineQueryResultCachedAudio

    def test_get_unknown_returns_none(self) -> None:
        assert registry.get("Nope") is None

    def test_marker_bases_are_not_registered(self) -> None:
        assert registry.get("InlineQueryResult") is None
        assert registry.get("PassportElementError") is None

    def test_require_unknown_raises(self) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            registry.require("Nope")
        assert exc_info.value.type_name == "Nope"
        assert str(exc_info.value) == "Unknown Telegram type: Nope"

    def test_unknown_type_error_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            registry.require("Nope")

    def test_property_names_by_name(self) -> None:
        assert registry.property_names("ResponseParameters") == ["migrate_to_chat_id", "retry_after"]

    def test_schema_table(self) -> None:
        schema = registry.schema()
        assert schema["PassportElementErrorTranslationFile"] == ["source", "type", "file_hash", "message"]
        assert schema["InlineQueryResultCachedAudio"][:3] == ["type", "id", "audio_file_id"]

    def test_entries_is_a_copy(self) -> None:
        entries = registry.entries()
        entries.pop("ResponseParameters")
        assert registry.get("ResponseParameters") is ResponseParameters

    def test_variants_of(self) -> None:
        assert len(registry.variants_of(InlineQueryResult)) == 20
        assert len(registry.variants_of(InputMessageContent)) == 4
        assert len(registry.variants_of(PassportElementError)) == 9
        assert InlineQueryResultCachedAudio in registry.variants_of(InlineQueryResult)

    def test_from_raw_data_by_name(self) -> None:
        params = registry.from_raw_data("ResponseParameters", {"retry_after": 30})
        assert isinstance(params, ResponseParameters)
        assert params.to_raw_data() == {"retry_after": 30}

    def test_register_decorator(self, scratch_type) -> None:
        assert registry.require("ScratchType") is scratch_type
        assert registry.schema()["ScratchType"] == ["name"]
