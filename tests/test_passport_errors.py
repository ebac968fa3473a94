"""Tests for the Telegram Passport element error variants."""

import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_types import (
    PassportElementError,
    PassportElementErrorDataField,
    PassportElementErrorFiles,
    PassportElementErrorReverseSide,
    PassportElementErrorTranslationFile,
    PassportElementErrorTranslationFiles,
    PassportElementErrorUnspecified,
    passport_element_error_from_raw_data,
)


# ── Files ────────────────────────────────────────────────────────────────────


class TestFilesError:
    def test_property_names(self) -> None:
        assert PassportElementErrorFiles.property_names() == [
            "source",
            "type",
            "file_hashes",
            "message",
        ]

    def test_serialization(self) -> None:
        err = PassportElementErrorFiles(
            type="utility_bill", file_hashes=["h1", "h2"], message="Scans are blurry"
        )
        assert err.to_raw_data() == {
            "source": "files",
            "type": "utility_bill",
            "file_hashes": ["h1", "h2"],
            "message": "Scans are blurry",
        }

    def test_primitive_list_passes_through(self) -> None:
        hashes = ["h1", "h2"]
        err = PassportElementErrorFiles(type="bank_statement", file_hashes=hashes, message="m")
        assert err.to_raw_data()["file_hashes"] == hashes

    def test_identity_document_type_rejected(self) -> None:
        """Multi-file scans only exist for utility-type documents."""
        with pytest.raises(ValidationError):
            PassportElementErrorFiles(type="passport", file_hashes=["h1"], message="m")


# ── TranslationFile ──────────────────────────────────────────────────────────


class TestTranslationFileError:
    def test_serialization(self) -> None:
        err = PassportElementErrorTranslationFile(
            type="driver_license", file_hash="abc", message="Translation unreadable"
        )
        assert err.to_raw_data() == {
            "source": "translation_file",
            "type": "driver_license",
            "file_hash": "abc",
            "message": "Translation unreadable",
        }

    def test_accepts_utility_and_identity_types(self) -> None:
        PassportElementErrorTranslationFile(type="passport", file_hash="a", message="m")
        PassportElementErrorTranslationFile(type="rental_agreement", file_hash="a", message="m")

    def test_rejects_personal_details(self) -> None:
        with pytest.raises(ValidationError):
            PassportElementErrorTranslationFile(type="personal_details", file_hash="a", message="m")

    def test_missing_hash_raises(self) -> None:
        with pytest.raises(ValidationError):
            PassportElementErrorTranslationFile(type="passport", message="m")


# ── Other variants ───────────────────────────────────────────────────────────


class TestOtherVariants:
    def test_data_field(self) -> None:
        err = PassportElementErrorDataField(
            type="personal_details", field_name="birth_date", data_hash="d1", message="Wrong date"
        )
        assert list(err.to_raw_data()) == ["source", "type", "field_name", "data_hash", "message"]
        assert err.source == "data"

    def test_reverse_side_only_for_two_sided_documents(self) -> None:
        PassportElementErrorReverseSide(type="identity_card", file_hash="a", message="m")
        with pytest.raises(ValidationError):
            PassportElementErrorReverseSide(type="passport", file_hash="a", message="m")

    def test_unspecified_accepts_any_type(self) -> None:
        err = PassportElementErrorUnspecified(type="email", element_hash="e1", message="m")
        assert err.to_raw_data()["source"] == "unspecified"

    def test_all_variants_share_marker_base(self) -> None:
        err = PassportElementErrorTranslationFiles(type="passport", file_hashes=[], message="m")
        assert isinstance(err, PassportElementError)
        assert err.to_raw_data()["file_hashes"] == []


# ── Discriminated hydration ──────────────────────────────────────────────────


class TestFromRawData:
    def test_source_selects_variant(self) -> None:
        data = {"source": "files", "type": "utility_bill", "file_hashes": ["a", "b"], "message": "m"}
        err = passport_element_error_from_raw_data(data)
        assert isinstance(err, PassportElementErrorFiles)
        assert err.to_raw_data() == data

    def test_translation_file(self) -> None:
        data = {"source": "translation_file", "type": "passport", "file_hash": "x", "message": "m"}
        err = passport_element_error_from_raw_data(data)
        assert isinstance(err, PassportElementErrorTranslationFile)

    def test_unknown_source_rejected(self) -> None:
        with pytest.raises(ValidationError):
            passport_element_error_from_raw_data(
                {"source": "hologram", "type": "passport", "message": "m"}
            )

    def test_missing_source_rejected(self) -> None:
        with pytest.raises(ValidationError):
            passport_element_error_from_raw_data({"type": "passport", "file_hash": "x", "message": "m"})
