"""Telegram Passport element errors.

A bot reports problems with the passport data a user submitted by sending a
list of these objects.  :class:`PassportElementError` is a marker base; the
``source`` literal of each variant names where the problem lies, and ``type``
is restricted to the element types that source can refer to.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Mapping, Union

from pydantic import Field, TypeAdapter

from telegram_types.base import TelegramType, variant_from_raw_data
from telegram_types.registry import registry

IdentityDocumentType = Literal["passport", "driver_license", "identity_card", "internal_passport"]
UtilityDocumentType = Literal[
    "utility_bill",
    "bank_statement",
    "rental_agreement",
    "passport_registration",
    "temporary_registration",
]
DataElementType = Literal[
    "personal_details",
    "passport",
    "driver_license",
    "identity_card",
    "internal_passport",
    "address",
]
TwoSidedDocumentType = Literal["driver_license", "identity_card"]
TranslatableDocumentType = Union[IdentityDocumentType, UtilityDocumentType]


class PassportElementError(TelegramType):
    """An error in a submitted Telegram Passport element that the user should resolve."""


@registry.register
class PassportElementErrorDataField(PassportElementError):
    """Represents an issue in one of the data fields that was provided by the user.

    The error is considered resolved when the field's value changes.
    """

    source: Literal["data"] = "data"
    type: DataElementType
    field_name: str
    data_hash: str
    message: str


@registry.register
class PassportElementErrorFrontSide(PassportElementError):
    """Represents an issue with the front side of a document."""

    source: Literal["front_side"] = "front_side"
    type: IdentityDocumentType
    file_hash: str
    message: str


@registry.register
class PassportElementErrorReverseSide(PassportElementError):
    """Represents an issue with the reverse side of a document."""

    source: Literal["reverse_side"] = "reverse_side"
    type: TwoSidedDocumentType
    file_hash: str
    message: str


@registry.register
class PassportElementErrorSelfie(PassportElementError):
    """Represents an issue with the selfie with a document."""

    source: Literal["selfie"] = "selfie"
    type: IdentityDocumentType
    file_hash: str
    message: str


@registry.register
class PassportElementErrorFile(PassportElementError):
    """Represents an issue with a document scan."""

    source: Literal["file"] = "file"
    type: UtilityDocumentType
    file_hash: str
    message: str


@registry.register
class PassportElementErrorFiles(PassportElementError):
    """Represents an issue with a list of scans.

    The error is considered resolved when the list of files containing the
    scans changes.
    """

    source: Literal["files"] = "files"
    type: UtilityDocumentType
    file_hashes: List[str]
    message: str


@registry.register
class PassportElementErrorTranslationFile(PassportElementError):
    """Represents an issue with one of the files that constitute the translation of a document.

    The error is considered resolved when the file changes.
    """

    source: Literal["translation_file"] = "translation_file"
    type: TranslatableDocumentType
    file_hash: str
    message: str


@registry.register
class PassportElementErrorTranslationFiles(PassportElementError):
    """Represents an issue with the translated version of a document."""

    source: Literal["translation_files"] = "translation_files"
    type: TranslatableDocumentType
    file_hashes: List[str]
    message: str


@registry.register
class PassportElementErrorUnspecified(PassportElementError):
    """Represents an issue in an unspecified place."""

    source: Literal["unspecified"] = "unspecified"
    type: str
    element_hash: str
    message: str


AnyPassportElementError = Annotated[
    Union[
        PassportElementErrorDataField,
        PassportElementErrorFrontSide,
        PassportElementErrorReverseSide,
        PassportElementErrorSelfie,
        PassportElementErrorFile,
        PassportElementErrorFiles,
        PassportElementErrorTranslationFile,
        PassportElementErrorTranslationFiles,
        PassportElementErrorUnspecified,
    ],
    Field(discriminator="source"),
]

_error_adapter = TypeAdapter(AnyPassportElementError)


def passport_element_error_from_raw_data(data: Mapping[str, Any]) -> PassportElementError:
    """Hydrate *data* into the passport error variant named by its ``source``."""
    return variant_from_raw_data(_error_adapter, data, "PassportElementError")
