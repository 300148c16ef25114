"""Parse, validate and generate International Bank Account Numbers (ISO 13616-1)."""

from __future__ import annotations

from typing import Mapping

from iso_iban.checksum import numerify
from iso_iban.exceptions import (
    ArityError,
    ConfigurationError,
    IbanError,
    InvalidCharacterError,
    InvalidIbanError,
    LengthMismatchError,
    MalformedStructureError,
    PreconditionViolationError,
    UnknownCountryError,
)
from iso_iban.models import (
    IBAN,
    IBANDraft,
    Specification,
    SpecificationTable,
    ValidationError,
)
from iso_iban.registry import default_table

__version__ = "0.1.0"


def parse(iban: str, specifications: Mapping[str, Specification] | None = None) -> IBAN:
    """Normalize an IBAN string; never fails on content."""
    return IBAN.parse(iban, specifications)


def parse_strict(iban: str, specifications: Mapping[str, Specification] | None = None) -> IBAN:
    """Parse an IBAN, raising :class:`InvalidIbanError` if it is not valid."""
    return IBAN.parse_strict(iban, specifications)


def validate(
    iban: str, specifications: Mapping[str, Specification] | None = None
) -> list[ValidationError]:
    return IBAN(iban, specifications).validate()


def is_valid(iban: str, specifications: Mapping[str, Specification] | None = None) -> bool:
    return IBAN(iban, specifications).valid()


def generate(
    country_code: str,
    *components: str,
    specifications: Mapping[str, Specification] | None = None,
) -> IBAN:
    return IBAN.generate(country_code, *components, specifications=specifications)


def random_iban(
    *countries: str, specifications: Mapping[str, Specification] | None = None
) -> IBAN:
    return IBAN.random(*countries, specifications=specifications)


__all__ = [
    "ArityError",
    "ConfigurationError",
    "IBAN",
    "IBANDraft",
    "IbanError",
    "InvalidCharacterError",
    "InvalidIbanError",
    "LengthMismatchError",
    "MalformedStructureError",
    "PreconditionViolationError",
    "Specification",
    "SpecificationTable",
    "UnknownCountryError",
    "ValidationError",
    "default_table",
    "generate",
    "is_valid",
    "numerify",
    "parse",
    "parse_strict",
    "random_iban",
    "validate",
]
