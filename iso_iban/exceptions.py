"""Custom exception hierarchy for iso-iban."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iso_iban.models.enums import ValidationError
    from iso_iban.models.iban import IBAN


class IbanError(Exception):
    """Base exception for all iso-iban errors."""


class MalformedStructureError(IbanError, ValueError):
    """Raised when a structure descriptor cannot be tokenized."""


class InvalidCharacterError(IbanError, ValueError):
    """Raised when a character has no numeric transliteration."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"The string contains an invalid character {character!r}")


class PreconditionViolationError(IbanError):
    """Raised when the checksum is updated on an IBAN without placeholders."""


class ArityError(IbanError, TypeError):
    """Raised when generate() receives the wrong number of components."""


class LengthMismatchError(IbanError, ValueError):
    """Raised when a component does not fit its field."""


class UnknownCountryError(IbanError, KeyError):
    """Raised when a country code is missing from the specification table."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InvalidIbanError(IbanError, ValueError):
    """Raised by strict parsing when an IBAN fails validation."""

    def __init__(self, iban: IBAN, errors: list[ValidationError] | None = None) -> None:
        self.iban = iban
        self.errors = list(errors) if errors is not None else iban.validate()
        codes = ", ".join(error.value for error in self.errors)
        super().__init__(f"The IBAN {iban.formatted} is invalid ({codes})")


class ConfigurationError(IbanError):
    """Raised when configuration is invalid or missing."""
