"""Domain models for IBAN parsing and generation."""

from iso_iban.models.enums import ValidationError
from iso_iban.models.iban import IBAN, IBANDraft
from iso_iban.models.specification import Specification, SpecificationTable

__all__ = [
    "IBAN",
    "IBANDraft",
    "Specification",
    "SpecificationTable",
    "ValidationError",
]
