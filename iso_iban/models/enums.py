"""Enumeration types for IBAN validation results."""

from enum import Enum


class ValidationError(str, Enum):
    """Structural defect reported by IBAN.validate().

    Members are listed in evaluation order.
    """

    INVALID_CHARACTERS = "invalid_characters"
    INVALID_COUNTRY = "invalid_country"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
