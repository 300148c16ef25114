"""IBAN value type (ISO 13616-1).

An IBAN consists of a two-letter ISO 3166-1 country code, two check
digits and a BBAN (basic bank account number) of up to thirty
alphanumeric characters.  The BBAN has a fixed length and layout per
country and embeds a bank identifier, and for some countries a branch
identifier, at fixed positions.  The check digits follow ISO/IEC 7064
MOD97-10.

Validity is a query, not a precondition: any string can be wrapped in an
:class:`IBAN` and asked what is wrong with it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from iso_iban import checksum
from iso_iban.exceptions import (
    ArityError,
    InvalidIbanError,
    LengthMismatchError,
    PreconditionViolationError,
    UnknownCountryError,
)
from iso_iban.logging import get_logger
from iso_iban.models.enums import ValidationError
from iso_iban.models.specification import Specification
from iso_iban.registry import default_table

logger = get_logger(__name__)

PLACEHOLDER = "??"

# Whitespace, dashes and control characters
_SEPARATOR_RE = re.compile(r"[\s\-\x00-\x1f\x7f]+")
_CHARACTERS_RE = re.compile(r"[A-Z]{2}(?:[0-9]{2}|\?\?)[A-Z0-9]*")
_GROUP_RE = re.compile(r"(.{4})(?=.)")


def strip(raw: str) -> str:
    """Return the compact form of an IBAN in human or compact notation."""
    return _SEPARATOR_RE.sub("", raw).upper()


def _lookup(
    specifications: Mapping[str, Specification] | None, country_code: str
) -> Specification:
    table = default_table() if specifications is None else specifications
    try:
        return table[country_code]
    except KeyError:
        raise UnknownCountryError(f"No IBAN specification for country {country_code!r}") from None


class IBAN:
    """International Bank Account Number.

    Parameters
    ----------
    iban : str
        The IBAN in compact or human readable form.  Whitespace, dashes
        and control characters are removed and the rest is upper-cased.
    specifications : Mapping[str, Specification] | None
        Country specifications to validate against.  Defaults to the
        bundled registry.

    Examples
    --------
    >>> iban = IBAN("CH35 1234 5987 6543 2109 A")
    >>> iban.compact
    'CH351234598765432109A'
    >>> iban.valid()
    True
    """

    def __init__(
        self,
        iban: str,
        specifications: Mapping[str, Specification] | None = None,
    ) -> None:
        if not isinstance(iban, str):
            raise TypeError(f"String expected for iban, but got {type(iban).__name__}")

        self._specifications = default_table() if specifications is None else specifications
        self._compact = strip(iban)
        self._formatted: str | None = None
        self._components: list[str] | None = None
        self.specification: Specification | None = self._specifications.get(
            self.country_code
        )

    # --- Construction ---

    @classmethod
    def parse(
        cls, iban: str, specifications: Mapping[str, Specification] | None = None
    ) -> "IBAN":
        """Normalize ``iban`` without validating it."""
        return cls(iban, specifications)

    @classmethod
    def parse_strict(
        cls, iban: str, specifications: Mapping[str, Specification] | None = None
    ) -> "IBAN":
        """Parse ``iban`` and raise if it fails validation.

        Raises
        ------
        InvalidIbanError
            Carrying the parsed IBAN and all of its validation errors.
        """
        parsed = cls(iban, specifications)
        errors = parsed.validate()
        if errors:
            logger.debug("Rejected IBAN %s: %s", parsed.formatted, errors)
            raise InvalidIbanError(parsed, errors)
        return parsed

    @classmethod
    def generate(
        cls,
        country_code: str,
        *components: str,
        specifications: Mapping[str, Specification] | None = None,
    ) -> "IBAN":
        """Build an IBAN from its bank, branch and account components.

        Separators inside components are removed, then components shorter
        than their field are left-padded with zeros.  The check digits are
        computed.

        Components are laid out from offset 4 in bank, branch, account
        order.  Countries whose BBAN does not start with the bank code
        (Italy and San Marino lead with a CIN check letter) have that
        character counted as the first one of the account component, so a
        purely numeric account yields an IBAN reporting ``invalid_format``.

        Examples
        --------
        >>> IBAN.generate("CH", "123", "9876B").formatted
        'CH76 0012 3000 0000 9876 B'
        """
        draft = IBANDraft.from_components(
            country_code, *components, specifications=specifications
        )
        return draft.finalize()

    @classmethod
    def random(
        cls,
        *countries: str,
        specifications: Mapping[str, Specification] | None = None,
    ) -> "IBAN":
        """Return a random, valid IBAN.

        The country is picked uniformly from ``countries``, or from every
        country in the table when none are given.
        """
        from iso_iban.generators.iban import default_generator

        return default_generator(specifications).random(*countries)

    # --- Derived values ---

    @property
    def compact(self) -> str:
        """The IBAN without separators, for machine communication."""
        return self._compact

    @property
    def country_code(self) -> str:
        return self._compact[:2]

    @property
    def checksum_digits(self) -> str:
        return self._compact[2:4]

    @property
    def bban(self) -> str:
        return self._compact[4:]

    @property
    def formatted(self) -> str:
        """The IBAN in groups of four characters, e.g. ``CH35 1234 5987 ...``."""
        if self._formatted is None:
            self._formatted = _GROUP_RE.sub(r"\1 ", self._compact)
        return self._formatted

    @property
    def numeric(self) -> int | None:
        """The rearranged IBAN as an integer, ``None`` below five characters.

        Raises
        ------
        InvalidCharacterError
            If the IBAN contains characters without a transliteration.
        """
        if len(self._compact) < 5:
            return None
        return checksum.numerify(checksum.rearrange(self._compact))

    @property
    def bank_code(self) -> str | None:
        """The bank identifier, ``None`` if the country defines none."""
        if self.specification is None or self.specification.bank_field_range is None:
            return None
        start, end = self.specification.bank_field_range
        return self._compact[start : end + 1]

    @property
    def branch_code(self) -> str | None:
        """The branch identifier, ``None`` if the country defines none."""
        if self.specification is None or self.specification.branch_field_range is None:
            return None
        start, end = self.specification.branch_field_range
        return self._compact[start : end + 1]

    @property
    def account_code(self) -> str:
        """Everything after the bank and branch identifiers."""
        offsets = [3]
        if self.specification is not None:
            for field_range in (
                self.specification.bank_field_range,
                self.specification.branch_field_range,
            ):
                if field_range is not None:
                    offsets.append(field_range[1])
        return self._compact[max(offsets) + 1 :]

    def calculated_check_digits(self) -> str:
        """The check digits computed from country code and BBAN."""
        return checksum.checksum_digits_for(self.bban, self.country_code)

    def to_list(self) -> list[str]:
        """Split the IBAN into one part per structure token.

        Returns an empty list when the country is unknown or the IBAN does
        not match its country's structure.
        """
        if self._components is None:
            if self.specification is None:
                self._components = []
            else:
                self._components = self.specification.grouped_matcher.decompose(self._compact)
        return list(self._components)

    # --- Validation ---

    def valid_characters(self) -> bool:
        """Whether the IBAN has a letter prefix, check digits and an alphanumeric body."""
        return _CHARACTERS_RE.fullmatch(self._compact) is not None

    def valid_country(self) -> bool:
        return self.specification is not None

    def valid_checksum(self) -> bool:
        if not self.valid_characters() or self.checksum_digits == PLACEHOLDER:
            return False
        return checksum.is_valid_checksum(self._compact)

    def valid_length(self) -> bool:
        return (
            self.specification is not None
            and len(self._compact) == self.specification.iban_length
        )

    def valid_format(self) -> bool:
        return (
            self.specification is not None
            and self.specification.matcher.matches(self._compact)
        )

    def validate(self) -> list[ValidationError]:
        """Return every structural defect of the IBAN, empty if valid.

        Checks run independently and report in this order:

        * ``invalid_characters``: not two letters, two digits and an
          alphanumeric body
        * ``invalid_country``: the country code has no specification
        * ``invalid_checksum``: the MOD97-10 check fails (only checked when
          the characters are valid)
        * ``invalid_length``: the length differs from the country's
        * ``invalid_format``: the IBAN does not match the country's structure
        """
        errors = []
        characters_valid = self.valid_characters()
        if not characters_valid:
            errors.append(ValidationError.INVALID_CHARACTERS)
        if not self.valid_country():
            errors.append(ValidationError.INVALID_COUNTRY)
        if characters_valid and not self.valid_checksum():
            errors.append(ValidationError.INVALID_CHECKSUM)
        if not self.valid_length():
            errors.append(ValidationError.INVALID_LENGTH)
        if not self.valid_format():
            errors.append(ValidationError.INVALID_FORMAT)
        return errors

    def valid(self) -> bool:
        return not self.validate()

    # --- Mutation ---

    def update_checksum(self) -> "IBAN":
        """Replace the ``??`` placeholder with the computed check digits.

        Raises
        ------
        PreconditionViolationError
            If the check digits are not the ``??`` placeholder.
        """
        if self.checksum_digits != PLACEHOLDER:
            raise PreconditionViolationError("Checksum digit placeholders missing")
        self._compact = self.country_code + self.calculated_check_digits() + self.bban
        self._formatted = None
        self._components = None
        return self

    # --- Comparison ---

    def compare(self, other: Any) -> int | None:
        """Three-way comparison by compact form, ``None`` for non-IBANs."""
        if not isinstance(other, IBAN):
            return None
        return (self._compact > other._compact) - (self._compact < other._compact)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return type(self) is type(other) and self._compact == other._compact

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return self._compact < other._compact

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return self._compact <= other._compact

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return self._compact > other._compact

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return self._compact >= other._compact

    def __hash__(self) -> int:
        # Check digits are left out so update_checksum() keeps the hash stable
        return hash((self.country_code, self.bban))

    def __str__(self) -> str:
        return self._compact

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.formatted}>"


@dataclass(frozen=True)
class IBANDraft:
    """An IBAN whose check digits have not been computed yet.

    Drafts only know their country and BBAN.  :meth:`finalize` computes
    the check digits and returns the finished :class:`IBAN`.
    """

    country_code: str
    bban: str
    specifications: Mapping[str, Specification] | None = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def from_components(
        cls,
        country_code: str,
        *components: str,
        specifications: Mapping[str, Specification] | None = None,
    ) -> "IBANDraft":
        """Assemble a draft from bank, branch and account components.

        Raises
        ------
        UnknownCountryError
            If the country has no specification.
        ArityError
            If the number of components differs from the number of fields
            the country defines.
        LengthMismatchError
            If a component is longer than its field.
            Separators (whitespace, dashes) are removed before the check.
        """
        country_code = country_code.upper()
        specification = _lookup(specifications, country_code)
        lengths = specification.component_lengths()
        if len(components) != len(lengths):
            raise ArityError(
                f"{country_code} IBANs take {len(lengths)} components, got {len(components)}"
            )

        justified = []
        for length, component in zip(lengths, map(strip, components)):
            if len(component) > length:
                raise LengthMismatchError(
                    f"Component {component!r} is longer than its field of {length} characters"
                )
            justified.append(component.rjust(length, "0"))

        return cls(country_code, "".join(justified), specifications)

    def check_digits(self) -> str:
        return checksum.checksum_digits_for(self.bban, self.country_code)

    def finalize(self) -> IBAN:
        """Compute the check digits and return the finished IBAN."""
        iban = IBAN(self.country_code + PLACEHOLDER + self.bban, self.specifications)
        return iban.update_checksum()
