"""Per-country IBAN specifications."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType

from iso_iban.exceptions import ConfigurationError
from iso_iban.logging import get_logger
from iso_iban.structure import (
    GroupedMatcher,
    Matcher,
    Segment,
    structure_length,
    tokenize,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Specification:
    """IBAN format of one country, as registered with SWIFT.

    Field positions are inclusive, zero-based offsets into the compact
    IBAN, so the first BBAN character sits at offset 4.  Switzerland's
    bank code, for example, spans offsets 4 to 8.

    The structure descriptor is tokenized on construction: a malformed
    descriptor fails when the specification table is built, never while
    validating an IBAN.
    """

    country_name: str
    country_code: str
    structure: str
    iban_length: int
    bban_structure: str
    bban_length: int
    bank_position_from: int | None = None
    bank_position_to: int | None = None
    branch_position_from: int | None = None
    branch_position_to: int | None = None

    def __post_init__(self) -> None:
        # Force tokenization so malformed descriptors surface at load time
        self.segments  # noqa: B018

    @classmethod
    def from_record(cls, record: Sequence) -> "Specification":
        """Build a specification from a 10-field registry record."""
        if len(record) != 10:
            raise ConfigurationError(
                f"Specification record needs 10 fields, got {len(record)}: {record!r}"
            )
        return cls(*record)

    def to_record(self) -> tuple:
        """Return the specification as a 10-field registry record."""
        return (
            self.country_name,
            self.country_code,
            self.structure,
            self.iban_length,
            self.bban_structure,
            self.bban_length,
            self.bank_position_from,
            self.bank_position_to,
            self.branch_position_from,
            self.branch_position_to,
        )

    @cached_property
    def segments(self) -> tuple[Segment, ...]:
        return tokenize(self.structure)

    @cached_property
    def matcher(self) -> Matcher:
        """Anchored matcher over the full IBAN structure."""
        return Matcher(self.segments)

    @cached_property
    def grouped_matcher(self) -> GroupedMatcher:
        """Matcher capturing one group per structure token."""
        return GroupedMatcher(self.segments)

    @property
    def bank_field_range(self) -> tuple[int, int] | None:
        if self.bank_position_from is None or self.bank_position_to is None:
            return None
        return (self.bank_position_from, self.bank_position_to)

    @property
    def branch_field_range(self) -> tuple[int, int] | None:
        # A branch is only defined relative to a bank
        if self.bank_field_range is None:
            return None
        if self.branch_position_from is None or self.branch_position_to is None:
            return None
        return (self.branch_position_from, self.branch_position_to)

    @property
    def bank_code_length(self) -> int:
        """Length of the bank code, 0 if the country has none."""
        field_range = self.bank_field_range
        return field_range[1] - field_range[0] + 1 if field_range else 0

    @property
    def branch_code_length(self) -> int:
        """Length of the branch code, 0 if the country has none."""
        field_range = self.branch_field_range
        return field_range[1] - field_range[0] + 1 if field_range else 0

    @property
    def account_code_length(self) -> int:
        return self.bban_length - self.bank_code_length - self.branch_code_length

    def component_lengths(self) -> list[int]:
        """Lengths of bank, branch and account code, omitting empty ones."""
        lengths = [self.bank_code_length, self.branch_code_length, self.account_code_length]
        return [length for length in lengths if length]

    def check_consistency(self) -> list[str]:
        """Return descriptions of every internal inconsistency.

        An empty list means the structure length equals ``iban_length``,
        the BBAN structure is the structure minus country and check digits,
        and ``bban_length`` is ``iban_length - 4``.
        """
        problems = []
        described = structure_length(self.segments)
        if described != self.iban_length:
            problems.append(
                f"structure {self.structure} describes {described} characters, "
                f"iban_length is {self.iban_length}"
            )
        if self.bban_structure != self.structure[5:]:
            problems.append(
                f"bban_structure {self.bban_structure} differs from "
                f"structure {self.structure} without country and check digits"
            )
        if self.bban_length != self.iban_length - 4:
            problems.append(
                f"bban_length {self.bban_length} differs from iban_length - 4 "
                f"({self.iban_length - 4})"
            )
        return problems


class SpecificationTable(Mapping[str, Specification]):
    """Read-only mapping of country code to :class:`Specification`.

    Built once by the caller and shared by every IBAN that refers to it.
    Duplicate countries and specifications failing
    :meth:`Specification.check_consistency` raise :class:`ConfigurationError`.

    Parameters
    ----------
    specifications : Iterable[Specification]
        Specifications to index by their country code.
    """

    def __init__(self, specifications: Iterable[Specification] = ()) -> None:
        table: dict[str, Specification] = {}
        for specification in specifications:
            code = specification.country_code
            if code in table:
                raise ConfigurationError(f"Duplicate specification for country {code}")
            problems = specification.check_consistency()
            if problems:
                raise ConfigurationError(
                    f"Inconsistent specification for country {code}: {'; '.join(problems)}"
                )
            table[code] = specification
        self._table = MappingProxyType(table)
        logger.debug("Loaded IBAN specifications for %d countries", len(table))

    @classmethod
    def from_specifications(
        cls, specifications: Iterable[Specification]
    ) -> "SpecificationTable":
        """Build a table from already constructed specifications."""
        return cls(specifications)

    @classmethod
    def from_records(
        cls, records: Iterable[Sequence] | Mapping[str, Sequence]
    ) -> "SpecificationTable":
        """Build a table from registry records.

        Parameters
        ----------
        records : Iterable[Sequence] | Mapping[str, Sequence]
            Either 10-field records, or a mapping of country code to such a
            record (the shape of a parsed registry file).

        Raises
        ------
        ConfigurationError
            If a record is malformed or inconsistent, a key disagrees with
            the record's country code, or a country appears twice.
        MalformedStructureError
            If a structure descriptor cannot be tokenized.
        """
        if isinstance(records, Mapping):
            specifications = []
            for code, record in records.items():
                specification = Specification.from_record(record)
                if specification.country_code != code:
                    raise ConfigurationError(
                        f"Record keyed {code} describes country {specification.country_code}"
                    )
                specifications.append(specification)
            return cls(specifications)
        return cls(Specification.from_record(record) for record in records)

    @property
    def countries(self) -> tuple[str, ...]:
        return tuple(self._table)

    def __getitem__(self, country_code: str) -> Specification:
        return self._table[country_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {', '.join(self._table)}>"
