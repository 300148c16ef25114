"""Compilation of SWIFT structure descriptors into matchers.

A structure descriptor is the compact notation used by the IBAN registry
to describe the layout of an account number, e.g. ``"CH2!n5!n12!c"``.
It is a sequence of tokens, each one either

- a run of uppercase letters, matched literally (the country code), or
- ``<length>[!]<class>``, where class is one of

  * ``n``: digits (0-9)
  * ``a``: uppercase letters (A-Z)
  * ``c``: upper and lower case alphanumerics (A-Z, a-z, 0-9)
  * ``e``: blank space

  A trailing ``!`` fixes the length; without it the length is a maximum.

Descriptors are lowered to a tuple of :class:`Segment` objects and from
there to a regex.  Every quantifier is bounded and applies to a single
character class, so matching is linear in the input length.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from iso_iban.exceptions import MalformedStructureError

TOKEN_RE = re.compile(r"([A-Z]+)|(\d+)(!?)([nace])")


class CharacterClass(str, Enum):
    NUMERIC = "n"
    ALPHA = "a"
    ALPHANUMERIC = "c"
    BLANK = "e"

    @property
    def pattern(self) -> str:
        """Regex character class matched by this structure code."""
        return _CLASS_PATTERNS[self]


_CLASS_PATTERNS = {
    CharacterClass.NUMERIC: "[0-9]",
    CharacterClass.ALPHA: "[A-Z]",
    CharacterClass.ALPHANUMERIC: "[A-Za-z0-9]",
    CharacterClass.BLANK: " ",
}


@dataclass(frozen=True)
class Segment:
    """One token of a structure descriptor.

    Literal segments carry ``literal`` and no character class; class
    segments carry ``char_class`` and no literal.
    """

    length: int
    fixed: bool = True
    char_class: CharacterClass | None = None
    literal: str | None = None

    @property
    def is_literal(self) -> bool:
        return self.literal is not None

    @property
    def min_length(self) -> int:
        return self.length if self.fixed else 0

    @property
    def max_length(self) -> int:
        return self.length

    @property
    def pattern(self) -> str:
        """Regex source for this segment, without grouping."""
        if self.literal is not None:
            return re.escape(self.literal)
        assert self.char_class is not None
        if self.fixed:
            return f"{self.char_class.pattern}{{{self.length}}}"
        return f"{self.char_class.pattern}{{0,{self.length}}}"

    def __str__(self) -> str:
        if self.literal is not None:
            return self.literal
        assert self.char_class is not None
        return f"{self.length}{'!' if self.fixed else ''}{self.char_class.value}"


def tokenize(descriptor: str) -> tuple[Segment, ...]:
    """Split a structure descriptor into segments.

    Parameters
    ----------
    descriptor : str
        Structure descriptor, e.g. ``"CH2!n5!n12!c"``.

    Returns
    -------
    tuple[Segment, ...]
        Segments in declaration order.

    Raises
    ------
    MalformedStructureError
        If the descriptor is empty or contains anything that is neither a
        literal run nor a ``<length>[!]<class>`` token.
    """
    if not descriptor:
        raise MalformedStructureError("Empty structure descriptor")

    segments: list[Segment] = []
    position = 0
    while position < len(descriptor):
        match = TOKEN_RE.match(descriptor, position)
        if match is None:
            raise MalformedStructureError(
                f"Malformed structure {descriptor!r} at offset {position}: "
                f"{descriptor[position:]!r}"
            )
        literal, length, fixed, code = match.groups()
        if literal:
            segments.append(Segment(length=len(literal), literal=literal))
        else:
            segments.append(
                Segment(
                    length=int(length),
                    fixed=fixed == "!",
                    char_class=CharacterClass(code),
                )
            )
        position = match.end()

    return tuple(segments)


def structure_length(segments: Iterable[Segment]) -> int:
    """Maximum number of characters described by the segments."""
    return sum(segment.max_length for segment in segments)


def structure_source(segments: Iterable[Segment], grouped: bool = False) -> str:
    """Build the regex source for a sequence of segments."""
    if grouped:
        return "".join(f"({segment.pattern})" for segment in segments)
    return "".join(segment.pattern for segment in segments)


class Matcher:
    """Anchored whole-string matcher for a structure descriptor."""

    def __init__(self, segments: tuple[Segment, ...]) -> None:
        self.segments = segments
        self.regex = re.compile(structure_source(segments))

    def matches(self, text: str) -> bool:
        """Return whether ``text`` matches the structure from start to end."""
        return self.regex.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.regex.pattern!r}>"


class GroupedMatcher(Matcher):
    """Matcher capturing one group per segment, in declaration order."""

    def __init__(self, segments: tuple[Segment, ...]) -> None:
        self.segments = segments
        self.regex = re.compile(structure_source(segments, grouped=True))

    def decompose(self, text: str) -> list[str]:
        """Split ``text`` into one substring per segment.

        Returns an empty list when ``text`` does not match the structure
        in full.
        """
        match = self.regex.fullmatch(text)
        return list(match.groups()) if match else []

    def search(self, text: str) -> list[str]:
        """Decompose the first occurrence of the structure inside ``text``."""
        match = self.regex.search(text)
        return list(match.groups()) if match else []


def compile_structure(descriptor: str) -> Matcher:
    """Compile a descriptor into an anchored matcher."""
    return Matcher(tokenize(descriptor))


def compile_grouped(descriptor: str) -> GroupedMatcher:
    """Compile a descriptor into a grouped, decomposing matcher."""
    return GroupedMatcher(tokenize(descriptor))
