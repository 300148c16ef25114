"""ISO/IEC 7064 MOD97-10 check digits for IBANs.

Letters are transliterated to two-digit numbers (``a``/``A`` = 10 through
``z``/``Z`` = 35) and digits stand for themselves.  An IBAN is valid when
its rearranged form (first four characters moved to the end) is congruent
to 1 modulo 97.
"""

from __future__ import annotations

import string

from iso_iban.exceptions import InvalidCharacterError

CHARACTER_CODES: dict[str, int] = {
    **{digit: value for value, digit in enumerate(string.digits)},
    **{letter: value for value, letter in enumerate(string.ascii_lowercase, start=10)},
}


def _codes(text: str) -> list[int]:
    codes = []
    for char in text.lower():
        code = CHARACTER_CODES.get(char)
        if code is None:
            raise InvalidCharacterError(char)
        codes.append(code)
    return codes


def numerify(text: str) -> int:
    """Convert a string into its digits-only integer form.

    Parameters
    ----------
    text : str
        Characters from ``0-9``, ``a-z`` or ``A-Z``.

    Returns
    -------
    int
        The concatenated transliteration, e.g.
        ``numerify("CH351234598765432109A") == 121735123459876543210910``.

    Raises
    ------
    InvalidCharacterError
        If ``text`` contains a character without a transliteration.
    """
    digits = "".join(str(code) for code in _codes(text))
    return int(digits) if digits else 0


def mod97(text: str) -> int:
    """Compute ``numerify(text) % 97`` without building the large integer."""
    remainder = 0
    for code in _codes(text):
        remainder = (remainder * (100 if code > 9 else 10) + code) % 97
    return remainder


def rearrange(compact: str) -> str:
    """Move country code and check digits to the end of the IBAN."""
    return compact[4:] + compact[:4]


def checksum_digits_for(bban: str, country_code: str) -> str:
    """Calculate the two check digits for a BBAN in a given country."""
    return f"{98 - (mod97(bban + country_code) * 100) % 97:02d}"


def verify(value: int) -> bool:
    """Return whether a numerified, rearranged IBAN carries a valid checksum."""
    return value % 97 == 1


def is_valid_checksum(compact: str) -> bool:
    """Check the MOD97-10 checksum of a compact IBAN.

    Strings shorter than five characters have no numeric form and never
    validate.
    """
    if len(compact) < 5:
        return False
    return mod97(rearrange(compact)) == 1
