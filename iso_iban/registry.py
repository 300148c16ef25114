"""Bundled IBAN registry records.

A subset of the SWIFT IBAN registry covering the SEPA core and a few
neighbours.  Each record lists country name, country code, IBAN
structure, IBAN length, BBAN structure, BBAN length, and the inclusive
bank and branch offsets into the compact IBAN (``None`` when the country
does not define the field).

Callers with their own registry build a :class:`SpecificationTable`
directly and pass it wherever a table is accepted.
"""

from __future__ import annotations

from functools import lru_cache

from iso_iban.models.specification import SpecificationTable

RECORDS: list[tuple] = [
    ("Andorra", "AD", "AD2!n4!n4!n12!c", 24, "4!n4!n12!c", 20, 4, 7, 8, 11),
    ("Austria", "AT", "AT2!n5!n11!n", 20, "5!n11!n", 16, 4, 8, None, None),
    ("Belgium", "BE", "BE2!n3!n7!n2!n", 16, "3!n7!n2!n", 12, 4, 6, None, None),
    ("Bulgaria", "BG", "BG2!n4!a4!n2!n8!c", 22, "4!a4!n2!n8!c", 18, 4, 7, 8, 11),
    ("Switzerland", "CH", "CH2!n5!n12!c", 21, "5!n12!c", 17, 4, 8, None, None),
    ("Germany", "DE", "DE2!n8!n10!n", 22, "8!n10!n", 18, 4, 11, None, None),
    ("Denmark", "DK", "DK2!n4!n9!n1!n", 18, "4!n9!n1!n", 14, 4, 7, None, None),
    ("Spain", "ES", "ES2!n4!n4!n1!n1!n10!n", 24, "4!n4!n1!n1!n10!n", 20, 4, 7, 8, 11),
    ("Finland", "FI", "FI2!n3!n11!n", 18, "3!n11!n", 14, 4, 6, None, None),
    ("France", "FR", "FR2!n5!n5!n11!c2!n", 27, "5!n5!n11!c2!n", 23, 4, 8, 9, 13),
    ("United Kingdom", "GB", "GB2!n4!a6!n8!n", 22, "4!a6!n8!n", 18, 4, 7, 8, 13),
    ("Greece", "GR", "GR2!n3!n4!n16!c", 27, "3!n4!n16!c", 23, 4, 6, 7, 10),
    ("Croatia", "HR", "HR2!n7!n10!n", 21, "7!n10!n", 17, 4, 10, None, None),
    ("Ireland", "IE", "IE2!n4!a6!n8!n", 22, "4!a6!n8!n", 18, 4, 7, 8, 13),
    ("Italy", "IT", "IT2!n1!a5!n5!n12!c", 27, "1!a5!n5!n12!c", 23, 5, 9, 10, 14),
    ("Liechtenstein", "LI", "LI2!n5!n12!c", 21, "5!n12!c", 17, 4, 8, None, None),
    ("Luxembourg", "LU", "LU2!n3!n13!c", 20, "3!n13!c", 16, 4, 6, None, None),
    ("Malta", "MT", "MT2!n4!a5!n18!c", 31, "4!a5!n18!c", 27, 4, 7, 8, 12),
    ("Netherlands", "NL", "NL2!n4!a10!n", 18, "4!a10!n", 14, 4, 7, None, None),
    ("Norway", "NO", "NO2!n4!n6!n1!n", 15, "4!n6!n1!n", 11, 4, 7, None, None),
    ("Portugal", "PT", "PT2!n4!n4!n11!n2!n", 25, "4!n4!n11!n2!n", 21, 4, 7, 8, 11),
    ("Sweden", "SE", "SE2!n3!n16!n1!n", 24, "3!n16!n1!n", 20, 4, 6, None, None),
]


@lru_cache(maxsize=1)
def default_table() -> SpecificationTable:
    """Return the table built from the bundled records.

    Built on first use and shared afterwards; the table is read-only.
    """
    return SpecificationTable.from_records(RECORDS)
