"""Pytest configuration and fixtures."""

import pytest

from iso_iban.models.specification import Specification, SpecificationTable
from iso_iban.registry import default_table


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ch_specification() -> Specification:
    """Switzerland: bank code at offsets 4-8, no branch code."""
    return Specification("Switzerland", "CH", "CH2!n5!n12!c", 21, "5!n12!c", 17, 4, 8, None, None)


@pytest.fixture
def bg_specification() -> Specification:
    """Bulgaria: alphabetic bank code and a branch code."""
    return Specification(
        "Bulgaria", "BG", "BG2!n4!a4!n2!n8!c", 22, "4!a4!n2!n8!c", 18, 4, 7, 8, 11
    )


@pytest.fixture
def specifications(
    ch_specification: Specification, bg_specification: Specification
) -> SpecificationTable:
    """Small table with Switzerland and Bulgaria."""
    return SpecificationTable([ch_specification, bg_specification])


@pytest.fixture
def registry() -> SpecificationTable:
    """The bundled registry table."""
    return default_table()


@pytest.fixture
def sample_iban() -> str:
    """Valid Swiss IBAN in human readable form."""
    return "CH35 1234 5987 6543 2109 A"
