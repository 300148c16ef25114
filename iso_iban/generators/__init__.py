"""Random IBAN generators."""

from iso_iban.generators.country import CountryDistribution
from iso_iban.generators.iban import IbanGenerator, default_generator

__all__ = ["CountryDistribution", "IbanGenerator", "default_generator"]
