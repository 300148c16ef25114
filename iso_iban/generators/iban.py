"""Random IBAN generator.

Walks a country's structure descriptor and fills every token with
matching random content, then computes the check digits.  The results
are structurally valid and pass the checksum, which makes them suitable
as fixtures and seed data; they do not identify real accounts.
"""

from __future__ import annotations

import random
import string
from typing import Iterator, Mapping

from iso_iban.config import GeneratorConfig, IbanConfig
from iso_iban.exceptions import UnknownCountryError
from iso_iban.generators.base import BaseGenerator
from iso_iban.generators.country import CountryDistribution
from iso_iban.logging import get_logger
from iso_iban.models.iban import IBAN, IBANDraft
from iso_iban.models.specification import Specification
from iso_iban.registry import default_table
from iso_iban.structure import CharacterClass, Segment

logger = get_logger(__name__)

# Generators shared by IBAN.random, keyed by table identity
_DEFAULT_GENERATORS: dict[int, tuple[Mapping[str, Specification], "IbanGenerator"]] = {}

# Compact IBANs are upper-cased, so "c" tokens draw from upper case only
ALPHANUMERIC = string.ascii_uppercase + string.digits


class IbanGenerator(BaseGenerator):
    """Generate random, valid IBANs.

    Parameters
    ----------
    specifications : Mapping[str, Specification] | None
        Country specifications to draw from.  Defaults to the bundled
        registry.
    distribution : CountryDistribution | None
        Country weights used when :meth:`random` is called without
        countries.  Defaults to a uniform pick over the whole table.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale.
    """

    def __init__(
        self,
        specifications: Mapping[str, Specification] | None = None,
        distribution: CountryDistribution | None = None,
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        super().__init__(seed, locale=locale)
        self.specifications = default_table() if specifications is None else specifications
        self._distribution = distribution

        if distribution is not None:
            unknown = [c for c in distribution.countries if c not in self.specifications]
            if unknown:
                raise UnknownCountryError(
                    f"No IBAN specification for countries {', '.join(unknown)}"
                )

    @classmethod
    def from_config(
        cls,
        config: IbanConfig | GeneratorConfig,
        specifications: Mapping[str, Specification] | None = None,
    ) -> "IbanGenerator":
        """Create a generator from configuration.

        Explicit ``country_weights`` take precedence over ``countries``.
        Passing an :class:`IbanConfig` also applies its logging settings.
        """
        if isinstance(config, IbanConfig):
            config.configure_logging()
            generator_config = config.generator
        else:
            generator_config = config

        distribution = None
        if generator_config.country_weights:
            distribution = CountryDistribution(weights=dict(generator_config.country_weights))
        elif generator_config.countries:
            distribution = CountryDistribution.uniform(generator_config.countries)

        return cls(
            specifications,
            distribution=distribution,
            seed=generator_config.seed,
            locale=generator_config.locale,
        )

    def random(self, *countries: str) -> IBAN:
        """Generate a single IBAN.

        Parameters
        ----------
        *countries : str
            Countries to pick from uniformly.  When empty, the configured
            distribution or the whole table is used.

        Returns
        -------
        IBAN
            Random IBAN with valid structure and check digits.
        """
        country = self._choose_country(countries)
        specification = self.specifications.get(country)
        if specification is None:
            raise UnknownCountryError(f"No IBAN specification for country {country!r}")

        account = "".join(self._synthesize(segment) for segment in specification.segments)
        draft = IBANDraft(account[:2], account[4:], self.specifications)
        return draft.finalize()

    def generate_batch(self, count: int, *countries: str) -> Iterator[IBAN]:
        """Generate multiple IBANs.

        Parameters
        ----------
        count : int
            Number of IBANs to generate.
        *countries : str
            Countries to pick from, as for :meth:`random`.

        Yields
        ------
        IBAN
            Generated IBANs.
        """
        logger.info("Generating %d random IBANs", count)
        for _ in range(count):
            yield self.random(*countries)

    def _choose_country(self, countries: tuple[str, ...]) -> str:
        if countries:
            return random.choice(countries).upper()
        if self._distribution is not None:
            return self._distribution.choose()
        if not self.specifications:
            raise UnknownCountryError("The specification table is empty")
        return random.choice(list(self.specifications))

    def _synthesize(self, segment: Segment) -> str:
        """Random content matching one structure token."""
        if segment.literal is not None:
            return segment.literal
        if segment.char_class == CharacterClass.NUMERIC:
            return self.fake.numerify("#" * segment.length)
        if segment.char_class == CharacterClass.ALPHA:
            return self.fake.lexify("?" * segment.length, letters=string.ascii_uppercase)
        if segment.char_class == CharacterClass.ALPHANUMERIC:
            return self.fake.lexify("?" * segment.length, letters=ALPHANUMERIC)
        return " " * segment.length


def default_generator(
    specifications: Mapping[str, Specification] | None = None,
) -> IbanGenerator:
    """Return the shared unseeded generator for a specification table.

    One generator, and so one Faker instance, is created per table and
    reused by later calls.
    """
    table = default_table() if specifications is None else specifications
    cached = _DEFAULT_GENERATORS.get(id(table))
    if cached is None or cached[0] is not table:
        cached = (table, IbanGenerator(table))
        _DEFAULT_GENERATORS[id(table)] = cached
    return cached[1]
