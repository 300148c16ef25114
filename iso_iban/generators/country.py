"""Weighted country selection for random IBAN generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CountryDistribution:
    """Weighted distribution of countries.

    Parameters
    ----------
    weights : dict[str, float]
        Mapping of ISO 3166-1 alpha-2 country code to weight.
        Weights are relative (do not need to sum to 1.0).
    """

    weights: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if any(weight < 0 for weight in self.weights.values()):
            raise ValueError("Country weights must not be negative")
        if self.weights and not sum(self.weights.values()) > 0:
            raise ValueError("At least one country weight must be positive")

    @classmethod
    def uniform(cls, countries: list[str] | tuple[str, ...]) -> "CountryDistribution":
        """Equal weight for every given country."""
        return cls(weights={country: 1.0 for country in countries})

    @classmethod
    def sepa_core(cls) -> "CountryDistribution":
        """Eurozone-heavy mix, roughly following payment volumes."""
        return cls(
            weights={
                "DE": 0.25,
                "FR": 0.20,
                "IT": 0.15,
                "ES": 0.12,
                "NL": 0.08,
                "BE": 0.05,
                "AT": 0.05,
                "PT": 0.04,
                "IE": 0.03,
                "FI": 0.03,
            }
        )

    @property
    def countries(self) -> list[str]:
        return list(self.weights.keys())

    def choose(self) -> str:
        """Pick a country according to the weights."""
        return random.choices(self.countries, weights=list(self.weights.values()), k=1)[0]
