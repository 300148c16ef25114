"""Configuration management for iso-iban."""

from dataclasses import dataclass, field

from iso_iban.exceptions import ConfigurationError
from iso_iban.logging import setup_logging

LOG_FORMATS = ("standard", "json")


@dataclass
class GeneratorConfig:
    """Random IBAN generator configuration."""

    seed: int | None = None
    countries: tuple[str, ...] = ()
    country_weights: dict[str, float] | None = None
    locale: str = "en_US"


@dataclass
class IbanConfig:
    """Main configuration for iso-iban."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def configure_logging(self) -> None:
        """Apply ``log_level`` and ``log_format`` to the root logger."""
        setup_logging(self.log_level, self.log_format)

    @classmethod
    def from_env(cls) -> "IbanConfig":
        """Create config from environment variables."""
        import json
        import os

        seed_str = os.getenv("IBAN_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"IBAN_SEED must be an integer, got {seed_str!r}") from exc

        countries_str = os.getenv("IBAN_COUNTRIES", "")
        countries = tuple(
            code.strip().upper() for code in countries_str.split(",") if code.strip()
        )

        weights_str = os.getenv("IBAN_COUNTRY_WEIGHTS")
        try:
            country_weights = json.loads(weights_str) if weights_str else None
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"IBAN_COUNTRY_WEIGHTS is not valid JSON: {exc}") from exc
        if country_weights is not None and not isinstance(country_weights, dict):
            raise ConfigurationError("IBAN_COUNTRY_WEIGHTS must be a JSON object")

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        generator = GeneratorConfig(
            seed=seed,
            countries=countries,
            country_weights=country_weights,
            locale=os.getenv("IBAN_LOCALE", "en_US"),
        )

        return cls(
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
