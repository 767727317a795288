"""Configuration management for backoffice-data-gen."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from backoffice_data.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Generator configuration.

    ``reference_date`` pins "today" so that relative dates (join dates,
    repayment dates) are reproducible across days. ``pool_locale`` switches
    the literal pools to Faker-built ones.
    """

    reference_date: date | None = None
    pool_locale: str | None = None
    pool_seed: int = 0
    pool_size: int = 50


@dataclass
class DataGenConfig:
    """Main configuration for backoffice-data-gen."""

    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "DataGenConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        reference_str = os.getenv("REFERENCE_DATE")
        try:
            reference_date = date.fromisoformat(reference_str) if reference_str else None
            pool_seed = int(os.getenv("POOL_SEED", "0"))
            pool_size = int(os.getenv("POOL_SIZE", "50"))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid generator configuration: {exc}") from exc

        if pool_size <= 0:
            raise ConfigurationError(f"POOL_SIZE must be positive, got {pool_size}")

        generator = GeneratorConfig(
            reference_date=reference_date,
            pool_locale=os.getenv("POOL_LOCALE") or None,
            pool_seed=pool_seed,
            pool_size=pool_size,
        )

        return cls(
            output=output,
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
