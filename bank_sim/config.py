"""Configuration management for bank-sim."""

import os
from dataclasses import dataclass

from bank_sim.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")
OUTPUT_FORMATS = ("table", "json")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass
class BankConfig:
    """Main configuration for bank-sim."""

    log_level: str = "WARNING"
    log_format: str = "standard"
    seed_demo_accounts: bool = True
    generated_accounts: int = 0
    seed: int | None = None
    locale: str = "en_US"
    output_format: str = "table"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Invalid log format: {self.log_format}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Invalid output format: {self.output_format}")
        if self.generated_accounts < 0:
            raise ConfigurationError("generated_accounts cannot be negative")

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        seed = os.getenv("BANK_SIM_SEED")
        return cls(
            log_level=os.getenv("BANK_SIM_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("BANK_SIM_LOG_FORMAT", "standard"),
            seed_demo_accounts=_parse_bool("BANK_SIM_DEMO", os.getenv("BANK_SIM_DEMO", "true")),
            generated_accounts=_parse_int(
                "BANK_SIM_GENERATED_ACCOUNTS", os.getenv("BANK_SIM_GENERATED_ACCOUNTS", "0")
            ),
            seed=_parse_int("BANK_SIM_SEED", seed) if seed else None,
            locale=os.getenv("BANK_SIM_LOCALE", "en_US"),
            output_format=os.getenv("BANK_SIM_OUTPUT", "table"),
        )


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
