import logging
import os
import tomllib
from dataclasses import dataclass

from .log import DEFAULT_FORMAT, setup_logging


@dataclass
class Configuration:
    """Runtime settings for tensoralg's logging."""

    log_level: str = "WARNING"
    log_format: str = DEFAULT_FORMAT

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def load(cls, config_path: str) -> "Configuration":
        """
        Load configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "tensoralg" table.

        Returns
        -------
        Configuration
            Instance populated from the "tensoralg" table; missing fields use
            their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data.get("tensoralg", {}))


def configure(config_path: str | None = None) -> Configuration:
    """Load settings from `config_path` (defaults when None) and apply them to logging."""
    config = Configuration.load(config_path) if config_path else Configuration()
    setup_logging(config.log_level, config.log_format)
    return config
