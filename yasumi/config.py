"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from yasumi.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "yasumi" / "config.ini"
LANGUAGE_ENV_VAR = "YASUMI_LANGUAGE"
LANGUAGES = ("ja", "en")


@dataclass(frozen=True)
class Config:
    """Holiday name configuration."""

    language: str = "ja"

    def __post_init__(self) -> None:
        if self.language not in LANGUAGES:
            msg = f"Unsupported language {self.language!r}, expected one of {LANGUAGES}"
            raise ConfigError(msg)

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            return cls(language=os.environ[LANGUAGE_ENV_VAR].strip().lower())
        except KeyError:
            return None

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path, encoding="utf-8")
        return cls(language=config.get("yasumi", "language", fallback="ja").strip().lower())

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["yasumi"] = {"language": self.language}
        with path.open("w", encoding="utf-8") as config_file:
            config.write(config_file)
