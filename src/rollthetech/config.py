"""Configuration loading and validation."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .exceptions import ConfigError

DEFAULT_URL = (
    "https://github.com/codecrafters-io/build-your-own-x/raw/refs/heads/master/README.md"
)


@dataclass
class Config:
    """Application configuration."""

    url: str = DEFAULT_URL
    fast: bool = False
    spinner_delay: float = 0.5

    def validate(self) -> None:
        """Validate configuration values."""
        if urlparse(self.url).scheme not in ("http", "https"):
            raise ConfigError(f"Document URL must be http(s): {self.url}")
        if self.spinner_delay < 0:
            raise ConfigError("spinner_delay cannot be negative.")


def load_config(
    fast: bool = False,
    url: Optional[str] = None,
    spinner_delay: Optional[float] = None,
) -> Config:
    """Build config from defaults and apply CLI overrides."""
    config = Config(
        url=url or DEFAULT_URL,
        fast=fast,
        spinner_delay=spinner_delay if spinner_delay is not None else 0.5,
    )

    config.validate()
    return config
