"""
Configuration management for bdaddress.

Loads settings from YAML config file and provides typed access.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()


SUPPORTED_LANGUAGES = ("en", "bn")


def _project_root() -> Path:
    """Return project root (parent of bdaddress package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"


@dataclass
class AddressConfig:
    """Configuration for the address hierarchy component."""

    # Name resolution
    match_aliases: bool = True          # Accept legacy spellings (Barisal, Comilla, ...)

    # Display
    default_language: str = "en"        # "en" or "bn"

    # Data paths
    reference_data_path: Optional[str] = None   # YAML override for the built-in tables

    def __post_init__(self):
        if self.default_language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported default_language {self.default_language!r}; "
                f"expected one of {SUPPORTED_LANGUAGES}"
            )

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "AddressConfig":
        """Load configuration from YAML file (str or Path; missing file gives defaults)."""
        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        data = {}
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

        address_config = data.get('address', {}) or {}
        data_config = data.get('data', {}) or {}

        reference_data = os.getenv('BDADDRESS_REFERENCE_DATA') or data_config.get('reference_data')

        return cls(
            match_aliases=bool(address_config.get('match_aliases', True)),
            default_language=address_config.get('default_language', 'en'),
            reference_data_path=reference_data,
        )


# Global config instance
_config: Optional[AddressConfig] = None


def get_config() -> AddressConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AddressConfig.from_yaml()
    return _config


def set_config(config: Optional[AddressConfig]) -> None:
    """Set the global configuration instance (None reloads from YAML on next access)."""
    global _config
    _config = config
