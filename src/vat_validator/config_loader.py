"""Configuration loader with Pydantic v2 validation.

Loads and validates a ``vat_validator.yaml`` file into a typed
:class:`ValidatorConfig` object.  Unknown keys are allowed to support
future schema additions without breakage.

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load(Path("vat_validator.yaml"))
>>> config.vies.timeout_seconds
10.0
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from vat_validator.vies.client import DEFAULT_VIES_URL


class ViesConfig(BaseModel):
    """Configuration for the default VIES registry client."""

    model_config = {"extra": "allow"}

    base_url: str = Field(default=DEFAULT_VIES_URL)
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"VIES base_url must be an http(s) URL, got '{value}'")
        return value.rstrip("/")


class ValidatorConfig(BaseModel):
    """Top-level configuration schema.

    Loaded from ``vat_validator.yaml``.  All sections are optional and
    fall back to defaults.
    """

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    vies: ViesConfig = Field(default_factory=ViesConfig)


class ConfigLoader:
    """Loads and validates YAML configuration."""

    def load(self, config_path: Path) -> ValidatorConfig:
        """Load and validate a configuration file.

        Parameters
        ----------
        config_path:
            Path to the ``vat_validator.yaml`` file.

        Returns
        -------
        ValidatorConfig
            Validated configuration object.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return ValidatorConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> ValidatorConfig:
        """Load and validate a YAML string directly."""
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return ValidatorConfig.model_validate(raw)

    def defaults(self) -> ValidatorConfig:
        """Return a default configuration with all defaults applied."""
        return ValidatorConfig()
