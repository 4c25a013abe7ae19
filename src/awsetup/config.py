"""
AWSETUP Configuration Management.

Settings live in a TOML file under the platform's application directory
(see typer.get_app_dir). A few values can be overridden per run through
environment variables:

- AWSETUP_REGION: default region for environment-variable credentials
- AWSETUP_OUTPUT_DIR: directory that receives generated files
- AWSETUP_AWS_CLI: name or path of the AWS CLI executable
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import toml
import typer
from pydantic import BaseModel, Field, ValidationError

from awsetup.helpers import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "awsetup"
CONFIG_FILENAME = "config.toml"

ENV_OVERRIDES = {
    "AWSETUP_REGION": ("aws", "default_region"),
    "AWSETUP_OUTPUT_DIR": ("output", "directory"),
    "AWSETUP_AWS_CLI": ("cli", "aws_cli_name"),
}


class AwsSettings(BaseModel):
    default_region: str = "us-west-2"
    assume_role_region: str = "us-west-2"


class OutputSettings(BaseModel):
    directory: str = "."
    env_file: str = ".env.aws"
    assume_role_file: str = ".env.assume-role"
    confirm_overwrite: bool = True


class CliSettings(BaseModel):
    aws_cli_name: str = "aws"


class AwsetupConfig(BaseModel):
    """Top-level awsetup settings."""

    aws: AwsSettings = Field(default_factory=AwsSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    cli: CliSettings = Field(default_factory=CliSettings)


class ConfigManager:
    """Loads, updates and persists the awsetup configuration file."""

    def __init__(self, config_dir: Optional[Path] = None, environ: Optional[dict] = None):
        self.config_dir = Path(config_dir) if config_dir else Path(typer.get_app_dir(APP_NAME))
        self.config_file = self.config_dir / CONFIG_FILENAME
        self._environ = environ if environ is not None else os.environ
        self._config: Optional[AwsetupConfig] = None

    def _read(self) -> AwsetupConfig:
        if not self.config_file.exists():
            logger.debug("No config file at %s, using defaults", self.config_file)
            return AwsetupConfig()
        try:
            data = toml.load(self.config_file)
            return AwsetupConfig.model_validate(data)
        except (toml.TomlDecodeError, OSError) as e:
            raise ConfigError(f"Could not read {self.config_file}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}: {e}") from e

    def load(self) -> AwsetupConfig:
        """Return the stored configuration with environment overrides applied."""
        if self._config is None:
            self._config = self._read()

        config = self._config.model_copy(deep=True)
        for env_name, (section, field) in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value:
                logger.debug("Applying %s override for %s.%s", env_name, section, field)
                setattr(getattr(config, section), field, value)
        return config

    def save(self) -> None:
        """Write the stored configuration (without environment overrides) to disk."""
        if self._config is None:
            self._config = AwsetupConfig()
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                toml.dump(self._config.model_dump(), f)
        except OSError as e:
            raise ConfigError(f"Could not write {self.config_file}: {e}") from e

    def set_value(self, key: str, value: Any) -> AwsetupConfig:
        """
        Update one setting addressed as 'section.field' and save.

        Args:
            key: Dotted setting name, e.g. 'aws.default_region'
            value: New value; validated against the setting's type

        Returns:
            The updated stored configuration

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        section, _, field = key.partition(".")
        if self._config is None:
            self._config = self._read()

        data = self._config.model_dump()
        if section not in data or field not in data[section]:
            raise ConfigError(f"Unknown setting '{key}'")

        data[section][field] = value
        try:
            self._config = AwsetupConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {e}") from e
        self.save()
        return self._config

    def reset(self) -> None:
        self._config = AwsetupConfig()
        self.save()


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
