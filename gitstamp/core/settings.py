"""
Pydantic Settings for gitstamp configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import DescribeConfig, LoggingConfig

CONFIG_FILE_NAME = ".gitstamp.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .gitstamp.toml, or a pyproject.toml with a [tool.gitstamp]
    section, by walking up from start_dir (or cwd).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "gitstamp" in data.get("tool", {}):
                    return pyproject
            except (tomllib.TOMLDecodeError, OSError):
                # An unrelated, broken pyproject.toml does not stop the search
                continue

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a TOML config file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)
        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("gitstamp", {})

            self._data = data
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            self._data["_config_error"] = f"Failed to parse config file {path}: {e}"
        except OSError as e:
            self._data["_config_error"] = f"Failed to read config file {path}: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self._load_toml().items() if not k.startswith("_")}


class GitstampSettings(BaseSettings):
    """gitstamp configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (GITSTAMP_<section>__<field>)
    3. TOML config file (.gitstamp.toml or pyproject.toml [tool.gitstamp])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "GITSTAMP_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    describe: DescribeConfig = DescribeConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading below init values and the environment.

        The config location is passed through module-level variables since
        this hook only receives the settings class.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        return self._config_file

    @property
    def config_error(self) -> str | None:
        return self._config_error


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> GitstampSettings:
    """Load gitstamp settings from config file and environment.

    An unparseable config file is not fatal: defaults apply and the
    problem is recorded in ``config_error`` for the caller to report.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit init values

    Returns:
        GitstampSettings instance with all sources merged

    Raises:
        ConfigFileError: If an explicit config_path does not exist
        ConfigValidationError: If a file or environment value is invalid
    """
    global _current_config_path, _current_start_dir

    if config_path is not None and not config_path.exists():
        raise ConfigFileError("Config file not found", file_path=str(config_path))

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        try:
            settings = GitstampSettings(**overrides)
        except ValidationError as e:
            error = e.errors()[0]
            raise ConfigValidationError(
                f"Invalid configuration: {error['msg']}",
                key=".".join(str(part) for part in error["loc"]),
                value=repr(error.get("input")),
                cause=e,
            ) from e
        except SettingsError as e:
            raise ConfigValidationError(f"Invalid configuration: {e}", cause=e) from e

        toml_data = TomlConfigSource(GitstampSettings, config_path, start_dir)._load_toml()
        settings._config_file = toml_data.get("_config_file")
        settings._config_error = toml_data.get("_config_error")

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
