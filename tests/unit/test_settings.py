"""
Tests for gitstamp configuration loading.

Tests verify:
- .gitstamp.toml and pyproject.toml [tool.gitstamp] discovery
- Environment variables override file values
- Broken config files fall back to defaults with a recorded error
- DescribeConfig converts to DescribeOptions with overrides
"""

import os
from pathlib import Path

import pytest

from gitstamp.core.exceptions import ConfigFileError, ConfigValidationError, GitstampConfigError
from gitstamp.core.models.config import DescribeConfig
from gitstamp.core.settings import find_config_file, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GITSTAMP_* variables from the outer environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("GITSTAMP_"):
            monkeypatch.delenv(key)


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_finds_dotfile(self, tmp_path: Path):
        """.gitstamp.toml in the start directory is found."""
        (tmp_path / ".gitstamp.toml").write_text("[describe]\ntags = true\n")
        assert find_config_file(str(tmp_path)) == tmp_path / ".gitstamp.toml"

    def test_walks_up(self, tmp_path: Path):
        """Config in a parent directory is found."""
        (tmp_path / ".gitstamp.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(str(nested)) == tmp_path / ".gitstamp.toml"

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path):
        """A pyproject.toml without [tool.gitstamp] is not a config file."""
        (tmp_path / "pyproject.toml").write_text("[tool.other]\nx = 1\n")
        assert find_config_file(str(tmp_path)) is None


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, tmp_path: Path):
        """Without config the defaults apply."""
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.describe.abbrev == 7
        assert settings.describe.tags is False
        assert settings.logging.level == "warning"
        assert settings.config_file is None

    def test_dotfile_values(self, tmp_path: Path):
        """Values from .gitstamp.toml are loaded."""
        (tmp_path / ".gitstamp.toml").write_text(
            '[describe]\ntags = true\nmatch = ["v*"]\nabbrev = 10\n\n[logging]\nlevel = "debug"\n'
        )
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.describe.tags is True
        assert settings.describe.match == ["v*"]
        assert settings.describe.abbrev == 10
        assert settings.logging.level == "debug"
        assert settings.config_file == str(tmp_path / ".gitstamp.toml")

    def test_pyproject_section(self, tmp_path: Path):
        """Values from [tool.gitstamp] in pyproject.toml are loaded."""
        (tmp_path / "pyproject.toml").write_text(
            "[tool.gitstamp.describe]\nalways = true\ndirty = true\n"
        )
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.describe.always is True
        assert settings.describe.dirty is True

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        """GITSTAMP_DESCRIBE__ABBREV overrides the file value."""
        (tmp_path / ".gitstamp.toml").write_text("[describe]\nabbrev = 10\n")
        monkeypatch.setenv("GITSTAMP_DESCRIBE__ABBREV", "12")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.describe.abbrev == 12

    def test_broken_file_falls_back(self, tmp_path: Path):
        """An unparseable file yields defaults and a recorded error."""
        (tmp_path / ".gitstamp.toml").write_text("[describe\n")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.describe.abbrev == 7
        assert settings.config_error is not None

    def test_explicit_missing_file(self, tmp_path: Path):
        """An explicit config path that does not exist is an error."""
        with pytest.raises(ConfigFileError):
            load_settings(config_path=tmp_path / "missing.toml")

    def test_explicit_file(self, tmp_path: Path):
        """An explicit config path is used instead of discovery."""
        config = tmp_path / "stamp.toml"
        config.write_text("[describe]\nlong = true\n")
        settings = load_settings(config_path=config, start_dir=str(tmp_path))
        assert settings.describe.long is True

    def test_invalid_file_value(self, tmp_path: Path):
        """A file value that fails validation names the offending key."""
        (tmp_path / ".gitstamp.toml").write_text("[describe]\nabbrev = 2\n")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert exc_info.value.context["key"] == "describe.abbrev"
        assert isinstance(exc_info.value, GitstampConfigError)

    def test_invalid_env_value(self, tmp_path: Path, monkeypatch):
        """A non-numeric GITSTAMP_DESCRIBE__ABBREV is a configuration error."""
        monkeypatch.setenv("GITSTAMP_DESCRIBE__ABBREV", "abc")
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(tmp_path))


class TestDescribeConfig:
    """Tests for DescribeConfig.to_options."""

    def test_to_options(self):
        """Config values map onto DescribeOptions."""
        options = DescribeConfig(match=["v*"], tags=True, abbrev=9).to_options()
        assert options.match_patterns == ("v*",)
        assert options.include_lightweight is True
        assert options.abbrev == 9
        assert options.dirty_marker is None

    def test_dirty_enables_marker(self):
        """dirty = true turns the configured marker on."""
        options = DescribeConfig(dirty=True, dirty_marker="+local").to_options()
        assert options.dirty_marker == "+local"

    def test_overrides_win(self):
        """Non-None overrides replace config values; None keeps them."""
        config = DescribeConfig(match=["v*"], always=True)
        options = config.to_options(match_patterns=("rel-*",), always=None)
        assert options.match_patterns == ("rel-*",)
        assert options.always is True

    def test_comma_separated_patterns(self):
        """A comma-separated string is split into patterns."""
        assert DescribeConfig(match="v*, rel-*").match == ["v*", "rel-*"]

    def test_invalid_abbrev(self):
        """abbrev outside 4..64 is rejected."""
        with pytest.raises(ValueError):
            DescribeConfig(abbrev=2)
