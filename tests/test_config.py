"""Tests for the TOML configuration."""

import pytest

from dos_datetime.config import Config, get_config_dir, get_config_path
from dos_datetime.models import ValidationMode


class TestConfigPaths:
    """Test config file location."""

    def test_config_dir_in_home(self, isolated_home):
        """The config lives in ~/.dosdt, created on demand."""
        config_dir = get_config_dir()

        assert config_dir == isolated_home / ".dosdt"
        assert config_dir.is_dir()

    def test_config_path(self, config_file):
        """The default file is ~/.dosdt/config.toml."""
        assert get_config_path() == config_file


class TestConfigDefaults:
    """Test default values."""

    def test_default_mode(self):
        """Strict is the default mode."""
        assert Config().get_mode() is ValidationMode.STRICT
        assert Config.DEFAULT_CONFIG["codec"]["mode"] == "strict"

    def test_default_json(self):
        """JSON output is off by default."""
        assert Config().get_json_output() is False

    def test_missing_file(self, tmp_path):
        """load() reports False when there is no file."""
        config = Config(tmp_path / "missing.toml")

        assert config.load() is False
        assert config.get_mode() is ValidationMode.STRICT

    def test_defaults_not_shared(self):
        """Changing one instance does not touch the class defaults."""
        config = Config()
        config.set_mode("loose")
        assert Config.DEFAULT_CONFIG["codec"]["mode"] == "strict"


class TestConfigPersistence:
    """Test saving and loading."""

    def test_mode_round_trip(self, tmp_path):
        """The mode is saved to and read back from TOML."""
        path = tmp_path / "config.toml"

        config1 = Config(path)
        config1.set_mode(ValidationMode.LOOSE)
        assert config1.save()

        config2 = Config(path)
        assert config2.get_mode() is ValidationMode.LOOSE

    def test_json_round_trip(self, tmp_path):
        """The JSON flag is saved to and read back from TOML."""
        path = tmp_path / "config.toml"

        config1 = Config(path)
        config1.set_json_output(True)
        config1.save()

        assert Config(path).get_json_output() is True

    def test_partial_file_merged(self, tmp_path):
        """Keys missing from the file keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[output]\njson = true\n')

        config = Config(path)

        assert config.get_json_output() is True
        assert config.get_mode() is ValidationMode.STRICT

    def test_dirty_tracking(self, tmp_path):
        """Setters mark the config dirty and saving clears it."""
        config = Config(tmp_path / "config.toml")
        assert not config.is_dirty()

        config.set_mode("loose")
        assert config.is_dirty()

        config.save()
        assert not config.is_dirty()

    def test_clean_save_writes_nothing(self, tmp_path):
        """Saving an unmodified config is a no-op unless forced."""
        path = tmp_path / "config.toml"
        config = Config(path)

        assert config.save()
        assert not path.exists()

        assert config.save(force=True)
        assert path.exists()


class TestConfigValidation:
    """Test handling of bad values."""

    def test_set_invalid_mode(self):
        """Unknown modes are rejected."""
        with pytest.raises(ValueError):
            Config().set_mode("sloppy")

    def test_unknown_mode_in_file(self, tmp_path):
        """An unknown mode in the file falls back to strict."""
        path = tmp_path / "config.toml"
        path.write_text('[codec]\nmode = "sloppy"\n')

        assert Config(path).get_mode() is ValidationMode.STRICT

    def test_broken_file(self, tmp_path):
        """Unparsable TOML is reported and defaults are kept."""
        path = tmp_path / "config.toml"
        path.write_text("[codec\nmode = ")

        config = Config(path)

        assert config.load() is False
        assert config.get_mode() is ValidationMode.STRICT
