"""Tests for ConfigManager."""

import pytest

from artifact_relay.utils import ConfigManager


@pytest.fixture
def config_file(tmp_path):
    """TOML configuration file with a relay section."""
    path = tmp_path / "relay.toml"
    path.write_text(
        '[relay]\ndestination_bucket = "release-mirror"\nhttp_timeout = 60\n\n[other]\nvalue = "x"\n'
    )
    return path


class TestConfigManager:
    """Test ConfigManager."""

    def test_get_section(self, config_file):
        """The relay section is returned as a dict."""
        assert ConfigManager(str(config_file)).get_section() == {
            "destination_bucket": "release-mirror",
            "http_timeout": 60,
        }

    def test_missing_section(self, tmp_path):
        """A file without the section yields an empty dict."""
        path = tmp_path / "empty.toml"
        path.write_text('title = "x"\n')
        assert ConfigManager(str(path)).get_section() == {}

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path / "missing.toml")).load()

    def test_invalid_toml(self, tmp_path):
        """Invalid TOML raises ValueError."""
        path = tmp_path / "bad.toml"
        path.write_text("[relay\n")
        with pytest.raises(ValueError, match="Invalid TOML"):
            ConfigManager(str(path)).load()

    def test_loaded_once(self, config_file):
        """The file is read once and cached."""
        manager = ConfigManager(str(config_file))
        first = manager.load()
        config_file.write_text('[relay]\ndestination_bucket = "changed"\n')
        assert manager.load() is first
