"""Tests for adapter configuration loading."""

import pytest

from src.adpopcorn.config import YamlHostConfig, get_host_config, reset_host_config
from src.adpopcorn.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from adapter env vars and the cached global config."""
    for name in ("ADPOPCORN_CONFIG", "ADPOPCORN_SERVER", "ADPOPCORN_HOST_VERSION"):
        monkeypatch.delenv(name, raising=False)
    reset_host_config()
    yield
    reset_host_config()


class TestYamlHostConfig:
    """Test suite for dotted-key lookup."""

    def test_dotted_lookup(self):
        """Test lookup of nested keys by dotted path."""
        config = YamlHostConfig({"adpopcorn": {"server": "bid.example.com"}})

        assert config.get_config("adpopcorn.server") == "bid.example.com"
        assert config.get_config("adpopcorn") == {"server": "bid.example.com"}

    def test_missing_key(self):
        """Test that missing keys resolve to None."""
        config = YamlHostConfig({"adpopcorn": {"server": "bid.example.com"}})

        assert config.get_config("adpopcorn.host_version") is None
        assert config.get_config("other.server") is None

    def test_lookup_through_scalar(self):
        """Test that descending into a scalar yields None."""
        config = YamlHostConfig({"adpopcorn": "flat"})

        assert config.get_config("adpopcorn.server") is None

    def test_empty_config(self):
        """Test lookup on an empty config."""
        assert YamlHostConfig().get_config("adpopcorn.server") is None


class TestFromFile:
    """Test suite for YAML file loading."""

    def test_loads_mapping(self, tmp_path):
        """Test loading a YAML mapping from disk."""
        path = tmp_path / "adpopcorn.yaml"
        path.write_text(
            "adpopcorn:\n"
            "  server: bid.example.com\n"
            "  host_version: \"8.52.0\"\n"
        )

        config = YamlHostConfig.from_file(path)

        assert config.get_config("adpopcorn.server") == "bid.example.com"
        assert config.get_config("adpopcorn.host_version") == "8.52.0"

    def test_empty_file(self, tmp_path):
        """Test that an empty file loads as an empty config."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert YamlHostConfig.from_file(path).get_config("adpopcorn.server") is None

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            YamlHostConfig.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises ConfigError."""
        path = tmp_path / "broken.yaml"
        path.write_text("adpopcorn: [unclosed\n")

        with pytest.raises(ConfigError):
            YamlHostConfig.from_file(path)

    def test_non_mapping(self, tmp_path):
        """Test that a non-mapping document raises ConfigError."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            YamlHostConfig.from_file(path)


class TestFromEnv:
    """Test suite for environment-driven config."""

    def test_no_env(self):
        """Test loading with no environment variables set."""
        config = YamlHostConfig.from_env()

        assert config.get_config("adpopcorn.server") is None

    def test_env_overrides(self, monkeypatch):
        """Test that environment variables set the adapter keys."""
        monkeypatch.setenv("ADPOPCORN_SERVER", "env.example.com")
        monkeypatch.setenv("ADPOPCORN_HOST_VERSION", "9.0.0")

        config = YamlHostConfig.from_env()

        assert config.get_config("adpopcorn.server") == "env.example.com"
        assert config.get_config("adpopcorn.host_version") == "9.0.0"

    def test_file_then_overrides(self, monkeypatch, tmp_path):
        """Test that env vars win over the config file."""
        path = tmp_path / "adpopcorn.yaml"
        path.write_text(
            "adpopcorn:\n"
            "  server: file.example.com\n"
            "  host_version: \"8.0.0\"\n"
        )
        monkeypatch.setenv("ADPOPCORN_CONFIG", str(path))
        monkeypatch.setenv("ADPOPCORN_SERVER", "env.example.com")

        config = YamlHostConfig.from_env()

        assert config.get_config("adpopcorn.server") == "env.example.com"
        assert config.get_config("adpopcorn.host_version") == "8.0.0"

    def test_invalid_section(self, monkeypatch, tmp_path):
        """Test that a scalar adpopcorn section raises ConfigError."""
        path = tmp_path / "adpopcorn.yaml"
        path.write_text("adpopcorn: flat\n")
        monkeypatch.setenv("ADPOPCORN_CONFIG", str(path))

        with pytest.raises(ConfigError):
            YamlHostConfig.from_env()


class TestGlobalConfig:
    """Test suite for the cached global config."""

    def test_cached(self):
        """Test that the global config is loaded once."""
        assert get_host_config() is get_host_config()

    def test_reset(self, monkeypatch):
        """Test that reset forces a reload from the environment."""
        first = get_host_config()
        monkeypatch.setenv("ADPOPCORN_SERVER", "new.example.com")

        assert get_host_config().get_config("adpopcorn.server") is None

        reset_host_config()
        second = get_host_config()

        assert second is not first
        assert second.get_config("adpopcorn.server") == "new.example.com"
