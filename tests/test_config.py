"""
Tests for the config loader.
"""

from pathlib import Path

import pytest
import yaml

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.errors import ConfigError
from chuk_mcp_tokens.models import ExtractionConfig, MatchingConfig, TokensConfig


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_library_default(self, library_path: Path):
        """The shipped default matches the model defaults."""
        config = ConfigLoader(library_path=library_path).get_config("default")
        assert config.extraction == ExtractionConfig()
        assert config.matching.numeric_tolerance == MatchingConfig().numeric_tolerance
        assert [b.size for b in config.matching.shadow_buckets] == ["none", "sm", "md", "lg"]
        assert config.matching.bucket_for(6) == "sm"

    def test_library_overlays(self, library_path: Path):
        """The overlays config turns on overlay penalties and widening."""
        config = ConfigLoader(library_path=library_path).get_config("overlays")
        assert config.extraction.deprioritize_overlays is True
        assert config.matching.numeric_tolerance == 1

    def test_list_configs(self, library_path: Path):
        """Library configs are listed by name."""
        names = ConfigLoader(library_path=library_path).list_configs()
        assert "default" in names
        assert "overlays" in names

    def test_unknown_name_gives_defaults(self, library_path: Path):
        """An unknown config name falls back to the defaults."""
        config = ConfigLoader(library_path=library_path).get_config("nope")
        assert config == TokensConfig()

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path):
        """A project config with the same name wins."""
        (temp_dir / "default.yaml").write_text(
            yaml.safe_dump({"schema": "tokens-config/v1", "matching": {"numeric_tolerance": 2}})
        )
        loader = ConfigLoader(library_path=library_path, project_path=temp_dir)
        assert loader.get_config("default").matching.numeric_tolerance == 2

    def test_cached(self, library_path: Path):
        """Loaded configs are cached until cleared."""
        loader = ConfigLoader(library_path=library_path)
        assert loader.get_config("default") is loader.get_config("default")
        first = loader.get_config("default")
        loader.clear_cache()
        assert loader.get_config("default") is not first

    def test_invalid_yaml(self, temp_dir: Path):
        """Broken YAML raises ConfigError."""
        path = temp_dir / "broken.yaml"
        path.write_text("extraction: [unclosed")
        with pytest.raises(ConfigError):
            ConfigLoader(library_path=temp_dir).load_file(path)

    def test_invalid_schema(self, temp_dir: Path):
        """Invalid values raise ConfigError."""
        path = temp_dir / "bad.yaml"
        path.write_text(
            yaml.safe_dump({"matching": {"shadow_buckets": [{"size": "sm", "max_blur": 6}]}})
        )
        with pytest.raises(ConfigError):
            ConfigLoader(library_path=temp_dir).load_file(path)

    def test_root_must_be_mapping(self, temp_dir: Path):
        """A YAML list is not a config."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            ConfigLoader(library_path=temp_dir).load_file(path)

    def test_empty_file_gives_defaults(self, temp_dir: Path):
        """An empty file is an all-defaults config."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert ConfigLoader(library_path=temp_dir).load_file(path) == TokensConfig()

    def test_list_skips_invalid(self, temp_dir: Path):
        """Invalid files are left out of the listing."""
        (temp_dir / "good.yaml").write_text("matching:\n  numeric_tolerance: 1\n")
        (temp_dir / "bad.yaml").write_text("matching:\n  numeric_tolerance: -1\n")
        assert ConfigLoader(library_path=temp_dir).list_configs() == ["good"]

    def test_save_round_trip(self, library_path: Path, temp_dir: Path):
        """Saved configs load back unchanged."""
        loader = ConfigLoader(library_path=library_path, project_path=temp_dir / "cfg")
        config = TokensConfig(matching=MatchingConfig(numeric_tolerance=3))
        path = loader.save(config, "custom")
        assert path.exists()
        assert loader.get_config("custom").matching.numeric_tolerance == 3

    def test_save_requires_project_path(self, library_path: Path):
        """Saving needs a project directory."""
        with pytest.raises(ValueError):
            ConfigLoader(library_path=library_path).save(TokensConfig(), "x")
