"""Tests for configuration loading."""

from pathlib import Path

import pytest

from quire.config import Config, get_config_path, load_config, save_config
from quire.core import ConfigError


def write_config(root: Path, text: str) -> None:
    path = get_config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestConfig:
    """Test the configuration schema."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.frontmatter.split_mode == "all"
        assert config.rendering.allow_html is True
        assert config.output.include_drafts is True

    def test_from_dict_partial(self) -> None:
        config = Config.from_dict({"output": {"include_drafts": False}})
        assert config.output.include_drafts is False
        assert config.frontmatter.split_mode == "all"

    def test_from_dict_ignores_unknown_sections(self) -> None:
        config = Config.from_dict({"theme": {"name": "dark"}})
        assert config == Config()

    def test_to_yaml(self) -> None:
        text = Config().to_yaml()
        assert "split_mode: all" in text
        assert "include_drafts: true" in text


class TestLoadConfig:
    """Test loading .quire/config.yaml."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) is None

    def test_empty_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, "")
        assert load_config(tmp_path) is None

    def test_values_loaded(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            "frontmatter:\n  split_mode: pair\nrendering:\n  allow_html: false\n",
        )
        config = load_config(tmp_path)
        assert config is not None
        assert config.frontmatter.split_mode == "pair"
        assert config.rendering.allow_html is False
        assert config.output.include_drafts is True

    def test_invalid_value(self, tmp_path: Path) -> None:
        write_config(tmp_path, "frontmatter:\n  split_mode: some\n")
        with pytest.raises(ConfigError, match="invalid configuration"):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "frontmatter: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        write_config(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(tmp_path)

    def test_save_then_load(self, tmp_path: Path) -> None:
        config = Config.from_dict({"frontmatter": {"split_mode": "pair"}})
        save_config(config, tmp_path)
        assert get_config_path(tmp_path).exists()
        assert load_config(tmp_path) == config
