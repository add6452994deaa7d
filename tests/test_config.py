import pytest

from dex_browser_core import __version__
from dex_browser_core.config import BrowserConfig
from dex_browser_core.utils.core.config_registry import (
    clear_config,
    get_config,
    has_config,
    resolve_config,
    set_config,
)


class TestBrowserConfig:
    def test_defaults_point_at_public_api(self):
        config = BrowserConfig()

        assert config.api_base_url == "https://pokeapi.co/api/v2"
        assert config.page_size == 150
        assert config.language == "en"
        assert config.user_agent == f"dex-browser-core/{__version__}"

    def test_trailing_slash_is_stripped(self):
        assert BrowserConfig(api_base_url="http://localhost:8000/api/v2/").api_base_url == (
            "http://localhost:8000/api/v2"
        )

    def test_custom_user_agent_is_kept(self):
        assert BrowserConfig(user_agent="my-dex/2.0").user_agent == "my-dex/2.0"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"api_base_url": ""},
            {"api_base_url": "ftp://pokeapi.co"},
            {"sprite_fallback_url": "https://cdn.example/sprite.png"},
            {"page_size": 0},
            {"request_timeout": 0},
            {"logging_level": "VERBOSE"},
            {"logging_format": "xml"},
            {"logging_max_log_size_mb": 0},
            {"logging_backup_count": -1},
            {"language": " "},
        ],
    )
    def test_invalid_values_raise_value_error(self, overrides):
        with pytest.raises(ValueError):
            BrowserConfig(**overrides)

    @pytest.mark.parametrize("overrides", [{"api_base_url": 42}, {"page_size": "20"}, {"page_size": True}])
    def test_wrong_types_raise_type_error(self, overrides):
        with pytest.raises(TypeError):
            BrowserConfig(**overrides)


class TestFromYaml:
    def test_loads_known_keys(self, tmp_path):
        path = tmp_path / "dex.yaml"
        path.write_text("page_size: 20\nlanguage: fr\nlogging_level: DEBUG\n", encoding="utf-8")

        config = BrowserConfig.from_yaml(path)

        assert config.page_size == 20
        assert config.language == "fr"
        assert config.logging_level == "DEBUG"
        assert config.api_base_url == "https://pokeapi.co/api/v2"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert BrowserConfig.from_yaml(path) == BrowserConfig()

    def test_unknown_keys_are_rejected(self, tmp_path):
        path = tmp_path / "dex.yaml"
        path.write_text("page_size: 20\npagesize: 30\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Unknown config keys.*pagesize"):
            BrowserConfig.from_yaml(path)

    def test_non_mapping_is_rejected(self, tmp_path):
        path = tmp_path / "dex.yaml"
        path.write_text("- page_size\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            BrowserConfig.from_yaml(path)

    def test_invalid_values_are_validated(self, tmp_path):
        path = tmp_path / "dex.yaml"
        path.write_text("page_size: -5\n", encoding="utf-8")

        with pytest.raises(ValueError, match="page_size"):
            BrowserConfig.from_yaml(path)


class TestConfigRegistry:
    def test_get_config_before_set_raises(self):
        assert not has_config()
        with pytest.raises(RuntimeError):
            get_config()

    def test_set_and_clear(self):
        config = BrowserConfig(page_size=10)

        set_config(config)
        assert get_config() is config

        clear_config()
        assert not has_config()

    def test_resolve_prefers_explicit_then_global_then_defaults(self):
        explicit = BrowserConfig(page_size=1)
        registered = BrowserConfig(page_size=2)

        assert resolve_config().page_size == 150

        set_config(registered)
        assert resolve_config() is registered
        assert resolve_config(explicit) is explicit
