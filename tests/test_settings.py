"""Tests for configuration loading."""

from shop.config import Settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.name_search_limit == 10
        assert settings.producer_search_limit == 10
        assert settings.case_sensitive_search is True

    def test_unknown_env_falls_back(self):
        settings = Settings(_env_file=None, app_env="Moon")
        assert settings.app_env == "development"
        assert settings.is_development

    def test_env_normalized(self):
        settings = Settings(_env_file=None, app_env=" Production ")
        assert settings.is_production

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("NAME_SEARCH_LIMIT", "3")
        monkeypatch.setenv("CASE_SENSITIVE_SEARCH", "false")
        settings = Settings(_env_file=None)
        assert settings.name_search_limit == 3
        assert settings.case_sensitive_search is False

    def test_invalid_cors_origins(self):
        settings = Settings(_env_file=None, cors_origins="not json")
        assert settings.cors_origins_list == ["*"]
