"""Unit tests for application settings"""
import pytest
from pydantic import ValidationError

from config import Settings


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings:

    def test_cors_origins_are_split(self):
        settings = make_settings(CORS_ORIGINS="http://a.test, http://b.test")
        assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_cors_wildcard(self):
        assert make_settings(CORS_ORIGINS="*").CORS_ORIGINS == ["*"]

    def test_invalid_debug_level(self):
        with pytest.raises(ValidationError):
            make_settings(DEBUG_LEVEL=7)

    def test_test_db_url_falls_back_to_db_url(self):
        settings = make_settings(DB_URL="mongodb://db:27017", TEST_DB_URL=None)
        assert settings.get_db_url(use_test=True) == "mongodb://db:27017"

    def test_test_db_selection(self):
        settings = make_settings(
            DB_URL="mongodb://db:27017",
            TEST_DB_URL="mongodb://test-db:27017",
            DB_NAME="blog_app",
            TEST_DB_NAME="blog_app_test",
        )
        assert settings.get_db_url(use_test=True) == "mongodb://test-db:27017"
        assert settings.get_db_url() == "mongodb://db:27017"
        assert settings.get_db_name(use_test=True) == "blog_app_test"
        assert settings.get_db_name() == "blog_app"

    def test_log_dir(self):
        assert make_settings().LOG_DIR == "logs"
        assert make_settings(LOG_DIR="/var/log/blog").LOG_DIR == "/var/log/blog"

    def test_is_production(self):
        assert make_settings(ENVIRONMENT="Production").is_production()
        assert not make_settings(ENVIRONMENT="test").is_production()
