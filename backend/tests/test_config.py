"""
Tests for config.py - environment-driven settings.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings, DEFAULT_CORS_ORIGINS

ENV_VARS = ["SNAKE_GRID_SIZE", "CORS_ALLOWED_ORIGINS", "FLASK_DEBUG", "LOG_LEVEL", "SNAKE_TICK_DELAY"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # empty .env so a developer's local file is never picked up
    dotenv = tmp_path / ".env"
    dotenv.write_text("")
    return str(dotenv)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, clean_env):
        settings = load_settings(clean_env)
        assert settings.grid_size == 20
        assert settings.cors_allowed_origins == DEFAULT_CORS_ORIGINS
        assert settings.flask_debug is False
        assert settings.log_level == "INFO"
        assert settings.tick_delay == 0.0

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "12")
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example ,")
        monkeypatch.setenv("FLASK_DEBUG", "1")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SNAKE_TICK_DELAY", "0.3")

        settings = load_settings(clean_env)
        assert settings.grid_size == 12
        assert settings.cors_allowed_origins == ["https://a.example", "https://b.example"]
        assert settings.flask_debug is True
        assert settings.log_level == "DEBUG"
        assert settings.tick_delay == 0.3

    def test_reads_dotenv_file(self, clean_env, monkeypatch):
        with open(clean_env, "w") as f:
            f.write("SNAKE_GRID_SIZE=7\n")
        try:
            settings = load_settings(clean_env)
            assert settings.grid_size == 7
        finally:
            # load_dotenv writes into os.environ
            os.environ.pop("SNAKE_GRID_SIZE", None)

    def test_invalid_grid_size(self, clean_env, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "big")
        with pytest.raises(ValueError, match="SNAKE_GRID_SIZE"):
            load_settings(clean_env)

    def test_non_positive_grid_size(self, clean_env, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "0")
        with pytest.raises(ValueError):
            load_settings(clean_env)

    def test_grid_size_above_limit(self, clean_env, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "101")
        with pytest.raises(ValueError, match="at most 100"):
            load_settings(clean_env)

    def test_invalid_tick_delay(self, clean_env, monkeypatch):
        monkeypatch.setenv("SNAKE_TICK_DELAY", "soon")
        with pytest.raises(ValueError, match="SNAKE_TICK_DELAY"):
            load_settings(clean_env)
