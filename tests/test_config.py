# File: tests/test_config.py

"""Unit tests for environment-driven settings."""

from wallframe.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch) -> None:
        for name in ("LOG_LEVEL", "CORS_ORIGINS", "HOST", "PORT", "RELOAD"):
            monkeypatch.delenv(f"WALLFRAME_{name}", raising=False)

        settings = Settings.from_env()
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["*"]
        assert settings.port == 8000
        assert settings.reload is False

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("WALLFRAME_LOG_LEVEL", "debug")
        monkeypatch.setenv("WALLFRAME_CORS_ORIGINS", "http://localhost:5173, https://example.com,")
        monkeypatch.setenv("WALLFRAME_PORT", "9000")
        monkeypatch.setenv("WALLFRAME_RELOAD", "True")

        settings = Settings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://localhost:5173", "https://example.com"]
        assert settings.port == 9000
        assert settings.reload is True
