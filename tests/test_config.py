"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from auditd_parser.config import (
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_MAX_LOG_ENTRIES,
    Settings,
    get_settings,
)

CUSTOM_LENGTH = 4096
CUSTOM_INDENT = 4


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test away from any local ``.env`` and stray variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("MAX_LINE_LENGTH", "RAW", "INDENT", "MAX_LOG_ENTRIES"):
        monkeypatch.delenv(f"AUDITD_PARSER_{name}", raising=False)
    get_settings.cache_clear()


class TestSettings:
    """Verify defaults and overrides."""

    def test_defaults(self) -> None:
        """With no environment the defaults apply."""
        settings = Settings()
        assert settings.max_line_length == DEFAULT_MAX_LINE_LENGTH
        assert settings.raw is False
        assert settings.max_log_entries == DEFAULT_MAX_LOG_ENTRIES
        assert settings.indent == 2  # noqa: PLR2004

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Prefixed variables override the defaults."""
        monkeypatch.setenv("AUDITD_PARSER_MAX_LINE_LENGTH", str(CUSTOM_LENGTH))
        monkeypatch.setenv("AUDITD_PARSER_RAW", "true")
        settings = Settings()
        assert settings.max_line_length == CUSTOM_LENGTH
        assert settings.raw is True

    def test_dotenv_file(self, tmp_path: Path) -> None:
        """A ``.env`` file in the working directory is read."""
        (tmp_path / ".env").write_text(f"AUDITD_PARSER_INDENT={CUSTOM_INDENT}\n")
        assert Settings().indent == CUSTOM_INDENT

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A non-positive line limit is rejected."""
        monkeypatch.setenv("AUDITD_PARSER_MAX_LINE_LENGTH", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Verify the cached accessor."""

    def test_cached(self) -> None:
        """The same instance is returned until the cache is cleared."""
        assert get_settings() is get_settings()
