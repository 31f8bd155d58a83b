import pytest
from pydantic import ValidationError

from httpulse.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_http_timeout(self) -> None:
        s = Settings()
        assert s.http_timeout_seconds == 30.0

    def test_default_cookie_jar_path(self) -> None:
        s = Settings()
        assert s.cookie_jar_path == "cookies.txt"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"

    def test_loads_http_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
        s = Settings()
        assert s.http_timeout_seconds == 2.5

    def test_loads_cookie_jar_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COOKIE_JAR_PATH", "/var/lib/httpulse/cookies.txt")
        s = Settings()
        assert s.cookie_jar_path == "/var/lib/httpulse/cookies.txt"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
