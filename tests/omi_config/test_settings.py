"""Tests for settings loading and env-file discovery."""

import pytest
from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from omi_config import settings as settings_module
from omi_config.settings import Settings


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": SecretStr("secret"),
        "postgres_password": SecretStr("pw"),
    }
    values.update(overrides)
    return Settings(**values)


class TestEnvFileDiscovery:
    def test_explicit_env_file_wins(self, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("OMI_ENV_FILE", str(env_file))

        assert settings_module._resolve_env_file_path() == env_file

    def test_missing_explicit_file_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OMI_ENV_FILE", str(tmp_path / "absent.env"))
        monkeypatch.setattr(settings_module, "_REPO_ROOT", tmp_path)

        assert settings_module._resolve_env_file_path() is None

    def test_dev_file_preferred_over_production_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OMI_ENV_FILE", raising=False)
        monkeypatch.setattr(settings_module, "_REPO_ROOT", tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / ".env").write_text("")
        (tmp_path / "config" / ".env.dev").write_text("")

        assert settings_module._resolve_env_file_path() == (
            tmp_path / "config" / ".env.dev"
        )


class TestSettingsValues:
    def test_database_url_built_from_parts(self):
        settings = _settings(
            database_url_override=None,
            postgres_user="postgres",
            postgres_host="db",
            postgres_port=5432,
            postgres_db="omi",
        )

        assert settings.database_url == "postgresql+asyncpg://postgres:pw@db:5432/omi"

    def test_override_url_used_verbatim(self):
        settings = _settings(database_url_override="sqlite+aiosqlite:///./omi.db")

        assert settings.database_url == "sqlite+aiosqlite:///./omi.db"

    def test_cors_origins_split(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_reset_url_trailing_slash_dropped(self):
        settings = _settings(reset_password_url="https://omi.test/reset/")

        assert settings.reset_password_url == "https://omi.test/reset"

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_hash_rounds_bounded(self, rounds):
        with pytest.raises(PydanticValidationError):
            _settings(password_hash_rounds=rounds)

    def test_is_production(self):
        assert _settings(environment="production").is_production
        assert not _settings(environment="test").is_production
