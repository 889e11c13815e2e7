"""
Tests for environment settings and SpreadsheetConfig.

Tests cover:
1. Settings loaded from environment variables
2. Credential source precedence
3. Building a SpreadsheetConfig from settings
"""
import json

import pytest
from unittest.mock import patch

from gsheet_transfer.config import Settings
from gsheet_transfer.models.spreadsheet import SpreadsheetConfig
from gsheet_transfer.services.google.exceptions import GoogleSheetsAuthError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env file."""
    for name in (
        "GOOGLE_SPREADSHEET_ID",
        "GOOGLE_SERVICE_ACCOUNT_JSON",
        "GOOGLE_SERVICE_ACCOUNT_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Tests for Settings."""

    def test_defaults_have_no_credentials(self):
        """Nothing configured means no credentials."""
        settings = Settings()
        assert settings.google_spreadsheet_id == ""
        assert settings.has_google_credentials is False
        assert settings.google_credentials_bytes is None

    def test_reads_environment(self, monkeypatch):
        """Values come from environment variables."""
        monkeypatch.setenv("GOOGLE_SPREADSHEET_ID", "abc123")
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", '{"type": "service_account"}')

        settings = Settings()

        assert settings.google_spreadsheet_id == "abc123"
        assert settings.has_google_credentials is True
        assert settings.google_credentials_bytes == b'{"type": "service_account"}'

    def test_json_secret_not_in_repr(self, monkeypatch):
        """The inline key is masked."""
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", '{"private_key": "secret"}')
        assert "secret" not in repr(Settings())

    def test_reads_key_file(self, tmp_path):
        """A key file is used when no inline JSON is set."""
        key_file = tmp_path / "key.json"
        key_file.write_bytes(b'{"type": "service_account"}')

        settings = Settings(google_spreadsheet_id="abc", google_service_account_file=key_file)

        assert settings.has_google_credentials is True
        assert settings.google_credentials_bytes == b'{"type": "service_account"}'

    def test_inline_json_wins_over_file(self, tmp_path):
        """Inline JSON takes precedence over the key file."""
        key_file = tmp_path / "key.json"
        key_file.write_bytes(b'{"from": "file"}')

        settings = Settings(
            google_service_account_json='{"from": "env"}',
            google_service_account_file=key_file,
        )

        assert json.loads(settings.google_credentials_bytes) == {"from": "env"}

    def test_dotenv_file(self, tmp_path):
        """Settings are read from .env in the working directory."""
        (tmp_path / ".env").write_text("GOOGLE_SPREADSHEET_ID=from-dotenv\nUNRELATED=1\n")
        assert Settings().google_spreadsheet_id == "from-dotenv"


class TestSpreadsheetConfig:
    """Tests for SpreadsheetConfig."""

    def test_client_starts_unset(self, service_account_json):
        """A new config has no client."""
        config = SpreadsheetConfig(google_credentials=service_account_json, spreadsheet_id="abc")
        assert config.client is None

    def test_repr_shows_only_spreadsheet_id(self, service_account_json, mock_service):
        """Credentials, client and lock are left out of the repr."""
        config = SpreadsheetConfig(
            google_credentials=service_account_json, spreadsheet_id="abc", client=mock_service
        )
        assert repr(config) == "SpreadsheetConfig(spreadsheet_id='abc')"

    def test_from_settings(self):
        """Settings with credentials produce a config."""
        settings = Settings(
            google_spreadsheet_id="abc123",
            google_service_account_json='{"type": "service_account"}',
        )

        config = SpreadsheetConfig.from_settings(settings)

        assert config.spreadsheet_id == "abc123"
        assert config.google_credentials == b'{"type": "service_account"}'
        assert config.client is None

    def test_from_settings_without_credentials(self):
        """Missing credentials raise an auth error."""
        with pytest.raises(GoogleSheetsAuthError, match="not configured"):
            SpreadsheetConfig.from_settings(Settings(google_spreadsheet_id="abc123"))

    def test_from_settings_missing_key_file(self, tmp_path):
        """An unreadable key file raises an auth error, not FileNotFoundError."""
        settings = Settings(
            google_spreadsheet_id="abc123",
            google_service_account_file=tmp_path / "missing.json",
        )

        with pytest.raises(GoogleSheetsAuthError, match="Cannot read service account key file") as exc_info:
            SpreadsheetConfig.from_settings(settings)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.details["path"].endswith("missing.json")

    def test_from_settings_defaults_to_global_settings(self):
        """Without an argument the package-wide settings are used."""
        settings = Settings(
            google_spreadsheet_id="global-id",
            google_service_account_json='{"type": "service_account"}',
        )

        with patch("gsheet_transfer.config.settings", settings):
            config = SpreadsheetConfig.from_settings()

        assert config.spreadsheet_id == "global-id"
        assert config.google_credentials == b'{"type": "service_account"}'

    def test_from_settings_default_unconfigured(self):
        """Unconfigured global settings raise an auth error."""
        with patch("gsheet_transfer.config.settings", Settings()):
            with pytest.raises(GoogleSheetsAuthError, match="not configured"):
                SpreadsheetConfig.from_settings()

    def test_from_settings_without_spreadsheet_id(self):
        """Missing spreadsheet ID raises an auth error."""
        settings = Settings(google_service_account_json='{"type": "service_account"}')
        with pytest.raises(GoogleSheetsAuthError):
            SpreadsheetConfig.from_settings(settings)
