"""Configuration management using pydantic-settings."""
from pathlib import Path
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    # Google Sheets Configuration
    google_spreadsheet_id: str = ""
    google_service_account_json: SecretStr = SecretStr("")
    google_service_account_file: Optional[Path] = None

    @property
    def has_google_credentials(self) -> bool:
        """Check if a spreadsheet ID and some form of credentials are configured."""
        return bool(
            self.google_spreadsheet_id
            and (
                self.google_service_account_json.get_secret_value()
                or self.google_service_account_file
            )
        )

    @property
    def google_credentials_bytes(self) -> Optional[bytes]:
        """Raw service account JSON key.

        Inline JSON takes precedence over the key file.

        Returns:
            The key as bytes, or None if neither source is configured.
        """
        json_str = self.google_service_account_json.get_secret_value()
        if json_str:
            return json_str.encode("utf-8")
        if self.google_service_account_file:
            return self.google_service_account_file.read_bytes()
        return None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
