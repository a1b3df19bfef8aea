"""
Application configuration loaded from environment variables.
"""
import base64
import binascii
import json
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # HTTP server
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # MongoDB
    mongo_db_uri: str
    db_name: str

    # Identity provider
    identity_provider: Literal["firebase", "jwt"] = "firebase"
    firebase_service_key: Optional[str] = None  # base64-encoded service account JSON
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"

    # Logging
    log_level: str = "INFO"

    @model_validator(mode="after")
    def check_identity_credentials(self) -> "Settings":
        if self.identity_provider == "firebase" and not self.firebase_service_key:
            raise ValueError(
                "Missing FIREBASE_SERVICE_KEY env var "
                "(base64-encoded service account JSON)."
            )
        if self.identity_provider == "jwt" and not self.jwt_secret_key:
            raise ValueError("Missing JWT_SECRET_KEY env var.")
        return self

    def service_account_info(self) -> dict[str, Any]:
        """
        Decode the Firebase service account bundle.

        Raises:
            ValueError: If the value is not base64-encoded JSON
        """
        if not self.firebase_service_key:
            raise ValueError("FIREBASE_SERVICE_KEY is not set")
        try:
            raw = base64.b64decode(self.firebase_service_key, validate=True)
            return json.loads(raw.decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"FIREBASE_SERVICE_KEY is not valid base64 JSON: {e}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
