"""
Configuration management for the Melody Magic server.

Loads settings from .env via pydantic-settings. Everything here is read once
at process start; the PayPal pieces are frozen into a PayPalConfig that is
handed to the verification service explicitly.
"""
import logging
from dataclasses import dataclass
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PAYPAL_LIVE_BASE = "https://api-m.paypal.com"
PAYPAL_SANDBOX_BASE = "https://api-m.sandbox.paypal.com"


@dataclass(frozen=True)
class PayPalConfig:
    """Immutable view of everything the PayPal calls need."""
    base_url: str
    client_id: str
    client_secret: str
    timeout_seconds: float = 30.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Server ──────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5051
    log_level: str = "INFO"

    # ── PayPal ──────────────────────────────────────────────────────
    paypal_mode: str = "sandbox"          # "live" or anything else for sandbox
    paypal_client_id: str = ""
    paypal_secret: str = ""
    paypal_timeout_seconds: float = 30.0

    # ── HTTP surface ────────────────────────────────────────────────
    cors_origins: str = "*"
    max_body_bytes: int = 2 * 1024 * 1024  # 2 MB

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_live(self) -> bool:
        return self.paypal_mode.strip().lower() == "live"

    @property
    def paypal_base_url(self) -> str:
        """PayPal REST base URL for the configured mode."""
        return PAYPAL_LIVE_BASE if self.is_live else PAYPAL_SANDBOX_BASE

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def paypal_config(self) -> PayPalConfig:
        return PayPalConfig(
            base_url=self.paypal_base_url,
            client_id=self.paypal_client_id,
            client_secret=self.paypal_secret,
            timeout_seconds=self.paypal_timeout_seconds,
        )

    def validate_startup_settings(self):
        """
        Log configuration problems at startup. Never blocks boot.

        Missing credentials simply fail upstream at the first token exchange.
        Returns the list of problems found.
        """
        problems = []
        if not self.paypal_client_id or not self.paypal_secret:
            problems.append("PAYPAL_CLIENT_ID / PAYPAL_SECRET not set")
        if "*" in self.cors_origins:
            problems.append("CORS_ORIGINS contains '*' (open access)")

        mode = "live" if self.is_live else "sandbox"
        for p in problems:
            logger.warning(f"⚠️  [{mode}] {p}")
        if not problems:
            logger.info(f"✅ PayPal {mode} settings validated")
        return problems


# Global settings instance
settings = Settings()
