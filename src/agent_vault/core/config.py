"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor
principles. Secrets are read once at process start and turned into the
immutable key material the protection engine is constructed with.
"""

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agent_vault.core.security import DEFAULT_ROUNDS, MAX_ROUNDS, MIN_ROUNDS
from agent_vault.lib.protection.engine import FieldProtectionEngine
from agent_vault.lib.protection.errors import ConfigurationError
from agent_vault.lib.protection.keys import KEY_SIZE, MIN_PEPPER_LENGTH, KeyMaterial


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Field protection secrets
    encryption_key: str = Field(
        default="",
        description=f"AES-256 master key as {KEY_SIZE * 2} hex characters",
    )
    hash_pepper: str = Field(
        default="",
        description=f"Secret pepper for search fingerprints (minimum {MIN_PEPPER_LENGTH} characters)",
    )
    system_code_rounds: int = Field(
        default=DEFAULT_ROUNDS,
        description="bcrypt work factor for passwords, PINs and access codes",
        ge=MIN_ROUNDS,
        le=MAX_ROUNDS,
    )

    # Format checks belong to KeyMaterial.from_hex, which raises ConfigurationError
    @field_validator("encryption_key")
    @classmethod
    def normalize_encryption_key(cls, v: str) -> str:
        return v.strip().lower()

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit stderr logs as JSON lines",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    @property
    def protection_configured(self) -> bool:
        """Whether both field protection secrets are present."""
        return bool(self.encryption_key and self.hash_pepper)


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()


def build_key_material(settings: Settings) -> KeyMaterial:
    """Build the immutable key material from settings.

    Args:
        settings: Loaded application settings.

    Returns:
        The validated KeyMaterial.

    Raises:
        ConfigurationError: If the key or pepper is missing or invalid.
    """
    return KeyMaterial.from_hex(settings.encryption_key, settings.hash_pepper)


def build_engine(settings: Settings) -> FieldProtectionEngine:
    """Construct the field protection engine once at process start.

    Args:
        settings: Loaded application settings.

    Returns:
        A ready FieldProtectionEngine.

    Raises:
        ConfigurationError: If the key material is missing or invalid.
    """
    try:
        keys = build_key_material(settings)
    except ConfigurationError as e:
        logger.error(f"Field protection is not configured: {e}")
        raise
    engine = FieldProtectionEngine(keys, system_code_rounds=settings.system_code_rounds)
    logger.info(f"Field protection engine ready (key {engine.key_id}, bcrypt rounds {settings.system_code_rounds})")
    return engine
