"""Unit tests for core configuration module."""

import pytest
from pydantic import ValidationError

from agent_vault.core.config import Settings, build_engine, build_key_material
from agent_vault.core.sensitivity import ProtectionTier
from agent_vault.lib.protection import ConfigurationError

KEY_HEX = "ab" * 32
PEPPER = "test-pepper-not-for-production"


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings load from environment variables."""
        monkeypatch.setenv("ENCRYPTION_KEY", KEY_HEX)
        monkeypatch.setenv("HASH_PEPPER", PEPPER)
        monkeypatch.setenv("SYSTEM_CODE_ROUNDS", "10")
        settings = Settings(_env_file=None)
        assert settings.encryption_key == KEY_HEX
        assert settings.hash_pepper == PEPPER
        assert settings.system_code_rounds == 10
        assert settings.protection_configured

    def test_settings_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default values are applied correctly."""
        for name in ("ENCRYPTION_KEY", "HASH_PEPPER", "SYSTEM_CODE_ROUNDS", "LOG_LEVEL", "LOG_DIR", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.encryption_key == ""
        assert settings.hash_pepper == ""
        assert settings.system_code_rounds == 12
        assert settings.log_level == "INFO"
        assert settings.log_dir is None
        assert settings.log_json is False
        assert settings.environment == "production"
        assert not settings.protection_configured

    def test_encryption_key_normalized(self) -> None:
        """Whitespace is stripped and hex is lower-cased."""
        settings = Settings(_env_file=None, encryption_key=f"  {KEY_HEX.upper()}\n")
        assert settings.encryption_key == KEY_HEX

    def test_malformed_key_loads(self) -> None:
        """Settings only normalize the key; format errors surface when building the engine."""
        settings = Settings(_env_file=None, encryption_key="zz" * 32)
        assert settings.encryption_key == "zz" * 32

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_system_code_rounds_bounds(self, monkeypatch: pytest.MonkeyPatch, rounds: str) -> None:
        """bcrypt rounds outside 4..31 are rejected."""
        monkeypatch.setenv("SYSTEM_CODE_ROUNDS", rounds)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestBuildEngine:
    """Tests for constructing key material and the engine from settings."""

    def test_build_key_material(self, settings: Settings) -> None:
        keys = build_key_material(settings)
        assert keys.master_key == bytes.fromhex(settings.encryption_key)
        assert keys.pepper == settings.hash_pepper.encode()

    def test_build_engine(self, settings: Settings) -> None:
        """An engine built from settings round-trips values."""
        engine = build_engine(settings)
        assert engine.system_code_rounds == settings.system_code_rounds
        protected = engine.protect("Ikeja", ProtectionTier.BASIC)
        assert engine.unprotect(protected, ProtectionTier.BASIC) == "Ikeja"

    def test_missing_key_is_fatal(self) -> None:
        """Without a key the engine cannot be built."""
        settings = Settings(_env_file=None, encryption_key="", hash_pepper=PEPPER)
        with pytest.raises(ConfigurationError, match="Encryption key"):
            build_engine(settings)

    def test_missing_pepper_is_fatal(self) -> None:
        """Without a pepper the engine cannot be built."""
        settings = Settings(_env_file=None, encryption_key=KEY_HEX, hash_pepper="")
        with pytest.raises(ConfigurationError, match="Hash pepper"):
            build_engine(settings)

    @pytest.mark.parametrize(
        ("key", "message"),
        [("zz" * 32, "hex encoded"), ("ab" * 16, "32 bytes"), ("ab" * 33, "32 bytes"), ("ab cd" * 16, "hex encoded")],
    )
    def test_malformed_key_is_configuration_error(self, key: str, message: str) -> None:
        """Non-hex or wrong-length keys fail as ConfigurationError."""
        settings = Settings(_env_file=None, encryption_key=key, hash_pepper=PEPPER)
        with pytest.raises(ConfigurationError, match=message):
            build_engine(settings)

    def test_short_pepper_is_configuration_error(self) -> None:
        """A pepper under 16 characters fails as ConfigurationError."""
        settings = Settings(_env_file=None, encryption_key=KEY_HEX, hash_pepper="short")
        with pytest.raises(ConfigurationError, match="at least 16"):
            build_engine(settings)
