"""Shared test fixtures for settings, key material, and the protection engine."""

import pytest

from agent_vault.core.config import Settings
from agent_vault.lib.protection import FieldProtectionEngine, KeyMaterial

# Low bcrypt cost keeps system-code tests fast
TEST_ROUNDS = 4


@pytest.fixture
def settings() -> Settings:
    """Test application settings with fixed, non-production secrets."""
    return Settings(
        _env_file=None,
        encryption_key="0f1e2d3c4b5a69788796a5b4c3d2e1f000112233445566778899aabbccddeeff",
        hash_pepper="test-pepper-not-for-production",
        system_code_rounds=TEST_ROUNDS,
    )


@pytest.fixture
def key_material(settings: Settings) -> KeyMaterial:
    """Key material built from the test settings."""
    return KeyMaterial.from_hex(settings.encryption_key, settings.hash_pepper)


@pytest.fixture
def engine(key_material: KeyMaterial) -> FieldProtectionEngine:
    """Protection engine over the test key material."""
    return FieldProtectionEngine(key_material, system_code_rounds=TEST_ROUNDS)


@pytest.fixture
def other_engine() -> FieldProtectionEngine:
    """Protection engine with a different key and pepper."""
    keys = KeyMaterial.from_hex("ab" * 32, "another-pepper-for-tests")
    return FieldProtectionEngine(keys, system_code_rounds=TEST_ROUNDS)
