"""Unit tests for the AES composite format helpers."""

import pytest

from agent_vault.lib.protection import IntegrityError, MalformedInputError
from agent_vault.lib.protection.ciphers import decrypt_cbc, decrypt_gcm, encrypt_cbc, encrypt_gcm

KEY = bytes(range(32))
OTHER_KEY = bytes(range(1, 33))


class TestGcm:
    """Tests for the authenticated cipher."""

    def test_round_trip(self) -> None:
        assert decrypt_gcm(KEY, encrypt_gcm(KEY, "12345678901")) == "12345678901"

    def test_output_is_lowercase_hex(self) -> None:
        """Every segment is lowercase hex."""
        for segment in encrypt_gcm(KEY, "12345678901").split(":"):
            assert segment == segment.lower()
            bytes.fromhex(segment)

    def test_wrong_key(self) -> None:
        with pytest.raises(IntegrityError):
            decrypt_gcm(OTHER_KEY, encrypt_gcm(KEY, "12345678901"))

    def test_swapped_ciphertexts(self) -> None:
        """Splicing a tag onto another ciphertext fails authentication."""
        iv, tag, _ = encrypt_gcm(KEY, "12345678901").split(":")
        _, _, other_ciphertext = encrypt_gcm(KEY, "10987654321").split(":")
        with pytest.raises(IntegrityError):
            decrypt_gcm(KEY, f"{iv}:{tag}:{other_ciphertext}")

    def test_short_tag(self) -> None:
        iv, tag, ciphertext = encrypt_gcm(KEY, "12345678901").split(":")
        with pytest.raises(MalformedInputError, match="Auth tag"):
            decrypt_gcm(KEY, f"{iv}:{tag[:-2]}:{ciphertext}")

    def test_empty_segment(self) -> None:
        iv, tag, _ = encrypt_gcm(KEY, "12345678901").split(":")
        with pytest.raises(MalformedInputError):
            decrypt_gcm(KEY, f"{iv}:{tag}:")


class TestCbc:
    """Tests for the unauthenticated cipher."""

    def test_round_trip(self) -> None:
        assert decrypt_cbc(KEY, encrypt_cbc(KEY, "user@example.com")) == "user@example.com"

    def test_block_aligned_plaintext_gets_full_pad_block(self) -> None:
        """A 16-byte plaintext pads to two blocks."""
        _, ciphertext = encrypt_cbc(KEY, "a" * 16).split(":")
        assert len(bytes.fromhex(ciphertext)) == 32

    def test_wrong_key_does_not_return_plaintext(self) -> None:
        """Decrypting with another key fails or yields something else."""
        protected = encrypt_cbc(KEY, "user@example.com")
        try:
            result = decrypt_cbc(OTHER_KEY, protected)
        except MalformedInputError:
            return
        assert result != "user@example.com"
