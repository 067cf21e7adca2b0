"""AES primitives and the hex composite format for reversible tiers.

Highest tier: AES-256-GCM, stored as ``iv:tag:ciphertext``.
Strong and basic tiers: AES-256-CBC with PKCS7 padding, stored as ``iv:ciphertext``.
All segments are lowercase hex. A fresh random IV is drawn for every call.
"""

import os
import re

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from agent_vault.lib.protection.errors import IntegrityError, MalformedInputError

IV_SIZE = 16
TAG_SIZE = 16
BLOCK_SIZE = 16

SEPARATOR = ":"
_HEX_SEGMENT = re.compile(r"(?:[0-9a-f]{2})+")


def _split(value: str, expected: int) -> list[bytes]:
    """Split a composite value into exactly ``expected`` hex-decoded segments."""
    segments = value.split(SEPARATOR)
    if len(segments) != expected:
        msg = f"Expected {expected} segments, got {len(segments)}"
        raise MalformedInputError(msg)

    decoded = []
    for index, segment in enumerate(segments):
        if not _HEX_SEGMENT.fullmatch(segment):
            msg = f"Segment {index} is not lowercase hex"
            raise MalformedInputError(msg)
        decoded.append(bytes.fromhex(segment))
    return decoded


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = "Decrypted value is not valid UTF-8"
        raise MalformedInputError(msg) from e


def encrypt_gcm(key: bytes, plaintext: str) -> str:
    """Encrypt with AES-256-GCM and return ``iv:tag:ciphertext``."""
    iv = os.urandom(IV_SIZE)
    sealed = AESGCM(key).encrypt(iv, plaintext.encode("utf-8"), None)
    ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
    return SEPARATOR.join((iv.hex(), tag.hex(), ciphertext.hex()))


def decrypt_gcm(key: bytes, value: str) -> str:
    """Decrypt an ``iv:tag:ciphertext`` value produced by :func:`encrypt_gcm`.

    Raises:
        MalformedInputError: If the value is not a well-formed GCM composite.
        IntegrityError: If the authentication tag does not verify.
    """
    iv, tag, ciphertext = _split(value, 3)
    if len(iv) != IV_SIZE:
        msg = f"IV must be {IV_SIZE} bytes, got {len(iv)}"
        raise MalformedInputError(msg)
    if len(tag) != TAG_SIZE:
        msg = f"Auth tag must be {TAG_SIZE} bytes, got {len(tag)}"
        raise MalformedInputError(msg)

    try:
        plaintext = AESGCM(key).decrypt(iv, ciphertext + tag, None)
    except InvalidTag as e:
        msg = "Authentication tag verification failed"
        raise IntegrityError(msg) from e
    return _decode_text(plaintext)


def encrypt_cbc(key: bytes, plaintext: str) -> str:
    """Encrypt with AES-256-CBC and return ``iv:ciphertext``."""
    iv = os.urandom(IV_SIZE)
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return SEPARATOR.join((iv.hex(), ciphertext.hex()))


def decrypt_cbc(key: bytes, value: str) -> str:
    """Decrypt an ``iv:ciphertext`` value produced by :func:`encrypt_cbc`.

    CBC carries no authentication, so a wrong key or altered ciphertext is
    only detected when the padding or the UTF-8 decoding breaks.

    Raises:
        MalformedInputError: If the value cannot be parsed or decrypted.
    """
    iv, ciphertext = _split(value, 2)
    if len(iv) != IV_SIZE:
        msg = f"IV must be {IV_SIZE} bytes, got {len(iv)}"
        raise MalformedInputError(msg)
    if len(ciphertext) % BLOCK_SIZE:
        msg = f"Ciphertext length must be a multiple of {BLOCK_SIZE} bytes"
        raise MalformedInputError(msg)

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        msg = "Invalid padding; wrong key or corrupted ciphertext"
        raise MalformedInputError(msg) from e
    return _decode_text(plaintext)
