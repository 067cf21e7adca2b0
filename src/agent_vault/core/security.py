"""One-way hashing for system codes (passwords, PINs, access codes).

Uses passlib with bcrypt. Each digest carries its own random salt and the
configured work factor, so verification needs nothing but the digest.
"""

from loguru import logger
from passlib.context import CryptContext

DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4
MAX_ROUNDS = 31


def make_code_context(rounds: int = DEFAULT_ROUNDS) -> CryptContext:
    """Build a bcrypt hashing context with a fixed work factor.

    Args:
        rounds: bcrypt cost factor (log2 of the iteration count).

    Returns:
        A configured CryptContext.

    Raises:
        ValueError: If rounds is outside bcrypt's supported range.
    """
    if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
        msg = f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}"
        raise ValueError(msg)
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_code(context: CryptContext, code: str) -> str:
    """Hash a plaintext system code.

    Args:
        context: The bcrypt context to hash with.
        code: The plaintext code to hash.

    Returns:
        The bcrypt digest string.

    Raises:
        PasswordValueError: If bcrypt cannot accept the code (NUL bytes, or
            longer than passlib's 4096-character limit).
    """
    return context.hash(code)


def verify_code(context: CryptContext, code: str, digest: str) -> bool:
    """Verify a plaintext system code against a bcrypt digest.

    Args:
        context: The bcrypt context to verify with.
        code: The plaintext code to verify.
        digest: The stored bcrypt digest.

    Returns:
        True if the code matches, False otherwise (including when ``digest``
        is not a well-formed bcrypt hash or ``code`` is not an acceptable
        bcrypt secret).
    """
    if not context.identify(digest):
        return False
    try:
        return context.verify(code, digest)
    except ValueError as e:
        logger.warning(f"System code verification rejected its input: {type(e).__name__}")
        return False
