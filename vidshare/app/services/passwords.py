"""Password hashing, password policy and reset-token generation."""

import hashlib
import secrets
from functools import lru_cache
from typing import Tuple

import bcrypt

from vidshare.libs.result import Error, Result, Return

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=8)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def check_dummy_password(password: str, rounds: int) -> None:
    """Spend the same bcrypt time as a real check when no account matched"""
    try:
        bcrypt.checkpw(password.encode("utf-8"), _dummy_hash(rounds))
    except ValueError:
        pass


def validate_password(password: str, min_length: int) -> Result[None]:
    """
    Validate password against the length policy.

    Returns:
        Result with None if valid, or Error(WEAK_PASSWORD | PASSWORD_TOO_LONG)
    """
    if len(password) < min_length:
        return Return.err(
            Error(
                "WEAK_PASSWORD",
                f"Password must be at least {min_length} characters long",
            )
        )
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return Return.err(
            Error(
                "PASSWORD_TOO_LONG",
                f"Password must be at most {BCRYPT_MAX_BYTES} bytes long",
            )
        )
    return Return.ok(None)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_reset_token() -> Tuple[str, str]:
    """
    Generate a password reset token.

    Returns:
        (plain token for delivery, SHA-256 digest for storage)
    """
    token = secrets.token_hex(32)
    return token, hash_reset_token(token)
