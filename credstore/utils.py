"""Password hashing primitive built on bcrypt.

The salt is kept next to the digest so that a stored record can be checked
by hashing the candidate password with the same salt again.
"""
from __future__ import annotations

import hmac

import bcrypt

from .domain.errors import PasswordPolicyError

DEFAULT_ROUNDS = 12

# bcrypt only reads the first 72 bytes of its input and the library refuses longer passwords
MAX_PASSWORD_BYTES = 72


def gen_salt(rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a fresh bcrypt salt string (128 random bits plus the cost factor)."""
    return bcrypt.gensalt(rounds=rounds).decode("utf-8")


def get_password_hash(password: str, salt: str) -> str:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        raise PasswordPolicyError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(password_bytes, salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, salt: str, hashed_password: str) -> bool:
    try:
        candidate = get_password_hash(plain_password, salt)
    except PasswordPolicyError:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), hashed_password.encode("utf-8"))
