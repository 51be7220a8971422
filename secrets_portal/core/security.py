# File: secrets_portal/core/security.py

"""
Password hashing helpers.

bcrypt embeds a fresh random salt and the cost factor in every hash, so
verification only needs the plaintext and the stored string. Stored hashes
are never decrypted or compared as plain text.

bcrypt only reads the first 72 bytes of its input, so passwords are first
reduced to a fixed-size SHA-256 digest (base64, 44 bytes). Every byte of
the password then counts, whatever its length.
"""

import base64
import hashlib
from typing import Optional

import bcrypt

from secrets_portal.core.config import settings


def _prehash(plain: str) -> bytes:
    digest = hashlib.sha256(plain.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with bcrypt.

    `rounds` defaults to the configured cost factor (10 unless overridden).
    """
    salt = bcrypt.gensalt(rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_prehash(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    One-way compare of a plaintext password against a stored bcrypt hash.

    Returns False on mismatch. A malformed hash raises ValueError so callers
    can tell corrupt data apart from a wrong password.
    """
    return bcrypt.checkpw(_prehash(plain), hashed.encode("utf-8"))
