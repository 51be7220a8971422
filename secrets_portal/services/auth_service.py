# File: secrets_portal/services/auth_service.py

"""
Authentication service.

Registration and login against the credential store. Both operations
return an AuthOutcome instead of raising, so callers have to handle
every case explicitly:
  - register_user:     REGISTERED | ALREADY_REGISTERED | INTERNAL_ERROR
  - authenticate_user: AUTHENTICATED | INCORRECT_PASSWORD | USER_NOT_FOUND | INTERNAL_ERROR

Internal errors are logged here. Their detail never reaches the outcome.
"""

import logging
from enum import Enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from secrets_portal.core.security import hash_password, verify_password
from secrets_portal.models.user import User

logger = logging.getLogger(__name__)


class AuthOutcome(str, Enum):
    REGISTERED = "registered"
    ALREADY_REGISTERED = "already_registered"
    AUTHENTICATED = "authenticated"
    INCORRECT_PASSWORD = "incorrect_password"
    USER_NOT_FOUND = "user_not_found"
    INTERNAL_ERROR = "internal_error"

    @property
    def is_success(self) -> bool:
        """True when the visitor may see the protected page."""
        return self in (AuthOutcome.REGISTERED, AuthOutcome.AUTHENTICATED)

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    AuthOutcome.REGISTERED: "Registration successful.",
    AuthOutcome.ALREADY_REGISTERED: "Email already exists. Try logging in.",
    AuthOutcome.AUTHENTICATED: "Login successful.",
    AuthOutcome.INCORRECT_PASSWORD: "Incorrect Password",
    AuthOutcome.USER_NOT_FOUND: "User not found",
    AuthOutcome.INTERNAL_ERROR: "An error occurred. Please try again later.",
}


def register_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> AuthOutcome:
    """
    Create a user record for a new email.

    The password is hashed before the insert is issued. A unique violation
    on commit means another request registered the same email first, which
    is reported as ALREADY_REGISTERED.
    """
    try:
        if db.get(User, email) is not None:
            return AuthOutcome.ALREADY_REGISTERED
    except SQLAlchemyError:
        logger.exception("User lookup failed during registration")
        return AuthOutcome.INTERNAL_ERROR

    try:
        password_hash = hash_password(password)
    except (TypeError, ValueError):
        logger.exception("Password hashing failed during registration")
        return AuthOutcome.INTERNAL_ERROR

    db.add(User(email=email, password_hash=password_hash))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Concurrent registration detected; email already taken")
        return AuthOutcome.ALREADY_REGISTERED
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to store new user")
        return AuthOutcome.INTERNAL_ERROR

    logger.info("Registered new user")
    return AuthOutcome.REGISTERED


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> AuthOutcome:
    """
    Check an email/password pair against the stored hash.
    """
    try:
        user = db.get(User, email)
    except SQLAlchemyError:
        logger.exception("User lookup failed during login")
        return AuthOutcome.INTERNAL_ERROR

    if user is None:
        return AuthOutcome.USER_NOT_FOUND

    try:
        matched = verify_password(password, user.password_hash)
    except (TypeError, ValueError):
        # Stored value is not a bcrypt hash
        logger.exception("Password verification failed for stored hash")
        return AuthOutcome.INTERNAL_ERROR

    if matched:
        return AuthOutcome.AUTHENTICATED
    return AuthOutcome.INCORRECT_PASSWORD
