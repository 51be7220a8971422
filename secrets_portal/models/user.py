# File: secrets_portal/models/user.py

"""
User model.

One row per registered email. Rows are only ever inserted; there is no
profile edit or password reset.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from secrets_portal.models.base import Base

EMAIL_MAX_LENGTH = 255


class User(Base):
    __tablename__ = "users"

    # Exact match, case-sensitive as stored; the primary key enforces uniqueness
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), primary_key=True)

    # bcrypt hash text, e.g. "$2b$10$..."; column keeps the legacy name
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(email={self.email!r})"
