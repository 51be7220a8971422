# File: secrets_portal/api/deps.py

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from secrets_portal.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    One credential-store session per request, closed when the response
    is sent. Tests swap it out through app.dependency_overrides[get_db].
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Route parameter shorthand: `db: DbSession`
DbSession = Annotated[Session, Depends(get_db)]
