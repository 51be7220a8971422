# File: secrets_portal/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for the credential store models.

    Importing a model module registers its table on Base.metadata.
    """
    pass
