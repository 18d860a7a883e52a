"""SQLAlchemy declarative base for warden models.

warden_accounts reuses this base so every table shares one metadata and
one ``create_all`` call creates the full schema.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for warden models."""
