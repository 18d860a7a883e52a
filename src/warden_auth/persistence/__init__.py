"""Persistence implementations for warden_auth.

Usage:
    from warden_auth.persistence.sqlalchemy import (
        IssuedTokenRepositorySQLAlchemy,
        AuthBase,
    )
"""
