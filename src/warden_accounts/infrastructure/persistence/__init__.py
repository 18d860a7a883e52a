"""Persistence implementations for warden_accounts."""
