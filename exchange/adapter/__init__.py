"""Adapters for external services (identity provider, email)."""
