"""Persistence: SQLAlchemy engine/session, ORM models and repositories."""
