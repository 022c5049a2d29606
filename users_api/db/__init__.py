"""Database metadata: SQLAlchemy declarative base."""
