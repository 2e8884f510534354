"""Database models, connection management and repositories."""
