"""Database models, connection management and operations."""
