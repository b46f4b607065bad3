"""Database engine and session configuration."""
