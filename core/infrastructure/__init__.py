"""Infrastructure layer - adapters, database and logging."""
