"""Domain layer for recordkeep application."""
