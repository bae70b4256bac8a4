"""CLI layer for recordkeep."""
