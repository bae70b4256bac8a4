"""Runtime configuration for recordkeep."""
