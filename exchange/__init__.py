"""Gift exchange accounts: registration and session synchronization."""
