"""Docker Home CLI commands."""
