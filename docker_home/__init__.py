"""Docker Home - Curated overview of the Docker containers on a host."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
