"""HTTP API for Docker Home."""

from .app import create_app

__all__ = ['create_app']
