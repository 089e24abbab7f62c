"""Core functionality for Docker Home."""
