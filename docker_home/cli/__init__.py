"""Command line interface for Docker Home."""
