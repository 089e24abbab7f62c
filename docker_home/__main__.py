"""Allow running Docker Home with ``python -m docker_home``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
