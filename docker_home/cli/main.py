"""Main CLI entry point for Docker Home."""

import logging
from pathlib import Path

import click

from ..core.constants import DATA_DIR_NAME, DEFAULT_HOSTNAME, DOCKER_TIMEOUT, PROBE_TIMEOUT
from ..models.config import DashboardSettings
from .commands.containers import containers
from .commands.control import start, stop
from .commands.display import display
from .commands.probe import probe
from .commands.serve import serve


@click.group()
@click.option('--docker-host', envvar='DOCKER_HOST', help='Docker endpoint to try before auto-detection')
@click.option('--hostname', envvar='DOCKER_HOME_HOSTNAME', default=DEFAULT_HOSTNAME, show_default=True,
              help='Host name used in inferred container URLs')
@click.option('--data-dir', envvar='DOCKER_HOME_DATA_DIR', default=DATA_DIR_NAME, show_default=True,
              type=click.Path(file_okay=False, path_type=Path), help='Directory holding curation.json')
@click.option('--probe-timeout', envvar='DOCKER_HOME_PROBE_TIMEOUT', default=PROBE_TIMEOUT, show_default=True,
              type=float, help='Seconds to wait for each endpoint while probing')
@click.option('--docker-timeout', envvar='DOCKER_HOME_DOCKER_TIMEOUT', default=DOCKER_TIMEOUT, show_default=True,
              type=int, help='Seconds to wait for regular Docker API calls')
@click.option('--log-level', envvar='DOCKER_HOME_LOG_LEVEL', default='INFO', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
@click.pass_context
def cli(ctx, docker_host, hostname, data_dir, probe_timeout, docker_timeout, log_level):
    """Docker Home - Curated overview of the containers on this host"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.obj = DashboardSettings(
        docker_host=docker_host,
        hostname=hostname,
        data_dir=data_dir,
        probe_timeout=probe_timeout,
        docker_timeout=docker_timeout,
    )


# Register commands
cli.add_command(serve)
cli.add_command(probe)
cli.add_command(containers)
cli.add_command(start)
cli.add_command(stop)
cli.add_command(display)


if __name__ == '__main__':
    cli()
