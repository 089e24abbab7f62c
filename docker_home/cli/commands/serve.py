"""Serve command for Docker Home."""

import logging
from pathlib import Path

import click
import uvicorn

from ...api.app import create_app
from ...core.constants import DEFAULT_BIND_HOST, DEFAULT_PORT, REGISTRY_TIMEOUT
from ..helpers import connect_or_exit

logger = logging.getLogger(__name__)


@click.command()
@click.option('--bind', envvar='DOCKER_HOME_BIND', default=DEFAULT_BIND_HOST, show_default=True,
              help='Address the HTTP server listens on')
@click.option('--port', '-p', envvar='DOCKER_HOME_PORT', default=DEFAULT_PORT, show_default=True,
              type=click.IntRange(1, 65535), help='Port the HTTP server listens on')
@click.option('--registry-timeout', envvar='DOCKER_HOME_REGISTRY_TIMEOUT', default=REGISTRY_TIMEOUT,
              show_default=True, type=float, help='Seconds to wait for Docker Hub lookups')
@click.option('--static-dir', envvar='DOCKER_HOME_STATIC_DIR',
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Directory of presentation files to serve at /')
@click.pass_context
def serve(ctx, bind, port, registry_timeout, static_dir):
    """Run the dashboard HTTP API"""
    ctx.obj = ctx.obj.model_copy(update={
        'bind_host': bind,
        'port': port,
        'registry_timeout': registry_timeout,
        'static_dir': static_dir,
    })
    settings = ctx.obj

    dashboard = connect_or_exit(ctx)
    click.echo(f"Connected to Docker at {dashboard.docker_service.endpoint}")
    click.echo(f"Curation file: {settings.curation_file}")

    app = create_app(dashboard, static_dir=settings.static_dir)
    logger.info(f"Serving dashboard on {settings.bind_host}:{settings.port}")
    uvicorn.run(app, host=settings.bind_host, port=settings.port,
                log_level=logging.getLevelName(logging.getLogger().level).lower())
