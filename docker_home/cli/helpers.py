"""CLI helper functions for Docker Home.

Commands share one way of turning settings into connected services and of
printing container tables.
"""

import asyncio
from typing import List

import click
from tabulate import tabulate

from ..core.constants import RUNNING_STATE
from ..core.curation_store import CurationStore
from ..models.config import DashboardSettings
from ..models.container import ContainerRecord
from ..services.dashboard_service import DashboardService
from ..services.docker_service import DockerService
from ..services.endpoint_prober import EndpointProber
from ..services.exceptions import DockerServiceError
from ..services.registry_service import DockerHubClient


def build_prober(settings: DashboardSettings) -> EndpointProber:
    return EndpointProber(configured_endpoint=settings.docker_host, timeout=settings.probe_timeout)


def build_dashboard(settings: DashboardSettings) -> DashboardService:
    """Construct and connect every service the dashboard needs.

    Raises:
        EndpointNotFoundError: If no Docker endpoint answers
    """
    docker_service = DockerService(build_prober(settings), timeout=settings.docker_timeout)
    docker_service.connect()
    return DashboardService(
        docker_service=docker_service,
        hub_client=DockerHubClient(timeout=settings.registry_timeout),
        store=CurationStore(settings.curation_file),
        hostname=settings.hostname,
    )


async def _close(dashboard: DashboardService) -> None:
    try:
        await dashboard.hub_client.aclose()
    finally:
        dashboard.docker_service.close()


def run_async(dashboard: DashboardService, coro):
    """Run a dashboard coroutine from a command, then close its clients."""
    async def _run():
        try:
            return await coro
        finally:
            await _close(dashboard)

    return asyncio.run(_run())


def run_sync(dashboard: DashboardService, func, *args):
    """Call a blocking dashboard method, then close its clients."""
    try:
        return func(*args)
    finally:
        asyncio.run(_close(dashboard))


def connect_or_exit(ctx: click.Context) -> DashboardService:
    """Build the dashboard, exiting with status 1 when Docker is unreachable."""
    try:
        return build_dashboard(ctx.obj)
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def status_label(running: bool) -> str:
    if running:
        return click.style(RUNNING_STATE.upper(), fg='green')
    return click.style("STOPPED", fg='yellow')


def format_container_table(records: List[ContainerRecord], show_description: bool = False) -> str:
    """Format containers as a plain text table."""
    headers = ["ID", "NAME", "IMAGE", "STATUS", "PROJECT", "URLS"]
    if show_description:
        headers.append("DESCRIPTION")

    rows = []
    for record in records:
        row = [
            record.id[:12],
            record.name,
            record.image,
            status_label(record.running),
            record.group_label,
            "\n".join(record.urls) or "-",
        ]
        if show_description:
            row.append(record.description or "-")
        rows.append(row)

    return tabulate(rows, headers=headers, tablefmt="simple")
