"""Containers command for Docker Home."""

import click

from ...services.exceptions import DockerServiceError
from ..helpers import connect_or_exit, format_container_table, run_async


@click.command()
@click.option('--running', '-r', is_flag=True, help='Only show running containers')
@click.option('--enrich', '-e', is_flag=True, help='Fetch descriptions from Docker Hub')
@click.pass_context
def containers(ctx, running, enrich):
    """List containers with their inferred URLs"""
    dashboard = connect_or_exit(ctx)

    try:
        records = run_async(dashboard, dashboard.list_containers(all=not running, enrich=enrich))
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if not records:
        click.echo("No containers found")
        return

    click.echo(format_container_table(records, show_description=enrich))
