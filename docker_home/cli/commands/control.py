"""Start and stop commands for Docker Home."""

import click

from ...core.constants import STOP_GRACE_PERIOD
from ...models.operation import OperationResult
from ..helpers import connect_or_exit, run_sync


def _report(ctx: click.Context, result: OperationResult) -> None:
    if result.success:
        verb = "Started" if result.action == "start" else "Stopped"
        click.echo(f"{verb} container {result.container_id}")
        return
    click.echo(f"Error ({result.failure.value}): {result.message}", err=True)
    ctx.exit(1)


@click.command()
@click.argument('container_id')
@click.pass_context
def start(ctx, container_id):
    """Start a container"""
    dashboard = connect_or_exit(ctx)
    _report(ctx, run_sync(dashboard, dashboard.start_container, container_id))


@click.command()
@click.argument('container_id')
@click.option('--grace-period', '-t', default=STOP_GRACE_PERIOD, show_default=True, type=click.IntRange(min=0),
              help='Seconds to wait before the container is killed')
@click.pass_context
def stop(ctx, container_id, grace_period):
    """Stop a container"""
    dashboard = connect_or_exit(ctx)
    _report(ctx, run_sync(dashboard, dashboard.stop_container, container_id, grace_period))
