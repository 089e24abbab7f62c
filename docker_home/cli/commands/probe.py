"""Probe command for Docker Home."""

import click
from tabulate import tabulate

from ..helpers import build_prober


@click.command()
@click.pass_context
def probe(ctx):
    """Show which Docker endpoints answer"""
    prober = build_prober(ctx.obj)

    rows = []
    selected = None
    for endpoint in prober.candidates():
        reachable = prober.probe(endpoint)
        if reachable and selected is None:
            selected = endpoint
        rows.append([
            endpoint,
            click.style("OK", fg='green') if reachable else click.style("NO ANSWER", fg='red'),
        ])

    click.echo(tabulate(rows, headers=["ENDPOINT", "RESULT"], tablefmt="simple"))

    if selected is None:
        click.echo("\nNo reachable Docker endpoint found", err=True)
        ctx.exit(1)
    click.echo(f"\nSelected endpoint: {selected}")
