"""
Version command - displays hornet version information
"""

import click

from hornet.version import HORNET_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display hornet version information.

    Args:
        verbose: If True, show the full hash and build date
    """
    if verbose:
        click.echo(f"hornet version {HORNET_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {HORNET_VERSION}")
        click.echo(f"  Build Date:       {HORNET_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {HORNET_VERSION.hash}")
    else:
        click.echo(f"hornet {HORNET_VERSION}")
