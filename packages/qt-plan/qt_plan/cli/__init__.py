"""qt-plan CLI: rebuild MySQL execution plan trees.

Usage: qt-plan <command> [options]
"""

from __future__ import annotations

import click

from .. import __version__


@click.group()
@click.version_option(__version__, prog_name="qt-plan")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-essential output.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """qt-plan: MySQL execution plan trees from EXPLAIN output."""
    import logging

    from ..config import get_settings

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")
    elif quiet:
        logging.basicConfig(level=logging.WARNING)
    else:
        logging.basicConfig(level=get_settings().log_level.upper(), format="%(message)s")


def _register_commands() -> None:
    """Import and register all sub-commands."""
    from .cmd_check import check
    from .cmd_explain import explain
    from .cmd_tree import tree

    main.add_command(check)
    main.add_command(explain)
    main.add_command(tree)


_register_commands()
