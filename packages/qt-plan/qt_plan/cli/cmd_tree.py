"""qt-plan tree: rebuild a plan tree from a JSON dump of EXPLAIN rows."""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)


@click.command()
@click.argument("rows_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the plan forest as JSON.")
def tree(rows_file: str, as_json: bool) -> None:
    """Build the plan tree for ROWS_FILE (a list of EXPLAIN rows, or {"rows": [...]})."""
    from ..execution import create_row_source_from_file
    from ..plan import MySQLPlanAnalyser
    from ._common import print_forest

    try:
        source = create_row_source_from_file(rows_file)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    logger.debug(f"Loaded {len(source)} row(s) from {rows_file}")
    analyser = MySQLPlanAnalyser("")
    forest = analyser.load_rows(source.execute_for_rows(""))
    print_forest(forest, title=rows_file, as_json=as_json)
