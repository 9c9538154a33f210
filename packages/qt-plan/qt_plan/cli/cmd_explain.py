"""qt-plan explain: run EXPLAIN against a live database and show the plan tree."""

from __future__ import annotations

import logging
from typing import Optional

import click

logger = logging.getLogger(__name__)


@click.command()
@click.argument("query_or_file")
@click.option("--dsn", default=None, help="Database URL (default: QT_PLAN_DATABASE_URL).")
@click.option("--json", "as_json", is_flag=True, help="Print the plan forest as JSON.")
def explain(query_or_file: str, dsn: Optional[str], as_json: bool) -> None:
    """Explain QUERY_OR_FILE (SQL text or a .sql file) and print its plan tree."""
    from ..config import get_settings
    from ..errors import PlanAnalysisError
    from ..execution import create_row_source
    from ..plan import MySQLPlanAnalyser
    from ._common import print_forest, read_query

    settings = get_settings()
    query = read_query(query_or_file)
    analyser = MySQLPlanAnalyser(query, dialect=settings.dialect, explain_prefix=settings.explain_prefix)

    try:
        source = create_row_source(dsn)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    with source as live_source:
        try:
            forest = analyser.explain(live_source)
        except PlanAnalysisError as e:
            raise click.ClickException(str(e)) from e

    print_forest(forest, title=analyser.get_plan_query_string(), as_json=as_json)
