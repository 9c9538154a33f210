"""qt-plan check: validate that a statement can produce an execution plan."""

from __future__ import annotations

import sys

import click


@click.command()
@click.argument("query_or_file")
def check(query_or_file: str) -> None:
    """Check whether QUERY_OR_FILE is a plan-explainable SELECT statement."""
    from ..config import get_settings
    from ..plan import build_plan_query
    from ..sql_utils import is_select_statement
    from ._common import console, print_error, print_success, read_query

    settings = get_settings()
    query = read_query(query_or_file)

    if not is_select_statement(query, settings.dialect):
        print_error("Only SELECT statements could produce execution plan")
        sys.exit(1)

    print_success("OK")
    console.print(build_plan_query(query, settings.explain_prefix), markup=False, highlight=False)
