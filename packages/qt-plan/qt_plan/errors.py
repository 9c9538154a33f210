"""Exceptions raised while collecting and analysing execution plans."""

from __future__ import annotations

from typing import Optional


class PlanAnalysisError(Exception):
    """Base class for plan analysis failures."""


class UnsupportedStatementKind(PlanAnalysisError):
    """Raised when a statement cannot produce an execution plan.

    Only read-only (SELECT) statements are explained. The check happens
    before any round-trip to the data source.
    """

    def __init__(self, query: str, message: Optional[str] = None):
        self.query = query
        super().__init__(message or "Only SELECT statements could produce execution plan")


class SourceQueryFailure(PlanAnalysisError):
    """Raised when the plan-explain round-trip to the data source fails.

    Attributes:
        source_name: Identifier of the data source (DSN with password masked).
        cause: The original exception raised by the driver.
    """

    def __init__(self, source_name: str, cause: BaseException):
        self.source_name = source_name
        self.cause = cause
        super().__init__(f"Plan query failed on {source_name}: {cause}")
