from typing import List
from ..logger import get_logger

logger = get_logger("top10.viewer.diagnostics")

class LoadError(Exception):
    """A top-10 request that did not produce rows.

    Covers transport failures (status 0, empty body), non-2xx responses and
    bodies that are not a JSON array of name/score records.
    """

    def __init__(self, status: int, body: str):
        super().__init__(f"status={status}")
        self.status = status
        self.body = body

class DiagnosticLog:
    """Developer-facing record of failed loads"""

    def __init__(self):
        self.records: List[LoadError] = []

    def record(self, error: LoadError):
        self.records.append(error)
        logger.error(f"Top 10 request failed: status={error.status}")
        logger.error(f"Top 10 response body: {error.body!r}")

    @property
    def last(self):
        return self.records[-1] if self.records else None
