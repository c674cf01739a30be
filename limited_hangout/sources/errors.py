"""Errors raised while reading a schedule tab.

None of these escape a source: TabularSource.fetch_result catches them,
logs, and reports the tab as empty.
"""


class SourceError(Exception):
    """Base class for schedule source failures."""


class SourceUnavailable(SourceError):
    """Network failure, bad status, or a login page instead of data."""


class MalformedEncoding(SourceError):
    """The body arrived but its wrapper or structure could not be parsed."""
