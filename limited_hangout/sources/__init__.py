"""
Schedule sources — one TabularSource per way the sheet can be published.

Pick one with make_source(config); the encoding is fixed for the life of the
source and never sniffed from the response.
"""

from typing import Optional

import requests

from ..config import SourceConfig
from .base import TabularSource
from .csv_export import CsvSource
from .demo import DemoSource
from .errors import MalformedEncoding, SourceError, SourceUnavailable
from .gviz import GvizSource
from .json_api import ApiSource, ValuesSource

SOURCES = {
    "csv": CsvSource,
    "gviz": GvizSource,
    "api": ApiSource,
    "values": ValuesSource,
}


def make_source(config: SourceConfig, session: Optional[requests.Session] = None) -> TabularSource:
    """Build the source variant the config asks for."""
    if config.demo:
        return DemoSource(config)
    try:
        source_class = SOURCES[config.encoding]
    except KeyError:
        raise ValueError(
            f"Unknown schedule encoding {config.encoding!r} "
            f"(expected one of: {', '.join(SOURCES)})"
        ) from None
    return source_class(config, session=session)


__all__ = [
    "SOURCES",
    "ApiSource",
    "CsvSource",
    "DemoSource",
    "GvizSource",
    "MalformedEncoding",
    "SourceError",
    "SourceUnavailable",
    "TabularSource",
    "ValuesSource",
    "make_source",
]
