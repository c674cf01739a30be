"""Live shows schedule for the Limited Hangout site."""

from .board import ShowBoard
from .config import ROSTER, SourceConfig, load_config
from .filters import FilterEngine, apply_filters
from .models import ALL, FilterFacets, FilterSelection, Performer, Show, TabResult
from .normalize import FIELD_ALIASES, normalize_row
from .schedule import derive_facets, process
from .sources import make_source

__all__ = [
    "ALL",
    "FIELD_ALIASES",
    "ROSTER",
    "FilterEngine",
    "FilterFacets",
    "FilterSelection",
    "Performer",
    "Show",
    "ShowBoard",
    "SourceConfig",
    "TabResult",
    "apply_filters",
    "derive_facets",
    "load_config",
    "make_source",
    "normalize_row",
    "process",
]
