"""Google Visualization query export (tqx=out:json).

The body is JSON wrapped in a JavaScript callback:

    /*O_o*/
    google.visualization.Query.setResponse({"version":"0.6", ..., "table": {...}});

table.cols carries the header labels and table.rows[].c the cells. A cell
has a raw value "v" and sometimes a formatted "f"; dates come through as
"Date(2025,10,5)" in "v" with the sheet's own formatting in "f".
"""

import json
from typing import List

from ..models import RawRow
from .base import TabularSource, clean_header, zip_row
from .errors import MalformedEncoding


class GvizSource(TabularSource):
    encoding = "gviz"

    def parse(self, text: str) -> List[RawRow]:
        return parse_gviz(text)


def unwrap_gviz(text: str) -> dict:
    """Strip the setResponse(...) wrapper and decode the JSON inside."""
    start = text.find("(")
    end = text.rfind(")")
    if start == -1 or end <= start:
        raise MalformedEncoding("no setResponse(...) wrapper in gviz response")
    try:
        payload = json.loads(text[start + 1:end])
    except json.JSONDecodeError as e:
        raise MalformedEncoding(f"gviz JSON error: {str(e)[:100]}") from e
    if not isinstance(payload, dict):
        raise MalformedEncoding("gviz payload is not an object")
    if payload.get("status") == "error":
        errors = payload.get("errors") or [{}]
        reason = errors[0].get("detailed_message") or errors[0].get("message") or "unknown"
        raise MalformedEncoding(f"gviz query error: {reason}")
    return payload


def cell_text(cell) -> str:
    """Prefer the formatted value, then the raw one."""
    if not cell:
        return ""
    if cell.get("f") is not None:
        return str(cell["f"])
    if cell.get("v") is not None:
        return str(cell["v"])
    return ""


def parse_gviz(text: str) -> List[RawRow]:
    payload = unwrap_gviz(text)
    try:
        table = payload["table"]
        header = clean_header(col.get("label") or "" for col in table["cols"])
        return [
            zip_row(header, (cell_text(cell) for cell in (row.get("c") or [])))
            for row in table.get("rows") or []
        ]
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedEncoding(f"unexpected gviz table shape: {e}") from e
