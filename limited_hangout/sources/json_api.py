"""JSON sources: a key/value rows API and the Sheets v4 values range."""

import json
from typing import List

from ..models import RawRow
from .base import TabularSource, clean_header, zip_row
from .errors import MalformedEncoding


def _load_json(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedEncoding(f"JSON error: {str(e)[:100]}") from e


class ApiSource(TabularSource):
    """A plain JSON array of objects, one per row (opensheet and friends)."""
    encoding = "api"

    def parse(self, text: str) -> List[RawRow]:
        data = _load_json(text)
        if not isinstance(data, list):
            raise MalformedEncoding("expected a JSON array of rows")

        rows = []
        for item in data:
            if not isinstance(item, dict):
                raise MalformedEncoding("expected each row to be a JSON object")
            header = clean_header(item.keys())
            rows.append(zip_row(header, item.values()))
        return rows


class ValuesSource(TabularSource):
    """Sheets API v4 values range holding every member's shows:

        member | date       | time    | venue     | link
        Devin  | 2025-11-01 | 8:00 PM | DC Improv | https://...

    The header must start with "member". Rows with fewer than four cells are
    skipped; trailing empty cells are omitted by the API, so the rest are
    padded. Each tab keeps only the rows whose member matches its name.
    """
    encoding = "values"

    MEMBER_COLUMN = "member"
    MIN_CELLS = 4

    def parse(self, text: str) -> List[RawRow]:
        data = _load_json(text)
        if not isinstance(data, dict):
            raise MalformedEncoding("expected a values range object")

        values = data.get("values") or []
        if not isinstance(values, list) or not all(isinstance(r, list) for r in values):
            raise MalformedEncoding("values is not a list of rows")
        if not values:
            return []

        header = clean_header(values[0])
        if not header or header[0].lower() != self.MEMBER_COLUMN:
            raise MalformedEncoding("first header column must be 'member'")
        header[0] = self.MEMBER_COLUMN

        return [
            zip_row(header, cells)
            for cells in values[1:]
            if len(cells) >= self.MIN_CELLS
        ]

    def rows_for(self, text: str, tab: str) -> List[RawRow]:
        return [
            row for row in self.parse(text)
            if row[self.MEMBER_COLUMN] == str(tab)
        ]
