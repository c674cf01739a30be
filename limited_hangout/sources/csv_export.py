"""Published-to-web CSV export of a sheet tab.

The first non-empty line is the header. Quoted fields may hold commas
("Washington, DC"), newlines, and doubled quotes.
"""

import csv
import io
from typing import List

from ..models import RawRow
from .base import TabularSource, clean_header, zip_row
from .errors import MalformedEncoding


class CsvSource(TabularSource):
    encoding = "csv"

    def parse(self, text: str) -> List[RawRow]:
        return parse_csv(text)


def parse_csv(text: str) -> List[RawRow]:
    """Parse CSV text into rows keyed by the trimmed header labels."""
    reader = csv.reader(io.StringIO(text, newline=""))
    rows: List[RawRow] = []
    header = None

    try:
        for cells in reader:
            if not any(cell.strip() for cell in cells):
                continue  # blank line
            if header is None:
                header = clean_header(cells)
                continue
            rows.append(zip_row(header, cells))
    except csv.Error as e:
        raise MalformedEncoding(f"CSV parse error: {str(e)[:100]}") from e

    return rows
