from pathlib import Path
from typing import Dict, List, Optional, Sequence
import csv

from ..config import CSV_LAYOUT, TYPE_TOKENS
from ..errors import InputFormatError
from .element import Element, ElementKind


class CSVReader:
    """
    Reads the element list exported by the alignment design software.
    The export starts with a header block and ends with a summary row,
    both are skipped.
    """

    def __init__(
        self,
        delimiter: str = ",",
        encoding: str = "utf-8",
        header_rows: int = CSV_LAYOUT["header_rows"],
        footer_rows: int = CSV_LAYOUT["footer_rows"],
        type_tokens: Optional[Dict[str, str]] = None,
        logger=None,
    ):
        self.delimiter = delimiter
        self.encoding = encoding
        self.header_rows = header_rows
        self.footer_rows = footer_rows
        self.type_tokens = {
            token: ElementKind(kind) for token, kind in (type_tokens or TYPE_TOKENS).items()
        }
        self.logger = logger

        self.id_column = CSV_LAYOUT["id_column"]
        self.type_column = CSV_LAYOUT["type_column"]
        self.length_column = CSV_LAYOUT["length_column"]
        self.radius_column = CSV_LAYOUT["radius_column"]

    def load_csv(self, path: Path) -> List[Element]:
        with Path(path).open("r", newline="", encoding=self.encoding) as f:
            rows = list(csv.reader(f, delimiter=self.delimiter))
        return self.read_rows(rows)

    def read_rows(self, rows: Sequence[Sequence[str]]) -> List[Element]:
        if len(rows) < self.header_rows + self.footer_rows:
            raise InputFormatError(
                f"Expected at least {self.header_rows + self.footer_rows} rows "
                f"(header and footer), got {len(rows)}"
            )

        elements = [
            self.read_element(rows[index], row_number=index + 1)
            for index in range(self.header_rows, len(rows) - self.footer_rows)
        ]

        if self.logger:
            self.logger.log(f"Read {len(elements)} element(s)")
        return elements

    def read_element(self, row: Sequence[str], row_number: Optional[int] = None) -> Element:
        needed = max(self.id_column, self.type_column, self.length_column, self.radius_column) + 1
        if len(row) < needed:
            raise InputFormatError(f"Expected {needed} columns, got {len(row)}", row=row_number)

        element_id = self._parse(int, row[self.id_column], "id", row_number)
        kind = self._kind(row[self.type_column], element_id, row_number)
        length = self._parse(float, row[self.length_column], "length", row_number, element_id)

        radius = 0.0
        if row[self.radius_column].strip():
            radius = self._parse(float, row[self.radius_column], "radius", row_number, element_id)

        return Element(id=element_id, kind=kind, length=length, radius=radius, row=row_number)

    # --- helpers ---------------------------------------------------------
    def _kind(self, token: str, element_id: int, row_number: Optional[int]) -> ElementKind:
        try:
            return self.type_tokens[token.strip()]
        except KeyError:
            raise InputFormatError(
                f"Unknown element type {token!r}, expected one of {sorted(self.type_tokens)}",
                element_id=element_id,
                row=row_number,
            ) from None

    def _parse(self, convert, value: str, field: str, row_number: Optional[int], element_id: Optional[int] = None):
        try:
            return convert(value)
        except ValueError:
            raise InputFormatError(
                f"Could not convert {field} {value!r} to {convert.__name__}",
                element_id=element_id,
                row=row_number,
            ) from None
