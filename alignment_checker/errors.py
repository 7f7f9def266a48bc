from typing import Optional


class AlignmentError(Exception):
    """
    Base class for conditions that abort a run.
    Carries the offending element id and/or source row when known.
    """

    def __init__(self, message: str, element_id: Optional[int] = None, row: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.element_id = element_id
        self.row = row

    def __str__(self):
        where = []
        if self.row is not None:
            where.append(f"row {self.row}")
        if self.element_id is not None:
            where.append(f"element {self.element_id}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class InputFormatError(AlignmentError):
    """Unparseable number, unknown type token or malformed row."""


class TableLookupError(AlignmentError):
    """A design speed has no entry in one of the lookup tables."""


class NoRadiusError(AlignmentError):
    """No radius element is reachable from an element that needs one."""
