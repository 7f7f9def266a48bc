from __future__ import annotations

import csv
from pathlib import Path

import pytest

from alignment_checker.design.element import Element, ElementKind

# ---------------------------------------------------------------------------
# Element builders
# ---------------------------------------------------------------------------

def straight(id: int, length: float) -> Element:
    return Element(id=id, kind=ElementKind.STRAIGHT, length=length)


def clothoid(id: int, length: float) -> Element:
    return Element(id=id, kind=ElementKind.CLOTHOID, length=length)


def radius(id: int, length: float, r: float) -> Element:
    return Element(id=id, kind=ElementKind.RADIUS, length=length, radius=r)


# ---------------------------------------------------------------------------
# Input file builders
# ---------------------------------------------------------------------------

HEADER_ROWS = [
    ["Elementliste", "", "", "", "", "", ""],
    ["Achse 1", "", "", "", "", "", ""],
    ["Nr", "Typ", "Station", "Laenge", "A", "Richtung", "Radius"],
]


def data_row(id, token, length, r=""):
    return [str(id), token, "", str(length), "", "", str(r)]


# Straight, clothoid, radius R=-300, clothoid, straight, radius R=45
SAMPLE_ROWS = [
    data_row(1, "Gerade", 120),
    data_row(2, "Klothoide", 60),
    data_row(3, "Radius", 80, -300),
    data_row(4, "Klothoide", 60),
    data_row(5, "Gerade", 40),
    data_row(6, "Radius", 30, 45),
]


def with_header_footer(rows):
    return HEADER_ROWS + list(rows) + [["Summe", "", "", "390", "", "", ""]]


def write_input(path: Path, rows, delimiter=",") -> Path:
    with path.open("w", newline="", encoding="utf-8") as f:
        csv.writer(f, delimiter=delimiter).writerows(with_header_footer(rows))
    return path


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    return write_input(tmp_path / "alignment.csv", SAMPLE_ROWS)
