from pathlib import Path
from typing import List, Optional
import csv

import ezdxf

from .. import config
from .aggregate import mean_vp
from .element import ERROR_LABELS, Element, ElementKind

TABLE_HEADER = ["Id", "Type", "Length", "Radius", "Vp", "MinLength", "AMin", "AMax", "Errors"]


def element_row(e: Element) -> List[str]:
    return [
        str(e.id),
        e.kind.value,
        f"{e.length:.2f}",
        f"{e.radius:.2f}",
        str(e.vp),
        f"{e.min_length:.2f}",
        f"{e.a_min:.2f}",
        f"{e.a_max:.2f}",
        ", ".join(e.error_labels()),
    ]


def format_table(table: List[List[str]]) -> str:
    """Boxed plain-text table, first row is the header."""
    widths = [max(len(row[i]) for row in table) for i in range(len(table[0]))]
    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(row):
        return "| " + " | ".join(cell.ljust(w) for cell, w in zip(row, widths)) + " |"

    out = [border, line(table[0]), border]
    out.extend(line(row) for row in table[1:])
    if len(table) > 1:
        out.append(border)
    return "\n".join(out)


class ValidationReport:
    def __init__(self, elements: List[Element], checks: Optional[list] = None, include_all: bool = False):
        self.elements = elements
        self.checks = checks or []
        self.include_all = include_all

    @property
    def reported(self) -> List[Element]:
        if self.include_all:
            return list(self.elements)
        return [e for e in self.elements if e.has_errors]

    def table(self) -> List[List[str]]:
        return [list(TABLE_HEADER)] + [element_row(e) for e in self.reported]

    def render(self) -> str:
        return format_table(self.table())

    def mean_vp(self) -> Optional[float]:
        return mean_vp(self.elements)

    def summary(self) -> dict:
        kinds = {kind.value: sum(1 for e in self.elements if e.kind is kind) for kind in ElementKind}
        return {
            "count": len(self.elements),
            "total_length": sum(e.length for e in self.elements),
            "mean_vp": self.mean_vp(),
            "kinds": kinds,
            "flagged": sum(1 for e in self.elements if e.has_errors),
            "error_counts": {
                label: sum(1 for e in self.elements if error in e.errors)
                for error, label in ERROR_LABELS
            },
            "checks": {check.name: check.get_error_count() for check in self.checks},
        }

    # --- export ----------------------------------------------------------
    def save(self, path: Path):
        path = Path(path)
        if path.suffix.lower() == ".dxf":
            self.save_dxf(path)
        else:
            self.save_csv(path)

    def save_csv(self, path: Path):
        with Path(path).open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(self.table())

    def save_dxf(self, path: Path):
        """
        Speed band drawing: element axis along the stationing, stepped Vp line
        above it and a marker per error on the reported elements.
        """
        doc = ezdxf.new(config.DXF_VERSION)
        msp = doc.modelspace()

        if config.DXF_APPID not in doc.appids:
            doc.appids.new(config.DXF_APPID)

        layers = {config.VP_BAND_LAYER: 7, config.LABEL_LAYER: 7}
        for kind, layer in config.ELEMENT_LAYERS.items():
            layers[layer] = config.ELEMENT_COLORS.get(kind, 7)
        for label, layer in config.ERROR_LAYERS.items():
            layers[layer] = config.ERROR_COLORS.get(label, 1)
        for name, color in layers.items():
            if name not in doc.layers:
                doc.layers.new(name=name, dxfattribs={'color': color})

        reported = {id(e) for e in self.reported}
        band = []
        marker_count = 0
        station = 0.0
        for e in self.elements:
            start, end = station, station + e.length
            y = e.vp * config.DXF_VP_SCALE

            msp.add_line((start, 0.0), (end, 0.0),
                         dxfattribs={'layer': config.ELEMENT_LAYERS[e.kind.value]})
            msp.add_text(str(e.id), dxfattribs={
                'layer': config.LABEL_LAYER,
                'height': config.DXF_TEXT_HEIGHT,
                'insert': (start, -2 * config.DXF_TEXT_HEIGHT),
            })
            band.extend([(start, y), (end, y)])

            if id(e) in reported:
                for label in e.error_labels():
                    marker_count += 1
                    self._mark_error(msp, e, label, (start + end) / 2, y, marker_count)
            station = end

        if len(band) >= 2:
            msp.add_lwpolyline(band, dxfattribs={'layer': config.VP_BAND_LAYER})

        doc.saveas(path)

    def _mark_error(self, msp, e: Element, label: str, station: float, y: float, number: int):
        marker = msp.add_point(
            (station, y, 0.0),
            dxfattribs={
                'layer': config.ERROR_LAYERS[label],
                'color': config.ERROR_COLORS.get(label, 1),
            },
        )
        marker.set_xdata(
            config.DXF_APPID,
            [
                (1000, f"ERR_{label.upper()}_{number:04d}"),
                (1000, f"{e.kind.value} {e.id}: {label}"),
                (1071, e.id),
                (1040, float(station)),
                (1071, e.vp),
            ]
        )
