from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List

from spine_vec.domain.errors import CoordinatesFormatError
from spine_vec.domain.levels import normalize_label
from spine_vec.domain.points import SpinePoint, sort_points
from spine_vec.domain.results import OutputRow

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "Slope Angle",
    "Shear Vector Magnitude",
    "Normal Vector Magnitude",
    "Vector Ratio",
    "Level",
]
COORD_COLUMNS = ["Level", "X", "Y"]

RESULTS_FILENAME = "spine_vec.csv"
COORDINATES_FILENAME = "coordinates.csv"


# -------------------------
# Texto
# -------------------------
def results_to_csv_text(rows: Iterable[OutputRow]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(RESULT_COLUMNS)
    for r in rows:
        w.writerow(r.as_list())
    return buf.getvalue()


def coordinates_to_csv_text(points: Iterable[SpinePoint]) -> str:
    """Coordenadas ordenadas por y (como se exportan desde el canvas)."""
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(COORD_COLUMNS)
    for p in sort_points(points):
        w.writerow([normalize_label(p.label), repr(float(p.x)), repr(float(p.y))])
    return buf.getvalue()


def coordinates_from_csv_text(text: str) -> List[SpinePoint]:
    """
    Lee un CSV de coordenadas exportado por la app.
    Requiere header con Level, X, Y; ignora filas vacías.
    """
    reader = csv.DictReader(io.StringIO(text))
    header = [h.strip() for h in (reader.fieldnames or [])]
    missing = [c for c in COORD_COLUMNS if c not in header]
    if missing:
        raise CoordinatesFormatError(
            f"CSV de coordenadas sin columnas {', '.join(missing)} (header: {header})."
        )
    reader.fieldnames = header

    out: List[SpinePoint] = []
    for k, row in enumerate(reader, start=2):
        values = [(v or "").strip() for v in row.values() if isinstance(v, str)]
        if not any(values):
            continue
        try:
            x = float((row.get("X") or "").strip())
            y = float((row.get("Y") or "").strip())
        except ValueError:
            raise CoordinatesFormatError(
                f"Fila {k}: X/Y no numéricos (X={row.get('X')!r}, Y={row.get('Y')!r})."
            ) from None
        out.append(SpinePoint(x=x, y=y, label=normalize_label(row.get("Level"))))

    return out


# -------------------------
# Archivos
# -------------------------
def write_results_csv(path: str | Path, rows: Iterable[OutputRow]) -> Path:
    p = Path(path)
    p.write_text(results_to_csv_text(rows), encoding="utf-8")
    logger.info("Tabla de vectores exportada: %s", p)
    return p


def write_coordinates_csv(path: str | Path, points: Iterable[SpinePoint]) -> Path:
    p = Path(path)
    p.write_text(coordinates_to_csv_text(points), encoding="utf-8")
    logger.info("Coordenadas exportadas: %s", p)
    return p


def read_coordinates_csv(path: str | Path) -> List[SpinePoint]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"No existe el archivo de coordenadas: {p}")

    points = coordinates_from_csv_text(p.read_text(encoding="utf-8-sig", errors="replace"))
    logger.info("Coordenadas leídas: %s (%d puntos)", p, len(points))
    return points
