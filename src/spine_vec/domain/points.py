from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from spine_vec.domain.levels import normalize_label, region_of


@dataclass(frozen=True)
class SpinePoint:
    """
    Punto digitalizado sobre la imagen (coordenadas de canvas: y crece hacia abajo).
    label: código de nivel (C1..S1) o '' si el usuario no lo etiquetó.
    """
    x: float
    y: float
    label: str = ""

    @property
    def is_labeled(self) -> bool:
        return bool(normalize_label(self.label))

    @property
    def region(self) -> Optional[str]:
        return region_of(self.label)


PointLike = Union[SpinePoint, Mapping[str, Any]]


def as_point(p: PointLike) -> SpinePoint:
    """Acepta SpinePoint o dict {'x','y','label'} (formato de coordenadas del canvas)."""
    if isinstance(p, SpinePoint):
        return SpinePoint(x=float(p.x), y=float(p.y), label=normalize_label(p.label))
    return SpinePoint(
        x=float(p["x"]),
        y=float(p["y"]),
        label=normalize_label(p.get("label")),
    )


def as_points(points: Iterable[PointLike]) -> List[SpinePoint]:
    return [as_point(p) for p in points]


def sort_points(points: Iterable[SpinePoint]) -> List[SpinePoint]:
    """Orden por y ascendente (eje independiente de la spline). Estable."""
    return sorted(points, key=lambda p: p.y)
