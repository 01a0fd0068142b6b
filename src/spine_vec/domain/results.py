from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from spine_vec.domain.points import SpinePoint

Vec2 = Tuple[float, float]

TAG_CERVICAL = "RSV-C"
TAG_THORACIC = "RSV-T"
TAG_LUMBAR = "RSV-L"
TAG_GLOBAL = "GSV"

SUMMARY_TAGS = (TAG_CERVICAL, TAG_THORACIC, TAG_LUMBAR, TAG_GLOBAL)


@dataclass(frozen=True)
class RegionWeightShare:
    """
    Fracción de peso (en % del peso corporal) asignada a un nivel:
      - single_level_share: parte propia del nivel dentro de su región
      - cumulative_share: acumulado incluyendo las regiones más craneales
    """
    level: str
    single_level_share: float
    cumulative_share: float


@dataclass(frozen=True)
class LevelVector:
    label: str
    start: Vec2               # (x, y) del punto
    angle_deg: float          # ángulo de la tangente

    shear_magnitude: float    # |sin| * share simple
    normal_magnitude: float   # |cos| * share simple
    shear_vector: Vec2        # excursión (la que se suma en las resultantes)
    normal_vector: Vec2

    # Variantes con signo (share acumulado / 58), solo para la tabla
    signed_shear: float
    signed_normal: float
    ratio: float              # tan(ángulo)


@dataclass(frozen=True)
class RegionResultant:
    """
    Resultante de una región (o global).

    angle_deg es el ángulo matemático atan2(y, x); la tabla reporta
    el ángulo clínico = 180 - angle_deg.
    """
    vector: Vec2
    magnitude: float
    angle_deg: float

    normal_vector: Vec2 = (0.0, 0.0)
    normal_magnitude: float = 0.0

    @property
    def clinical_angle_deg(self) -> float:
        return 180.0 - self.angle_deg

    @property
    def ratio(self) -> float:
        return math.tan(math.radians(self.angle_deg))


@dataclass(frozen=True)
class RegionalResultants:
    cervical: RegionResultant
    thoracic: RegionResultant
    lumbar: RegionResultant
    global_: RegionResultant

    def by_tag(self) -> List[Tuple[str, RegionResultant]]:
        return [
            (TAG_CERVICAL, self.cervical),
            (TAG_THORACIC, self.thoracic),
            (TAG_LUMBAR, self.lumbar),
            (TAG_GLOBAL, self.global_),
        ]


@dataclass(frozen=True)
class OutputRow:
    """Fila de la tabla: [Slope Angle, Shear, Normal, Ratio, Level]."""
    angle_deg: float
    shear_magnitude: float
    normal_magnitude: float
    ratio: float
    level: str

    @property
    def is_summary(self) -> bool:
        return self.level in SUMMARY_TAGS

    def as_list(self) -> List[Any]:
        return [self.angle_deg, self.shear_magnitude, self.normal_magnitude, self.ratio, self.level]


@dataclass(frozen=True)
class SpineLoadResult:
    rows: List[OutputRow]
    level_vectors: List[LevelVector]
    resultants: RegionalResultants

    # Entradas ya ordenadas por y y ángulos de tangente (uno por punto)
    points: List[SpinePoint]
    angles: List[float]

    weight_kg: float

    @property
    def level_rows(self) -> List[OutputRow]:
        return [r for r in self.rows if not r.is_summary]

    @property
    def summary_rows(self) -> List[OutputRow]:
        return [r for r in self.rows if r.is_summary]

    def row_for(self, level: str) -> Optional[OutputRow]:
        for r in self.rows:
            if r.level == level:
                return r
        return None

    # Resultante global (lo que se dibuja como flecha en la UI)
    @property
    def resultant_vector(self) -> Vec2:
        return self.resultants.global_.vector

    @property
    def angle_degrees(self) -> float:
        return self.resultants.global_.angle_deg

    @property
    def sum_magnitude(self) -> float:
        return self.resultants.global_.magnitude
