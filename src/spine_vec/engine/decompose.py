from __future__ import annotations

import logging
import math
from typing import List, Mapping, Sequence

from spine_vec.domain.config import DEFAULT_CONFIG, WeightModelConfig
from spine_vec.domain.errors import UnknownLevelError
from spine_vec.domain.levels import normalize_label
from spine_vec.domain.points import SpinePoint
from spine_vec.domain.results import LevelVector, RegionWeightShare, Vec2

logger = logging.getLogger(__name__)


def shear_excursion(magnitude: float, angle_deg: float) -> Vec2:
    """
    Vector de corte (excursión):
      ángulo >= 0 => (-m cosθ,  m sinθ)
      ángulo <  0 => ( m cosθ, -m sinθ)
    """
    a = math.radians(angle_deg)
    if a < 0:
        return (magnitude * math.cos(a), -magnitude * math.sin(a))
    return (-magnitude * math.cos(a), magnitude * math.sin(a))


def normal_excursion(magnitude: float, angle_deg: float) -> Vec2:
    """Vector normal: (m sinθ, m cosθ) para ambos signos del ángulo (no es simétrico al de corte)."""
    a = math.radians(angle_deg)
    return (magnitude * math.sin(a), magnitude * math.cos(a))


def decompose(
    point: SpinePoint,
    angle_deg: float,
    weight: float,
    shares: Mapping[str, RegionWeightShare],
    config: WeightModelConfig = DEFAULT_CONFIG,
) -> LevelVector:
    """
    Descompone el peso que llega al nivel del punto en corte y normal.

      shear  = g * W * |sinθ| * single
      normal = g * W * |cosθ| * single

    Con signo (columnas de la tabla):
      shear_s  = g * W * sinθ * cumulative / 58
      normal_s = g * W * cosθ * cumulative / 58
      ratio    = tanθ
    """
    label = normalize_label(point.label)
    share = shares.get(label)
    if share is None:
        raise UnknownLevelError(label)

    a = math.radians(float(angle_deg))
    gW = float(config.gravity) * float(weight)

    shear = abs(gW * math.sin(a) * share.single_level_share)
    normal = abs(gW * math.cos(a) * share.single_level_share)

    k = share.cumulative_share / float(config.normalization)
    signed_shear = gW * math.sin(a) * k
    signed_normal = gW * math.cos(a) * k

    logger.debug("Nivel %s: θ=%.3f°, corte=%.3f N, normal=%.3f N", label, angle_deg, shear, normal)

    return LevelVector(
        label=label,
        start=(float(point.x), float(point.y)),
        angle_deg=float(angle_deg),
        shear_magnitude=shear,
        normal_magnitude=normal,
        shear_vector=shear_excursion(shear, angle_deg),
        normal_vector=normal_excursion(normal, angle_deg),
        signed_shear=signed_shear,
        signed_normal=signed_normal,
        ratio=math.tan(a),
    )


def decompose_all(
    points: Sequence[SpinePoint],
    angles: Sequence[float],
    weight: float,
    shares: Mapping[str, RegionWeightShare],
    config: WeightModelConfig = DEFAULT_CONFIG,
) -> List[LevelVector]:
    """
    Descompone cada punto etiquetado (mismo orden que la entrada).
    Los puntos sin etiqueta solo sirven para la curva y se omiten;
    una etiqueta no vacía fuera de la tabla => UnknownLevelError.
    """
    if len(points) != len(angles):
        raise ValueError(f"Cantidad de ángulos ({len(angles)}) distinta de la de puntos ({len(points)}).")

    out: List[LevelVector] = []
    for p, ang in zip(points, angles):
        if not p.is_labeled:
            continue
        out.append(decompose(p, float(ang), weight, shares, config))
    return out
