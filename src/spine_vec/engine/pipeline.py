from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from spine_vec.domain.config import DEFAULT_CONFIG, WeightModelConfig
from spine_vec.domain.levels import REGIONS
from spine_vec.domain.points import PointLike, SpinePoint, as_points, sort_points
from spine_vec.domain.results import (
    LevelVector, OutputRow, RegionalResultants, SpineLoadResult,
)
from spine_vec.engine.aggregate import aggregate
from spine_vec.engine.curve import fit_curve
from spine_vec.engine.decompose import decompose_all
from spine_vec.engine.weights import compute_region_weight_shares

logger = logging.getLogger(__name__)

MIN_POINTS_PER_REGION = 2

INSUFFICIENT_DATA_MESSAGE = (
    "Insufficient points to perform spine vector calculations. Please make sure you have "
    "at least two points for the cervical, thoracic, and lumbar regions."
)


def parse_weight(value: Any) -> Optional[float]:
    """
    Peso del paciente (kg) desde texto o número.
    None si está vacío, no es numérico, no es finito o es <= 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        t = value.strip()
        if not t:
            return None
        try:
            w = float(t)
        except ValueError:
            return None
    else:
        try:
            w = float(value)
        except (TypeError, ValueError):
            return None

    if not math.isfinite(w) or w <= 0:
        return None
    return w


def count_region_labels(points: Iterable[SpinePoint]) -> Dict[str, int]:
    counts = {r: 0 for r in REGIONS}
    for p in points:
        region = p.region
        if region is not None:
            counts[region] += 1
    return counts


def build_rows(
    level_vectors: Sequence[LevelVector],
    resultants: RegionalResultants,
    config: WeightModelConfig = DEFAULT_CONFIG,
) -> List[OutputRow]:
    """
    Tabla de salida:
      - una fila por nivel: [θ, corte con signo, normal con signo, tanθ, nivel]
      - RSV-C, RSV-T, RSV-L, GSV: [180 - ángulo, |R|, |N|, tan(ángulo), tag]
    """
    d = int(config.level_row_decimals)
    rows: List[OutputRow] = [
        OutputRow(
            angle_deg=round(lv.angle_deg, d),
            shear_magnitude=round(lv.signed_shear, d),
            normal_magnitude=round(lv.signed_normal, d),
            ratio=round(lv.ratio, d),
            level=lv.label,
        )
        for lv in level_vectors
    ]

    ds = int(config.summary_decimals)
    dr = int(config.summary_ratio_decimals)
    for tag, res in resultants.by_tag():
        rows.append(OutputRow(
            angle_deg=180.0 - round(res.angle_deg, ds),
            shear_magnitude=round(res.magnitude, ds),
            normal_magnitude=round(res.normal_magnitude, ds),
            ratio=round(res.ratio, dr),
            level=tag,
        ))
    return rows


def compute_spine_load_vectors(
    points: Iterable[PointLike],
    weight: Any,
    config: WeightModelConfig = DEFAULT_CONFIG,
) -> Optional[SpineLoadResult]:
    """
    Cálculo completo: curva -> ángulos -> corte/normal por nivel -> resultantes -> tabla.

    Devuelve None si faltan datos (no hay puntos, peso inválido o menos de 2
    puntos etiquetados en alguna región). Una etiqueta fuera de C1..S1
    es un error de contrato y propaga UnknownLevelError.
    """
    pts = as_points(points)
    if not pts:
        logger.info("Sin puntos: no se calcula.")
        return None

    w = parse_weight(weight)
    if w is None:
        logger.info("Peso inválido (%r): no se calcula.", weight)
        return None

    sorted_pts = sort_points(pts)

    counts = count_region_labels(sorted_pts)
    missing = [r for r in REGIONS if counts[r] < MIN_POINTS_PER_REGION]
    if missing:
        logger.info(
            "Puntos insuficientes (C=%d, T=%d, L=%d); faltan en: %s.",
            counts[REGIONS[0]], counts[REGIONS[1]], counts[REGIONS[2]], ", ".join(missing),
        )
        return None

    logger.info("Calculando vectores con peso %g kg (%d puntos).", w, len(sorted_pts))

    curve = fit_curve(sorted_pts)
    angles = [float(a) for a in curve.tangent_angles(sorted_pts)]

    shares = compute_region_weight_shares(config)
    level_vectors = decompose_all(sorted_pts, angles, w, shares, config)

    resultants = aggregate(level_vectors)
    rows = build_rows(level_vectors, resultants, config)

    g = resultants.global_
    logger.info("GSV: |R|=%.1f N, ángulo clínico=%.1f°", g.magnitude, g.clinical_angle_deg)

    return SpineLoadResult(
        rows=rows,
        level_vectors=level_vectors,
        resultants=resultants,
        points=sorted_pts,
        angles=angles,
        weight_kg=w,
    )
