from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from spine_vec.domain.levels import CERVICAL, THORACIC, LUMBAR, REGIONS, region_of
from spine_vec.domain.results import LevelVector, RegionResultant, RegionalResultants


def _sum_vectors(vectors: List[tuple]) -> np.ndarray:
    if not vectors:
        return np.zeros(2, dtype=float)
    return np.sum(np.asarray(vectors, dtype=float), axis=0)


def resultant_of(level_vectors: Iterable[LevelVector]) -> RegionResultant:
    """
    Suma vectorial de los vectores de corte (y, aparte, de los normales).
    Ángulo matemático: atan2(y, x) en grados.
    """
    lvs = list(level_vectors)
    R = _sum_vectors([lv.shear_vector for lv in lvs])
    N = _sum_vectors([lv.normal_vector for lv in lvs])

    return RegionResultant(
        vector=(float(R[0]), float(R[1])),
        magnitude=float(np.linalg.norm(R)),
        angle_deg=float(np.degrees(np.arctan2(R[1], R[0]))),
        normal_vector=(float(N[0]), float(N[1])),
        normal_magnitude=float(np.linalg.norm(N)),
    )


def group_by_region(level_vectors: Iterable[LevelVector]) -> Dict[str, List[LevelVector]]:
    """Agrupa por región; etiquetas desconocidas quedan fuera de todos los grupos."""
    groups: Dict[str, List[LevelVector]] = {r: [] for r in REGIONS}
    for lv in level_vectors:
        region = region_of(lv.label)
        if region is not None:
            groups[region].append(lv)
    return groups


def aggregate(level_vectors: Iterable[LevelVector]) -> RegionalResultants:
    """
    Resultantes por región (C, T, L) y global.
    La global suma solo los niveles reconocidos (los mismos de los tres grupos).
    """
    groups = group_by_region(level_vectors)
    all_known = groups[CERVICAL] + groups[THORACIC] + groups[LUMBAR]

    return RegionalResultants(
        cervical=resultant_of(groups[CERVICAL]),
        thoracic=resultant_of(groups[THORACIC]),
        lumbar=resultant_of(groups[LUMBAR]),
        global_=resultant_of(all_known),
    )
