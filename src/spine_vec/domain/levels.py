from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

CERVICAL = "cervical"
THORACIC = "thoracic"
LUMBAR = "lumbar"

REGIONS: Tuple[str, str, str] = (CERVICAL, THORACIC, LUMBAR)

CERVICAL_LEVELS: Tuple[str, ...] = ("C1", "C2", "C3", "C4", "C5", "C6", "C7")
THORACIC_LEVELS: Tuple[str, ...] = (
    "T1", "T2", "T3", "T4", "T5", "T6",
    "T7", "T8", "T9", "T10", "T11", "T12",
)
# S1 se agrupa con la región lumbar
LUMBAR_LEVELS: Tuple[str, ...] = ("L1", "L2", "L3", "L4", "L5", "S1")

# Orden craneal -> caudal
ALL_LEVELS: Tuple[str, ...] = CERVICAL_LEVELS + THORACIC_LEVELS + LUMBAR_LEVELS
VALID_LEVELS = frozenset(ALL_LEVELS)

REGION_LEVELS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    CERVICAL: CERVICAL_LEVELS,
    THORACIC: THORACIC_LEVELS,
    LUMBAR: LUMBAR_LEVELS,
})

# Peso relativo con que cada nivel contribuye dentro de su región
LEVEL_PROPORTION: Mapping[str, float] = MappingProxyType({
    "C1": 1.0, "C2": 1.0, "C3": 1.0, "C4": 1.0, "C5": 1.0, "C6": 1.0, "C7": 1.0,
    "T1": 1.1, "T2": 1.1, "T3": 1.4, "T4": 1.3, "T5": 1.3, "T6": 1.3,
    "T7": 1.4, "T8": 1.5, "T9": 1.6, "T10": 2.0, "T11": 2.1, "T12": 2.5,
    "L1": 2.4, "L2": 2.4, "L3": 2.3, "L4": 2.6, "L5": 2.6, "S1": 2.6,
})

_REGION_BY_LEVEL: Dict[str, str] = {
    lvl: region for region, levels in REGION_LEVELS.items() for lvl in levels
}


def normalize_label(label: Optional[str]) -> str:
    """Etiqueta limpia; None o vacío => ''."""
    return (label or "").strip()


def is_valid_level(label: Optional[str]) -> bool:
    return normalize_label(label) in VALID_LEVELS


def region_of(label: Optional[str]) -> Optional[str]:
    """
    Región anatómica del nivel:
      - C1..C7 => 'cervical'
      - T1..T12 => 'thoracic'
      - L1..L5, S1 => 'lumbar'
    Etiquetas vacías o desconocidas => None.
    """
    return _REGION_BY_LEVEL.get(normalize_label(label))


def level_index(label: str) -> Optional[int]:
    """Posición craneal->caudal (0 = C1). None si no es un nivel válido."""
    lbl = normalize_label(label)
    if lbl not in VALID_LEVELS:
        return None
    return ALL_LEVELS.index(lbl)
