from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Sequence

from spine_vec.domain.config import DEFAULT_CONFIG, WeightModelConfig
from spine_vec.domain.levels import (
    CERVICAL, THORACIC, LUMBAR,
    CERVICAL_LEVELS, THORACIC_LEVELS, LUMBAR_LEVELS,
    LEVEL_PROPORTION,
)
from spine_vec.domain.results import RegionWeightShare


def _fractions(levels: Sequence[str], proportion: Mapping[str, float]) -> Dict[str, float]:
    """Peso relativo de cada nivel normalizado por la suma del grupo."""
    total = sum(float(proportion[lvl]) for lvl in levels)
    return {lvl: float(proportion[lvl]) / total for lvl in levels}


def region_totals(config: WeightModelConfig = DEFAULT_CONFIG) -> Dict[str, float]:
    """
    Contribución total (en % del peso) asignada a cada grupo:
      - cervical: C1..C7
      - thoracolumbar: T1..S1 en conjunto (tronco + miembros superiores)
    """
    return {
        CERVICAL: float(config.cervical_contribution),
        THORACIC + "+" + LUMBAR: config.trunk_upper_extremities_contribution,
    }


@lru_cache(maxsize=None)
def compute_region_weight_shares(
    config: WeightModelConfig = DEFAULT_CONFIG,
) -> Mapping[str, RegionWeightShare]:
    """
    Reparto del peso por nivel a partir de LEVEL_PROPORTION.

    Cervical:
      single     = cervical * p / Σp_C
      cumulative = cabeza + cervical * p / Σp_C      (mismo valor en C1..C7)

    Torácica + lumbar (un solo grupo):
      single     = tronco * p / Σp_TL
      cumulative = acumulado corrido desde cabeza + cervical

    Tabla constante: se cachea por config.
    """
    shares: Dict[str, RegionWeightShare] = {}

    # 1) Cervical
    cerv_total = float(config.cervical_contribution)
    head = float(config.head_contribution)
    for lvl, frac in _fractions(CERVICAL_LEVELS, LEVEL_PROPORTION).items():
        single = cerv_total * frac
        shares[lvl] = RegionWeightShare(
            level=lvl,
            single_level_share=single,
            cumulative_share=head + single,
        )

    # 2) Torácica + lumbar: el acumulado arranca donde termina la cervical
    tl_total = config.trunk_upper_extremities_contribution
    prior = head + cerv_total
    for lvl, frac in _fractions(THORACIC_LEVELS + LUMBAR_LEVELS, LEVEL_PROPORTION).items():
        single = tl_total * frac
        prior = prior + single
        shares[lvl] = RegionWeightShare(
            level=lvl,
            single_level_share=single,
            cumulative_share=prior,
        )

    return MappingProxyType(shares)
