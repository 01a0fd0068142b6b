from __future__ import annotations

from dataclasses import dataclass

from scipy import constants

DEFAULT_WEIGHT_KG = 60.0


@dataclass(frozen=True)
class WeightModelConfig:
    """
    Constantes del modelo de distribución de peso (en % del peso corporal).

      - head_contribution: cabeza, soportada por toda la columna
      - cervical_contribution: repartida entre C1..C7
      - total_supported_weight: peso total que llega a la región lumbar
      - trunk_upper_extremities_contribution: tronco + miembros superiores,
        repartida entre T1..S1 (= total - cabeza - cervical)

    normalization: divisor de las fórmulas con signo (58). Origen no documentado,
    se conserva el valor tal cual.
    """
    head_contribution: float = 7.0
    cervical_contribution: float = 4.0
    total_supported_weight: float = 65.0

    normalization: float = 58.0
    gravity: float = constants.g  # m/s²

    # Redondeos de la tabla de salida
    level_row_decimals: int = 1
    summary_decimals: int = 0
    summary_ratio_decimals: int = 1

    @property
    def trunk_upper_extremities_contribution(self) -> float:
        return float(self.total_supported_weight - self.head_contribution - self.cervical_contribution)


DEFAULT_CONFIG = WeightModelConfig()
