from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

import numpy as np
from scipy.interpolate import CubicSpline

from spine_vec.domain.errors import CurveFitError, InsufficientPointsError
from spine_vec.domain.points import SpinePoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittedCurve:
    """
    Spline cúbica natural x = f(y) por los puntos digitalizados.

    Convención:
    - y es el eje independiente (la columna se marca de arriba hacia abajo)
    - contorno natural: f''(y_min) = f''(y_max) = 0
    """
    ys: np.ndarray
    xs: np.ndarray
    spline: CubicSpline

    def evaluate(self, y: float) -> float:
        return float(self.spline(float(y)))

    def derivative(self, order: int = 1) -> Callable[[np.ndarray], np.ndarray]:
        return self.spline.derivative(order)

    def slopes(self, ys: Optional[np.ndarray] = None) -> np.ndarray:
        """dx/dy en los y pedidos (por defecto, los nodos)."""
        y = self.ys if ys is None else np.asarray(ys, dtype=float)
        return np.asarray(self.spline.derivative(1)(y), dtype=float)

    def tangent_angles(self, points: Optional[Sequence[SpinePoint]] = None) -> np.ndarray:
        """
        Ángulo (grados) de la tangente en cada punto, mismo orden que la entrada.

        Tangente t = (dx/dy, 1) normalizada; ángulo = atan2(t_x, t_y).
        0° => columna vertical en ese nivel; signo = sentido de la inclinación.
        """
        y = self.ys if points is None else np.asarray([p.y for p in points], dtype=float)
        dx = self.slopes(y)
        dy = np.ones_like(dx)
        t = np.stack((dx, dy), axis=-1)
        t = t / np.linalg.norm(t, axis=-1, keepdims=True)
        return np.degrees(np.arctan2(t[:, 0], t[:, 1]))

    def sample(self, n: int = 1000) -> Tuple[np.ndarray, np.ndarray]:
        """Muestreo denso (xs, ys) entre y_min e y_max, para superponer la curva."""
        ynew = np.linspace(float(np.min(self.ys)), float(np.max(self.ys)), int(n))
        return np.asarray(self.spline(ynew), dtype=float), ynew


def fit_curve(points: Sequence[SpinePoint]) -> FittedCurve:
    """
    Ajusta la spline sobre puntos YA ordenados por y.

    Errores:
      - InsufficientPointsError: menos de 2 puntos
      - CurveFitError: y no estrictamente creciente o coordenadas no finitas
    """
    if len(points) < 2:
        raise InsufficientPointsError(f"Se necesitan al menos 2 puntos para la curva (hay {len(points)}).")

    ys = np.asarray([float(p.y) for p in points], dtype=float)
    xs = np.asarray([float(p.x) for p in points], dtype=float)

    if not (np.all(np.isfinite(ys)) and np.all(np.isfinite(xs))):
        raise CurveFitError("Coordenadas no finitas en los puntos de la curva.")

    steps = np.diff(ys)
    if np.any(steps < 0):
        raise CurveFitError("Los puntos deben estar ordenados por y ascendente.")
    if np.any(steps == 0):
        dup = sorted({float(v) for v in ys[1:][steps == 0]})
        raise CurveFitError(f"Hay puntos con la misma y ({', '.join(f'{v:g}' for v in dup)}): la curva x=f(y) no es única.")

    cs = CubicSpline(ys, xs, bc_type="natural")
    logger.debug("Spline natural ajustada con %d puntos (y en [%g, %g]).", len(ys), ys[0], ys[-1])
    return FittedCurve(ys=ys, xs=xs, spline=cs)
