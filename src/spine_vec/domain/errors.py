from __future__ import annotations


class SpineVecError(ValueError):
    """Base de errores del motor."""


class InsufficientPointsError(SpineVecError):
    """Menos de 2 puntos para ajustar la curva."""


class CurveFitError(SpineVecError):
    """Datos no aptos para la spline (y repetida, no ordenada o no finita)."""


class UnknownLevelError(SpineVecError):
    """
    Punto con etiqueta fuera de C1..S1 llegando a la descomposición.
    Es un error de contrato (etiqueta mal formada), no "faltan datos".
    """

    def __init__(self, label: str):
        self.label = label
        super().__init__(f'Nivel vertebral desconocido: "{label}". Válidos: C1-C7, T1-T12, L1-L5, S1.')


class CoordinatesFormatError(SpineVecError):
    """CSV de coordenadas ilegible (no es un archivo exportado por la app)."""
