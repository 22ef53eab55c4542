from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FloatUtils:
    """Float primitives with IEEE-754 results where Python would raise."""

    @staticmethod
    def divide(a: float, b: float) -> float:
        """Quotient a / b; division by zero gives +-inf or nan."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(a) / np.float64(b))

    @staticmethod
    def fmod(a: float, b: float) -> float:
        """Truncated remainder, the result takes the sign of the dividend."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.fmod(np.float64(a), np.float64(b)))

    @staticmethod
    def acos(a: float) -> float:
        """Arc cosine in radians, nan outside [-1, 1]."""
        with np.errstate(invalid="ignore"):
            return float(np.arccos(np.float64(a)))
