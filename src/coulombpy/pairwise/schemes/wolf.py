"""Damped shifted-force Wolf summation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from scipy.special import erfc

from coulombpy.pairwise.base import (
    ArrayLike,
    SchemeKind,
    SelfEnergyPrefactors,
    ShortRangeFunction,
    require_non_negative,
)


SQRT_PI = math.sqrt(math.pi)


@dataclass(frozen=True)
class Wolf(ShortRangeFunction):
    """Wolf damped and shifted kernel.

    ``S(q) = erfc(eta q) - q erfc(eta)`` with ``eta = alpha * cutoff``, so that
    ``S(1) = 0``. With ``alpha = 0`` this is the undamped Wolf potential. The
    method is thermodynamically consistent only when the self energy is added
    once per particle.
    """

    alpha: float = 0.0

    kind: ClassVar[SchemeKind] = SchemeKind.WOLF
    url: ClassVar[str] = "https://doi.org/10.1063/1.478738"

    def __post_init__(self) -> None:
        super().__post_init__()
        require_non_negative("alpha", self.alpha)

    @property
    def eta(self) -> float:
        """Reduced damping, alpha times cutoff."""
        return self.alpha * self.cutoff

    @property
    def continuity_order(self) -> int:
        return 0

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return erfc(self.eta * q) - q * math.erfc(self.eta)

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        return -2.0 * eta / SQRT_PI * np.exp(-((eta * q) ** 2)) - math.erfc(eta)

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        return 4.0 * eta**3 / SQRT_PI * q * np.exp(-((eta * q) ** 2))

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        return 4.0 * eta**3 / SQRT_PI * (1.0 - 2.0 * (eta * q) ** 2) * np.exp(-((eta * q) ** 2))

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        eta = self.eta
        return SelfEnergyPrefactors(
            monopole=-(eta / SQRT_PI + 0.5 * math.erfc(eta)),
            dipole=-2.0 * eta**3 / (3.0 * SQRT_PI),
        )
