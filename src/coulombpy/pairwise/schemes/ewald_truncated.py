"""Ewald real-space kernel for a Gaussian charge cloud truncated at the cutoff.

The screening Gaussian of ordinary Ewald summation is cut off at ``r_c`` and
renormalised, so the kernel reaches zero with zero slope at the cutoff without
any shifting.
"""

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
    require_positive,
)


SQRT_PI = math.sqrt(math.pi)


@dataclass(frozen=True)
class TruncatedEwald(ShortRangeFunction):
    """Truncated Gaussian Ewald, ``eta = alpha * cutoff``.

    ``S(q) = [erfc(eta q) - erfc(eta) - (1 - q) 2 eta exp(-eta^2) / sqrt(pi)] / N``
    with ``N = 1 - erfc(eta) - 2 eta exp(-eta^2) / sqrt(pi)``.
    """

    alpha: float = 0.1

    kind: ClassVar[SchemeKind] = SchemeKind.EWALD_TRUNCATED

    def __post_init__(self) -> None:
        super().__post_init__()
        require_positive("alpha", self.alpha)

    @property
    def eta(self) -> float:
        return self.alpha * self.cutoff

    @property
    def normalization(self) -> float:
        eta = self.eta
        return 1.0 - math.erfc(eta) - 2.0 * eta / SQRT_PI * math.exp(-(eta**2))

    @property
    def continuity_order(self) -> int:
        return 1

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        tail = 2.0 * eta / SQRT_PI * math.exp(-(eta**2))
        return (erfc(eta * q) - math.erfc(eta) - (1.0 - q) * tail) / self.normalization

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        gauss = np.exp(-((eta * q) ** 2)) - math.exp(-(eta**2))
        return -2.0 * eta / SQRT_PI * gauss / self.normalization

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        return 4.0 * eta**3 / SQRT_PI * q * np.exp(-((eta * q) ** 2)) / self.normalization

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta = self.eta
        polynomial = 1.0 - 2.0 * (eta * q) ** 2
        return 4.0 * eta**3 / SQRT_PI * polynomial * np.exp(-((eta * q) ** 2)) / self.normalization

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        eta, norm = self.eta, self.normalization
        return SelfEnergyPrefactors(
            monopole=-eta / SQRT_PI * (1.0 - math.exp(-(eta**2))) / norm,
            dipole=-2.0 * eta**3 / (3.0 * SQRT_PI * norm),
        )
