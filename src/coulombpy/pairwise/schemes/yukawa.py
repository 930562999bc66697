"""Screened Coulomb (Yukawa) interaction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from coulombpy.pairwise.base import (
    ArrayLike,
    SchemeKind,
    SelfEnergyPrefactors,
    ShortRangeFunction,
    require_positive,
)


@dataclass(frozen=True)
class Yukawa(ShortRangeFunction):
    """Debye-Hueckel screened kernel ``S(q) = exp(-zeta q)``, ``zeta = cutoff / debye_length``.

    With ``shifted=True`` the energy is shifted to zero at the cutoff,
    ``S(q) = exp(-zeta q) - q exp(-zeta)``.
    """

    debye_length: float = math.inf
    shifted: bool = False

    kind: ClassVar[SchemeKind] = SchemeKind.YUKAWA
    url: ClassVar[str] = "https://en.wikipedia.org/wiki/Debye%E2%80%93H%C3%BCckel_theory"

    def __post_init__(self) -> None:
        super().__post_init__()
        require_positive("debye_length", self.debye_length, allow_inf=True)

    @property
    def zeta(self) -> float:
        """Reduced inverse Debye length, cutoff / debye_length."""
        return self.cutoff / self.debye_length

    @property
    def kappa(self) -> float | None:
        if math.isinf(self.debye_length):
            return None
        return 1.0 / self.debye_length

    @property
    def continuity_order(self) -> int:
        return 0 if self.shifted else -1

    def _shift(self) -> float:
        return math.exp(-self.zeta) if self.shifted else 0.0

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return np.exp(-self.zeta * q) - q * self._shift()

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return -self.zeta * np.exp(-self.zeta * q) - self._shift()

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return self.zeta**2 * np.exp(-self.zeta * q)

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return -(self.zeta**3) * np.exp(-self.zeta * q)

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        # The kernel has a cusp at the origin (f2(0) != 0), so no dipole term.
        return SelfEnergyPrefactors(monopole=-0.5 * (self.zeta + self._shift()))
