"""Real-space part of Ewald summation, optionally with Debye screening."""

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
class RealSpaceEwald(ShortRangeFunction):
    """Real-space Ewald kernel ``S(q) = erfc(eta q)``, ``eta = alpha * cutoff``.

    With a Debye length the screened (Yukawa) Ewald split is used,
    ``S(q) = [erfc(eta q + zeta / 2 eta) exp(2 zeta q) + erfc(eta q - zeta / 2 eta)] / 2``
    with ``zeta = cutoff / debye_length``.
    """

    alpha: float = 0.1
    debye_length: float | None = None

    kind: ClassVar[SchemeKind] = SchemeKind.EWALD
    url: ClassVar[str] = "https://doi.org/fcjts8"

    def __post_init__(self) -> None:
        super().__post_init__()
        require_positive("alpha", self.alpha)
        if self.debye_length is not None:
            require_positive("debye_length", self.debye_length)

    @property
    def eta(self) -> float:
        """Reduced splitting parameter, alpha times cutoff."""
        return self.alpha * self.cutoff

    @property
    def zeta(self) -> float:
        """Reduced inverse Debye length; zero without salt."""
        if self.debye_length is None:
            return 0.0
        return self.cutoff / self.debye_length

    @property
    def kappa(self) -> float | None:
        if self.debye_length is None:
            return None
        return 1.0 / self.debye_length

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta, zeta = self.eta, self.zeta
        if zeta == 0.0:
            return erfc(eta * q)
        shift = zeta / (2.0 * eta)
        return 0.5 * (erfc(eta * q + shift) * np.exp(2.0 * zeta * q) + erfc(eta * q - shift))

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta, zeta = self.eta, self.zeta
        if zeta == 0.0:
            return -2.0 * eta / SQRT_PI * np.exp(-((eta * q) ** 2))
        shift = zeta / (2.0 * eta)
        gauss = np.exp(-((eta * q - shift) ** 2))
        return -2.0 * eta / SQRT_PI * gauss + zeta * erfc(eta * q + shift) * np.exp(2.0 * zeta * q)

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta, zeta = self.eta, self.zeta
        if zeta == 0.0:
            return 4.0 * eta**2 / SQRT_PI * (eta * q) * np.exp(-((eta * q) ** 2))
        shift = zeta / (2.0 * eta)
        gauss = np.exp(-((eta * q - shift) ** 2))
        return (
            4.0 * eta**2 / SQRT_PI * (eta * q - zeta / eta) * gauss
            + 2.0 * zeta**2 * erfc(eta * q + shift) * np.exp(2.0 * zeta * q)
        )

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        eta, zeta = self.eta, self.zeta
        if zeta == 0.0:
            return 4.0 * eta**3 / SQRT_PI * (1.0 - 2.0 * (eta * q) ** 2) * np.exp(-((eta * q) ** 2))
        shift = zeta / (2.0 * eta)
        gauss = np.exp(-((eta * q - shift) ** 2))
        polynomial = 1.0 - 2.0 * (eta * q - zeta / eta) * (eta * q - shift) - zeta**2 / eta**2
        return (
            4.0 * eta**3 / SQRT_PI * polynomial * gauss
            + 4.0 * zeta**3 * erfc(eta * q + shift) * np.exp(2.0 * zeta * q)
        )

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        eta, zeta = self.eta, self.zeta
        shift = zeta / (2.0 * eta)
        gauss = math.exp(-(shift**2))
        monopole = -eta / SQRT_PI * (gauss - SQRT_PI * shift * math.erfc(shift))
        dipole = (
            -(eta**3) / SQRT_PI * 2.0 / 3.0
            * (SQRT_PI * zeta**3 / (4.0 * eta**3) * math.erfc(shift) + (1.0 - zeta**2 / (2.0 * eta**2)) * gauss)
        )
        return SelfEnergyPrefactors(monopole=monopole, dipole=dipole)
