"""Reaction-field electrostatics."""

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
    _zeros,
    require_positive,
)


@dataclass(frozen=True)
class ReactionField(ShortRangeFunction):
    """Reaction field from a dielectric continuum beyond the cutoff sphere.

    ``S(q) = 1 + a q^3 - b q`` with ``a = (eps_rf - eps_r) / (2 eps_rf + eps_r)``
    and, when shifted, ``b = 3 eps_rf / (2 eps_rf + eps_r)`` so that ``S(1) = 0``.
    ``eps_r`` is the permittivity inside the cutoff sphere and ``eps_rf`` that of
    the surrounding continuum; ``eps_rf = inf`` gives conducting boundaries.
    """

    epsr: float = 1.0
    epsrf: float = math.inf
    shifted: bool = True

    kind: ClassVar[SchemeKind] = SchemeKind.REACTION_FIELD
    url: ClassVar[str] = "https://doi.org/dbs99w"

    def __post_init__(self) -> None:
        super().__post_init__()
        require_positive("epsr", self.epsr)
        require_positive("epsrf", self.epsrf, allow_inf=True)

    @property
    def dielectric_ratio(self) -> float:
        """eps_r / eps_rf; zero for a conducting continuum."""
        return self.epsr / self.epsrf

    @property
    def cubic_coefficient(self) -> float:
        ratio = self.dielectric_ratio
        return (1.0 - ratio) / (2.0 + ratio)

    @property
    def linear_coefficient(self) -> float:
        if not self.shifted:
            return 0.0
        return 3.0 / (2.0 + self.dielectric_ratio)

    @property
    def continuity_order(self) -> int:
        return 0 if self.shifted else -1

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return 1.0 + self.cubic_coefficient * q**3 - self.linear_coefficient * q

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return 3.0 * self.cubic_coefficient * q**2 - self.linear_coefficient

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        q = np.asarray(q, dtype=float)
        return 6.0 * self.cubic_coefficient * q

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        return _zeros(q) + 6.0 * self.cubic_coefficient

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        return SelfEnergyPrefactors(
            monopole=-0.5 * self.linear_coefficient,
            dipole=-self.cubic_coefficient,
        )
