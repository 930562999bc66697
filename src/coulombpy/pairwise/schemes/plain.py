"""Plain Coulomb interaction without damping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from coulombpy.pairwise.base import (
    UNBOUNDED_CUTOFF,
    ArrayLike,
    SchemeKind,
    SelfEnergyPrefactors,
    ShortRangeFunction,
    _ones,
    _zeros,
)


@dataclass(frozen=True)
class Plain(ShortRangeFunction):
    """Bare Coulomb kernel, ``S(q) = 1``, hard-truncated at the cutoff.

    Serves as the reference when validating the pair evaluator independently
    of any damping.
    """

    cutoff: float = UNBOUNDED_CUTOFF

    kind: ClassVar[SchemeKind] = SchemeKind.PLAIN
    url: ClassVar[str] = "https://en.wikipedia.org/wiki/Coulomb%27s_law"

    @classmethod
    def without_cutoff(cls) -> "Plain":
        return cls(cutoff=UNBOUNDED_CUTOFF)

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        return _ones(q)

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        return _zeros(q)

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        return _zeros(q)

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        return _zeros(q)

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        return SelfEnergyPrefactors()
