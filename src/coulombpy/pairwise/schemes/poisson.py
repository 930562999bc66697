"""Poisson family of short-range functions.

Electrostatic pair potentials that cancel a chosen number of derivatives at
the origin (``C``) and at the cutoff (``D``). See Stenqvist and Lund,
https://doi.org/c5fr, and Fanourgakis, https://doi.org/10.1063/1.3216520.

Without salt::

    S(q) = (1 - q)^(D + 1) * sum_{c=0}^{C-1} binom(D - 1 + c, c) (C - c) / C * q^c

With a Debye length ``lambda`` and ``k = cutoff / lambda`` the polynomial is
evaluated at ``p(q) = expm1(2 k q) / expm1(2 k)`` and multiplied by ``exp(-k q)``.
For the undamped Wolf case (C=1, D=0) this gives the screened Green's function
of a grounded sphere, ``sinh(k (1 - q)) / sinh(k)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from coulombpy.errors import ConfigError
from coulombpy.pairwise.base import (
    ArrayLike,
    SchemeKind,
    SelfEnergyPrefactors,
    ShortRangeFunction,
    _ones,
    _zeros,
    require_positive,
)


# Named (C, D) combinations from the literature.
POISSON_ALIASES: dict[str, tuple[int, int]] = {
    "plain": (1, -1),
    "undamped_wolf": (1, 0),
    "fennell": (1, 1),
    "kale": (1, 2),
    "mccann": (1, 3),
    "fukuda": (2, 1),
    "markland": (2, 2),
    "stenqvist": (3, 3),
    "fanourgakis": (4, 3),
}


def _binomial(n: int, k: int) -> float:
    """Binomial coefficient for any integer ``n``, e.g. ``binom(-1, 0) == 1``."""

    return math.prod((n - j) / (j + 1) for j in range(k))


def _polynomial_derivatives(p: np.ndarray, c: int, d: int) -> tuple[np.ndarray, ...]:
    """Return S(p) and dS/dp, d2S/dp2, d3S/dp3 for a salt-free Poisson polynomial."""

    weights = [_binomial(d - 1 + i, i) * (c - i) / c for i in range(c)]
    one_minus = 1.0 - p

    poly = np.zeros_like(p)
    dpoly = np.zeros_like(p)
    for i, w in enumerate(weights):
        poly = poly + w * p**i
        if i > 0:
            dpoly = dpoly + w * i * p ** (i - 1)

    s0 = one_minus ** (d + 1) * poly
    s1 = one_minus ** (d + 1) * dpoly
    if d != -1:
        s1 = s1 - (d + 1) * one_minus**d * poly

    # Closed form d2S/dp2 = binom(C + D, C) D (1 - p)^(D - 1) p^(C - 1).
    k = _binomial(c + d, c) * d
    if k == 0:
        return s0, s1, np.zeros_like(p), np.zeros_like(p)
    s2 = k * one_minus ** (d - 1) * p ** (c - 1)
    s3 = np.zeros_like(p)
    if d != 1:
        s3 = s3 - k * (d - 1) * one_minus ** (d - 2) * p ** (c - 1)
    if c != 1:
        s3 = s3 + k * (c - 1) * one_minus ** (d - 1) * p ** (c - 2)
    return s0, s1, s2, s3


@dataclass(frozen=True)
class Poisson(ShortRangeFunction):
    """Poisson short-range function with ``C`` and ``D`` cancelled derivatives.

    Constraints: ``C >= 1``; ``D >= -1`` or ``D == -C``; ``D == 0`` requires
    ``C == 1``. ``D == -C`` is the plain Coulomb kernel and ``D == -1`` with
    ``C > 1`` the linear ``1 - (C - 1) q / C``. The first ``D`` derivatives
    vanish at the cutoff, so forces are continuous for ``D >= 1``.
    """

    c: int = 3
    d: int = 3
    debye_length: float | None = None

    kind: ClassVar[SchemeKind] = SchemeKind.POISSON
    url: ClassVar[str] = "https://doi.org/c5fr"

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.c, bool) or not isinstance(self.c, int):
            raise ConfigError(f"C must be an integer, got {self.c!r}.")
        if isinstance(self.d, bool) or not isinstance(self.d, int):
            raise ConfigError(f"D must be an integer, got {self.d!r}.")
        if self.c < 1:
            raise ConfigError("C must be larger than zero.")
        if self.d < -1 and self.d != -self.c:
            raise ConfigError("D must be at least -1 unless it equals -C.")
        if self.d == 0 and self.c != 1:
            raise ConfigError("If D is zero, C must equal one.")
        if self.debye_length is not None:
            require_positive("debye_length", self.debye_length)

    @classmethod
    def from_alias(cls, name: str, cutoff: float, debye_length: float | None = None) -> "Poisson":
        key = name.strip().lower()
        try:
            c, d = POISSON_ALIASES[key]
        except KeyError as exc:
            available = ", ".join(sorted(POISSON_ALIASES))
            raise ConfigError(f"Unknown Poisson variant '{name}'. Available variants: {available}") from exc
        return cls(cutoff=cutoff, c=c, d=d, debye_length=debye_length)

    @property
    def has_cancellation(self) -> bool:
        return self.d != -self.c

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

    @property
    def continuity_order(self) -> int:
        return self.d if self.has_cancellation else -1

    def _derivatives(self, q: ArrayLike) -> tuple[ArrayLike, ...]:
        q = np.asarray(q, dtype=float)
        zeta = self.zeta
        if zeta == 0.0:
            if not self.has_cancellation:
                return _ones(q), _zeros(q), _zeros(q), _zeros(q)
            s0, s1, s2, s3 = _polynomial_derivatives(q, self.c, self.d)
            return s0[()], s1[()], s2[()], s3[()]

        # Reduced distance p(q) and its derivatives p^(n) = (2 zeta)^n exp(2 zeta q) / expm1(2 zeta),
        # both scaled by exp(-2 zeta) so that large zeta does not overflow.
        denominator = -math.expm1(-2.0 * zeta)
        growth = np.exp(2.0 * zeta * (q - 1.0)) / denominator
        p = -np.expm1(-2.0 * zeta * q) * growth
        p1 = 2.0 * zeta * growth
        p2 = 2.0 * zeta * p1
        p3 = 2.0 * zeta * p2
        if self.has_cancellation:
            s0, s1, s2, s3 = _polynomial_derivatives(p, self.c, self.d)
        else:
            s0, s1, s2, s3 = np.ones_like(p), np.zeros_like(p), np.zeros_like(p), np.zeros_like(p)

        g0 = s0
        g1 = s1 * p1
        g2 = s2 * p1**2 + s1 * p2
        g3 = s3 * p1**3 + 3.0 * s2 * p1 * p2 + s1 * p3

        # Leibniz rule with the screening factor exp(-zeta q).
        e = np.exp(-zeta * q)
        z = -zeta
        f0 = e * g0
        f1 = e * (g1 + z * g0)
        f2 = e * (g2 + 2.0 * z * g1 + z**2 * g0)
        f3 = e * (g3 + 3.0 * z * g2 + 3.0 * z**2 * g1 + z**3 * g0)
        return f0[()], f1[()], f2[()], f3[()]

    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        return self._derivatives(q)[0]

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        return self._derivatives(q)[1]

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        return self._derivatives(q)[2]

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        return self._derivatives(q)[3]

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        _, f1, f2, f3 = (float(v) for v in self._derivatives(0.0))
        # A cusp at the origin (f2(0) != 0) leaves the dipole self term undefined.
        dipole = -f3 / 6.0 if f2 == 0.0 else 0.0
        return SelfEnergyPrefactors(monopole=0.5 * f1, dipole=dipole)


def qpotential(cutoff: float, order: int) -> Poisson:
    """q-potential of the given order, a Poisson scheme with ``C = D = order``."""

    return Poisson(cutoff=cutoff, c=order, d=order)


def fanourgakis(cutoff: float) -> Poisson:
    return Poisson.from_alias("fanourgakis", cutoff)
