"""Common contract for short-range (truncation) functions.

A scheme scales the bare Coulomb kernel as ``S(q) / r`` with the reduced
distance ``q = r / cutoff``. Every scheme provides ``S`` (``short_range_f0``)
and its first three derivatives with respect to ``q``; charge-charge terms need
``f0`` and ``f1``, dipole terms and field gradients need ``f2`` and ``f3``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Iterable

import numpy as np

from coulombpy.errors import ConfigError
from coulombpy.pairwise.numdiff import numerical_derivative


Array = np.ndarray
ArrayLike = Array | float

# Stands in for an infinite cutoff: finite, so q = r / cutoff stays well defined.
UNBOUNDED_CUTOFF = float(np.finfo(float).max)


class SchemeKind(str, Enum):
    PLAIN = "plain"
    WOLF = "wolf"
    POISSON = "poisson"
    REACTION_FIELD = "reactionfield"
    EWALD = "ewald"
    EWALD_TRUNCATED = "ewald_truncated"
    YUKAWA = "yukawa"


@dataclass(frozen=True)
class SelfEnergyPrefactors:
    """Reduced self-energy prefactors.

    The self energy of one particle is
    ``monopole * z**2 / cutoff + dipole * |mu|**2 / cutoff**3``.
    """

    monopole: float = 0.0
    dipole: float = 0.0


def _zeros(q: ArrayLike) -> ArrayLike:
    return np.zeros_like(np.asarray(q, dtype=float))[()]


def _ones(q: ArrayLike) -> ArrayLike:
    return np.ones_like(np.asarray(q, dtype=float))[()]


def require_positive(name: str, value: float, *, allow_inf: bool = False) -> None:
    if math.isnan(value) or value <= 0.0:
        raise ConfigError(f"{name} must be positive, got {value!r}.")
    if math.isinf(value) and not allow_inf:
        raise ConfigError(f"{name} must be finite, got {value!r}.")


def require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0.0:
        raise ConfigError(f"{name} must be finite and non-negative, got {value!r}.")


@dataclass(frozen=True)
class ShortRangeFunction(ABC):
    """Base class of all truncation schemes.

    Subclasses implement :meth:`short_range_f0`. The derivatives fall back to
    the finite-difference engine in :mod:`coulombpy.pairwise.numdiff`;
    overriding them with closed forms must not change their values beyond the
    accuracy of that engine.

    Kernels accept floats or numpy arrays of ``q`` in ``[0, 1]``. Truncation
    for ``q >= 1`` is the caller's job.
    """

    cutoff: float

    kind: ClassVar[SchemeKind]
    url: ClassVar[str] = ""

    def __post_init__(self) -> None:
        require_positive("cutoff", self.cutoff)

    @abstractmethod
    def short_range_f0(self, q: ArrayLike) -> ArrayLike:
        """Short-range function S(q)."""

    def short_range_f1(self, q: ArrayLike) -> ArrayLike:
        """First derivative dS/dq."""
        return numerical_derivative(self.short_range_f0, q, order=1)

    def short_range_f2(self, q: ArrayLike) -> ArrayLike:
        """Second derivative d^2S/dq^2."""
        return numerical_derivative(self.short_range_f0, q, order=2)

    def short_range_f3(self, q: ArrayLike) -> ArrayLike:
        """Third derivative d^3S/dq^3."""
        return numerical_derivative(self.short_range_f0, q, order=3)

    @property
    def kappa(self) -> float | None:
        """Inverse Debye length, or ``None`` without salt screening."""
        return None

    @property
    def continuity_order(self) -> int:
        """Highest derivative order j with ``f_j(1) = 0``; -1 if ``f0(1) != 0``."""
        return -1

    def reduced_distance(self, r: ArrayLike) -> ArrayLike:
        return np.asarray(r, dtype=float)[()] / self.cutoff

    def self_energy_prefactors(self) -> SelfEnergyPrefactors:
        """Prefactors from the ``r -> 0`` limit of ``(S(q) - 1) / r``.

        The monopole term is ``f1(0) / 2``; the dipole term ``-f3(0) / 6`` is
        the interaction of a dipole with the regular part of its own field.
        """

        return SelfEnergyPrefactors(
            monopole=0.5 * float(self.short_range_f1(0.0)),
            dipole=-float(self.short_range_f3(0.0)) / 6.0,
        )

    def self_energy_prefactor(self, charge: float, dipole_moment: ArrayLike | None = None) -> float:
        """Self energy of a single particle, in units of the Bjerrum length."""

        prefactors = self.self_energy_prefactors()
        energy = 0.0
        if prefactors.monopole != 0.0 and charge != 0.0:
            energy += prefactors.monopole * float(charge) ** 2 / self.cutoff
        if prefactors.dipole != 0.0 and dipole_moment is not None:
            mu2 = float(np.sum(np.square(np.asarray(dipole_moment, dtype=float))))
            energy += prefactors.dipole * mu2 / self.cutoff**3
        return energy

    def self_energy(
        self,
        charges: Iterable[float],
        dipole_moments: Iterable[ArrayLike] | None = None,
    ) -> float:
        """Summed self energy; each particle contributes exactly once."""

        prefactors = self.self_energy_prefactors()
        energy = 0.0
        z = np.asarray(list(charges), dtype=float)
        if prefactors.monopole != 0.0:
            energy += prefactors.monopole * float(np.sum(z * z)) / self.cutoff
        if prefactors.dipole != 0.0 and dipole_moments is not None:
            mu = np.asarray(list(dipole_moments), dtype=float).reshape(-1, 3)
            energy += prefactors.dipole * float(np.sum(mu * mu)) / self.cutoff**3
        return energy

    def to_dict(self) -> dict[str, Any]:
        """Flat dict of the scheme's named parameters plus a ``scheme`` tag."""

        payload: dict[str, Any] = {"scheme": self.kind.value}
        payload.update(asdict(self))
        return payload

    @classmethod
    def parameter_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.init)
