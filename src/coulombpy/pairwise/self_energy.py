"""Self-energy and total-energy helpers.

Schemes that redistribute long-range contributions (Wolf, Ewald, Poisson,
reaction field) are only thermodynamically consistent when the per-particle
self energy is added once per particle, on top of the pair sum.
"""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

import numpy as np

from coulombpy.pairwise.base import ShortRangeFunction
from coulombpy.pairwise.multipole import evaluate_pair
from coulombpy.pairwise.types import Multipole


Array = np.ndarray


def self_energy_prefactor(scheme: ShortRangeFunction, charge: float, dipole: Array | None = None) -> float:
    """Self energy of one particle in units of the Bjerrum length."""

    return scheme.self_energy_prefactor(charge, dipole)


def self_energy(scheme: ShortRangeFunction, multipoles: Sequence[Multipole], bjerrum_length: float = 1.0) -> float:
    """Summed self energy of all particles."""

    return bjerrum_length * sum(scheme.self_energy_prefactor(m.charge, m.dipole) for m in multipoles)


def pair_energy(
    scheme: ShortRangeFunction,
    multipoles: Sequence[Multipole],
    bjerrum_length: float = 1.0,
    box: Array | None = None,
) -> float:
    """Sum of pair energies over all unique pairs."""

    return float(
        sum(evaluate_pair(scheme, a, b, bjerrum_length=bjerrum_length, box=box).energy for a, b in combinations(multipoles, 2))
    )


def total_energy(
    scheme: ShortRangeFunction,
    multipoles: Sequence[Multipole],
    bjerrum_length: float = 1.0,
    box: Array | None = None,
) -> float:
    """Pair sum plus self energy added once per particle."""

    return pair_energy(scheme, multipoles, bjerrum_length, box) + self_energy(scheme, multipoles, bjerrum_length)
