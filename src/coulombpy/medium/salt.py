"""Salts, stoichiometry and ionic strength."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from coulombpy.errors import DomainError, SaltError


def stoichiometry(valencies: tuple[int, ...]) -> tuple[int, ...]:
    """Smallest integer stoichiometry of an electroneutral binary salt.

    ``(1, -1) -> (1, 1)``, ``(2, -1) -> (1, 2)``, ``(2, -2) -> (1, 1)``.
    """

    if len(valencies) != 2:
        raise SaltError("Stoichiometry can only be resolved for two ions; provide it explicitly.")
    if any(int(z) != z for z in valencies):
        raise SaltError("Valencies must be integers.")
    positive = [z for z in valencies if z > 0]
    negative = [z for z in valencies if z < 0]
    if len(positive) != 1 or len(negative) != 1:
        raise SaltError("Cannot resolve stoichiometry; provide both positive and negative ions.")
    cation, anion = int(positive[0]), int(-negative[0])
    common = math.gcd(cation, anion)
    nu_cation, nu_anion = anion // common, cation // common
    if valencies[0] > 0:
        return nu_cation, nu_anion
    return nu_anion, nu_cation


@dataclass(frozen=True)
class Salt:
    """Electroneutral salt given by ion valencies and, optionally, stoichiometry."""

    valencies: tuple[int, ...]
    stoichiometry: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        valencies = tuple(int(z) for z in self.valencies)
        if any(z != v for z, v in zip(valencies, self.valencies)):
            raise SaltError("Valencies must be integers.")
        object.__setattr__(self, "valencies", valencies)
        if self.stoichiometry is None:
            nu = stoichiometry(valencies)
        else:
            nu = tuple(int(n) for n in self.stoichiometry)
            if len(nu) != len(valencies):
                raise SaltError("stoichiometry must have one entry per valency.")
            if any(n <= 0 for n in nu):
                raise SaltError("Stoichiometric coefficients must be positive.")
            if any(z == 0 for z in valencies):
                raise SaltError("Valencies must be non-zero.")
        if sum(n * z for n, z in zip(nu, valencies)) != 0:
            raise SaltError(f"Salt with valencies {valencies} and stoichiometry {nu} is not electroneutral.")
        object.__setattr__(self, "stoichiometry", nu)

    def ion_molarities(self, molarity: float) -> tuple[float, ...]:
        """Concentration [mol/l] of each ion for a salt molarity [mol/l]."""

        _check_molarity(molarity)
        return tuple(n * molarity for n in self.stoichiometry)

    def ionic_strength(self, molarity: float) -> float:
        """Ionic strength ``I = 1/2 sum c_i z_i^2`` [mol/l]."""

        _check_molarity(molarity)
        nu = np.asarray(self.stoichiometry, dtype=float)
        z = np.asarray(self.valencies, dtype=float)
        return float(0.5 * molarity * np.sum(nu * z * z))


def _check_molarity(molarity: float) -> None:
    if not math.isfinite(molarity) or molarity < 0.0:
        raise DomainError(f"Molarity must be finite and non-negative, got {molarity!r}.")


def ionic_strength(valencies: tuple[int, ...], molarity: float) -> float:
    return Salt(valencies).ionic_strength(molarity)


SODIUM_CHLORIDE = Salt((1, -1))
CALCIUM_CHLORIDE = Salt((2, -1))
CALCIUM_SULFATE = Salt((2, -2))
SODIUM_SULFATE = Salt((1, -2))
LANTHANUM_CHLORIDE = Salt((3, -1))
POTASSIUM_ALUM = Salt((1, 3, -2), (1, 1, 2))
