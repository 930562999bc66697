"""Physical constants and unit conversion helpers.

Internally all lengths are in angstrom, charges in elementary charges and
energies in units of the thermal energy kT. Conversions below move values in
and out of that convention.
"""

from __future__ import annotations

import numpy as np


# CODATA 2018 constants (SI).
ELEMENTARY_CHARGE_C = 1.602176634e-19
BOLTZMANN_J_K = 1.380649e-23
AVOGADRO_PER_MOL = 6.02214076e23
VACUUM_PERMITTIVITY_F_M = 8.8541878128e-12
ANGSTROM_M = 1.0e-10
LITER_ANGSTROM3 = 1.0e27
DEBYE_C_M = 3.33564095198152e-30


def thermal_energy(temperature: np.ndarray | float) -> np.ndarray | float:
    """Thermal energy kT [J] at the given temperature [K]."""

    return BOLTZMANN_J_K * np.asarray(temperature, dtype=float)


def kt_to_kjmol(energy: np.ndarray | float, temperature: float) -> np.ndarray | float:
    """Convert an energy in units of kT to kJ/mol."""

    factor = thermal_energy(temperature) * AVOGADRO_PER_MOL * 1.0e-3
    return np.asarray(energy, dtype=float) * factor


def kjmol_to_kt(energy: np.ndarray | float, temperature: float) -> np.ndarray | float:
    """Convert an energy in kJ/mol to units of kT."""

    factor = float(kt_to_kjmol(1.0, temperature))
    return np.asarray(energy, dtype=float) / factor


def debye_to_eangstrom(dipole: np.ndarray | float) -> np.ndarray | float:
    """Convert a dipole moment [debye] to elementary charge times angstrom."""

    return np.asarray(dipole, dtype=float) * DEBYE_C_M / (ELEMENTARY_CHARGE_C * ANGSTROM_M)


def eangstrom_to_debye(dipole: np.ndarray | float) -> np.ndarray | float:
    """Convert a dipole moment [e*angstrom] to debye."""

    factor = float(debye_to_eangstrom(1.0))
    return np.asarray(dipole, dtype=float) / factor
