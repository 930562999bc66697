"""Implicit solvent medium: permittivity, temperature and optional salt."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from coulombpy import units
from coulombpy.errors import ConfigError, DomainError
from coulombpy.medium.permittivity import WATER, RelativePermittivity
from coulombpy.medium.permittivity import permittivity_model as _resolve_permittivity
from coulombpy.medium.salt import SODIUM_CHLORIDE, Salt


logger = logging.getLogger(__name__)

ROOM_TEMPERATURE = 298.15


def bjerrum_length(temperature: float, relative_permittivity: float) -> float:
    """Bjerrum length ``e^2 / (4 pi eps0 eps_r kT)`` [angstrom]."""

    if not temperature > 0.0:
        raise DomainError(f"Temperature must be positive, got {temperature!r}.")
    if not relative_permittivity > 0.0:
        raise DomainError(f"Relative permittivity must be positive, got {relative_permittivity!r}.")
    numerator = units.ELEMENTARY_CHARGE_C**2
    denominator = (
        4.0 * math.pi * units.VACUUM_PERMITTIVITY_F_M * relative_permittivity
        * float(units.thermal_energy(temperature))
    )
    return numerator / denominator / units.ANGSTROM_M


def debye_length(bjerrum: float, ionic_strength: float) -> float:
    """Debye screening length [angstrom] for an ionic strength [mol/l].

    Returns ``inf`` for zero ionic strength.
    """

    if not math.isfinite(ionic_strength) or ionic_strength < 0.0:
        raise DomainError(f"Ionic strength must be finite and non-negative, got {ionic_strength!r}.")
    if bjerrum < 0.0:
        raise DomainError(f"Bjerrum length must be non-negative, got {bjerrum!r}.")
    kappa_squared = 8.0 * math.pi * bjerrum * ionic_strength * units.AVOGADRO_PER_MOL / units.LITER_ANGSTROM3
    if kappa_squared == 0.0:
        return math.inf
    return 1.0 / math.sqrt(kappa_squared)


@dataclass(frozen=True)
class Medium:
    """Dielectric continuum with an optional dissolved salt.

    Parameters
    ----------
    permittivity_model:
        A permittivity model, a registered model name (``"water"``) or a
        constant relative permittivity.
    temperature:
        Absolute temperature [K].
    salt, molarity:
        Dissolved salt and its molarity [mol/l].
    """

    permittivity_model: RelativePermittivity | str | float
    temperature: float = ROOM_TEMPERATURE
    salt: Salt | None = None
    molarity: float = 0.0

    def __post_init__(self) -> None:
        temperature = float(self.temperature)
        molarity = float(self.molarity)
        if not (math.isfinite(temperature) and temperature > 0.0):
            raise ConfigError(f"Temperature must be positive and finite, got {self.temperature!r}.")
        if not math.isfinite(molarity) or molarity < 0.0:
            raise ConfigError(f"Molarity must be finite and non-negative, got {self.molarity!r}.")
        if self.salt is None and molarity != 0.0:
            raise ConfigError("A molarity was given without a salt.")
        object.__setattr__(self, "permittivity_model", _resolve_permittivity(self.permittivity_model))
        object.__setattr__(self, "temperature", temperature)
        object.__setattr__(self, "molarity", molarity)

    @classmethod
    def neat_water(cls, temperature: float = ROOM_TEMPERATURE) -> "Medium":
        return cls(WATER, temperature)

    @classmethod
    def salt_water(cls, temperature: float, salt: Salt = SODIUM_CHLORIDE, molarity: float = 0.1) -> "Medium":
        return cls(WATER, temperature, salt=salt, molarity=molarity)

    def permittivity(self) -> float:
        """Relative permittivity at the medium temperature."""
        return self.permittivity_model.permittivity(self.temperature)

    def bjerrum_length(self) -> float:
        value = bjerrum_length(self.temperature, self.permittivity())
        logger.debug("Bjerrum length %.4f A at T=%.2f K", value, self.temperature)
        return value

    def ionic_strength(self) -> float:
        if self.salt is None:
            return 0.0
        return self.salt.ionic_strength(self.molarity)

    def debye_length(self) -> float | None:
        """Debye length [angstrom], or ``None`` when nothing screens."""

        strength = self.ionic_strength()
        if strength == 0.0:
            return None
        value = debye_length(self.bjerrum_length(), strength)
        logger.debug("Debye length %.4f A at I=%.4g M", value, strength)
        return value

    def kappa(self) -> float | None:
        length = self.debye_length()
        return None if length is None else 1.0 / length

    def __str__(self) -> str:
        text = f"Medium: {self.permittivity_model}; T = {self.temperature:.2f} K"
        if self.salt is not None:
            text += f"; salt {self.salt.valencies} at {self.molarity} M"
        return text
