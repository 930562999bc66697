"""Value types for multipole pair evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from coulombpy.errors import ConfigError


Array = np.ndarray


def _as_vector3(value: object, name: str) -> Array:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (3,):
        raise ConfigError(f"{name} must be a 3-vector, got shape {vec.shape}.")
    if not np.all(np.isfinite(vec)):
        raise ConfigError(f"{name} must be finite.")
    return vec


@dataclass(frozen=True, eq=False)
class Multipole:
    """Point multipole: position, charge and dipole moment.

    Lengths are in the same unit as the scheme cutoff; the charge is in
    elementary charges and the dipole in charge times length.
    """

    position: Array
    charge: float = 0.0
    dipole: Array = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_vector3(self.position, "position"))
        object.__setattr__(self, "dipole", _as_vector3(self.dipole, "dipole"))
        charge = float(self.charge)
        if not np.isfinite(charge):
            raise ConfigError("charge must be finite.")
        object.__setattr__(self, "charge", charge)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multipole):
            return NotImplemented
        return (
            self.charge == other.charge
            and np.array_equal(self.position, other.position)
            and np.array_equal(self.dipole, other.dipole)
        )

    @property
    def has_dipole(self) -> bool:
        return bool(np.any(self.dipole != 0.0))


@dataclass(frozen=True)
class InteractionResult:
    """Interaction of multipole A with multipole B.

    ``force``, ``field``, ``field_gradient`` and ``potential`` refer to A: the
    force acting on A (B feels ``-force``), and the potential, field and field
    gradient that B creates at A's position.
    """

    energy: float
    force: Array
    field: Array
    field_gradient: Array
    potential: float

    @classmethod
    def zero(cls) -> "InteractionResult":
        return cls(
            energy=0.0,
            force=np.zeros(3),
            field=np.zeros(3),
            field_gradient=np.zeros((3, 3)),
            potential=0.0,
        )
