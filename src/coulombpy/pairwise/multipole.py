"""Energies, forces and fields between point charges and dipoles.

The damped kernel is ``phi(r) = S(r / cutoff) / r``. With the radial
derivatives ``phi'``, ``phi''`` and ``phi'''`` (expressed through ``f0..f3``)
the Cartesian interaction tensors are::

    T1 = grad phi     = phi' r^
    T2 = grad grad phi = (phi'' - phi'/r) r^ r^ + (phi'/r) I
    T3 = grad^3 phi    = A r^ r^ r^ + B (I r^ + permutations)
    A = phi''' - 3 phi''/r + 3 phi'/r^2,   B = phi''/r - phi'/r^2

For multipoles A and B with ``r = r_B - r_A``::

    U   = qa qb phi + qa mu_b.T1 - qb mu_a.T1 - mu_a.T2.mu_b
    F_A = qa qb T1 + qa T2 mu_b - qb T2 mu_a - T3:mu_a mu_b
    E_A = qb T1 + T2 mu_b
    G_A = -qb T2 - T3.mu_b

Everything is exactly zero for ``r >= cutoff``; no smoothing is added beyond
what the scheme's ``S(q)`` provides.
"""

from __future__ import annotations

import numpy as np

from coulombpy.errors import ConfigError, DomainError
from coulombpy.pairwise.base import ShortRangeFunction
from coulombpy.pairwise.types import InteractionResult, Multipole


Array = np.ndarray
_EYE = np.eye(3)


def minimum_image(r_vec: Array, box: Array) -> Array:
    """Minimum-image separation in an orthorhombic box with side lengths ``box``."""

    r_vec = np.asarray(r_vec, dtype=float)
    box = np.asarray(box, dtype=float)
    if box.shape != (3,):
        raise ConfigError("box must contain three side lengths.")
    if np.any(~(box > 0.0)):
        raise ConfigError("box side lengths must be positive.")
    periodic = np.isfinite(box)
    shift = np.zeros(3)
    shift[periodic] = box[periodic] * np.round(r_vec[periodic] / box[periodic])
    return r_vec - shift


def radial_derivatives(scheme: ShortRangeFunction, r: float, order: int) -> tuple[float, ...]:
    """Return ``(phi, phi', ...)`` up to ``order`` at distance ``r`` inside the cutoff."""

    q = r / scheme.cutoff
    f0 = float(scheme.short_range_f0(q))
    out = [f0 / r]
    if order >= 1:
        f1 = float(scheme.short_range_f1(q))
        out.append((q * f1 - f0) / r**2)
    if order >= 2:
        f2 = float(scheme.short_range_f2(q))
        out.append((q * q * f2 - 2.0 * q * f1 + 2.0 * f0) / r**3)
    if order >= 3:
        f3 = float(scheme.short_range_f3(q))
        out.append((q**3 * f3 - 3.0 * q * q * f2 + 6.0 * q * f1 - 6.0 * f0) / r**4)
    return tuple(out)


class _Tensors:
    """Interaction tensors of one separation vector, up to the requested order."""

    def __init__(self, scheme: ShortRangeFunction, r_vec: Array, order: int) -> None:
        self.r = float(np.linalg.norm(r_vec))
        if self.r == 0.0:
            raise DomainError("Cannot evaluate an interaction between coincident multipoles.")
        self.rhat = r_vec / self.r
        derivs = radial_derivatives(scheme, self.r, order)
        self.phi = derivs[0]
        self.d1 = derivs[1] if order >= 1 else 0.0
        self.d2 = derivs[2] if order >= 2 else 0.0
        self.d3 = derivs[3] if order >= 3 else 0.0

    @property
    def t1(self) -> Array:
        return self.d1 * self.rhat

    @property
    def t2(self) -> Array:
        radial = self.d2 - self.d1 / self.r
        return radial * np.outer(self.rhat, self.rhat) + (self.d1 / self.r) * _EYE

    def _t3_coefficients(self) -> tuple[float, float]:
        r = self.r
        a = self.d3 - 3.0 * self.d2 / r + 3.0 * self.d1 / r**2
        b = self.d2 / r - self.d1 / r**2
        return a, b

    def t3_dot(self, mu: Array) -> Array:
        """T3 contracted with one vector, a symmetric 3x3 matrix."""

        a, b = self._t3_coefficients()
        rhat = self.rhat
        mu_r = float(mu @ rhat)
        return (
            a * mu_r * np.outer(rhat, rhat)
            + b * (mu_r * _EYE + np.outer(rhat, mu) + np.outer(mu, rhat))
        )

    def t3_dot2(self, mu_a: Array, mu_b: Array) -> Array:
        """T3 contracted with two vectors."""

        a, b = self._t3_coefficients()
        rhat = self.rhat
        ra = float(mu_a @ rhat)
        rb = float(mu_b @ rhat)
        return a * ra * rb * rhat + b * (float(mu_a @ mu_b) * rhat + ra * mu_b + rb * mu_a)


def _inside(scheme: ShortRangeFunction, r_vec: Array) -> bool:
    return float(np.linalg.norm(r_vec)) < scheme.cutoff


def interaction(
    scheme: ShortRangeFunction,
    r_vec: Array,
    charge_a: float,
    dipole_a: Array,
    charge_b: float,
    dipole_b: Array,
    bjerrum_length: float = 1.0,
) -> InteractionResult:
    """Interaction of A with B for the separation ``r_vec = r_B - r_A``."""

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return InteractionResult.zero()

    mu_a = np.asarray(dipole_a, dtype=float)
    mu_b = np.asarray(dipole_b, dtype=float)
    has_dipoles = bool(np.any(mu_a != 0.0) or np.any(mu_b != 0.0))
    tensors = _Tensors(scheme, r_vec, order=3 if has_dipoles else 2)
    qa, qb = float(charge_a), float(charge_b)

    t1 = tensors.t1
    t2 = tensors.t2
    potential = qb * tensors.phi + float(mu_b @ t1)
    field = qb * t1 + t2 @ mu_b
    energy = qa * potential - float(mu_a @ field)
    force = qa * qb * t1 + qa * (t2 @ mu_b) - qb * (t2 @ mu_a)
    gradient = -qb * t2
    if has_dipoles:
        force = force - tensors.t3_dot2(mu_a, mu_b)
        gradient = gradient - tensors.t3_dot(mu_b)

    return InteractionResult(
        energy=bjerrum_length * energy,
        force=bjerrum_length * force,
        field=bjerrum_length * field,
        field_gradient=bjerrum_length * gradient,
        potential=bjerrum_length * potential,
    )


def evaluate_pair(
    scheme: ShortRangeFunction,
    a: Multipole,
    b: Multipole,
    bjerrum_length: float = 1.0,
    box: Array | None = None,
) -> InteractionResult:
    """Interaction of multipole ``a`` with multipole ``b``.

    ``bjerrum_length`` scales all outputs; with lengths in angstrom and the
    Bjerrum length of the medium the energy comes out in units of kT. An
    orthorhombic ``box`` applies the minimum-image convention to the pair.
    """

    r_vec = b.position - a.position
    if box is not None:
        r_vec = minimum_image(r_vec, box)
    return interaction(
        scheme,
        r_vec,
        charge_a=a.charge,
        dipole_a=a.dipole,
        charge_b=b.charge,
        dipole_b=b.dipole,
        bjerrum_length=bjerrum_length,
    )


def ion_potential(scheme: ShortRangeFunction, charge: float, r: float) -> float:
    """Potential at distance ``r`` from a charge."""

    if r >= scheme.cutoff:
        return 0.0
    if r <= 0.0:
        raise DomainError("Distance must be positive.")
    return charge * radial_derivatives(scheme, r, 0)[0]


def dipole_potential(scheme: ShortRangeFunction, dipole: Array, r_vec: Array) -> float:
    """Potential of a dipole at ``r_vec`` measured from the dipole."""

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return 0.0
    return -float(np.asarray(dipole, dtype=float) @ _Tensors(scheme, r_vec, 1).t1)


def ion_field(scheme: ShortRangeFunction, charge: float, r_vec: Array) -> Array:
    """Field of a charge at ``r_vec`` measured from the charge."""

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return np.zeros(3)
    return -charge * _Tensors(scheme, r_vec, 1).t1


def dipole_field(scheme: ShortRangeFunction, dipole: Array, r_vec: Array) -> Array:
    """Field of a dipole at ``r_vec`` measured from the dipole."""

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return np.zeros(3)
    return _Tensors(scheme, r_vec, 2).t2 @ np.asarray(dipole, dtype=float)


def ion_ion_energy(scheme: ShortRangeFunction, charge_a: float, charge_b: float, r: float) -> float:
    return charge_a * ion_potential(scheme, charge_b, r)


def ion_dipole_energy(scheme: ShortRangeFunction, charge: float, dipole: Array, r_vec: Array) -> float:
    """Energy of a dipole in the field of a charge; ``r_vec = r_dipole - r_charge``."""

    return -float(np.asarray(dipole, dtype=float) @ ion_field(scheme, charge, r_vec))


def dipole_dipole_energy(scheme: ShortRangeFunction, dipole_a: Array, dipole_b: Array, r_vec: Array) -> float:
    """Energy of two dipoles; ``r_vec = r_b - r_a`` (the sign does not matter)."""

    return -float(np.asarray(dipole_a, dtype=float) @ dipole_field(scheme, dipole_b, r_vec))


def ion_ion_force(scheme: ShortRangeFunction, charge_a: float, charge_b: float, r_vec: Array) -> Array:
    """Force on charge B from charge A; ``r_vec = r_b - r_a``."""

    return charge_b * ion_field(scheme, charge_a, r_vec)


def ion_dipole_force(scheme: ShortRangeFunction, charge: float, dipole: Array, r_vec: Array) -> Array:
    """Force on a dipole from a charge; ``r_vec = r_dipole - r_charge``.

    The charge feels the opposite force.
    """

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return np.zeros(3)
    return -charge * (_Tensors(scheme, r_vec, 2).t2 @ np.asarray(dipole, dtype=float))


def dipole_dipole_force(scheme: ShortRangeFunction, dipole_a: Array, dipole_b: Array, r_vec: Array) -> Array:
    """Force on dipole B from dipole A; ``r_vec = r_b - r_a``."""

    r_vec = np.asarray(r_vec, dtype=float)
    if not _inside(scheme, r_vec):
        return np.zeros(3)
    mu_a = np.asarray(dipole_a, dtype=float)
    mu_b = np.asarray(dipole_b, dtype=float)
    return _Tensors(scheme, r_vec, 3).t3_dot2(mu_a, mu_b)
