"""Error types raised by coulombpy.

Configuration problems surface when a value object is constructed; evaluation
of a validated scheme never raises for distances beyond the cutoff.
"""

from __future__ import annotations


class CoulombError(Exception):
    """Base class for all coulombpy errors."""


class ConfigError(CoulombError, ValueError):
    """Invalid scheme, multipole or medium parameters at construction.

    Example: a non-positive cutoff, a negative damping parameter, or a Poisson
    scheme with an unsupported ``(C, D)`` combination.
    """


class DomainError(CoulombError, ValueError):
    """Evaluation input outside the declared validity range.

    Example: a negative molarity, or two multipoles at the same position.
    """


class MediumError(DomainError):
    """The permittivity model cannot be evaluated at the requested temperature."""


class SaltError(CoulombError, ValueError):
    """No integer stoichiometry satisfies the given valencies."""
