from .errors import ConfigError, CoulombError, DomainError, MediumError, SaltError
from .medium import Medium, Salt
from .pairwise import (
    Multipole,
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    ShortRangeFunction,
    TruncatedEwald,
    Wolf,
    Yukawa,
    evaluate_pair,
    load_scheme,
    save_scheme,
    total_energy,
)

__all__ = [
    "CoulombError",
    "ConfigError",
    "DomainError",
    "MediumError",
    "SaltError",
    "Medium",
    "Salt",
    "ShortRangeFunction",
    "Plain",
    "Wolf",
    "Poisson",
    "ReactionField",
    "RealSpaceEwald",
    "TruncatedEwald",
    "Yukawa",
    "Multipole",
    "evaluate_pair",
    "total_energy",
    "save_scheme",
    "load_scheme",
]
