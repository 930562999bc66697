from .ewald import RealSpaceEwald
from .ewald_truncated import TruncatedEwald
from .plain import Plain
from .poisson import POISSON_ALIASES, Poisson, fanourgakis, qpotential
from .reactionfield import ReactionField
from .wolf import Wolf
from .yukawa import Yukawa

__all__ = [
    "Plain",
    "Wolf",
    "Poisson",
    "POISSON_ALIASES",
    "qpotential",
    "fanourgakis",
    "ReactionField",
    "RealSpaceEwald",
    "TruncatedEwald",
    "Yukawa",
]
