from .base import UNBOUNDED_CUTOFF, SchemeKind, SelfEnergyPrefactors, ShortRangeFunction
from .multipole import (
    dipole_dipole_energy,
    dipole_dipole_force,
    dipole_field,
    dipole_potential,
    evaluate_pair,
    interaction,
    ion_dipole_energy,
    ion_dipole_force,
    ion_field,
    ion_ion_energy,
    ion_ion_force,
    ion_potential,
    minimum_image,
    radial_derivatives,
)
from .numdiff import FiniteDifference, derivative_deviation, numerical_derivative
from .registry import (
    get_scheme,
    list_schemes,
    load_scheme,
    register_scheme,
    save_scheme,
    scheme_from_dict,
    scheme_to_dict,
)
from .schemes import (
    POISSON_ALIASES,
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    TruncatedEwald,
    Wolf,
    Yukawa,
    fanourgakis,
    qpotential,
)
from .self_energy import pair_energy, self_energy, self_energy_prefactor, total_energy
from .types import InteractionResult, Multipole

__all__ = [
    "UNBOUNDED_CUTOFF",
    "SchemeKind",
    "SelfEnergyPrefactors",
    "ShortRangeFunction",
    "FiniteDifference",
    "numerical_derivative",
    "derivative_deviation",
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
    "Multipole",
    "InteractionResult",
    "evaluate_pair",
    "interaction",
    "minimum_image",
    "radial_derivatives",
    "ion_potential",
    "dipole_potential",
    "ion_field",
    "dipole_field",
    "ion_ion_energy",
    "ion_dipole_energy",
    "dipole_dipole_energy",
    "ion_ion_force",
    "ion_dipole_force",
    "dipole_dipole_force",
    "self_energy_prefactor",
    "self_energy",
    "pair_energy",
    "total_energy",
    "register_scheme",
    "get_scheme",
    "list_schemes",
    "scheme_to_dict",
    "scheme_from_dict",
    "save_scheme",
    "load_scheme",
]
