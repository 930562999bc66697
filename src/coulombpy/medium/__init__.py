from .medium import ROOM_TEMPERATURE, Medium, bjerrum_length, debye_length
from .permittivity import (
    ETHANOL,
    METAL,
    METHANOL,
    VACUUM,
    WATER,
    WATER_25C,
    ConstantPermittivity,
    EmpiricalPermittivity,
    RelativePermittivity,
    permittivity_model,
)
from .salt import (
    CALCIUM_CHLORIDE,
    CALCIUM_SULFATE,
    LANTHANUM_CHLORIDE,
    POTASSIUM_ALUM,
    SODIUM_CHLORIDE,
    SODIUM_SULFATE,
    Salt,
    ionic_strength,
    stoichiometry,
)

__all__ = [
    "Medium",
    "ROOM_TEMPERATURE",
    "bjerrum_length",
    "debye_length",
    "RelativePermittivity",
    "ConstantPermittivity",
    "EmpiricalPermittivity",
    "permittivity_model",
    "VACUUM",
    "WATER_25C",
    "METAL",
    "WATER",
    "METHANOL",
    "ETHANOL",
    "Salt",
    "stoichiometry",
    "ionic_strength",
    "SODIUM_CHLORIDE",
    "CALCIUM_CHLORIDE",
    "CALCIUM_SULFATE",
    "SODIUM_SULFATE",
    "LANTHANUM_CHLORIDE",
    "POTASSIUM_ALUM",
]
