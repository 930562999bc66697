"""Relative permittivity models."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from coulombpy.errors import ConfigError, MediumError


class RelativePermittivity(ABC):
    """Anything with a (possibly temperature dependent) relative permittivity."""

    @abstractmethod
    def permittivity(self, temperature: float) -> float:
        """Relative permittivity at ``temperature`` [K]; raises ``MediumError`` out of range."""

    def temperature_is_ok(self, temperature: float) -> bool:
        try:
            self.permittivity(temperature)
        except MediumError:
            return False
        return True

    def to_constant(self, temperature: float) -> "ConstantPermittivity":
        return ConstantPermittivity(self.permittivity(temperature))


@dataclass(frozen=True)
class ConstantPermittivity(RelativePermittivity):
    """Temperature independent relative permittivity; ``inf`` describes a metal."""

    value: float

    def __post_init__(self) -> None:
        if math.isnan(self.value) or self.value <= 0.0:
            raise ConfigError(f"Relative permittivity must be positive, got {self.value!r}.")

    def permittivity(self, temperature: float) -> float:
        return float(self.value)

    def __str__(self) -> str:
        if math.isinf(self.value):
            return "εᵣ = ∞"
        return f"εᵣ = {self.value:.2f}"


def _short_exp(value: float) -> str:
    """Scientific notation with two decimals and a bare exponent, e.g. ``-1.66e3``."""
    mantissa, exponent = f"{value:.2e}".split("e")
    return f"{mantissa}e{int(exponent)}"


@dataclass(frozen=True)
class EmpiricalPermittivity(RelativePermittivity):
    """Neau-Raspo model, ``eps(T) = a + b T + c T^2 + d / T + e ln(T)``.

    Valid on a closed temperature interval only, see
    https://doi.org/10.1016/j.fluid.2019.112371.
    """

    coeffs: tuple[float, float, float, float, float]
    temperature_interval: tuple[float, float]

    def __post_init__(self) -> None:
        if len(self.coeffs) != 5:
            raise ConfigError("EmpiricalPermittivity needs exactly five coefficients.")
        low, high = self.temperature_interval
        if not (0.0 < low <= high):
            raise ConfigError("temperature_interval must satisfy 0 < low <= high.")

    def permittivity(self, temperature: float) -> float:
        low, high = self.temperature_interval
        if not (low <= temperature <= high):
            raise MediumError(
                f"Temperature {temperature} K out of range [{low}, {high}] K for permittivity model."
            )
        a, b, c, d, e = self.coeffs
        value = a + b * temperature + c * temperature**2 + d / temperature + e * math.log(temperature)
        if value <= 0.0:
            raise MediumError(f"Permittivity model gives non-positive value {value} at {temperature} K.")
        return value

    def __str__(self) -> str:
        a, b, c, d, e = (_short_exp(x) for x in self.coeffs)
        low, high = self.temperature_interval
        return (
            f"εᵣ(𝑇) = {a} + {b}𝑇 + {c}𝑇² + {d}/𝑇 + {e}㏑(𝑇); "
            f"𝑇 = [{low:.1f}, {high:.1f}]"
        )


VACUUM = ConstantPermittivity(1.0)
WATER_25C = ConstantPermittivity(78.4)
METAL = ConstantPermittivity(math.inf)

WATER = EmpiricalPermittivity(
    coeffs=(-1664.4988, -0.884533, 0.0003635, 64839.1736, 308.3394),
    temperature_interval=(273.0, 403.0),
)
METHANOL = EmpiricalPermittivity(
    coeffs=(-1750.3069, -0.99026, 0.0004666, 51360.2652, 327.3124),
    temperature_interval=(176.0, 318.0),
)
ETHANOL = EmpiricalPermittivity(
    coeffs=(-1522.2782, -1.00508, 0.0005211, 38733.9481, 293.1133),
    temperature_interval=(288.0, 328.0),
)

_NAMED_MODELS: dict[str, RelativePermittivity] = {
    "vacuum": VACUUM,
    "water25": WATER_25C,
    "metal": METAL,
    "water": WATER,
    "methanol": METHANOL,
    "ethanol": ETHANOL,
}


def permittivity_model(model: str | float | RelativePermittivity) -> RelativePermittivity:
    """Resolve a model name (``"water"``, ``"vacuum"``, ...) or a constant value."""

    if isinstance(model, RelativePermittivity):
        return model
    if isinstance(model, str):
        key = model.strip().lower()
        try:
            return _NAMED_MODELS[key]
        except KeyError as exc:
            available = ", ".join(sorted(_NAMED_MODELS))
            raise ConfigError(f"Unknown permittivity model '{model}'. Available models: {available}") from exc
    return ConstantPermittivity(float(model))
