import dataclasses
import math

import numpy as np
import pytest

from coulombpy.errors import ConfigError, DomainError, MediumError, SaltError
from coulombpy.medium import (
    CALCIUM_CHLORIDE,
    CALCIUM_SULFATE,
    ETHANOL,
    LANTHANUM_CHLORIDE,
    METAL,
    METHANOL,
    POTASSIUM_ALUM,
    SODIUM_CHLORIDE,
    SODIUM_SULFATE,
    VACUUM,
    WATER,
    WATER_25C,
    ConstantPermittivity,
    EmpiricalPermittivity,
    Medium,
    Salt,
    bjerrum_length,
    debye_length,
    ionic_strength,
    permittivity_model,
    stoichiometry,
)


def test_empirical_permittivity_at_room_temperature() -> None:
    assert np.isclose(WATER.permittivity(298.15), 78.35565171480539, rtol=1e-12)
    assert np.isclose(METHANOL.permittivity(298.15), 33.081980713895064, rtol=1e-12)
    assert np.isclose(ETHANOL.permittivity(298.15), 24.33523434183735, rtol=1e-12)


def test_empirical_permittivity_outside_interval() -> None:
    assert WATER.temperature_is_ok(300.0)
    assert not WATER.temperature_is_ok(250.0)
    with pytest.raises(MediumError):
        WATER.permittivity(410.0)
    with pytest.raises(DomainError):
        ETHANOL.permittivity(280.0)


def test_constant_permittivity() -> None:
    assert VACUUM.permittivity(298.15) == 1.0
    assert ConstantPermittivity(2.0).temperature_is_ok(math.inf)
    assert math.isinf(METAL.permittivity(300.0))
    assert WATER.to_constant(298.15) == ConstantPermittivity(WATER.permittivity(298.15))
    with pytest.raises(ConfigError):
        ConstantPermittivity(0.0)


def test_permittivity_strings() -> None:
    assert str(METAL) == "εᵣ = ∞"
    assert str(WATER_25C) == "εᵣ = 78.40"
    assert str(WATER) == (
        "εᵣ(𝑇) = -1.66e3 + -8.85e-1𝑇 + 3.63e-4𝑇² + 6.48e4/𝑇 + 3.08e2㏑(𝑇); 𝑇 = [273.0, 403.0]"
    )


def test_empirical_permittivity_validation() -> None:
    with pytest.raises(ConfigError):
        EmpiricalPermittivity(coeffs=(1.0, 2.0), temperature_interval=(200.0, 300.0))
    with pytest.raises(ConfigError):
        EmpiricalPermittivity(coeffs=(1.0, 0.0, 0.0, 0.0, 0.0), temperature_interval=(300.0, 200.0))


def test_permittivity_model_lookup() -> None:
    assert permittivity_model("Water") is WATER
    assert permittivity_model(4.0) == ConstantPermittivity(4.0)
    assert permittivity_model(METHANOL) is METHANOL
    with pytest.raises(ConfigError, match="Available models"):
        permittivity_model("acetone")


@pytest.mark.parametrize(
    "valencies, expected",
    [
        ((1, -1), (1, 1)),
        ((2, -1), (1, 2)),
        ((2, -2), (1, 1)),
        ((1, -2), (2, 1)),
        ((3, -1), (1, 3)),
        ((-1, 3), (3, 1)),
        ((3, -2), (2, 3)),
    ],
)
def test_binary_stoichiometry(valencies, expected) -> None:
    assert stoichiometry(valencies) == expected


@pytest.mark.parametrize("valencies", [(0, -1), (1, 1), (-1, -2), (1, 2, -3), (1.5, -1), (2, -0.5)])
def test_unresolvable_stoichiometry(valencies) -> None:
    with pytest.raises(SaltError):
        stoichiometry(valencies)


def test_named_salts() -> None:
    assert SODIUM_CHLORIDE.stoichiometry == (1, 1)
    assert CALCIUM_CHLORIDE.stoichiometry == (1, 2)
    assert CALCIUM_SULFATE.stoichiometry == (1, 1)
    assert SODIUM_SULFATE.stoichiometry == (2, 1)
    assert LANTHANUM_CHLORIDE.stoichiometry == (1, 3)
    assert POTASSIUM_ALUM.valencies == (1, 3, -2)
    assert POTASSIUM_ALUM.stoichiometry == (1, 1, 2)


def test_salt_validation() -> None:
    with pytest.raises(SaltError):
        Salt((1, 3, -2), (1, 1, 1))
    with pytest.raises(SaltError):
        Salt((1, -1), (1, 1, 1))
    with pytest.raises(SaltError):
        Salt((1.5, -1))
    with pytest.raises(SaltError):
        Salt((1, -1), (0, 0))


def test_ionic_strength() -> None:
    assert np.isclose(SODIUM_CHLORIDE.ionic_strength(0.1), 0.1)
    assert np.isclose(CALCIUM_CHLORIDE.ionic_strength(0.1), 0.3)
    assert np.isclose(CALCIUM_SULFATE.ionic_strength(0.1), 0.4)
    assert np.isclose(POTASSIUM_ALUM.ionic_strength(1.0), 9.0)
    assert np.isclose(ionic_strength((2, -1), 0.5), 1.5)
    assert CALCIUM_CHLORIDE.ion_molarities(0.2) == (0.2, 0.4)
    with pytest.raises(DomainError):
        SODIUM_CHLORIDE.ionic_strength(-0.1)


def test_bjerrum_length_of_water() -> None:
    assert np.isclose(bjerrum_length(298.15, 78.4), 7.1486, rtol=1e-3)
    assert np.isclose(Medium.neat_water().bjerrum_length(), 7.15, rtol=2e-3)
    with pytest.raises(DomainError):
        bjerrum_length(0.0, 78.4)


def test_debye_length_of_salt_water() -> None:
    medium = Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.1)

    assert np.isclose(medium.ionic_strength(), 0.1)
    assert np.isclose(medium.debye_length(), 9.6, rtol=5e-3)
    assert np.isclose(medium.kappa(), 1.0 / medium.debye_length())
    assert math.isinf(debye_length(7.0, 0.0))
    with pytest.raises(DomainError):
        debye_length(7.0, -1.0)


def test_debye_length_scales_with_ionic_strength() -> None:
    dilute = Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.01).debye_length()
    concentrated = Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.04).debye_length()

    assert np.isclose(dilute / concentrated, 2.0)


def test_medium_without_salt_has_no_screening() -> None:
    medium = Medium.neat_water(300.0)

    assert medium.ionic_strength() == 0.0
    assert medium.debye_length() is None
    assert medium.kappa() is None
    assert Medium(WATER, 298.15, SODIUM_CHLORIDE, 0.0).debye_length() is None


def test_medium_construction() -> None:
    medium = Medium("vacuum", 300.0)
    assert medium.permittivity() == 1.0
    assert medium.permittivity_model is VACUUM

    with pytest.raises(ConfigError):
        Medium(WATER, -5.0)
    with pytest.raises(ConfigError):
        Medium(WATER, 298.15, molarity=0.1)
    with pytest.raises(ConfigError):
        Medium(WATER, 298.15, SODIUM_CHLORIDE, -0.1)


def test_medium_out_of_range_temperature_raises_on_evaluation() -> None:
    medium = Medium(WATER, 500.0)

    assert "500.00 K" in str(medium)
    with pytest.raises(MediumError):
        medium.bjerrum_length()


def test_medium_is_immutable() -> None:
    medium = Medium(WATER, 298.15, SODIUM_CHLORIDE, 0.1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        medium.temperature = -5.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        medium.molarity = 1.0
    assert medium.temperature == 298.15
    assert medium == Medium.salt_water(298.15, SODIUM_CHLORIDE, 0.1)
