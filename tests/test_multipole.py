import numpy as np
import pytest

from coulombpy.errors import ConfigError, DomainError
from coulombpy.pairwise import (
    InteractionResult,
    Multipole,
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    Wolf,
    Yukawa,
    dipole_dipole_energy,
    dipole_dipole_force,
    dipole_field,
    dipole_potential,
    evaluate_pair,
    ion_dipole_energy,
    ion_dipole_force,
    ion_field,
    ion_ion_energy,
    ion_ion_force,
    ion_potential,
    minimum_image,
)


SMOOTH_SCHEMES = [
    Plain(cutoff=20.0),
    Poisson(cutoff=12.0, c=3, d=3),
    RealSpaceEwald(cutoff=12.0, alpha=0.15, debye_length=25.0),
    Wolf(cutoff=12.0, alpha=0.1),
]


def _pair(position_b: np.ndarray) -> tuple[Multipole, Multipole]:
    a = Multipole(position=[0.3, -0.2, 0.1], charge=1.2, dipole=[0.4, -0.7, 0.25])
    b = Multipole(position=position_b, charge=-0.8, dipole=[-0.3, 0.5, 0.9])
    return a, b


def _shift(m: Multipole, axis: int, h: float) -> Multipole:
    position = m.position.copy()
    position[axis] += h
    return Multipole(position=position, charge=m.charge, dipole=m.dipole)


def test_plain_ion_ion_energy_is_coulomb() -> None:
    scheme = Plain.without_cutoff()
    a = Multipole(position=[0.0, 0.0, 0.0], charge=1.0)
    b = Multipole(position=[0.0, 0.0, 2.5], charge=-2.0)

    result = evaluate_pair(scheme, a, b)
    assert np.isclose(result.energy, -2.0 / 2.5)
    assert np.isclose(ion_ion_energy(scheme, 1.0, -2.0, 2.5), -0.8)
    assert np.isclose(result.potential, -2.0 / 2.5)
    # Opposite charges attract: A is pulled towards B.
    assert np.allclose(result.force, [0.0, 0.0, 2.0 / 2.5**2])


def test_plain_dipole_terms_match_textbook_expressions() -> None:
    scheme = Plain.without_cutoff()
    r_vec = np.array([1.0, 2.0, -0.5])
    r = np.linalg.norm(r_vec)
    rhat = r_vec / r
    mu_a = np.array([0.2, -0.4, 0.9])
    mu_b = np.array([-0.6, 0.1, 0.3])

    expected_dd = (mu_a @ mu_b - 3.0 * (mu_a @ rhat) * (mu_b @ rhat)) / r**3
    assert np.isclose(dipole_dipole_energy(scheme, mu_a, mu_b, r_vec), expected_dd)

    expected_id = -2.0 * (mu_b @ rhat) / r**2
    assert np.isclose(ion_dipole_energy(scheme, 2.0, mu_b, r_vec), expected_id)

    assert np.isclose(dipole_potential(scheme, mu_a, r_vec), (mu_a @ rhat) / r**2)
    assert np.allclose(ion_field(scheme, 2.0, r_vec), 2.0 * rhat / r**2)
    assert np.allclose(dipole_field(scheme, mu_a, r_vec), (3.0 * (mu_a @ rhat) * rhat - mu_a) / r**3)


@pytest.mark.parametrize("scheme", SMOOTH_SCHEMES, ids=repr)
def test_force_is_negative_gradient_of_energy(scheme) -> None:
    a, b = _pair(np.array([2.1, 1.4, -1.7]))
    h = 1e-5

    force = evaluate_pair(scheme, a, b).force
    numeric = np.zeros(3)
    for axis in range(3):
        up = evaluate_pair(scheme, _shift(a, axis, h), b).energy
        down = evaluate_pair(scheme, _shift(a, axis, -h), b).energy
        numeric[axis] = -(up - down) / (2.0 * h)

    assert np.allclose(force, numeric, rtol=1e-5, atol=1e-8)


@pytest.mark.parametrize("scheme", SMOOTH_SCHEMES, ids=repr)
def test_field_and_gradient_are_derivatives_of_potential(scheme) -> None:
    a, b = _pair(np.array([-1.6, 2.3, 0.9]))
    h = 1e-5

    result = evaluate_pair(scheme, a, b)
    numeric_field = np.zeros(3)
    numeric_gradient = np.zeros((3, 3))
    for axis in range(3):
        up = evaluate_pair(scheme, _shift(a, axis, h), b)
        down = evaluate_pair(scheme, _shift(a, axis, -h), b)
        numeric_field[axis] = -(up.potential - down.potential) / (2.0 * h)
        numeric_gradient[axis] = (up.field - down.field) / (2.0 * h)

    assert np.allclose(result.field, numeric_field, rtol=1e-5, atol=1e-8)
    assert np.allclose(result.field_gradient, numeric_gradient, rtol=1e-5, atol=1e-8)
    assert np.allclose(result.field_gradient, result.field_gradient.T)


@pytest.mark.parametrize("scheme", SMOOTH_SCHEMES, ids=repr)
def test_pair_energy_is_symmetric_and_forces_opposite(scheme) -> None:
    a, b = _pair(np.array([1.0, -2.2, 3.1]))

    ab = evaluate_pair(scheme, a, b)
    ba = evaluate_pair(scheme, b, a)
    assert np.isclose(ab.energy, ba.energy)
    assert np.allclose(ab.force, -ba.force)


@pytest.mark.parametrize("scheme", SMOOTH_SCHEMES, ids=repr)
def test_term_helpers_agree_with_pair_evaluation(scheme) -> None:
    r_vec = np.array([1.3, -0.4, 2.2])
    origin = np.zeros(3)
    mu_a = np.array([0.3, 0.8, -0.2])
    mu_b = np.array([-0.5, 0.2, 0.6])

    ion_a = Multipole(position=origin, charge=1.5)
    ion_b = Multipole(position=r_vec, charge=-0.7)
    dip_a = Multipole(position=origin, dipole=mu_a)
    dip_b = Multipole(position=r_vec, dipole=mu_b)

    ion_ion = evaluate_pair(scheme, ion_a, ion_b)
    assert np.isclose(ion_ion.energy, ion_ion_energy(scheme, 1.5, -0.7, np.linalg.norm(r_vec)))
    assert np.allclose(ion_ion_force(scheme, 1.5, -0.7, r_vec), -ion_ion.force)

    ion_dip = evaluate_pair(scheme, ion_a, dip_b)
    assert np.isclose(ion_dip.energy, ion_dipole_energy(scheme, 1.5, mu_b, r_vec))
    assert np.allclose(ion_dipole_force(scheme, 1.5, mu_b, r_vec), -ion_dip.force)

    dip_dip = evaluate_pair(scheme, dip_a, dip_b)
    assert np.isclose(dip_dip.energy, dipole_dipole_energy(scheme, mu_a, mu_b, r_vec))
    assert np.allclose(dipole_dipole_force(scheme, mu_a, mu_b, r_vec), -dip_dip.force)

    assert np.isclose(ion_ion.potential, ion_potential(scheme, -0.7, np.linalg.norm(r_vec)))
    assert np.allclose(ion_ion.field, ion_field(scheme, -0.7, -r_vec))
    assert np.isclose(dip_dip.potential, dipole_potential(scheme, mu_b, -r_vec))
    assert np.allclose(dip_dip.field, dipole_field(scheme, mu_b, -r_vec))


def test_everything_vanishes_beyond_cutoff() -> None:
    scheme = Poisson(cutoff=5.0, c=2, d=2)
    a = Multipole(position=[0.0, 0.0, 0.0], charge=1.0, dipole=[0.0, 1.0, 0.0])
    for distance in (5.0, 7.5):
        b = Multipole(position=[distance, 0.0, 0.0], charge=1.0, dipole=[1.0, 0.0, 0.0])
        result = evaluate_pair(scheme, a, b)
        assert result.energy == 0.0
        assert result.potential == 0.0
        assert np.all(result.force == 0.0)
        assert np.all(result.field == 0.0)
        assert np.all(result.field_gradient == 0.0)

    assert ion_potential(scheme, 1.0, 6.0) == 0.0
    assert np.all(ion_field(scheme, 1.0, [6.0, 0.0, 0.0]) == 0.0)
    assert np.all(dipole_dipole_force(scheme, [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 5.0]) == 0.0)


def test_energy_is_continuous_at_cutoff_for_shifted_schemes() -> None:
    scheme = Poisson(cutoff=5.0, c=3, d=3)
    a = Multipole(position=[0.0, 0.0, 0.0], charge=1.0, dipole=[0.2, 0.0, 0.0])
    b = Multipole(position=[5.0 - 1e-6, 0.0, 0.0], charge=-1.0, dipole=[0.0, 0.3, 0.0])

    assert abs(evaluate_pair(scheme, a, b).energy) < 1e-12

    ion_a = Multipole(position=a.position, charge=1.0)
    ion_b = Multipole(position=b.position, charge=-1.0)
    assert np.all(np.abs(evaluate_pair(scheme, ion_a, ion_b).force) < 1e-12)


def test_coincident_multipoles_raise() -> None:
    scheme = Wolf(cutoff=10.0)
    a = Multipole(position=[1.0, 1.0, 1.0], charge=1.0)

    with pytest.raises(DomainError):
        evaluate_pair(scheme, a, a)


def test_bjerrum_length_scales_all_outputs() -> None:
    scheme = RealSpaceEwald(cutoff=10.0, alpha=0.2)
    a, b = _pair(np.array([1.0, 2.0, 3.0]))

    unit = evaluate_pair(scheme, a, b)
    scaled = evaluate_pair(scheme, a, b, bjerrum_length=7.1)
    assert np.isclose(scaled.energy, 7.1 * unit.energy)
    assert np.allclose(scaled.force, 7.1 * unit.force)
    assert np.allclose(scaled.field_gradient, 7.1 * unit.field_gradient)


def test_minimum_image_wraps_periodic_axes_only() -> None:
    box = np.array([10.0, 10.0, np.inf])

    assert np.allclose(minimum_image([9.0, -6.0, 40.0], box), [-1.0, 4.0, 40.0])
    with pytest.raises(ConfigError):
        minimum_image([1.0, 0.0, 0.0], [10.0, 0.0, 10.0])


def test_evaluate_pair_uses_minimum_image() -> None:
    scheme = Plain(cutoff=4.0)
    a = Multipole(position=[0.5, 0.0, 0.0], charge=1.0)
    b = Multipole(position=[9.5, 0.0, 0.0], charge=1.0)

    assert evaluate_pair(scheme, a, b).energy == 0.0
    assert np.isclose(evaluate_pair(scheme, a, b, box=[10.0, 10.0, 10.0]).energy, 1.0)


def test_multipole_validation() -> None:
    with pytest.raises(ConfigError):
        Multipole(position=[0.0, 0.0], charge=1.0)
    with pytest.raises(ConfigError):
        Multipole(position=[0.0, 0.0, np.nan])
    with pytest.raises(ConfigError):
        Multipole(position=[0.0, 0.0, 0.0], dipole=[1.0, 0.0])

    assert not Multipole(position=[0.0, 0.0, 0.0], charge=1.0).has_dipole
    assert Multipole(position=[0.0, 0.0, 0.0], dipole=[0.0, 0.0, 1.0]).has_dipole


def test_multipole_equality_compares_values() -> None:
    a = Multipole(position=[1.0, 2.0, 3.0], charge=-1.0, dipole=[0.0, 0.5, 0.0])

    assert a == Multipole(position=(1.0, 2.0, 3.0), charge=-1.0, dipole=[0.0, 0.5, 0.0])
    assert a != Multipole(position=[1.0, 2.0, 3.0], charge=-1.0)
    assert a != Multipole(position=[1.0, 2.0, 3.5], charge=-1.0, dipole=[0.0, 0.5, 0.0])
    assert a != "multipole"


def test_zero_result() -> None:
    zero = InteractionResult.zero()

    assert zero.energy == 0.0
    assert zero.field_gradient.shape == (3, 3)


@pytest.mark.parametrize(
    "scheme",
    [
        Plain(cutoff=10.0),
        Wolf(cutoff=10.0, alpha=0.2),
        Poisson(cutoff=10.0, c=2, d=1),
        Poisson(cutoff=10.0, c=3, d=3, debye_length=12.0),
        ReactionField(cutoff=10.0, epsr=1.0, epsrf=80.0),
        RealSpaceEwald(cutoff=10.0, alpha=0.25),
        Yukawa(cutoff=10.0, debye_length=6.0, shifted=True),
    ],
    ids=repr,
)
def test_ion_ion_force_is_negative_radial_derivative(scheme) -> None:
    h = 1e-6

    for r in (1.5, 4.0, 7.0, 9.5):
        r_vec = np.array([0.0, r, 0.0])
        force = ion_ion_force(scheme, 1.0, -1.0, r_vec)
        numeric = -(ion_ion_energy(scheme, 1.0, -1.0, r + h) - ion_ion_energy(scheme, 1.0, -1.0, r - h)) / (2.0 * h)
        assert np.isclose(force[1], numeric, rtol=1e-3, atol=1e-9)
        assert np.allclose(force[[0, 2]], 0.0)
