"""Finite-difference derivatives of short-range functions on q in [0, 1].

Interior points use centered stencils, second order for ``f1`` and ``f2``
and fourth order for ``f3``. A centered stencil that would sample below
``q = 0`` is replaced by a forward-only stencil, and one that would sample
above ``q = 1`` by a backward-only stencil. One-sided stencils
have larger truncation error, so boundary estimates are less accurate than
interior ones; schemes that need precise boundary derivatives override
``short_range_f1..f3`` with closed forms instead.

Degenerate input (e.g. a discontinuous ``f0``) is never an error here: the
stencil value is returned as computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

from coulombpy.errors import ConfigError

if TYPE_CHECKING:
    from .base import ShortRangeFunction


Array = np.ndarray
Kernel = Callable[[Array], Array]

# Step sizes balance truncation against roundoff ~ eps / h^order.
DEFAULT_STEPS: dict[int, float] = {1: 1.0e-5, 2: 1.0e-4, 3: 1.0e-3}

# (offsets, weights) with the derivative = sum(w * f(q + k h)) / h^order.
_CENTERED: dict[int, tuple[tuple[int, ...], tuple[float, ...]]] = {
    1: ((-1, 1), (-0.5, 0.5)),
    2: ((-1, 0, 1), (1.0, -2.0, 1.0)),
    3: ((-3, -2, -1, 1, 2, 3), (0.125, -1.0, 1.625, -1.625, 1.0, -0.125)),
}
_FORWARD: dict[int, tuple[tuple[int, ...], tuple[float, ...]]] = {
    1: ((0, 1, 2), (-1.5, 2.0, -0.5)),
    2: ((0, 1, 2, 3), (2.0, -5.0, 4.0, -1.0)),
    3: ((0, 1, 2, 3, 4), (-2.5, 9.0, -12.0, 7.0, -1.5)),
}


def _backward(order: int) -> tuple[tuple[int, ...], tuple[float, ...]]:
    offsets, weights = _FORWARD[order]
    sign = -1.0 if order % 2 else 1.0
    return tuple(-k for k in offsets), tuple(sign * w for w in weights)


def _apply_stencil(
    f0: Kernel,
    q: Array,
    h: float,
    order: int,
    stencil: tuple[tuple[int, ...], tuple[float, ...]],
) -> Array:
    offsets, weights = stencil
    acc = np.zeros_like(q)
    for k, w in zip(offsets, weights):
        acc = acc + w * np.asarray(f0(q + k * h), dtype=float)
    return acc / h**order


@dataclass(frozen=True)
class FiniteDifference:
    """Boundary-aware finite-difference engine with per-order step sizes."""

    step_f1: float = DEFAULT_STEPS[1]
    step_f2: float = DEFAULT_STEPS[2]
    step_f3: float = DEFAULT_STEPS[3]

    def __post_init__(self) -> None:
        for name in ("step_f1", "step_f2", "step_f3"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0.0 or value >= 0.1:
                raise ConfigError(f"{name} must be in (0, 0.1).")

    def step(self, order: int) -> float:
        if order == 1:
            return self.step_f1
        if order == 2:
            return self.step_f2
        if order == 3:
            return self.step_f3
        raise ConfigError("Only derivative orders 1, 2 and 3 are supported.")

    def derivative(self, f0: Kernel, q: Array | float, order: int) -> Array | float:
        """Return d^order f0 / dq^order at ``q`` (float or array)."""

        h = self.step(order)
        q_arr = np.atleast_1d(np.asarray(q, dtype=float))
        reach = max(abs(k) for k in _CENTERED[order][0]) * h
        lower = q_arr - reach < 0.0
        upper = (q_arr + reach > 1.0) & ~lower
        inner = ~(lower | upper)

        out = np.empty_like(q_arr)
        with np.errstate(all="ignore"):
            if np.any(inner):
                out[inner] = _apply_stencil(f0, q_arr[inner], h, order, _CENTERED[order])
            if np.any(lower):
                out[lower] = _apply_stencil(f0, q_arr[lower], h, order, _FORWARD[order])
            if np.any(upper):
                out[upper] = _apply_stencil(f0, q_arr[upper], h, order, _backward(order))

        if np.ndim(q) == 0:
            return float(out[0])
        return out.reshape(np.shape(q))


DEFAULT_ENGINE = FiniteDifference()


def numerical_derivative(
    f0: Kernel,
    q: Array | float,
    order: int,
    step: float | None = None,
) -> Array | float:
    """Finite-difference derivative of ``f0`` with the default or a custom step."""

    if step is None:
        return DEFAULT_ENGINE.derivative(f0, q, order)
    steps = {f"step_f{order}": step} if order in (1, 2, 3) else {}
    return FiniteDifference(**steps).derivative(f0, q, order)


def derivative_deviation(
    scheme: ShortRangeFunction,
    order: int,
    q: Array | float,
    *,
    floor: float = 1.0e-6,
) -> Array | float:
    """Relative deviation of a scheme's analytic derivative from the numerical one.

    The denominator is ``max(|analytic|, floor)`` so that points where the
    derivative vanishes are compared on an absolute scale.
    """

    analytic = {
        1: scheme.short_range_f1,
        2: scheme.short_range_f2,
        3: scheme.short_range_f3,
    }
    if order not in analytic:
        raise ConfigError("Only derivative orders 1, 2 and 3 are supported.")
    exact = np.asarray(analytic[order](q), dtype=float)
    approx = np.asarray(numerical_derivative(scheme.short_range_f0, q, order), dtype=float)
    deviation = np.abs(approx - exact) / np.maximum(np.abs(exact), floor)
    if np.ndim(q) == 0:
        return float(deviation)
    return deviation
