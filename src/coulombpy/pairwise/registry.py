"""Scheme registry and (de)serialisation of scheme configurations.

A stored scheme is a flat mapping with a ``scheme`` tag and the named numeric
parameters of that scheme, e.g. ``{"scheme": "wolf", "cutoff": 12.0, "alpha": 0.2}``.
Poisson variants can also be referred to by name, e.g. ``{"scheme": "fanourgakis",
"cutoff": 12.0}``.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Callable

from coulombpy.errors import ConfigError
from coulombpy.pairwise.base import ShortRangeFunction
from coulombpy.pairwise.schemes import (
    POISSON_ALIASES,
    Plain,
    Poisson,
    ReactionField,
    RealSpaceEwald,
    TruncatedEwald,
    Wolf,
    Yukawa,
    qpotential,
)


logger = logging.getLogger(__name__)

Factory = Callable[..., ShortRangeFunction]
_SCHEMES: dict[str, Factory] = {}


def register_scheme(name: str, factory: Factory) -> None:
    key = name.strip().lower()
    if not key:
        raise ConfigError("Scheme name must be non-empty.")
    _SCHEMES[key] = factory


def get_scheme(name: str) -> Factory:
    key = name.strip().lower()
    try:
        return _SCHEMES[key]
    except KeyError as exc:
        available = ", ".join(sorted(_SCHEMES)) or "<none>"
        raise ConfigError(f"Unknown scheme '{name}'. Available schemes: {available}") from exc


def list_schemes() -> tuple[str, ...]:
    return tuple(sorted(_SCHEMES.keys()))


def _poisson_alias(name: str) -> Factory:
    def factory(cutoff: float, debye_length: float | None = None) -> Poisson:
        return Poisson.from_alias(name, cutoff=cutoff, debye_length=debye_length)

    return factory


def _to_builtin(value: Any) -> Any:
    if isinstance(value, float) and math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


def _from_builtin(value: Any) -> Any:
    if isinstance(value, str) and value in ("inf", "-inf"):
        return float(value)
    return value


def scheme_to_dict(scheme: ShortRangeFunction) -> dict[str, Any]:
    return {key: _to_builtin(value) for key, value in scheme.to_dict().items()}


def scheme_from_dict(payload: dict[str, Any]) -> ShortRangeFunction:
    """Build a scheme from a flat mapping with a ``scheme`` tag."""

    params = {key: _from_builtin(value) for key, value in payload.items()}
    try:
        name = params.pop("scheme")
    except KeyError as exc:
        raise ConfigError("Scheme configuration must contain a 'scheme' entry.") from exc
    factory = get_scheme(str(name))
    try:
        return factory(**params)
    except TypeError as exc:
        raise ConfigError(f"Invalid parameters for scheme '{name}': {exc}") from exc


def save_scheme(path: str | Path, scheme: ShortRangeFunction) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        json.dump(scheme_to_dict(scheme), fh, indent=2, sort_keys=True)
    logger.debug("Saved %s scheme to %s", scheme.kind.value, out)
    return out


def load_scheme(path: str | Path) -> ShortRangeFunction:
    src = Path(path)
    with src.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, dict):
        raise ConfigError(f"Scheme file {src} must contain a JSON object.")
    scheme = scheme_from_dict(payload)
    logger.debug("Loaded %s scheme from %s", scheme.kind.value, src)
    return scheme


for _cls in (Plain, Wolf, Poisson, ReactionField, RealSpaceEwald, TruncatedEwald, Yukawa):
    register_scheme(_cls.kind.value, _cls)
for _alias in POISSON_ALIASES:
    if _alias not in _SCHEMES:
        register_scheme(_alias, _poisson_alias(_alias))
register_scheme("qpotential", qpotential)
