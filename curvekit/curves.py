from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from . import make
from .easing import EASING_FUNCTIONS, get_easing
from .helpers import EasingFunction, ease, squeeze, to_ease_in_out, to_ease_out
from .types import CurveSpec

# factory name -> (factory, number of parameters)
FACTORIES: Dict[str, tuple] = {
    "polyIn": (make.poly_in, 1),
    "backIn": (make.back_in, 1),
    "elasticIn": (make.elastic_in, 2),
    "bounceIn": (make.bounce_in, 2),
}

_MODES: Dict[str, Callable[[EasingFunction], EasingFunction]] = {
    "out": to_ease_out,
    "inOut": to_ease_in_out,
}


def _base_curve(spec: CurveSpec) -> EasingFunction:
    if spec.factory is None:
        if spec.mode != "in":
            raise ValueError(
                f"mode '{spec.mode}' only applies to factory curves; use the '{spec.name}' variant name instead"
            )
        return get_easing(spec.name)

    if spec.factory not in FACTORIES:
        raise KeyError(f"Unknown factory '{spec.factory}'")
    factory, arity = FACTORIES[spec.factory]
    if len(spec.params) != arity:
        raise ValueError(f"Factory '{spec.factory}' takes {arity} parameter(s), got {len(spec.params)}")
    args = list(spec.params)
    if spec.factory == "bounceIn":
        if not args[0].is_integer():
            raise ValueError(f"Factory 'bounceIn' needs a whole number of bounces, got {args[0]}")
        args[0] = int(args[0])
    f = factory(*args)
    if spec.mode in _MODES:
        f = _MODES[spec.mode](f)
    return f


def build_curve(spec: CurveSpec) -> EasingFunction:
    """Turn a ``CurveSpec`` into an easing function.

    The base curve is squeezed first, then rescaled to ``[start, end]``.
    """
    f = _base_curve(spec)
    if spec.squeeze is not None:
        x1, x2 = spec.squeeze
        f = squeeze(f, x1, x2)
    if (spec.start, spec.end) != (0.0, 1.0):
        f = ease(f, spec.start, spec.end)
    return f


def resolve_curve(name: str, custom: Optional[Mapping[str, CurveSpec]] = None) -> EasingFunction:
    """Find ``name`` among the custom curves, falling back to the built-ins."""
    if custom and name in custom:
        return build_curve(custom[name])
    return get_easing(name)


def curve_names(custom: Optional[Mapping[str, CurveSpec]] = None) -> list:
    names = list(EASING_FUNCTIONS.keys())
    if custom:
        names.extend(n for n in custom if n not in EASING_FUNCTIONS)
    return names
