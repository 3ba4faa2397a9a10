from __future__ import annotations

import math
from typing import Callable, Dict

from . import make
from .make import _pow
from .helpers import to_ease_in_out, to_ease_out


def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t * t


def cubic_in(t: float) -> float:
    return _pow(t, 3)


def sin_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def exp_in(t: float) -> float:
    """2^(10(t-1)). exp_in(0) is 2^-10 rather than 0, close enough."""
    return _pow(2, 10 * (t - 1))


def circle_in(t: float) -> float:
    rest = 1 - t * t
    if rest < 0:
        return math.nan
    return 1 - math.sqrt(rest)


back_in = make.back_in(1.70158)


def elastic_in(t: float) -> float:
    return math.sin(13.0 * t * math.pi / 2) * _pow(2.0, 10.0 * (t - 1.0))


def bounce_out(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


bounce_in = to_ease_out(bounce_out)

quad_out = to_ease_out(quad_in)
quad_in_out = to_ease_in_out(quad_in)
cubic_out = to_ease_out(cubic_in)
cubic_in_out = to_ease_in_out(cubic_in)
sin_out = to_ease_out(sin_in)
sin_in_out = to_ease_in_out(sin_in)
exp_out = to_ease_out(exp_in)
exp_in_out = to_ease_in_out(exp_in)
circle_out = to_ease_out(circle_in)
circle_in_out = to_ease_in_out(circle_in)
back_out = to_ease_out(back_in)
back_in_out = to_ease_in_out(back_in)
elastic_out = to_ease_out(elastic_in)
elastic_in_out = to_ease_in_out(elastic_in)
bounce_in_out = to_ease_in_out(bounce_in)


# Families whose Out and InOut variants are derived from the In curve.
IN_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "quad": quad_in,
    "cubic": cubic_in,
    "sin": sin_in,
    "exp": exp_in,
    "circle": circle_in,
    "back": back_in,
    "elastic": elastic_in,
    "bounce": bounce_in,
}


EASING_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "linear": linear,
    "quadIn": quad_in,
    "quadOut": quad_out,
    "quadInOut": quad_in_out,
    "cubicIn": cubic_in,
    "cubicOut": cubic_out,
    "cubicInOut": cubic_in_out,
    "sinIn": sin_in,
    "sinOut": sin_out,
    "sinInOut": sin_in_out,
    "expIn": exp_in,
    "expOut": exp_out,
    "expInOut": exp_in_out,
    "circleIn": circle_in,
    "circleOut": circle_out,
    "circleInOut": circle_in_out,
    "backIn": back_in,
    "backOut": back_out,
    "backInOut": back_in_out,
    "elasticIn": elastic_in,
    "elasticOut": elastic_out,
    "elasticInOut": elastic_in_out,
    "bounceIn": bounce_in,
    "bounceOut": bounce_out,
    "bounceInOut": bounce_in_out,
}


def get_easing(name: str) -> Callable[[float], float]:
    """Look up a named easing function, e.g. ``get_easing("cubicOut")``."""
    if name not in EASING_FUNCTIONS:
        raise KeyError(f"Unknown easing '{name}'")
    return EASING_FUNCTIONS[name]
