from __future__ import annotations

import math
from typing import Callable


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        # 0 to a negative power, or a negative base with a fractional exponent
        return math.inf if base == 0 else math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2 == 1:
            return -math.inf
        return math.inf


def _expm1(x: float) -> float:
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def poly_in(exponent: float) -> Callable[[float], float]:
    """Return ``f(t) = t ** exponent``."""

    def f(t: float) -> float:
        return _pow(t, exponent)

    return f


def back_in(amplitude: float) -> Callable[[float], float]:
    """Comic style curve that moves backwards before heading to 1.

    Larger ``amplitude`` means a deeper dip below zero.
    """

    def f(t: float) -> float:
        return t * t * ((1 + amplitude) * t - amplitude)

    return f


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def elastic_in(springiness: float, number_of_swings: float) -> Callable[[float], float]:
    """Spring like curve.

    ``springiness`` controls how fast the swings grow (7 is a nice value).
    ``number_of_swings`` is rounded to the nearest integer.
    """
    s = springiness
    n = _round_half_up(number_of_swings)
    frequency = math.pi * 2.0 * n + math.pi * 0.5
    denominator = _expm1(s)

    def f(t: float) -> float:
        if denominator == 0:
            # no springiness: the envelope degenerates to a linear ramp
            envelope = t
        else:
            envelope = _expm1(s * t) / denominator
        return envelope * math.sin(frequency * t)

    return f


def bounce_in(bounces: int, bounciness: float) -> Callable[[float], float]:
    """Cartoony bounce curve.

    Each bounce is a parabola ``1 / bounciness`` times as high as the next
    one, so ``bounciness=2`` gives bounces of half the height. The last,
    highest bounce only contributes its rising half and peaks at ``t=1``.
    """
    # log(bounciness) is the divisor below
    if bounciness <= 1:
        bounciness = 1.001

    pow_ = _pow(bounciness, bounces)
    one_minus_bounciness = 1.0 - bounciness
    log_bounciness = math.log(bounciness)

    # geometric series in "unit" space, counting only half of the last term
    sum_of_units = (1.0 - pow_) / one_minus_bounciness + pow_ * 0.5

    def f(t: float) -> float:
        unit_at_t = t * sum_of_units

        # invert the series to find which bounce t falls into
        log_arg = -unit_at_t * one_minus_bounciness + 1.0
        if log_arg <= 0 or not math.isfinite(log_arg):
            return math.nan
        bounce_at_t = math.log(log_arg) / log_bounciness
        start = math.floor(bounce_at_t)
        end = start + 1.0

        start_time = (1.0 - _pow(bounciness, start)) / (one_minus_bounciness * sum_of_units)
        end_time = (1.0 - _pow(bounciness, end)) / (one_minus_bounciness * sum_of_units)

        mid_time = (start_time + end_time) * 0.5
        time_relative_to_peak = t - mid_time
        radius = mid_time - start_time
        amplitude = _pow(1.0 / bounciness, bounces - start)

        # parabola through (start_time, 0) and (end_time, 0) peaking at amplitude
        return (-amplitude / (radius * radius)) * (time_relative_to_peak - radius) * (time_relative_to_peak + radius)

    return f
