from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .types import AnimationState

EasingFunction = Callable[[float], float]


def ease(f: EasingFunction, start: float, end: float) -> EasingFunction:
    """Rescale the output of ``f`` from [0, 1] to [start, end]."""

    def eased(t: float) -> float:
        return start + f(t) * (end - start)

    return eased


def to_ease_out(f: EasingFunction) -> EasingFunction:
    """Mirror ``f`` in time and value, turning an ease-in into an ease-out."""

    def eased(t: float) -> float:
        return 1 - f(1 - t)

    return eased


def to_ease_in_out(f: EasingFunction) -> EasingFunction:
    """Use ``f`` for the first half and its mirror for the second half."""

    def eased(t: float) -> float:
        if t < 0.5:
            return 0.5 * f(2 * t)
        return 0.5 * (2 - f(2 - 2 * t))

    return eased


def squeeze(f: EasingFunction, x1: float, x2: float) -> EasingFunction:
    """Turn an arbitrary ``f`` into an easing function.

    The point ``(x1, f(x1))`` becomes ``(0, 0)`` and ``(x2, f(x2))`` becomes
    ``(1, 1)``. ``f(x1)`` must differ from ``f(x2)``; otherwise calling the
    result raises ``ZeroDivisionError``.
    """
    y1 = f(x1)
    y2 = f(x2)

    def squeezed(t: float) -> float:
        return (f(x1 + t * (x2 - x1)) - y1) / (y2 - y1)

    return squeezed


def advance(
    start_time: float,
    duration: float,
    easing: EasingFunction,
) -> Callable[[AnimationState, float, float], AnimationState]:
    """Return a per-frame step function driving an ``AnimationState``.

    The step is called with the state, the frame delta ``dt`` and the
    current time ``now``; it updates value, velocity and the finished flag
    in place and returns the state.
    """

    def step(state: AnimationState, dt: float, now: float) -> AnimationState:
        progress = min((now - start_time) / duration, 1.0)
        new_value = easing(progress)
        state.velocity = (new_value - state.value) / dt
        state.value = new_value
        if progress == 1.0:
            state.finished = True
        return state

    return step
