import math
import os
import subprocess
import sys

import pytest

from curvekit.easing import linear, quad_in
from curvekit.helpers import advance, ease, squeeze, to_ease_in_out, to_ease_out
from curvekit.types import AnimationState


ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def test_ease_rescales_output():
    f = ease(quad_in, 10, 20)
    assert f(0.0) == 10
    assert f(0.5) == 12.5
    assert f(1.0) == 20


def test_ease_allows_reversed_range():
    f = ease(linear, 1.0, 0.0)
    assert f(0.25) == 0.75


def test_to_ease_out():
    f = to_ease_out(quad_in)
    assert f(0.0) == 0.0
    assert f(1.0) == 1.0
    assert f(0.5) == 0.75


def test_to_ease_in_out_keeps_linear():
    f = to_ease_in_out(linear)
    for t in [i / 10 for i in range(11)]:
        assert math.isclose(f(t), t, abs_tol=1e-12)


def test_to_ease_in_out_calls_inner_once():
    calls = []

    def f(t):
        calls.append(t)
        return t

    g = to_ease_in_out(f)
    g(0.2)
    g(0.8)
    assert len(calls) == 2


def test_combinators_do_not_touch_input():
    out = to_ease_out(quad_in)
    assert quad_in(0.5) == 0.25
    assert out is not quad_in


@pytest.mark.parametrize("x1,x2", [(0.0, 1.0), (0.2, 1.3), (-1.0, 2.0)])
def test_squeeze_endpoints(x1, x2):
    f = squeeze(math.sin, x1, x2)
    assert math.isclose(f(0.0), 0.0, abs_tol=1e-9)
    assert math.isclose(f(1.0), 1.0, abs_tol=1e-9)


def test_squeeze_maps_sub_range():
    f = squeeze(lambda x: x * x, 1.0, 3.0)
    # f(2) = 4, (4 - 1) / (9 - 1)
    assert math.isclose(f(0.5), 3 / 8)


def test_squeeze_flat_function_fails():
    f = squeeze(lambda x: 1.0, 0.0, 1.0)
    with pytest.raises(ZeroDivisionError):
        f(0.5)


def test_advance_updates_state():
    step = advance(0.0, 2.0, linear)
    state = AnimationState()
    result = step(state, 0.5, 1.0)
    assert result is state
    assert state.value == 0.5
    assert state.velocity == 1.0
    assert not state.finished


def test_advance_clamps_and_finishes():
    step = advance(1.0, 1.0, quad_in)
    state = AnimationState(value=0.25)
    step(state, 0.5, 5.0)
    assert state.value == 1.0
    assert state.velocity == 1.5
    assert state.finished


def test_helpers_import_without_pydantic():
    code = "import sys, curvekit.helpers; sys.exit('pydantic' in sys.modules)"
    result = subprocess.run([sys.executable, "-c", code], cwd=ROOT_DIR)
    assert result.returncode == 0
