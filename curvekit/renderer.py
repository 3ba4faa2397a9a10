from __future__ import annotations

import os
from typing import Callable, List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .types import RenderConfig


BACKGROUND = (250, 250, 250)
GRID = (210, 210, 210)
AXIS = (90, 90, 90)
CURVE = (30, 110, 220)


def _ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def sample_curve(
    f: Callable[[float], float],
    steps: int = 200,
    t0: float = 0.0,
    t1: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Evaluate ``f`` at ``steps`` evenly spaced points in [t0, t1]."""
    if steps < 2:
        raise ValueError("steps must be at least 2")
    ts = np.linspace(t0, t1, steps)
    values = np.fromiter((f(float(t)) for t in ts), dtype=float, count=steps)
    return ts, values


def _value_range(values: np.ndarray) -> Tuple[float, float]:
    finite = values[np.isfinite(values)]
    low = min(0.0, float(finite.min())) if finite.size else 0.0
    high = max(1.0, float(finite.max())) if finite.size else 1.0
    return low, high


def render_curve(
    f: Callable[[float], float],
    config: RenderConfig,
    title: Optional[str] = None,
) -> str:
    """Plot ``f`` over [0, 1] and save it as a PNG at ``config.output_path``.

    The vertical range grows past [0, 1] when the curve overshoots.
    """
    ts, values = sample_curve(f, steps=config.steps)
    low, high = _value_range(values)

    width, height, pad = config.width, config.height, config.padding
    plot_w = max(1, width - 2 * pad)
    plot_h = max(1, height - 2 * pad)

    def to_px(t: float, v: float) -> Tuple[float, float]:
        x = pad + t * plot_w
        y = pad + (high - v) / (high - low) * plot_h
        return x, y

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    # unit box
    x0, y0 = to_px(0.0, 1.0)
    x1, y1 = to_px(1.0, 0.0)
    draw.rectangle((x0, y0, x1, y1), outline=GRID)
    draw.line((x0, y1, x1, y1), fill=AXIS)
    draw.line((x0, y0, x0, y1), fill=AXIS)

    points: List[Tuple[float, float]] = []
    for t, v in zip(ts, values):
        if not np.isfinite(v):
            # break the polyline where the curve is undefined
            if len(points) > 1:
                draw.line(points, fill=CURVE, width=2)
            points = []
            continue
        points.append(to_px(float(t), float(v)))
    if len(points) > 1:
        draw.line(points, fill=CURVE, width=2)

    if title:
        draw.text((pad, max(0, pad // 2 - 6)), title, fill=AXIS)

    _ensure_dir(os.path.dirname(config.output_path))
    img.save(config.output_path)
    return config.output_path
