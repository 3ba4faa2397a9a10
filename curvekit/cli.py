from __future__ import annotations

import os
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table
from dotenv import load_dotenv
from pydantic import ValidationError

from .config import AppConfig, load_config
from .curves import curve_names, resolve_curve
from .renderer import render_curve, sample_curve
from .types import RenderConfig


app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _load(config: Optional[str]) -> AppConfig:
    load_dotenv()
    path = config or os.getenv("CURVEKIT_CONFIG")
    if not path:
        return AppConfig()
    if not os.path.exists(path):
        raise typer.BadParameter(f"Config file not found: {path}")
    try:
        return load_config(path)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config {path}: {exc}") from exc


def _resolve(name: str, cfg: AppConfig):
    try:
        return resolve_curve(name, cfg.curves)
    except KeyError as exc:
        raise typer.BadParameter(f"Unknown curve '{name}'. Run 'curvekit list' to see the available names.") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("list")
def list_curves(
    config: Optional[str] = typer.Option(None, help="Path to YAML config with custom curves"),
):
    """List the built-in easing functions and any curves defined in the config."""
    cfg = _load(config)
    table = Table(title="Easing functions")
    table.add_column("Name")
    table.add_column("Source")
    for name in curve_names(cfg.curves):
        table.add_row(name, "config" if name in cfg.curves else "built-in")
    console.print(table)


@app.command()
def sample(
    name: str = typer.Argument(..., help="Curve name, e.g. cubicOut"),
    steps: int = typer.Option(11, help="Number of evenly spaced samples in [0,1]"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config with custom curves"),
):
    """Print the values of a curve at evenly spaced times."""
    cfg = _load(config)
    f = _resolve(name, cfg)
    if steps < 2:
        raise typer.BadParameter("steps must be at least 2")
    try:
        ts, values = sample_curve(f, steps=steps)
    except (ArithmeticError, ValueError) as exc:
        raise typer.BadParameter(f"Curve '{name}' cannot be evaluated: {exc}") from exc
    table = Table(title=name)
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for t, v in zip(ts, values):
        table.add_row(f"{t:.4f}", f"{v:.6f}")
    console.print(table)


@app.command()
def render(
    name: str = typer.Argument(..., help="Curve name, e.g. bounceOut"),
    output: Optional[str] = typer.Option(None, help="PNG path to write"),
    width: Optional[int] = typer.Option(None, help="Image width"),
    height: Optional[int] = typer.Option(None, help="Image height"),
    steps: Optional[int] = typer.Option(None, help="Number of samples along the curve"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config"),
):
    """Plot a curve to a PNG image."""
    cfg = _load(config)
    f = _resolve(name, cfg)

    def choose(val, cfg_val):
        return val if val is not None else cfg_val

    values = {
        "width": choose(width, cfg.width),
        "height": choose(height, cfg.height),
        "steps": choose(steps, cfg.steps),
        "padding": cfg.padding,
        "output_path": choose(output, cfg.output_path),
    }
    try:
        render_config = RenderConfig(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        path = render_curve(f, render_config, title=name)
    except (ArithmeticError, ValueError) as exc:
        raise typer.BadParameter(f"Curve '{name}' cannot be evaluated: {exc}") from exc
    print(f"[bold green]Wrote[/bold green] {name} to {path}")


if __name__ == "__main__":
    app()
