"""Module-level plotting functions acting on the current figure."""

from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np

from .figure import Figure, FigureRegistry

_registry = FigureRegistry()


def init() -> None:
    """Forget all figures and start numbering from zero again."""
    global _registry
    _registry = FigureRegistry(10)


def figure(name: str = "") -> Figure:
    """Create a new figure and make it current."""
    return _registry.new_figure(name)


def current_figure() -> Figure | None:
    """The current figure, or None if none was created."""
    return _registry.current()


def _target() -> Figure:
    fig = _registry.current()
    return fig if fig is not None else figure()


def plot(x, y, style: Mapping[str, float] | None = None, priority: int = 0) -> None:
    """Plot ``y`` over ``x`` in the current figure, creating one if needed."""
    if np.asarray(x).size == 0:
        return
    _target().plot(x, y, style, priority)


def quiver(x, y, u, v, style: Mapping[str, float] | None = None, priority: int = 0,
           flags: Iterable[str] | None = None) -> None:
    """Draw arrows in the current figure; each flag is added to the style as 1.0."""
    if np.asarray(x).size == 0:
        return
    merged = dict(style or {})
    if flags is not None:
        merged.update((flag, 1.0) for flag in flags)
        priority = 0
    _target().quiver(x, y, u, v, merged, priority)


def set_axes_ratio(axes_ratio: str) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_axes_ratio(axes_ratio)


def set_xmin(xmin: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_xmin(xmin)


def set_xmax(xmax: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_xmax(xmax)


def set_ymin(ymin: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_ymin(ymin)


def set_ymax(ymax: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_ymax(ymax)


def set_xlimits(xmin: float, xmax: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_xmin(xmin)
        fig.set_xmax(xmax)


def set_ylimits(ymin: float, ymax: float) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_ymin(ymin)
        fig.set_ymax(ymax)


def set_plot_background_color(color: int) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_plot_background_color(color)


def set_xticks_background_color(color: int) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_xticks_background_color(color)


def set_yticks_background_color(color: int) -> None:
    fig = _registry.current()
    if fig is not None:
        fig.set_yticks_background_color(color)