"""Example plots, each rendered to PNG files, and a small menu to pick one."""

from __future__ import annotations

import argparse
import math
import os
import re
from pathlib import Path
from typing import Callable, Sequence

import numpy as np

from . import api
from .colors import BLUE, RED
from .figure import Figure

WIDTH = 800
HEIGHT = 600


def _file_name(fig: Figure) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", fig.name.lower()).strip("-")
    return f"{slug or fig.index}.png"


def _save(figures: Sequence[Figure], output: str | os.PathLike) -> list[Path]:
    directory = Path(output)
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for fig in figures:
        path = directory / _file_name(fig)
        fig.save(path, WIDTH, HEIGHT)
        paths.append(path)
    return paths


def dot_plot(output: str | os.PathLike = ".") -> list[Path]:
    """Ten points drawn as dots; returns the written image files."""
    api.init()
    x = np.linspace(0.0, 9.0, 10)
    y = np.linspace(0.1, 1.0, 10)

    fig = api.figure("Dot plot example")
    api.plot(x, y, {"line_style": float(ord("o"))})
    return _save([fig], output)


def quiver_example(output: str | os.PathLike = ".") -> list[Path]:
    """A single red arrow on equally scaled axes; returns the written image files."""
    api.init()
    count = 1
    angles = np.arange(count) * 2.0 * math.pi / count
    x = np.cos(angles)
    y = np.sin(angles)
    u = 0.1 * np.cos(angles)
    v = 0.1 * np.sin(angles)

    fig = api.figure("Simple data")
    api.quiver(x, y, u, v, {"line_style": float(ord("-")), "color": RED}, 10)
    api.set_axes_ratio("equal")
    return _save([fig], output)


def simple_line_plot(output: str | os.PathLike = ".") -> list[Path]:
    """A sine and a cosine in one figure, two flat lines in another."""
    api.init()
    count = 1000
    x = np.arange(count) * 2.0 * math.pi / (count - 1)
    y1 = np.sin(x)
    y2 = np.cos(x)

    first = api.figure("Simple data")
    api.plot(x, y1, {"line_style": float(ord("-")), "color": RED}, 10)
    api.plot(x, y2, {"line_style": float(ord("-")), "color": BLUE}, 2)

    second = api.figure("Other data")
    xs = np.array([0.0, 6.0])
    api.plot(xs, np.array([-2.0, -2.0]))
    api.plot(xs, np.array([-2.2, -2.2]))
    return _save([first, second], output)


_EXAMPLES: dict[int, tuple[str, Callable[[str | os.PathLike], list[Path]]]] = {
    1: ("DotPlot", dot_plot),
    2: ("Quiver", quiver_example),
    3: ("SimpleLinePlot", simple_line_plot),
}


def _ask() -> int | None:
    print("Which example to you want to try?")
    for number, (name, _) in _EXAMPLES.items():
        print(f"[{number}] {name}")
    try:
        answer = input()
    except EOFError:
        return None
    try:
        return int(answer.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run one example, chosen on the command line or from a menu."""
    parser = argparse.ArgumentParser(description="Render one of the example plots.")
    parser.add_argument("choice", nargs="?", type=int,
                        help="number of the example; asked for if left out")
    parser.add_argument("-o", "--output", default=".",
                        help="directory to write the images to")
    args = parser.parse_args(argv)

    choice = args.choice if args.choice is not None else _ask()
    entry = _EXAMPLES.get(choice) if choice is not None else None
    if entry is None:
        return 0
    _, run = entry
    for path in run(args.output):
        print(path)
    return 0