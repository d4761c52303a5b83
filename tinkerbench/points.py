"""Points in the plane and small formatting helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = ["Point2d", "join_values", "sample_exp", "padded_names", "main"]


def _format_value(value: Any) -> str:
    """Shortest round-trip text for floats, with no trailing '.0'."""
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


@dataclass
class Point2d:
    """A point with x and y coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({_format_value(self.x)}, {_format_value(self.y)})"


def join_values(values: Iterable[Any], sep: str = ", ") -> str:
    """Join the text forms of ``values`` with ``sep``."""
    return sep.join(_format_value(v) for v in values)


def sample_exp(xmin: float = -1.0, xmax: float = 1.0, dx: float = 0.2) -> list[Point2d]:
    """Points (x, exp(x)) for x stepping by ``dx`` from ``xmin`` while x <= ``xmax``."""
    if dx <= 0:
        raise ValueError("dx must be positive")
    points = []
    x = xmin
    while x <= xmax:
        points.append(Point2d(x, math.exp(x)))
        x += dx
    return points


def padded_names(prefix: str = "fname", count: int = 100, width: int = 4) -> list[str]:
    """Names ``prefix`` followed by 0..count-1 zero-padded to ``width`` digits."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [f"{prefix}{i:0>{width}}" for i in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Print joined lists of numbers and points, a sampled curve and file names."""
    v1 = [1, 2, 3]
    v2 = [4, 5, 6]
    print(f" v1 = {join_values(v1, ', ')}")
    print(f" v2 = {join_values(v2, ', ')}")
    v1.extend(v2)
    print(f" v1 = {join_values(v1, ', ')}")

    p = Point2d(1.0, 2.0)
    print(f" p = {p}")

    vp1 = [Point2d(1.0, 1.0), Point2d(1.5, 2.0)]
    vp2 = [Point2d(2.0, 4.0), Point2d(2.5, 6.0)]
    print(f" vp1 = {join_values(vp1, ', ')}")
    print(f" vp2 = {join_values(vp2, ', ')}")
    vp1.extend(vp2)
    print(f" vp1 = {join_values(vp1, ', ')}")

    print("\nSampling exp(x) on [-1, 1]:\n")
    for point in sample_exp(-1.0, 1.0, 0.2):
        print(f" {point}")

    for name in padded_names("fname", 100, 4):
        print(name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())