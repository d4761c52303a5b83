"""Two-dimensional vectors and even-grade multivectors with geometric products."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

__all__ = ["Vec2d", "MVec2dE", "dot", "wdg", "gpr", "E1_2D", "E2_2D"]

_EPS = 1.0e-7


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, eq=False)
class Vec2d:
    """A 2d vector; equality tolerates deviations below 1e-7 per component."""

    x: float = 0.0
    y: float = 0.0

    def __neg__(self) -> Vec2d:
        return Vec2d(-self.x, -self.y)

    def __add__(self, other: object) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object):
        if _is_scalar(other):
            return Vec2d(self.x * other, self.y * other)
        if isinstance(other, (Vec2d, MVec2dE)):
            return gpr(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec2d:
        if _is_scalar(other):
            return Vec2d(self.x * other, self.y * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return abs(other.x - self.x) < _EPS and abs(other.y - self.y) < _EPS

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({_fmt(self.x)},{_fmt(self.y)})"


@dataclass(frozen=True, eq=False)
class MVec2dE:
    """An even-grade 2d multivector: scalar part c0 and bivector part c1."""

    c0: float = 0.0
    c1: float = 0.0

    def __neg__(self) -> MVec2dE:
        return MVec2dE(-self.c0, -self.c1)

    def __add__(self, other: object) -> MVec2dE:
        if not isinstance(other, MVec2dE):
            return NotImplemented
        return MVec2dE(self.c0 + other.c0, self.c1 + other.c1)

    def __sub__(self, other: object) -> MVec2dE:
        if not isinstance(other, MVec2dE):
            return NotImplemented
        return MVec2dE(self.c0 - other.c0, self.c1 - other.c1)

    def __mul__(self, other: object):
        if _is_scalar(other):
            return MVec2dE(self.c0 * other, self.c1 * other)
        if isinstance(other, (Vec2d, MVec2dE)):
            return gpr(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> MVec2dE:
        if _is_scalar(other):
            return MVec2dE(self.c0 * other, self.c1 * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MVec2dE):
            return NotImplemented
        return abs(other.c0 - self.c0) < _EPS and abs(other.c1 - self.c1) < _EPS

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({_fmt(self.c0)},{_fmt(self.c1)})"


E1_2D = Vec2d(1.0, 0.0)
E2_2D = Vec2d(0.0, 1.0)


def dot(a: Vec2d, b: Vec2d) -> float:
    """Inner product of two vectors in an orthonormal basis."""
    if not (isinstance(a, Vec2d) and isinstance(b, Vec2d)):
        raise TypeError("dot() takes two Vec2d arguments")
    return a.x * b.x + a.y * b.y


def wdg(a: Vec2d, b: Vec2d) -> float:
    """Outer (wedge) product of two vectors, as the bivector coefficient."""
    if not (isinstance(a, Vec2d) and isinstance(b, Vec2d)):
        raise TypeError("wdg() takes two Vec2d arguments")
    return a.x * b.y - a.y * b.x


def gpr(a, b):
    """Geometric product of any combination of Vec2d and MVec2dE."""
    if isinstance(a, Vec2d) and isinstance(b, Vec2d):
        return MVec2dE(dot(a, b), wdg(a, b))
    if isinstance(a, MVec2dE) and isinstance(b, MVec2dE):
        return MVec2dE(a.c0 * b.c0 - a.c1 * b.c1, a.c0 * b.c1 + a.c1 * b.c0)
    if isinstance(a, MVec2dE) and isinstance(b, Vec2d):
        return Vec2d(a.c0 * b.x + a.c1 * b.y, a.c0 * b.y - a.c1 * b.x)
    if isinstance(a, Vec2d) and isinstance(b, MVec2dE):
        return Vec2d(a.x * b.c0 - a.y * b.c1, a.x * b.c1 + a.y * b.c0)
    raise TypeError(
        f"gpr() is not defined for {type(a).__name__} and {type(b).__name__}"
    )