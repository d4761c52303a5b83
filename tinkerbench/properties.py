"""Drawing properties (window, font, circles, rectangles) read from JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

__all__ = [
    "Size",
    "ColorRGB",
    "Position",
    "Speed",
    "Window",
    "Font",
    "Circle",
    "Rectangle",
    "UnknownPropertyError",
    "parse_properties",
    "load_properties",
    "main",
]

DEFAULT_INPUT = "../json_test/input/input.json"


class UnknownPropertyError(ValueError):
    """Raised when a document holds a property that is not known."""


def _number(data: Mapping[str, Any], key: str) -> int | float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, not {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    return int(_number(data, key))


def _float(data: Mapping[str, Any], key: str) -> float:
    return float(_number(data, key))


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, not {type(value).__name__}")
    return value


def _fmt_float(value: float) -> str:
    return f"{value:g}"


@dataclass
class Size:
    """Width and height in pixels."""

    width: int = 0
    height: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Size:
        return cls(_int(data, "width"), _int(data, "height"))

    def __str__(self) -> str:
        return f"{self.width}, {self.height}"


@dataclass
class ColorRGB:
    """An RGB colour, each channel in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ColorRGB:
        return cls(_int(data, "r"), _int(data, "g"), _int(data, "b"))

    def __str__(self) -> str:
        return f"{self.r}, {self.g}, {self.b}"


@dataclass
class Position:
    """A position in pixels."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Position:
        return cls(_int(data, "x"), _int(data, "y"))

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


@dataclass
class Speed:
    """A speed in pixels per frame."""

    sx: float = 0.0
    sy: float = 0.0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Speed:
        return cls(_float(data, "sx"), _float(data, "sy"))

    def __str__(self) -> str:
        return f"{_fmt_float(self.sx)}, {_fmt_float(self.sy)}"


@dataclass
class Window:
    """The application window."""

    ID: ClassVar[str] = "window"

    s: Size = field(default_factory=Size)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Window:
        return cls(Size.from_json(data["size"]))

    def __str__(self) -> str:
        return f"size: {self.s}"


@dataclass
class Font:
    """A font file, its size in points and its colour."""

    ID: ClassVar[str] = "font"

    ffile: str = ""
    fsize: int = 12
    col: ColorRGB = field(default_factory=ColorRGB)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Font:
        return cls(
            _str(data, "ffile"),
            _int(data, "fsize"),
            ColorRGB.from_json(data["color_rgb"]),
        )

    def __str__(self) -> str:
        return f"ffile: {self.ffile}\nfsize: {self.fsize}\ncolor_rgb: {self.col}"


@dataclass
class Circle:
    """A moving, filled circle."""

    ID: ClassVar[str] = "circle"

    name: str = ""
    pos: Position = field(default_factory=Position)
    spd: Speed = field(default_factory=Speed)
    col: ColorRGB = field(default_factory=ColorRGB)
    radius: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Circle:
        return cls(
            _str(data, "name"),
            Position.from_json(data["position"]),
            Speed.from_json(data["speed"]),
            ColorRGB.from_json(data["color_rgb"]),
            _int(data, "radius"),
        )

    def __str__(self) -> str:
        return (
            f"name: {self.name}\npos: {self.pos}\nspd: {self.spd}\n"
            f"color_rgb: {self.col}\nradius: {self.radius}"
        )


@dataclass
class Rectangle:
    """A moving, filled rectangle."""

    ID: ClassVar[str] = "rectangle"

    name: str = ""
    pos: Position = field(default_factory=Position)
    spd: Speed = field(default_factory=Speed)
    col: ColorRGB = field(default_factory=ColorRGB)
    s: Size = field(default_factory=Size)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Rectangle:
        return cls(
            _str(data, "name"),
            Position.from_json(data["position"]),
            Speed.from_json(data["speed"]),
            ColorRGB.from_json(data["color_rgb"]),
            Size.from_json(data["size"]),
        )

    def __str__(self) -> str:
        return (
            f"name: {self.name}\npos: {self.pos}\nspd: {self.spd}\n"
            f"color_rgb: {self.col}\nsize: {self.s}"
        )


Property = Union[Window, Font, Circle, Rectangle]

_SINGLE = {"window": Window, "font": Font, "circle": Circle, "rectangle": Rectangle}
_SEQUENCE = {"circles": Circle, "rectangles": Rectangle}


def _iter_properties(document: Mapping[str, Any]) -> Iterator[Property]:
    for key, value in document.items():
        if key in _SINGLE:
            yield _SINGLE[key].from_json(value)
        elif key in _SEQUENCE:
            kind = _SEQUENCE[key]
            for element in value:
                yield kind.from_json(element[kind.ID])
        else:
            raise UnknownPropertyError("Unknown property in input file.")


def parse_properties(document: Mapping[str, Any]) -> list[Property]:
    """Build the properties of a document, in document order."""
    return list(_iter_properties(document))


def load_properties(path: str) -> list[Property]:
    """Read a JSON file and build its properties."""
    with open(path, encoding="utf-8") as handle:
        return parse_properties(json.load(handle))


def main(argv: list[str] | None = None) -> int:
    """Print a property file and each property read from it."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    try:
        try:
            with open(path, encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError:
            raise RuntimeError("Could not open input file.") from None
        print(json.dumps(document, indent=2) + "\n")
        for prop in _iter_properties(document):
            print(f"{prop.ID}:\n{prop}\n")
    except (RuntimeError, ValueError, KeyError, TypeError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"Error: {message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())