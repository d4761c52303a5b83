"""Joystick device descriptions and their JSON button-mapping files."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

__all__ = [
    "MAX_N_JOYSTICK",
    "MAX_N_BUTTON",
    "MAX_N_POV",
    "MAX_N_AXIS",
    "Axis",
    "DevId",
    "DevCap",
    "Device",
    "DevButton",
    "DevButtonAction",
    "JoystickConfig",
    "read_config",
    "template_document",
    "main",
]

MAX_N_JOYSTICK = 8
MAX_N_BUTTON = 128
MAX_N_POV = 4
MAX_N_AXIS = 8

DEFAULT_INPUT = "../json_io/input/input.json"


class Axis(IntFlag):
    """Flags for the axes a joystick supports."""

    X = 0x10000000
    Y = 0x01000000
    Z = 0x00100000
    RX = 0x00010000
    RY = 0x00001000
    RZ = 0x00000100
    S0 = 0x00000010
    S1 = 0x00000001


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, not {type(value).__name__}")
    return int(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, not {type(value).__name__}")
    return value


@dataclass
class DevId:
    """Identity of a joystick: assigned ids and system-reported values."""

    a_id: int = 0
    a_index: int = 0
    a_name: str = ""
    sys_name: str = "no joystick"
    sys_product_id: int = 0
    sys_vendor_id: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DevId:
        return cls(
            a_id=_int(data, "a_id"),
            a_index=_int(data, "a_index"),
            a_name=_str(data, "a_name"),
            sys_name=_str(data, "sys_name"),
            sys_vendor_id=_int(data, "sys_vendor_id"),
            sys_product_id=_int(data, "sys_product_id"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "a_id": self.a_id,
            "a_index": self.a_index,
            "a_name": self.a_name,
            "sys_name": self.sys_name,
            "sys_vendor_id": self.sys_vendor_id,
            "sys_product_id": self.sys_product_id,
        }

    def __str__(self) -> str:
        return (
            f"a_id: {self.a_id}, a_index: {self.a_index}, a_name: {self.a_name}, "
            f"sys_name: {self.sys_name}, sys_product_id: {self.sys_product_id}, "
            f"sys_vendor_id: {self.sys_vendor_id}\n"
        )


@dataclass
class DevCap:
    """Capabilities of a joystick: axes, buttons and POV hats."""

    axis_flags: int = 0
    axis_string: str = ""
    n_axis: int = 0
    n_button: int = 0
    n_pov: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DevCap:
        return cls(
            axis_flags=_int(data, "axis_flags"),
            axis_string=_str(data, "axis_string"),
            n_axis=_int(data, "nAxis"),
            n_button=_int(data, "nButton"),
            n_pov=_int(data, "nPOV"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "axis_flags": self.axis_flags,
            "axis_string": self.axis_string,
            "nAxis": self.n_axis,
            "nButton": self.n_button,
            "nPOV": self.n_pov,
        }

    def __str__(self) -> str:
        bits = format(self.axis_flags & 0xFF, "08b")
        return (
            f"axis_flags: {bits}, axis_string: {self.axis_string}, "
            f"nAxis: {self.n_axis}, nButton: {self.n_button}, nPOV: {self.n_pov}, \n"
        )


@dataclass
class Device:
    """A joystick: its identity and its capabilities."""

    id: DevId = field(default_factory=DevId)
    cap: DevCap = field(default_factory=DevCap)


@dataclass
class DevButton:
    """Maps a button index to a button name."""

    index: int = 0
    name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DevButton:
        return cls(index=_int(data, "index"), name=_str(data, "name"))

    def to_json(self) -> dict[str, Any]:
        return {"index": self.index, "name": self.name}

    def __str__(self) -> str:
        return f"index: {self.index}, name: {self.name}\n"


@dataclass
class DevButtonAction:
    """A button of a device and its mode: 0 immediate, 1 timed."""

    a_id: int = 0
    index: int = 0
    mode: int = 0


@dataclass
class JoystickConfig:
    """The sections of a joystick configuration document."""

    devices: list[DevId] = field(default_factory=list)
    capabilities: list[tuple[int, DevCap]] = field(default_factory=list)
    button_maps: list[tuple[int, list[DevButton]]] = field(default_factory=list)


def _section(document: Mapping[str, Any], key: str) -> list[Any]:
    value = document.get(key)
    return [] if value is None else list(value)


def read_config(document: Mapping[str, Any]) -> JoystickConfig:
    """Read devices, capabilities and button maps; absent sections are empty."""
    config = JoystickConfig()
    for entry in _section(document, "device"):
        config.devices.append(DevId.from_json(entry))
    for entry in _section(document, "device_capabilities"):
        config.capabilities.append(
            (_int(entry, "a_id"), DevCap.from_json(entry["capability"]))
        )
    for entry in _section(document, "device_map_buttons"):
        buttons = [DevButton.from_json(b) for b in _section(entry, "buttons")]
        config.button_maps.append((_int(entry, "a_id"), buttons))
    return config


def template_document() -> dict[str, Any]:
    """A document of default entries showing the expected layout."""
    return {
        "device": [DevId().to_json(), DevId().to_json()],
        "device_capabilities": [
            {"a_id": 0, "capability": DevCap().to_json()},
            {"a_id": 1, "capability": DevCap().to_json()},
        ],
        "device_map_buttons": [
            {"a_id": 2, "buttons": [DevButton().to_json(), DevButton().to_json()]},
        ],
    }


def _print_config(config: JoystickConfig) -> None:
    for dev in config.devices:
        print(f"joystick:\n{dev}")
    for a_id, cap in config.capabilities:
        print(f"capability:\na_id: {a_id}, {cap}")
    for a_id, buttons in config.button_maps:
        print("button:")
        for button in buttons:
            print(f"a_id: {a_id}, {button}", end="")
        print()


def main(argv: list[str] | None = None) -> int:
    """Print the joystick configuration in a file, then a template document."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    try:
        try:
            with open(path, encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError:
            raise RuntimeError("Could not open input file.") from None
        _print_config(read_config(document))
        print("\n\nj2:", end="")
        print(json.dumps(template_document(), indent=2, sort_keys=True) + "\n")
    except (RuntimeError, ValueError, KeyError, TypeError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"Error: {message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())