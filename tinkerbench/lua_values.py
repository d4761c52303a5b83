"""Tagged values mirroring the Lua value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "LuaType",
    "LuaValue",
    "lua_nil",
    "lua_boolean",
    "lua_number",
    "lua_string",
    "lua_function",
    "lua_table",
    "lua_value_string",
]


class LuaType(Enum):
    """The Lua value kinds that are represented."""

    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    TABLE = "table"


_Payload = Union[None, bool, float, str]


@dataclass(frozen=True)
class LuaValue:
    """A Lua value: its type tag and, for scalars, its payload."""

    type: LuaType
    value: _Payload = None


def lua_nil() -> LuaValue:
    return LuaValue(LuaType.NIL)


def lua_boolean(value: bool) -> LuaValue:
    return LuaValue(LuaType.BOOLEAN, bool(value))


def lua_number(value: float) -> LuaValue:
    if isinstance(value, bool):
        raise TypeError("a Lua number must be numeric, not bool")
    return LuaValue(LuaType.NUMBER, float(value))


def lua_string(value: str) -> LuaValue:
    if not isinstance(value, str):
        raise TypeError(f"a Lua string must be str, not {type(value).__name__}")
    return LuaValue(LuaType.STRING, value)


def lua_function() -> LuaValue:
    return LuaValue(LuaType.FUNCTION)


def lua_table() -> LuaValue:
    return LuaValue(LuaType.TABLE)


def lua_value_string(value: LuaValue) -> str:
    """Render a value as text; numbers use six decimal places."""
    match value.type:
        case LuaType.NIL:
            return "nil"
        case LuaType.BOOLEAN:
            return "true" if value.value else "false"
        case LuaType.NUMBER:
            return f"{value.value:f}"
        case LuaType.STRING:
            return str(value.value)
        case LuaType.FUNCTION:
            return "function"
        case LuaType.TABLE:
            return "table"
    raise ValueError(f"unknown Lua type: {value.type!r}")