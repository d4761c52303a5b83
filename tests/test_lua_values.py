import pytest

from tinkerbench.lua_values import (
    LuaType,
    LuaValue,
    lua_boolean,
    lua_function,
    lua_nil,
    lua_number,
    lua_string,
    lua_table,
    lua_value_string,
)


@pytest.mark.parametrize(
    "factory, expected_type",
    [
        (lua_nil, LuaType.NIL),
        (lua_function, LuaType.FUNCTION),
        (lua_table, LuaType.TABLE),
    ],
)
def test_payloadless_values(factory, expected_type):
    value = factory()
    assert value.type is expected_type
    assert value.value is None


def test_nil_string():
    assert lua_value_string(lua_nil()) == "nil"


def test_boolean_strings():
    assert lua_value_string(lua_boolean(True)) == "true"
    assert lua_value_string(lua_boolean(False)) == "false"
    assert lua_boolean(1).value is True


def test_function_and_table_strings():
    assert lua_value_string(lua_function()) == "function"
    assert lua_value_string(lua_table()) == "table"


def test_number_string_has_six_decimals():
    assert lua_value_string(lua_number(3.14)) == "3.140000"


def test_number_stored_as_float():
    value = lua_number(-2)
    assert value.type is LuaType.NUMBER
    assert value.value == -2.0
    assert isinstance(value.value, float)


def test_string_round_trip():
    text = "Hello Lua!"
    assert lua_value_string(lua_string(text)) == text
    assert lua_string(text).type is LuaType.STRING


def test_values_compare_by_content():
    assert lua_number(1.5) == lua_number(1.5)
    assert lua_string("a") != lua_string("b")
    assert lua_nil() == LuaValue(LuaType.NIL)


def test_invalid_payloads_rejected():
    with pytest.raises(TypeError):
        lua_string(42)
    with pytest.raises(TypeError):
        lua_number(True)
    with pytest.raises(ValueError):
        lua_number("abc")