import json

import pytest

from tinkerbench.properties import (
    Circle,
    ColorRGB,
    Font,
    Position,
    Rectangle,
    Size,
    Speed,
    UnknownPropertyError,
    Window,
    load_properties,
    main,
    parse_properties,
)

CIRCLE = {
    "name": "c1",
    "position": {"x": 10, "y": 20},
    "speed": {"sx": 1.5, "sy": -2.0},
    "color_rgb": {"r": 255, "g": 0, "b": 128},
    "radius": 7,
}

RECTANGLE = {
    "name": "r1",
    "position": {"x": 3, "y": 4},
    "speed": {"sx": 0.5, "sy": 0.25},
    "color_rgb": {"r": 1, "g": 2, "b": 3},
    "size": {"width": 30, "height": 40},
}

DOCUMENT = {
    "window": {"size": {"width": 640, "height": 400}},
    "font": {"ffile": "font.ttf", "fsize": 14, "color_rgb": {"r": 9, "g": 8, "b": 7}},
    "circles": [{"circle": CIRCLE}, {"circle": CIRCLE}],
    "rectangle": RECTANGLE,
}


def test_size_from_json_and_str():
    s = Size.from_json({"width": 640, "height": 400})
    assert s == Size(640, 400)
    assert str(s) == "640, 400"


def test_color_and_position_str():
    assert str(ColorRGB.from_json({"r": 1, "g": 2, "b": 3})) == "1, 2, 3"
    assert str(Position.from_json({"x": -5, "y": 6})) == "-5, 6"


def test_speed_prints_floats_compactly():
    sp = Speed.from_json({"sx": 1.5, "sy": 2})
    assert sp == Speed(1.5, 2.0)
    assert str(sp) == "1.5, 2"


def test_window_from_json():
    w = Window.from_json(DOCUMENT["window"])
    assert w.s == Size(640, 400)
    assert str(w) == "size: 640, 400"


def test_font_defaults_and_str():
    assert Font().fsize == 12
    f = Font.from_json(DOCUMENT["font"])
    assert f == Font("font.ttf", 14, ColorRGB(9, 8, 7))
    assert str(f) == "ffile: font.ttf\nfsize: 14\ncolor_rgb: 9, 8, 7"


def test_circle_from_json_and_str():
    c = Circle.from_json(CIRCLE)
    assert c.pos == Position(10, 20)
    assert c.radius == 7
    assert str(c).splitlines() == [
        "name: c1",
        "pos: 10, 20",
        "spd: 1.5, -2",
        "color_rgb: 255, 0, 128",
        "radius: 7",
    ]


def test_rectangle_from_json():
    r = Rectangle.from_json(RECTANGLE)
    assert r.s == Size(30, 40)
    assert str(r).splitlines()[-1] == "size: 30, 40"


def test_missing_key_raises():
    with pytest.raises(KeyError):
        Size.from_json({"width": 1})


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        Size.from_json({"width": "wide", "height": 2})


def test_parse_properties_keeps_order_and_expands_sequences():
    props = parse_properties(DOCUMENT)
    assert [type(p) for p in props] == [Window, Font, Circle, Circle, Rectangle]
    assert props[2] == Circle.from_json(CIRCLE)


def test_unknown_property_raises():
    with pytest.raises(UnknownPropertyError):
        parse_properties({"triangle": {}})


def test_load_properties_round_trip(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    assert load_properties(str(path)) == parse_properties(DOCUMENT)


def test_main_prints_properties(tmp_path, capsys):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"window": DOCUMENT["window"]}), encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "window:\nsize: 640, 400\n" in out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "Error: Could not open input file." in capsys.readouterr().out