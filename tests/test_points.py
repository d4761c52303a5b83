import math

import pytest

from tinkerbench.points import Point2d, join_values, main, padded_names, sample_exp


def test_point_str_drops_trailing_zero():
    assert str(Point2d(1.0, 2.0)) == "(1, 2)"
    assert str(Point2d(1.5, 2.0)) == "(1.5, 2)"


def test_point_defaults_to_origin():
    p = Point2d()
    assert (p.x, p.y) == (0.0, 0.0)


def test_join_values_ints():
    assert join_values([1, 2, 3], ", ") == "1, 2, 3"


def test_join_values_points_matches_str():
    pts = [Point2d(1.0, 1.0), Point2d(2.5, 6.0)]
    assert join_values(pts, "; ") == f"{pts[0]}; {pts[1]}"


def test_join_values_empty():
    assert join_values([], ", ") == ""


def test_sample_exp_invariants():
    pts = sample_exp(-1.0, 1.0, 0.2)
    assert pts[0].x == -1.0
    assert all(p.x <= 1.0 for p in pts)
    assert all(math.isclose(p.y, math.exp(p.x)) for p in pts)
    assert all(b.x > a.x for a, b in zip(pts, pts[1:]))


def test_sample_exp_empty_range():
    assert sample_exp(2.0, 1.0, 0.5) == []


def test_sample_exp_rejects_non_positive_step():
    with pytest.raises(ValueError):
        sample_exp(0.0, 1.0, 0.0)


def test_padded_names():
    names = padded_names("fname", 100, 4)
    assert len(names) == 100
    assert names[0] == "fname0000"
    assert names[-1] == "fname0099"


def test_padded_names_negative_count():
    with pytest.raises(ValueError):
        padded_names("x", -1, 2)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " v1 = 1, 2, 3, 4, 5, 6" in out
    assert " p = (1, 2)" in out
    assert "fname0099" in out