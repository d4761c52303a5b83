import pytest

from tinkerbench.ring import CircularBuffer, main


def make(capacity, *items):
    cb = CircularBuffer(capacity)
    for item in items:
        cb.push_back(item)
    return cb


def test_str_format():
    assert str(make(5, 1, 2, 3)) == "[1, 2, 3]"


def test_partial_fill_state():
    cb = make(5, 1, 2, 3)
    assert cb.capacity() == 5
    assert len(cb) == 3
    assert not cb.full()
    assert not cb.empty()
    assert cb.front() == 1
    assert cb.back() == 3


def test_overwrite_drops_oldest():
    cb = make(3, 1, 2, 3, 4, 5)
    assert list(cb) == [3, 4, 5]
    assert cb.full()
    assert len(cb) == cb.capacity()


def test_pop_both_ends():
    cb = make(3, 1, 2, 3, 4, 5)
    assert cb.pop_back() == 5
    assert cb.pop_front() == 3
    assert list(cb) == [4]
    assert cb[0] == 4


def test_indexing_matches_iteration():
    cb = make(4, 10, 20, 30, 40, 50)
    assert [cb[i] for i in range(len(cb))] == list(cb)
    assert cb[-1] == cb.back()


def test_empty_buffer_errors():
    cb = CircularBuffer(2)
    assert cb.empty()
    with pytest.raises(IndexError):
        cb.pop_back()
    with pytest.raises(IndexError):
        cb.pop_front()
    with pytest.raises(IndexError):
        cb.front()
    with pytest.raises(IndexError):
        cb.back()


def test_zero_capacity_discards():
    cb = make(0, 1, 2)
    assert len(cb) == 0
    assert cb.full() and cb.empty()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(-1)


def test_string_items_quoted():
    assert str(make(2, "a")) == '["a"]'


def test_main_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "initial cb: [1, 2, 3]" in out
    assert "after overwrite cb: [1, 2, 3, 4, 5]" in out
    assert "after pop_front & pop_back cb: [2, 3, 4]" in out
    assert "full: true" in out