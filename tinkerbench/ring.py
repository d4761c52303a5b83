"""A fixed-capacity circular buffer that overwrites its oldest items."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["CircularBuffer", "main"]


def _format_item(item: Any) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, str):
        return f'"{item}"'
    return str(item)


class CircularBuffer:
    """Ring buffer: pushing onto a full buffer drops the front item."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: deque[Any] = deque(maxlen=capacity)

    def push_back(self, item: Any) -> None:
        self._items.append(item)

    def pop_back(self) -> Any:
        if not self._items:
            raise IndexError("pop_back from an empty circular buffer")
        return self._items.pop()

    def pop_front(self) -> Any:
        if not self._items:
            raise IndexError("pop_front from an empty circular buffer")
        return self._items.popleft()

    def capacity(self) -> int:
        return self._items.maxlen or 0

    def full(self) -> bool:
        return len(self._items) == self.capacity()

    def empty(self) -> bool:
        return not self._items

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty circular buffer")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty circular buffer")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __str__(self) -> str:
        return "[" + ", ".join(_format_item(item) for item in self._items) + "]"


def _status(cb: CircularBuffer) -> str:
    return (
        f"cb capacity: {cb.capacity()}, size: {len(cb)}, "
        f"full: {_format_item(cb.full())}, empty: {_format_item(cb.empty())}, "
        f"front: {_format_item(cb.front())}, back: {_format_item(cb.back())}\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Demonstrate pushing, overwriting and popping on a buffer of five ints."""
    cb = CircularBuffer(5)
    for value in (1, 2, 3):
        cb.push_back(value)
    print(f"initial cb: {cb}")
    print(_status(cb))

    cb.push_back(4)
    cb.push_back(5)
    print(f"after overwrite cb: {cb}")
    print(_status(cb))

    cb.pop_back()
    cb.pop_front()
    print(f"after pop_front & pop_back cb: {cb}")
    print(_status(cb))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())