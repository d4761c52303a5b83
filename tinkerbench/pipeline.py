"""Lazy filter and transform stages that report each call they make."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["traced_filter", "traced_transform", "format_range", "main"]

Trace = Callable[[str], Any]


def traced_filter(
    items: Iterable[Any], predicate: Callable[[Any], bool], trace: Trace = print
) -> Iterator[Any]:
    """Lazily keep items passing ``predicate``, tracing each check."""
    for item in items:
        trace(f"filter: {item}")
        if predicate(item):
            yield item


def traced_transform(
    items: Iterable[Any], func: Callable[[Any], Any], trace: Trace = print
) -> Iterator[Any]:
    """Lazily apply ``func`` to each item, tracing each call."""
    for item in items:
        trace(f"transform: {item}")
        yield func(item)


def format_range(items: Iterable[Any]) -> str:
    """Render items as '[ a, b, ]'."""
    return "[ " + "".join(f"{item}, " for item in items) + "]"


def _print_range(items: Iterable[Any]) -> None:
    print("[ ", end="")
    for item in items:
        print(f"{item}, ", end="")
    print("]\n")


def main(argv: list[str] | None = None) -> int:
    """Show the call order produced by chaining traced stages."""
    v = [0, 1, 2]

    def keep(item: Any) -> bool:
        return isinstance(item, int)

    print("Sequence: v | filter | transform:")
    _print_range(traced_transform(traced_filter(v, keep), int))

    print("Sequence: v | transform | filter:")
    _print_range(traced_filter(traced_transform(v, int), keep))

    print("Sequence: v | transform | transform:")
    _print_range(traced_transform(traced_transform(v, int), int))

    print("Sequence: v | filter | filter:")
    _print_range(traced_filter(traced_filter(v, keep), keep))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())