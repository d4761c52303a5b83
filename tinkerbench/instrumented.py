"""Operation counting for wrapped values and call counting for callables."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

__all__ = [
    "Operation",
    "Instrumented",
    "reset_counts",
    "counts",
    "CountCalls",
    "main",
]


class Operation(Enum):
    """The operations that are counted; values are the counter names."""

    N = "n"
    DFLT_CTOR = "dflt_ctor"
    DTOR = "dtor"
    CP_CTOR = "cp_ctor"
    CP_ASSIGN = "cp_assign"
    MV_CTOR = "mv_ctor"
    MV_ASSIGN = "mv_assign"
    EQUALITY = "equality"
    COMPARISON = "comparison"
    CONVERSION_FROM_T = "conversion_from_T"
    CONVERSION_TO_T = "conversion_to_T"


_counts: dict[Operation, float] = {op: 0.0 for op in Operation}
_DEFAULT = object()


def reset_counts(n: int | float = 0) -> None:
    """Zero every counter and record the problem size ``n``."""
    for op in Operation:
        _counts[op] = 0.0
    _counts[Operation.N] = float(n)


def counts() -> dict[Operation, float]:
    """Return a snapshot of all counters."""
    return dict(_counts)


def _bump(op: Operation) -> None:
    _counts[op] += 1.0


class Instrumented:
    """Wraps a value and counts construction, copying, equality and ordering."""

    __slots__ = ("value", "__weakref__")

    def __init__(self, value: Any = _DEFAULT) -> None:
        if value is _DEFAULT:
            self.value = None
            _bump(Operation.DFLT_CTOR)
        elif isinstance(value, Instrumented):
            self.value = value.value
        else:
            self.value = value
            _bump(Operation.CONVERSION_FROM_T)

    def __del__(self) -> None:
        try:
            _bump(Operation.DTOR)
        except (KeyError, TypeError, NameError):
            pass

    def copy(self) -> Instrumented:
        """Return a new wrapper holding the same value."""
        other = Instrumented.__new__(Instrumented)
        other.value = self.value
        _bump(Operation.CP_CTOR)
        return other

    def assign(self, other: Instrumented) -> Instrumented:
        """Take over the value of ``other``."""
        if not isinstance(other, Instrumented):
            raise TypeError("assign() takes an Instrumented value")
        self.value = other.value
        _bump(Operation.CP_ASSIGN)
        return self

    def unwrap(self) -> Any:
        """Return the wrapped value."""
        _bump(Operation.CONVERSION_TO_T)
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        _bump(Operation.EQUALITY)
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        return not self == other

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        _bump(Operation.COMPARISON)
        return self.value < other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        return not self < other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        return other < self

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instrumented):
            return NotImplemented
        return not other < self

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Instrumented({self.value!r})"


class CountCalls:
    """Forwards calls to a callback and counts them."""

    def __init__(self, callback: Callable[..., Any]) -> None:
        self._callback = callback
        self._calls = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._calls += 1
        return self._callback(*args, **kwargs)

    def count(self) -> int:
        return self._calls


def _sort_with(less: Callable[[Any, Any], bool], items: Iterable[Any]) -> list[Any]:
    """Sort by a strict-weak-ordering predicate, calling it once per comparison."""
    key = functools.cmp_to_key(lambda a, b: -1 if less(a, b) else 1)
    return sorted(items, key=key)


_REPORT = [
    ("Default ctor", Operation.DFLT_CTOR),
    ("Default dtor", Operation.DTOR),
    ("Default cp_ctor", Operation.CP_CTOR),
    ("Default cp_assign", Operation.CP_ASSIGN),
    ("Default mv_ctor", Operation.MV_CTOR),
    ("Default mv_assign", Operation.MV_ASSIGN),
    ("Default equality", Operation.EQUALITY),
    ("Default comparison", Operation.COMPARISON),
    ("Default conversion from T", Operation.CONVERSION_FROM_T),
    ("Default conversion to T", Operation.CONVERSION_TO_T),
]


def main(argv: list[str] | None = None) -> int:
    """Sort plain and instrumented values and report the counted operations."""
    reset_counts(0)

    vec1 = [1, 0, 3, 1, -1, 3, 4, 7, 12, 3, 6, -3]
    print(f"\nvec1       : {vec1}")
    vec1.sort()
    print(f"vec1 sorted: {vec1}\n")

    wrapped = [Instrumented(v) for v in (1, 0, 3, 1, -1, 3, 4, 7, 12, 3, 6, -3)]
    del wrapped

    snapshot = counts()
    for label, op in _REPORT:
        print(f"{label}: {snapshot[op]:g}")

    values = [31, 17, -9, 7, 12, 35, 6, 2, 0, 15, 97, 17, 24, -12]
    sc = CountCalls(lambda x, y: x > y)
    _sort_with(sc, values)
    print(f"sorted with {sc.count()} calls to sorting criterion.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())