"""Shared vocabulary for the cell variants.

Each cell keeps its value in a ``_value`` slot. Once the cell is consumed the
slot holds the _CONSUMED sentinel and every further operation raises
CellConsumedError.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Effect = Callable[[T], None]

_CONSUMED = object()


class CellConsumedError(RuntimeError):
    """Raised when a cell is used after consume() or into_inner()."""


class _CellBase:
    """Value access, comparison delegation and repr common to every cell."""

    __slots__ = ("_value",)

    def _live(self) -> Any:
        value = self._value
        if value is _CONSUMED:
            raise CellConsumedError(f"{type(self).__name__} has been consumed")
        return value

    def _apply(self, mutator: Callable[[Any], Any]) -> None:
        """Run mutator on the value in place; its result is discarded."""
        mutator(self._live())

    def _map(self, fn: Callable[[Any], Any]) -> None:
        """Replace the value with fn(value)."""
        self._value = fn(self._live())

    def _unwrap(self, other: Any) -> Any:
        if type(other) is type(self):
            return other._live()
        return other

    def get(self) -> Any:
        """Read the value. Never runs effects."""
        return self._live()

    def into_inner(self) -> Any:
        """Return the value and end the cell's life without running effects."""
        value = self._live()
        self._value = _CONSUMED
        return value

    # Effects never take part in comparisons.

    def __eq__(self, other: object) -> bool:
        return self._live() == self._unwrap(other)

    def __ne__(self, other: object) -> bool:
        return self._live() != self._unwrap(other)

    def __lt__(self, other: Any) -> bool:
        return self._live() < self._unwrap(other)

    def __le__(self, other: Any) -> bool:
        return self._live() <= self._unwrap(other)

    def __gt__(self, other: Any) -> bool:
        return self._live() > self._unwrap(other)

    def __ge__(self, other: Any) -> bool:
        return self._live() >= self._unwrap(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._value is _CONSUMED:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}(value={self._value!r}, ...)"
