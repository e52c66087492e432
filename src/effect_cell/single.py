"""SingleEffectCell — one mandatory effect that sees the value being replaced.

Unlike EffectCell.update, which notifies after the write, the replace
operator here notifies first: the effect always observes the outgoing value,
never the incoming one.

    counter = []
    printer = SingleEffectCell(0, counter.append)
    printer <<= 2   # counter == [0]
    printer <<= 4   # counter == [0, 2]
"""

from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Any, Generic, Iterator, TypeVar

from effect_cell._base import _CONSUMED, Effect, _CellBase

T = TypeVar("T")


class ValueSlot(Generic[T]):
    """Mutable handle yielded by SingleEffectCell.get_mut().

    Valid only inside the ``with`` block; afterwards any access raises.
    """

    __slots__ = ("_value", "_open")

    def __init__(self, value: T) -> None:
        self._value = value
        self._open = True

    @property
    def value(self) -> T:
        self._check()
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._check()
        self._value = value

    def _check(self) -> None:
        if not self._open:
            raise RuntimeError("ValueSlot used outside its get_mut() block")

    def __repr__(self) -> str:
        state = repr(self._value) if self._open else "<closed>"
        return f"ValueSlot({state})"


class SingleEffectCell(_CellBase, Generic[T]):
    """A container with exactly one effect, fired before each replacement."""

    __slots__ = ("_effect",)

    def __init__(self, value: T, effect: Effect[T]) -> None:
        self._value = value
        self._effect = effect

    def call(self) -> None:
        """Run the effect with the current value."""
        self._effect(self._live())

    def shift_left_assign(self, value: T) -> None:
        """Run the effect with the old value, then replace it with value."""
        self.call()
        self._value = value

    replace_and_notify = shift_left_assign
    update = shift_left_assign

    def __ilshift__(self, value: T) -> SingleEffectCell[T]:
        self.shift_left_assign(value)
        return self

    def set(self, value: T) -> None:
        """Replace the value without running the effect."""
        self._live()
        self._value = value

    def __getitem__(self, key: Any) -> T:
        """``cell[...]`` reads the value, like get(). Any other key is a KeyError."""
        if key is not Ellipsis and key != ():
            raise KeyError(key)
        return self._live()

    @contextmanager
    def get_mut(self) -> Iterator[ValueSlot[T]]:
        """Mutable access, announced to the effect before it is granted.

        The effect runs with the current value on entry, whether or not the
        block goes on to change anything. The slot's value is written back on
        exit, including when the block raises, unless the cell was consumed or
        given a new value inside the block; that later write wins.

        Usage:
            with cell.get_mut() as slot:
                slot.value.append(3)     # in place
                slot.value = slot.value + [4]   # or replace
        """
        self.call()
        entry = self._value
        slot = ValueSlot(entry)
        try:
            yield slot
        finally:
            if self._value is entry:
                self._value = slot._value
            slot._open = False

    def consume(self) -> None:
        """Run the effect once, then end the cell's life."""
        self.call()
        self._value = _CONSUMED

    def clone(self) -> SingleEffectCell[T]:
        """Independent cell with deep copies of both the value and the effect.

        Effects that close over shared state keep sharing it; callable objects
        holding their own state get their own copy.
        """
        return self.__deepcopy__({})

    def __copy__(self) -> SingleEffectCell[T]:
        """New cell sharing the same value object and effect."""
        return type(self)(self._live(), self._effect)

    def __deepcopy__(self, memo: dict) -> SingleEffectCell[T]:
        value = copy.deepcopy(self._live(), memo)
        return type(self)(value, copy.deepcopy(self._effect, memo))
