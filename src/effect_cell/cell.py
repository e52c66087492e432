"""EffectCell — a value that runs every bound effect after it changes.

Effects fire in the order they were bound, each receiving the current value.
Only effectful operations (call, update, update_with, update_map, compound operators,
consume) run them; set/set_with/set_map are silent and dropping the cell runs
nothing.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from effect_cell._base import _CONSUMED, Effect, _CellBase
from effect_cell._ops import passthrough_operators

T = TypeVar("T")


@passthrough_operators
class EffectCell(_CellBase, Generic[T]):
    """A container that runs one or many effects on data mutation.

    Usage:
        seen = []
        cell = EffectCell(0)
        cell.bind(seen.append)

        cell.update(2)      # seen == [2]
        cell += 3           # seen == [2, 5]
        cell.set(10)        # seen unchanged
    """

    __slots__ = ("_effects",)

    def __init__(self, value: T) -> None:
        self._value = value
        self._effects: list[Effect[T]] = []

    def bind(self, effect: Effect[T]) -> Effect[T]:
        """Append an effect. Returns it, so bind works as a decorator."""
        self._live()
        self._effects.append(effect)
        return effect

    def call(self) -> None:
        """Run all effects, in bind order, with the current value."""
        value = self._live()
        for effect in self._effects:
            effect(value)

    def update(self, value: T) -> None:
        """Replace the value, then run the effects with the new value."""
        self._live()
        self._value = value
        self.call()

    def update_with(self, mutator: Callable[[T], Any]) -> None:
        """Mutate the value in place, then run the effects with the result.

        Whatever mutator returns is ignored, so ``lambda d: d.pop("a")`` is
        fine. Use update_map for immutable values such as ints.
        """
        self._apply(mutator)
        self.call()

    def update_map(self, fn: Callable[[T], T]) -> None:
        """Replace the value with fn(value), then run the effects."""
        self._map(fn)
        self.call()

    def set(self, value: T) -> None:
        """Replace the value without running effects."""
        self._live()
        self._value = value

    def set_with(self, mutator: Callable[[T], Any]) -> None:
        """Mutate the value like update_with, without running effects."""
        self._apply(mutator)

    def set_map(self, fn: Callable[[T], T]) -> None:
        """Replace the value with fn(value) without running effects."""
        self._map(fn)

    def consume(self) -> None:
        """Run the effects once, then end the cell's life.

        Letting the cell go out of scope does not run effects; this does.
        """
        self.call()
        self._value = _CONSUMED
