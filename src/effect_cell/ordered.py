"""OrderedEffectCell — effects split into before-change and after-change groups.

PRIOR effects run against the value about to be replaced, POST effects
against the value that replaced it. A PRIOR effect never sees the new value
and a POST effect never sees the old one.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Generic, TypeVar

from effect_cell._base import _CONSUMED, Effect, _CellBase
from effect_cell._ops import passthrough_operators

T = TypeVar("T")


class EffectOrder(enum.Enum):
    """Whether an effect runs before or after the value is updated."""

    PRIOR = "prior"
    POST = "post"


@passthrough_operators
class OrderedEffectCell(_CellBase, Generic[T]):
    """A container whose effects run before or after mutation, per EffectOrder.

    Usage:
        cell = OrderedEffectCell(0)
        cell.bind(EffectOrder.PRIOR, lambda v: print(f"Value before: {v}"))
        cell.bind(EffectOrder.POST, lambda v: print(f"Value after: {v}"))
        cell.update(2)
        # Value before: 0
        # Value after: 2
    """

    __slots__ = ("_prior", "_post")

    def __init__(self, value: T) -> None:
        self._value = value
        self._prior: list[Effect[T]] = []
        self._post: list[Effect[T]] = []

    def _registry(self, order: EffectOrder) -> list[Effect[T]]:
        if order is EffectOrder.PRIOR:
            return self._prior
        if order is EffectOrder.POST:
            return self._post
        raise TypeError(f"expected an EffectOrder, got {order!r}")

    def bind(self, order: EffectOrder, effect: Effect[T]) -> Effect[T]:
        """Append an effect to the PRIOR or POST group. Returns the effect."""
        self._live()
        self._registry(order).append(effect)
        return effect

    def call(self, order: EffectOrder) -> None:
        """Run one group of effects, in bind order, with the current value."""
        value = self._live()
        for effect in self._registry(order):
            effect(value)

    def update(self, value: T) -> None:
        """PRIOR effects see the old value, POST effects see the new one."""
        self.call(EffectOrder.PRIOR)
        self._value = value
        self.call(EffectOrder.POST)

    def update_with(self, mutator: Callable[[T], Any]) -> None:
        """Run PRIOR, mutate in place (result ignored), run POST."""
        self.call(EffectOrder.PRIOR)
        self._apply(mutator)
        self.call(EffectOrder.POST)

    def update_map(self, fn: Callable[[T], T]) -> None:
        """Run PRIOR, replace the value with fn(value), run POST."""
        self.call(EffectOrder.PRIOR)
        self._map(fn)
        self.call(EffectOrder.POST)

    def set(self, value: T) -> None:
        """Replace the value without running effects."""
        self._live()
        self._value = value

    def set_with(self, mutator: Callable[[T], Any]) -> None:
        """Mutate the value in place without running effects."""
        self._apply(mutator)

    def set_map(self, fn: Callable[[T], T]) -> None:
        """Replace the value with fn(value) without running effects."""
        self._map(fn)

    def consume(self) -> None:
        """Run PRIOR then POST once each, then end the cell's life."""
        self.call(EffectOrder.PRIOR)
        self.call(EffectOrder.POST)
        self._value = _CONSUMED
