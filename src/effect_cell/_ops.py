"""Compound-assignment pass-through for multi-effect cells.

``cell += 5`` behaves exactly like ``cell.update_map(lambda v: operator.iadd(v, 5))``:
the operator's result becomes the value (the same object for mutable types
such as lists), with whatever effect timing the cell's update_map uses.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, TypeVar

C = TypeVar("C", bound=type)

# dunder name -> in-place operator from the operator module
COMPOUND_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "__iadd__": operator.iadd,
    "__isub__": operator.isub,
    "__imul__": operator.imul,
    "__itruediv__": operator.itruediv,
    "__ifloordiv__": operator.ifloordiv,
    "__imod__": operator.imod,
    "__ilshift__": operator.ilshift,
    "__irshift__": operator.irshift,
    "__iand__": operator.iand,
    "__ior__": operator.ior,
    "__ixor__": operator.ixor,
}


def _make_passthrough(name: str, op: Callable[[Any, Any], Any]):
    def method(self, other):
        self.update_map(lambda value: op(value, other))
        return self

    method.__name__ = name
    method.__doc__ = f"In-place {op.__name__} on the value, with effects as update_map()."
    return method


def passthrough_operators(cls: C) -> C:
    """Class decorator: install every compound operator on cls."""
    for name, op in COMPOUND_OPERATORS.items():
        method = _make_passthrough(name, op)
        method.__qualname__ = f"{cls.__qualname__}.{name}"
        setattr(cls, name, method)
    return cls
