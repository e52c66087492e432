"""effect-cell: values that run side effects when they change."""

from importlib.metadata import version as _version

__version__ = _version("effect-cell")

from effect_cell._base import CellConsumedError, Effect
from effect_cell.cell import EffectCell
from effect_cell.ordered import EffectOrder, OrderedEffectCell
from effect_cell.single import SingleEffectCell, ValueSlot

__all__ = [
    "CellConsumedError",
    "Effect",
    "EffectCell",
    "EffectOrder",
    "OrderedEffectCell",
    "SingleEffectCell",
    "ValueSlot",
]
