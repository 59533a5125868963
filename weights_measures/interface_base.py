"""The shared shape of a conversion screen: up to nine linked unit values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

__all__ = ["Field", "ConversionInterface", "MAX_VALUES", "DEFAULT_VALUE"]

MAX_VALUES = 9
DEFAULT_VALUE = 0.0


@dataclass(frozen=True)
class Field:
    """One value slot: the quantity attribute it shows and its label resource ids."""

    attribute: str
    title: str = ""
    abbreviation: str = ""
    settable: bool = True


class ConversionInterface:
    """A set of value slots bound to one quantity object.

    Subclasses name their slots in ``fields``; slots beyond those read as
    ``DEFAULT_VALUE`` and ignore writes.
    """

    fields: ClassVar[tuple[Field, ...]] = ()

    def __init__(self, quantity: Any = None) -> None:
        self.quantity = quantity

    def _field(self, index: int) -> Field | None:
        if not 0 <= index < MAX_VALUES:
            raise IndexError(f"value index {index} out of range 0..{MAX_VALUES - 1}")
        return self.fields[index] if index < len(self.fields) else None

    def value_count(self) -> int:
        return len(self.fields)

    def get_value(self, index: int) -> float:
        field = self._field(index)
        if field is None or self.quantity is None:
            return DEFAULT_VALUE
        return getattr(self.quantity, field.attribute)

    def set_value(self, index: int, x: float) -> None:
        field = self._field(index)
        if field is None or not field.settable or self.quantity is None:
            return
        setattr(self.quantity, field.attribute, x)

    def title(self, index: int) -> str:
        if 0 <= index < len(self.fields):
            return self.fields[index].title
        return ""

    def abbreviation(self, index: int) -> str:
        if 0 <= index < len(self.fields):
            return self.fields[index].abbreviation
        return ""

    def values(self) -> list[float]:
        """The current value of every used slot, in order."""
        return [self.get_value(i) for i in range(self.value_count())]