"""Angle, area, length and volume quantities with conversions between units."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Angle", "Area", "Length", "Volume"]


class _Scaled:
    """A unit derived from another attribute by a constant factor.

    Reading divides the source attribute by the factor and writing stores the
    value multiplied by it; with ``inverse`` the two operations swap.
    """

    def __init__(self, factor: float, via: str, *, inverse: bool = False) -> None:
        self.factor = factor
        self.via = via
        self.inverse = inverse
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: object, objtype: type | None = None):
        if obj is None:
            return self
        value = getattr(obj, self.via)
        return value * self.factor if self.inverse else value / self.factor

    def __set__(self, obj: object, x: float) -> None:
        setattr(obj, self.via, x / self.factor if self.inverse else x * self.factor)


@dataclass
class Angle:
    """An angle stored in radians."""

    radians: float = 0.0

    @property
    def gradians(self) -> float:
        return self.radians * 200.0 / math.pi

    @gradians.setter
    def gradians(self, x: float) -> None:
        self.radians = x * math.pi / 200.0

    @property
    def degrees(self) -> float:
        return self.radians * 180.0 / math.pi

    @degrees.setter
    def degrees(self, x: float) -> None:
        self.radians = x * math.pi / 180.0

    @property
    def turns(self) -> float:
        return self.radians / (2.0 * math.pi)

    @turns.setter
    def turns(self, x: float) -> None:
        self.radians = x * 2.0 * math.pi


@dataclass
class Area:
    """An area stored in square metres."""

    square_metres: float = 0.0

    square_inches = _Scaled(0.00064516, "square_metres")
    square_feet = _Scaled(0.09290304, "square_metres")
    square_yards = _Scaled(0.83612736, "square_metres")
    acres = _Scaled(4046.8564224, "square_metres")
    hectares = _Scaled(10000.0, "square_metres")
    square_kilometres = _Scaled(1000000.0, "square_metres")
    square_miles = _Scaled(2589988.110336, "square_metres")


@dataclass
class Length:
    """A length stored in millimetres."""

    millimetres: float = 0.0

    centimetres = _Scaled(10.0, "millimetres")
    metres = _Scaled(100.0, "centimetres")
    inches = _Scaled(0.0254, "metres")
    feet = _Scaled(0.3048, "metres")
    yards = _Scaled(0.9144, "metres")
    kilometres = _Scaled(1000.0, "metres")
    miles = _Scaled(1609.344, "metres")


@dataclass
class Volume:
    """A volume stored in millilitres."""

    millilitres: float = 0.0

    litres = _Scaled(1000.0, "millilitres")
    pints_uk = _Scaled(568.26125, "millilitres")
    pints_us = _Scaled(473.176473, "millilitres")
    quarts_uk = _Scaled(1.1365225, "litres")
    quarts_us = _Scaled(0.946352946, "litres")
    gallons_uk = _Scaled(4.54609, "litres")
    gallons_us = _Scaled(3.785411784, "litres")
    fluid_ounces_uk = _Scaled(28.4130625, "millilitres")
    fluid_ounces_us = _Scaled(29.5735295625, "millilitres")
    cups_metric = _Scaled(250.0, "millilitres")
    cups_uk = _Scaled(284.130625, "millilitres")
    cups_us = _Scaled(236.5882365, "millilitres")
    teaspoons_metric = _Scaled(5.0, "millilitres")
    teaspoons_uk = _Scaled(5.919388020833333, "millilitres")
    teaspoons_us = _Scaled(4.92892159375, "millilitres")
    tablespoons_metric = _Scaled(15.0, "millilitres")
    tablespoons_uk = _Scaled(17.7581640625, "millilitres")
    tablespoons_us = _Scaled(14.78676478125, "millilitres")