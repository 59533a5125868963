"""Metric prefixes, information sizes, data rates, storage capacity and pixel density."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Metric", "Information", "DataRate", "Storage", "PixelDensity"]

_NANO = 0.000000001
_MICRO = 0.000001
_MILLI = 0.001
_CENTI = 0.01
_DECI = 0.1
_DECA = 10.0
_HECTO = 100.0
_KILO = 1000.0
_MEGA = 1000000.0
_GIGA = 1000000000.0
_TERA = 1000000000000.0
_PETA = 1000000000000000.0
_EXA = 1000000000000000000.0
_ZETTA = 1000000000000000000000.0
_YOTTA = 1000000000000000000000000.0

_KIBI = 1024.0
_MEBI = 1048576.0
_GIBI = 1073741824.0
_TEBI = 1099511627776.0
_PEBI = 1125899906842624.0
_EXBI = 1152921504606846976.0
_ZEBI = 1180591620717411303424.0
_YOBI = 1208925819614629174706176.0


class _Scaled:
    """A unit derived from another attribute by a constant factor.

    Reading divides the source attribute by the factor and writing stores the
    value multiplied by it.
    """

    def __init__(self, factor: float, via: str) -> None:
        self.factor = factor
        self.via = via

    def __get__(self, obj: object, objtype: type | None = None):
        if obj is None:
            return self
        return getattr(obj, self.via) / self.factor

    def __set__(self, obj: object, x: float) -> None:
        setattr(obj, self.via, x * self.factor)


@dataclass
class Metric:
    """A quantity in a base unit, viewed through the SI prefixes."""

    base: float = 0.0

    nano = _Scaled(_NANO, "base")
    micro = _Scaled(_MICRO, "base")
    milli = _Scaled(_MILLI, "base")
    centi = _Scaled(_CENTI, "base")
    deci = _Scaled(_DECI, "base")
    deca = _Scaled(_DECA, "base")
    hecto = _Scaled(_HECTO, "base")
    kilo = _Scaled(_KILO, "base")
    mega = _Scaled(_MEGA, "base")
    giga = _Scaled(_GIGA, "base")
    tera = _Scaled(_TERA, "base")
    peta = _Scaled(_PETA, "base")
    exa = _Scaled(_EXA, "base")
    zetta = _Scaled(_ZETTA, "base")
    yotta = _Scaled(_YOTTA, "base")


@dataclass
class Information:
    """An amount of information stored in bits, with binary (1024-based) multiples."""

    bits: float = 0.0

    bytes = _Scaled(8.0, "bits")
    kb = _Scaled(_KIBI, "bytes")
    mb = _Scaled(_MEBI, "bytes")
    gb = _Scaled(_GIBI, "bytes")
    tb = _Scaled(_TEBI, "bytes")
    pb = _Scaled(_PEBI, "bytes")
    eb = _Scaled(_EXBI, "bytes")
    zb = _Scaled(_ZEBI, "bytes")
    yb = _Scaled(_YOBI, "bytes")


@dataclass
class DataRate:
    """A data rate stored in bits per second.

    Bit rates use decimal prefixes; byte rates use binary multiples.
    """

    bits_per_second: float = 0.0

    kilobits_per_second = _Scaled(_KILO, "bits_per_second")
    megabits_per_second = _Scaled(_MEGA, "bits_per_second")
    gigabits_per_second = _Scaled(_GIGA, "bits_per_second")
    bytes_per_second = _Scaled(8.0, "bits_per_second")
    kilobytes_per_second = _Scaled(_KIBI, "bytes_per_second")
    megabytes_per_second = _Scaled(_MEBI, "bytes_per_second")
    gigabytes_per_second = _Scaled(_GIBI, "bytes_per_second")


class Storage:
    """Storage capacity as advertised (decimal) and as actually reported (binary)."""

    def __init__(self) -> None:
        self.actual = Information()

    def __repr__(self) -> str:
        return f"Storage(actual={self.actual!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Storage):
            return NotImplemented
        return self.actual == other.actual

    @property
    def actual_gb(self) -> float:
        return self.actual.gb

    @actual_gb.setter
    def actual_gb(self, x: float) -> None:
        self.actual.gb = x

    @property
    def actual_tb(self) -> float:
        return self.actual.tb

    @actual_tb.setter
    def actual_tb(self, x: float) -> None:
        self.actual.tb = x

    @property
    def advertised_gb(self) -> float:
        return Metric(self.actual.bytes).giga

    @advertised_gb.setter
    def advertised_gb(self, x: float) -> None:
        m = Metric()
        m.giga = x
        self.actual.bytes = m.base

    @property
    def advertised_tb(self) -> float:
        return Metric(self.actual.bytes).tera

    @advertised_tb.setter
    def advertised_tb(self, x: float) -> None:
        m = Metric()
        m.tera = x
        self.actual.bytes = m.base


@dataclass
class PixelDensity:
    """A display's diagonal size and resolution, giving pixels per unit of length."""

    diagonal: float = 24.0
    pixels_width: float = 1920.0
    pixels_height: float = 1080.0

    @property
    def pixels_per_unit(self) -> float:
        """Diagonal length in pixels divided by the diagonal in physical units."""
        diagonal_pixels = math.sqrt(
            self.pixels_width * self.pixels_width + self.pixels_height * self.pixels_height
        )
        if self.diagonal == 0:
            if diagonal_pixels == 0 or math.isnan(diagonal_pixels):
                return math.nan
            return math.copysign(math.inf, self.diagonal)
        return diagonal_pixels / self.diagonal