"""Conversion screens for angle, area, data rate, energy, information, length,
mass, metric prefixes and pixel density."""

from __future__ import annotations

from .interface_base import ConversionInterface, Field
from .units_digital import DataRate, Information, Metric, PixelDensity
from .units_geometry import Angle, Area, Length
from .units_physics import Energy, Mass

__all__ = [
    "AngleInterface",
    "AreaInterface",
    "DataRateInterface",
    "EnergyInterface",
    "InformationInterface",
    "LengthInterface",
    "MassInterface",
    "MetricInterface",
    "PixelDensityInterface",
]


def _labelled(attribute: str, key: str) -> Field:
    return Field(attribute, f"IDS_TITLE_{key}", f"IDS_ABRV_{key}")


class AngleInterface(ConversionInterface):
    """Gradians, degrees, radians and turns."""

    fields = (
        _labelled("gradians", "GRADIANS"),
        _labelled("degrees", "DEGREES"),
        _labelled("radians", "RADIANS"),
        _labelled("turns", "TURNS"),
    )

    def __init__(self) -> None:
        super().__init__(Angle())


class AreaInterface(ConversionInterface):
    """Imperial and metric areas."""

    fields = (
        _labelled("square_inches", "SQUARE_INCHES"),
        _labelled("square_feet", "SQUARE_FEET"),
        _labelled("square_yards", "SQUARE_YARDS"),
        _labelled("square_metres", "SQUARE_METRES"),
        _labelled("acres", "ACRES"),
        _labelled("hectares", "HECTARES"),
        _labelled("square_kilometres", "SQUARE_KILOMETRES"),
        _labelled("square_miles", "SQUARE_MILES"),
    )

    def __init__(self) -> None:
        super().__init__(Area())


class DataRateInterface(ConversionInterface):
    """Bit and byte rates; the slots carry abbreviations only."""

    fields = (
        Field("bits_per_second", abbreviation="IDS_ABRV_BITS_PER_SEC"),
        Field("kilobits_per_second", abbreviation="IDS_ABRV_KILOBITS_PER_SEC"),
        Field("megabits_per_second", abbreviation="IDS_ABRV_MEGABITS_PER_SEC"),
        Field("gigabits_per_second", abbreviation="IDS_ABRV_GIGABITS_PER_SEC"),
        Field("bytes_per_second", abbreviation="IDS_ABRV_BYTES_PER_SEC"),
        Field("kilobytes_per_second", abbreviation="IDS_ABRV_KILOBYTES_PER_SEC"),
        Field("megabytes_per_second", abbreviation="IDS_ABRV_MEGABYTES_PER_SEC"),
        Field("gigabytes_per_second", abbreviation="IDS_ABRV_GIGABYTES_PER_SEC"),
    )

    def __init__(self) -> None:
        super().__init__(DataRate())


class EnergyInterface(ConversionInterface):
    """Common units of energy."""

    fields = (
        _labelled("btu_iso", "BTU_ISO"),
        _labelled("calories", "CALORIES"),
        _labelled("joules", "JOULES"),
        _labelled("kilojoules", "KILOJOULES"),
        _labelled("foot_pound_force", "FOOT_POUND_FORCE"),
        _labelled("kilowatt_hours", "KILOWATT_HOURS"),
        _labelled("ergs", "ERGS"),
        _labelled("electronvolts", "ELECTRONVOLTS"),
    )

    def __init__(self) -> None:
        super().__init__(Energy())


class InformationInterface(ConversionInterface):
    """Bits, bytes and binary multiples up to zettabytes; abbreviations only."""

    fields = (
        Field("bits", abbreviation="IDS_ABRV_BITS"),
        Field("bytes", abbreviation="IDS_ABRV_BYTES"),
        Field("kb", abbreviation="IDS_ABRV_KB"),
        Field("mb", abbreviation="IDS_ABRV_MB"),
        Field("gb", abbreviation="IDS_ABRV_GB"),
        Field("tb", abbreviation="IDS_ABRV_TB"),
        Field("pb", abbreviation="IDS_ABRV_PB"),
        Field("eb", abbreviation="IDS_ABRV_EB"),
        Field("zb", abbreviation="IDS_ABRV_ZB"),
    )

    def __init__(self) -> None:
        super().__init__(Information())


class LengthInterface(ConversionInterface):
    """Imperial and metric lengths."""

    fields = (
        _labelled("millimetres", "MILLIMETRES"),
        _labelled("centimetres", "CENTIMETRES"),
        _labelled("inches", "INCHES"),
        _labelled("feet", "FEET"),
        _labelled("yards", "YARDS"),
        _labelled("metres", "METRES"),
        _labelled("kilometres", "KILOMETRES"),
        _labelled("miles", "MILES"),
    )

    def __init__(self) -> None:
        super().__init__(Length())


class MassInterface(ConversionInterface):
    """Imperial and metric masses."""

    fields = (
        _labelled("grams", "GRAMS"),
        _labelled("ounces", "OUNCES"),
        _labelled("pounds", "POUNDS"),
        _labelled("kilograms", "KILOGRAMS"),
        _labelled("stone", "STONE"),
        _labelled("tonnes", "TONNES"),
        _labelled("tons", "TONS"),
    )

    def __init__(self) -> None:
        super().__init__(Mass())


class MetricInterface(ConversionInterface):
    """SI prefixes from nano to tera; titles only."""

    fields = (
        Field("nano", title="IDS_TITLE_NANO"),
        Field("micro", title="IDS_TITLE_MICRO"),
        Field("milli", title="IDS_TITLE_MILLI"),
        Field("centi", title="IDS_TITLE_CENTI"),
        Field("base", title="IDS_TITLE_BASE"),
        Field("kilo", title="IDS_TITLE_KILO"),
        Field("mega", title="IDS_TITLE_MEGA"),
        Field("giga", title="IDS_TITLE_GIGA"),
        Field("tera", title="IDS_TITLE_TERA"),
    )

    def __init__(self) -> None:
        super().__init__(Metric())


class PixelDensityInterface(ConversionInterface):
    """Diagonal and resolution in, pixels per unit out (the last slot is read-only)."""

    fields = (
        _labelled("diagonal", "DIAGONAL"),
        Field("pixels_width", "IDS_TITLE_PIXELS_W", "IDS_ABRV_PIXELS_W"),
        Field("pixels_height", "IDS_TITLE_PIXELS_H", "IDS_ABRV_PIXELS_H"),
        Field("pixels_per_unit", "", "IDS_ABRV_PPU", settable=False),
    )

    def __init__(self) -> None:
        super().__init__(PixelDensity())