"""Conversion screens for power, pressure, speed, storage, temperature, time
and metric, UK and US volumes."""

from __future__ import annotations

from .interface_base import ConversionInterface, Field
from .units_digital import Storage
from .units_geometry import Volume
from .units_physics import Power, Pressure, Speed, Temperature, Time

__all__ = [
    "PowerInterface",
    "PressureInterface",
    "SpeedInterface",
    "StorageInterface",
    "TemperatureInterface",
    "TimeInterface",
    "VolumeInterface",
    "VolumeUKInterface",
    "VolumeUSInterface",
]


def _labelled(attribute: str, key: str) -> Field:
    return Field(attribute, f"IDS_TITLE_{key}", f"IDS_ABRV_{key}")


class PowerInterface(ConversionInterface):
    """BTU per hour, watts, kilowatts and mechanical horsepower."""

    fields = (
        _labelled("btu_per_hour", "BTU_H"),
        _labelled("watts", "WATTS"),
        _labelled("kilowatts", "KILOWATTS"),
        _labelled("horsepower_mechanical", "HORSEPOWER_MECH"),
    )

    def __init__(self) -> None:
        super().__init__(Power())


class PressureInterface(ConversionInterface):
    """Common units of pressure; the slots carry abbreviations only."""

    fields = (
        Field("pascals", abbreviation="IDS_ABRV_PASCALS"),
        Field("kilopascals", abbreviation="IDS_ABRV_KILOPASCALS"),
        Field("pounds_per_square_inch", abbreviation="IDS_ABRV_POUNDS_PER_SQUARE_INCH"),
        Field("bars", abbreviation="IDS_ABRV_BARS"),
        Field("standard_atmosphere", abbreviation="IDS_ABRV_STD_ATMOSPHERE"),
        Field("millimetres_of_mercury", abbreviation="IDS_ABRV_MILLIMETRES_MERCURY"),
        Field("inches_of_mercury", abbreviation="IDS_ABRV_INCHES_MERCURY"),
        Field("centimetres_of_water", abbreviation="IDS_ABRV_CENTIMETRES_WATER"),
        Field("inches_of_water", abbreviation="IDS_ABRV_INCHES_WATER"),
    )

    def __init__(self) -> None:
        super().__init__(Pressure())


class SpeedInterface(ConversionInterface):
    """Road, nautical and relative speeds."""

    fields = (
        _labelled("kilometres_per_hour", "KILOMETRES_PER_HOUR"),
        _labelled("feet_per_second", "FEET_PER_SECOND"),
        _labelled("miles_per_hour", "MILES_PER_HOUR"),
        _labelled("metres_per_second", "METRES_PER_SECOND"),
        _labelled("knots", "KNOTS"),
        _labelled("mach", "MACH"),
        _labelled("light", "LIGHT"),
    )

    def __init__(self) -> None:
        super().__init__(Speed())


class StorageInterface(ConversionInterface):
    """Advertised against actual storage capacity."""

    fields = (
        _labelled("advertised_gb", "ADV_GB"),
        _labelled("actual_gb", "ACTUAL_GB"),
        _labelled("advertised_tb", "ADV_TB"),
        _labelled("actual_tb", "ACTUAL_TB"),
    )

    def __init__(self) -> None:
        super().__init__(Storage())


class TemperatureInterface(ConversionInterface):
    """Centigrade, Fahrenheit and Kelvin."""

    fields = (
        _labelled("centigrade", "CENTIGRADE"),
        _labelled("fahrenheit", "FAHRENHEIT"),
        _labelled("kelvin", "KELVIN"),
    )

    def __init__(self) -> None:
        super().__init__(Temperature())


class TimeInterface(ConversionInterface):
    """Durations from milliseconds to years."""

    fields = (
        _labelled("milliseconds", "MILLISECONDS"),
        _labelled("seconds", "SECONDS"),
        _labelled("minutes", "MINUTES"),
        _labelled("hours", "HOURS"),
        _labelled("days", "DAYS"),
        _labelled("weeks", "WEEKS"),
        _labelled("months", "MONTHS"),
        _labelled("years", "YEARS"),
    )

    def __init__(self) -> None:
        super().__init__(Time())


class VolumeInterface(ConversionInterface):
    """Metric volumes and metric kitchen measures."""

    fields = (
        _labelled("millilitres", "MILLILITRES"),
        _labelled("litres", "LITRES"),
        _labelled("teaspoons_metric", "TEASPOONS_METRIC"),
        _labelled("tablespoons_metric", "TABLESPOONS_METRIC"),
        _labelled("cups_metric", "CUPS_METRIC"),
    )

    def __init__(self) -> None:
        super().__init__(Volume())


class VolumeUKInterface(ConversionInterface):
    """Imperial (UK) volumes alongside millilitres and litres."""

    fields = (
        _labelled("millilitres", "MILLILITRES"),
        _labelled("litres", "LITRES"),
        _labelled("fluid_ounces_uk", "FLUID_OUNCES_UK"),
        _labelled("pints_uk", "PINTS_UK"),
        _labelled("quarts_uk", "QUARTS_UK"),
        _labelled("gallons_uk", "GALLONS_UK"),
        _labelled("teaspoons_uk", "TEASPOONS_UK"),
        _labelled("tablespoons_uk", "TABLESPOONS_UK"),
        _labelled("cups_uk", "CUPS_UK"),
    )

    def __init__(self) -> None:
        super().__init__(Volume())


class VolumeUSInterface(ConversionInterface):
    """US customary volumes alongside millilitres and litres."""

    fields = (
        _labelled("millilitres", "MILLILITRES"),
        _labelled("litres", "LITRES"),
        _labelled("fluid_ounces_us", "FLUID_OUNCES_US"),
        _labelled("pints_us", "PINTS_US"),
        _labelled("quarts_us", "QUARTS_US"),
        _labelled("gallons_us", "GALLONS_US"),
        _labelled("teaspoons_us", "TEASPOONS_US"),
        _labelled("tablespoons_us", "TABLESPOONS_US"),
        _labelled("cups_us", "CUPS_US"),
    )

    def __init__(self) -> None:
        super().__init__(Volume())