"""Energy, power, pressure, speed, temperature, mass and time quantities."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "centigrade_to_fahrenheit",
    "centigrade_to_kelvin",
    "fahrenheit_to_centigrade",
    "fahrenheit_to_kelvin",
    "kelvin_to_centigrade",
    "kelvin_to_fahrenheit",
    "Energy",
    "Power",
    "Pressure",
    "Speed",
    "Temperature",
    "Mass",
    "Time",
]

_SPEED_OF_SOUND = 340.3  # air, at sea level, standard temperature
_SPEED_OF_LIGHT = 299792458.0


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


def centigrade_to_fahrenheit(x: float) -> float:
    return x * 9.0 / 5.0 + 32.0


def centigrade_to_kelvin(x: float) -> float:
    return x + 273.15


def fahrenheit_to_centigrade(x: float) -> float:
    return (x - 32.0) * 5.0 / 9.0


def fahrenheit_to_kelvin(x: float) -> float:
    return centigrade_to_kelvin(fahrenheit_to_centigrade(x))


def kelvin_to_centigrade(x: float) -> float:
    return x - 273.15


def kelvin_to_fahrenheit(x: float) -> float:
    return centigrade_to_fahrenheit(kelvin_to_centigrade(x))


@dataclass
class Energy:
    """An amount of energy stored in joules."""

    joules: float = 0.0

    btu_iso = _Scaled(1054.5, "joules")
    calories = _Scaled(4.184, "joules")
    kilojoules = _Scaled(1000.0, "joules")
    foot_pound_force = _Scaled(1.3558179483314004, "joules")
    kilowatt_hours = _Scaled(3600000.0, "joules")
    ergs = _Scaled(0.0000001, "joules")
    electronvolts = _Scaled(0.0000000000000000001602176634, "joules")


@dataclass
class Power:
    """A power stored in watts."""

    watts: float = 0.0

    btu_per_hour = _Scaled(3.412142, "watts", inverse=True)
    kilowatts = _Scaled(1000.0, "watts")
    horsepower_mechanical = _Scaled(745.69987158227022, "watts")


@dataclass
class Pressure:
    """A pressure stored in pascals."""

    pascals: float = 0.0

    kilopascals = _Scaled(1000.0, "pascals")
    pounds_per_square_inch = _Scaled(6894.757293168, "pascals")
    bars = _Scaled(100000.0, "pascals")
    standard_atmosphere = _Scaled(101325.0, "pascals")
    millimetres_of_mercury = _Scaled(133.322387415, "pascals")
    inches_of_mercury = _Scaled(3386.389, "pascals")
    centimetres_of_water = _Scaled(98.0665, "pascals")
    inches_of_water = _Scaled(249.082, "pascals")


@dataclass
class Speed:
    """A speed stored in metres per second."""

    metres_per_second: float = 0.0

    kilometres_per_hour = _Scaled(3.6, "metres_per_second", inverse=True)
    feet_per_second = _Scaled(0.3048, "metres_per_second")
    miles_per_hour = _Scaled(0.44704, "metres_per_second")
    knots = _Scaled(1.852, "kilometres_per_hour")
    mach = _Scaled(_SPEED_OF_SOUND, "metres_per_second")
    light = _Scaled(_SPEED_OF_LIGHT, "metres_per_second")


@dataclass
class Temperature:
    """A temperature stored in degrees centigrade."""

    centigrade: float = 0.0

    @property
    def fahrenheit(self) -> float:
        return centigrade_to_fahrenheit(self.centigrade)

    @fahrenheit.setter
    def fahrenheit(self, x: float) -> None:
        self.centigrade = fahrenheit_to_centigrade(x)

    @property
    def kelvin(self) -> float:
        return centigrade_to_kelvin(self.centigrade)

    @kelvin.setter
    def kelvin(self, x: float) -> None:
        self.centigrade = kelvin_to_centigrade(x)


@dataclass
class Mass:
    """A mass stored in grams."""

    grams: float = 0.0

    ounces = _Scaled(28.349523125, "grams")
    kilograms = _Scaled(1000.0, "grams")
    pounds = _Scaled(0.45359237, "kilograms")
    stone = _Scaled(6.35029318, "kilograms")
    tonnes = _Scaled(1000.0, "kilograms")
    tons = _Scaled(1016.0469088, "kilograms")


@dataclass
class Time:
    """A duration stored in seconds."""

    seconds: float = 0.0

    milliseconds = _Scaled(0.001, "seconds")
    minutes = _Scaled(60.0, "seconds")
    hours = _Scaled(60.0, "minutes")
    days = _Scaled(24.0, "hours")
    weeks = _Scaled(7.0, "days")
    months = _Scaled(30.0, "days")
    years = _Scaled(365.25, "days")