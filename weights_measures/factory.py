"""The registry of every conversion screen, each with a numeric type and a name."""

from __future__ import annotations

from dataclasses import dataclass

from .interface_base import ConversionInterface
from .interfaces_a import (
    AngleInterface,
    AreaInterface,
    DataRateInterface,
    EnergyInterface,
    InformationInterface,
    LengthInterface,
    MassInterface,
    MetricInterface,
    PixelDensityInterface,
)
from .interfaces_b import (
    PowerInterface,
    PressureInterface,
    SpeedInterface,
    StorageInterface,
    TemperatureInterface,
    TimeInterface,
    VolumeInterface,
    VolumeUKInterface,
    VolumeUSInterface,
)

__all__ = ["InterfaceType", "ConversionInterfaceFactory"]

_REGISTRY: tuple[tuple[str, type[ConversionInterface]], ...] = (
    ("IDS_ANGLE", AngleInterface),
    ("IDS_AREA", AreaInterface),
    ("IDS_DATA_RATE", DataRateInterface),
    ("IDS_ENERGY", EnergyInterface),
    ("IDS_INFORMATION", InformationInterface),
    ("IDS_LENGTH", LengthInterface),
    ("IDS_MASS", MassInterface),
    ("IDS_METRIC", MetricInterface),
    ("IDS_PIXEL_DENSITY", PixelDensityInterface),
    ("IDS_POWER", PowerInterface),
    ("IDS_PRESSURE", PressureInterface),
    ("IDS_SPEED", SpeedInterface),
    ("IDS_STORAGE", StorageInterface),
    ("IDS_TEMPERATURE", TemperatureInterface),
    ("IDS_TIME", TimeInterface),
    ("IDS_VOLUME", VolumeInterface),
    ("IDS_VOLUME_UK", VolumeUKInterface),
    ("IDS_VOLUME_US", VolumeUSInterface),
)


@dataclass(frozen=True)
class InterfaceType:
    """A registered conversion screen: its type number, name resource and instance."""

    type_id: int
    name: str
    interface: ConversionInterface


class ConversionInterfaceFactory:
    """Holds one live instance of every conversion screen, numbered from 0."""

    def __init__(self) -> None:
        self._interfaces = tuple(
            InterfaceType(type_id, name, cls())
            for type_id, (name, cls) in enumerate(_REGISTRY)
        )

    def interfaces(self) -> tuple[InterfaceType, ...]:
        """Every registered screen, in type order."""
        return self._interfaces

    def get_conversion_interface(self, type_id: int) -> ConversionInterface | None:
        """The screen registered under ``type_id``, or None if there is none."""
        return next(
            (entry.interface for entry in self._interfaces if entry.type_id == type_id),
            None,
        )