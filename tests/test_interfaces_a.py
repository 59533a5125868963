import math

import pytest

from weights_measures.interfaces_a import (
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

COUNTS = [4, 8, 8, 8, 9, 8, 7, 9, 4]


def _settable_count(iface):
    count = iface.value_count()
    return count - 1 if isinstance(iface, PixelDensityInterface) else count


def test_value_count():
    interfaces = [
        AngleInterface(), AreaInterface(), DataRateInterface(), EnergyInterface(),
        InformationInterface(), LengthInterface(), MassInterface(),
        MetricInterface(), PixelDensityInterface(),
    ]
    assert [iface.value_count() for iface in interfaces] == COUNTS
    assert [len(iface.values()) for iface in interfaces] == COUNTS


def test_round_trip_every_slot():
    interfaces = [
        AngleInterface(), AreaInterface(), DataRateInterface(), EnergyInterface(),
        InformationInterface(), LengthInterface(), MassInterface(),
        MetricInterface(), PixelDensityInterface(),
    ]
    for prototype in interfaces:
        for index in range(_settable_count(prototype)):
            iface = type(prototype)()
            iface.set_value(index, 3.5)
            assert iface.get_value(index) == pytest.approx(3.5)


def test_index_out_of_range():
    interfaces = [
        AngleInterface(), AreaInterface(), DataRateInterface(), EnergyInterface(),
        InformationInterface(), LengthInterface(), MassInterface(),
        MetricInterface(), PixelDensityInterface(),
    ]
    for iface in interfaces:
        with pytest.raises(IndexError):
            iface.get_value(9)
        with pytest.raises(IndexError):
            iface.set_value(-1, 1.0)


def test_unused_slots_read_default():
    interfaces = [
        AngleInterface(), AreaInterface(), DataRateInterface(), EnergyInterface(),
        InformationInterface(), LengthInterface(), MassInterface(),
        MetricInterface(), PixelDensityInterface(),
    ]
    for iface in interfaces:
        iface.set_value(0, 5.0)
        for index in range(iface.value_count(), 9):
            iface.set_value(index, 99.0)
            assert iface.get_value(index) == 0.0
            assert iface.title(index) == ""
            assert iface.abbreviation(index) == ""


def test_angle_degrees():
    iface = AngleInterface()
    iface.set_value(1, 180.0)
    assert iface.get_value(2) == pytest.approx(math.pi)
    assert iface.get_value(0) == pytest.approx(200.0)
    assert iface.get_value(3) == pytest.approx(0.5)


def test_angle_labels():
    iface = AngleInterface()
    assert iface.title(0) == "IDS_TITLE_GRADIANS"
    assert iface.abbreviation(3) == "IDS_ABRV_TURNS"


def test_area_acre():
    iface = AreaInterface()
    iface.set_value(3, 4046.8564224)
    assert iface.get_value(4) == pytest.approx(1.0)
    assert iface.title(7) == "IDS_TITLE_SQUARE_MILES"


def test_data_rate_bytes():
    iface = DataRateInterface()
    iface.set_value(5, 1.0)
    assert iface.get_value(4) == pytest.approx(1024.0)
    assert iface.get_value(0) == pytest.approx(8192.0)


def test_data_rate_labels_abbreviation_only():
    iface = DataRateInterface()
    assert iface.title(0) == ""
    assert iface.abbreviation(0) == "IDS_ABRV_BITS_PER_SEC"
    assert iface.abbreviation(7) == "IDS_ABRV_GIGABYTES_PER_SEC"


def test_energy_kilowatt_hour():
    iface = EnergyInterface()
    iface.set_value(5, 1.0)
    assert iface.get_value(2) == pytest.approx(3600000.0)
    assert iface.abbreviation(7) == "IDS_ABRV_ELECTRONVOLTS"


def test_information_kilobyte():
    iface = InformationInterface()
    iface.set_value(2, 1.0)
    assert iface.get_value(1) == pytest.approx(1024.0)
    assert iface.title(2) == ""
    assert iface.abbreviation(8) == "IDS_ABRV_ZB"


def test_length_mile():
    iface = LengthInterface()
    iface.set_value(7, 1.0)
    assert iface.get_value(5) == pytest.approx(1609.344)
    assert iface.title(2) == "IDS_TITLE_INCHES"


def test_mass_pound():
    iface = MassInterface()
    iface.set_value(2, 1.0)
    assert iface.get_value(3) == pytest.approx(0.45359237)
    assert iface.abbreviation(4) == "IDS_ABRV_STONE"


def test_metric_kilo():
    iface = MetricInterface()
    iface.set_value(5, 1.0)
    assert iface.get_value(4) == pytest.approx(1000.0)
    assert iface.title(4) == "IDS_TITLE_BASE"
    assert iface.abbreviation(4) == ""


def test_pixel_density_defaults():
    iface = PixelDensityInterface()
    assert iface.values()[:3] == [24.0, 1920.0, 1080.0]
    assert iface.title(3) == ""
    assert iface.abbreviation(3) == "IDS_ABRV_PPU"


def test_pixel_density_output_is_read_only():
    iface = PixelDensityInterface()
    before = iface.get_value(3)
    iface.set_value(3, 1.0)
    assert iface.get_value(3) == before


def test_pixel_density_scales_with_diagonal():
    iface = PixelDensityInterface()
    before = iface.get_value(3)
    iface.set_value(0, iface.get_value(0) * 2)
    assert iface.get_value(3) == pytest.approx(before / 2)


def test_interfaces_are_independent():
    a = LengthInterface()
    b = LengthInterface()
    a.set_value(0, 10.0)
    assert b.get_value(0) == 0.0