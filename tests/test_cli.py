import json

import pytest

from weights_measures.cli import (
    ConvertorSettings,
    convert,
    format_mode_list,
    format_values,
    main,
)
from weights_measures.factory import ConversionInterfaceFactory


def test_convert_temperature():
    values = convert(ConversionInterfaceFactory(), 13, 0, 100.0)
    assert values[0] == 100.0
    assert values[1] == pytest.approx(212.0)


def test_convert_keeps_entered_value():
    factory = ConversionInterfaceFactory()
    values = convert(factory, 5, 5, 3.5)
    assert values[5] == pytest.approx(3.5)
    assert len(values) == factory.get_conversion_interface(5).value_count()


def test_convert_round_trip_between_slots():
    factory = ConversionInterfaceFactory()
    first = convert(factory, 6, 3, 2.0)
    again = convert(factory, 6, 0, first[0])
    assert again[3] == pytest.approx(2.0)


def test_convert_unknown_mode():
    with pytest.raises(ValueError):
        convert(ConversionInterfaceFactory(), 99, 0, 1.0)


def test_convert_index_out_of_range():
    with pytest.raises(IndexError):
        convert(ConversionInterfaceFactory(), 13, 3, 1.0)


def test_format_mode_list_names_every_mode():
    factory = ConversionInterfaceFactory()
    text = format_mode_list(factory)
    assert len(text.splitlines()) == 18
    for entry in factory.interfaces():
        assert entry.name in text


def test_format_values_one_line_per_slot():
    factory = ConversionInterfaceFactory()
    interface = factory.get_conversion_interface(13)
    lines = format_values(interface).splitlines()
    assert len(lines) == interface.value_count()
    assert "IDS_ABRV_CENTIGRADE" in lines[0]


def test_settings_defaults():
    settings = ConvertorSettings()
    assert (settings.mode, settings.x, settings.y) == (4, 32, 32)


def test_settings_mapping_round_trip():
    settings = ConvertorSettings(mode=7, x=10, y=20)
    mapping = settings.to_mapping()
    assert mapping["CONVERTOR_DLG_MODE"] == 7
    assert ConvertorSettings.from_mapping(mapping) == settings


def test_settings_missing_keys_use_defaults():
    assert ConvertorSettings.from_mapping({"CONVERTOR_DLG_POS_X": 5}) == ConvertorSettings(x=5)


def test_settings_load_missing_file(tmp_path):
    assert ConvertorSettings.load(tmp_path / "absent.json") == ConvertorSettings()


def test_settings_save_load(tmp_path):
    path = tmp_path / "cfg.json"
    settings = ConvertorSettings(mode=2, x=1, y=3)
    settings.save(path)
    assert ConvertorSettings.load(path) == settings


def test_main_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "IDS_VOLUME_UK" in out


def test_main_converts(capsys):
    assert main(["13", "1", "100"]) == 0
    out = capsys.readouterr().out
    assert "212" in out.splitlines()[1]


def test_main_unknown_mode(capsys):
    assert main(["42"]) == 1
    assert "42" in capsys.readouterr().err


def test_main_index_without_value():
    with pytest.raises(SystemExit):
        main(["13", "1"])


def test_main_saves_mode(tmp_path, capsys):
    path = tmp_path / "cfg.json"
    assert main(["--config", str(path), "11"]) == 0
    assert json.loads(path.read_text())["CONVERTOR_DLG_MODE"] == 11
    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "IDS_ABRV_KNOTS" in out