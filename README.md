# Weights & Measures

A unit converter. Pick a conversion mode, enter a value in any one of its
units, and every other unit of that mode is worked out from it.

No third-party libraries are needed.

```
pip install .
```

## Conversion modes

Each mode has a fixed type id:

| Id | Mode            | Fields, in order                                                          |
|----|-----------------|---------------------------------------------------------------------------|
| 0  | Angle           | gradians, degrees, radians, turns                                         |
| 1  | Area            | sq in, sq ft, sq yd, sq m, acres, hectares, sq km, sq mi                  |
| 2  | Data rate       | bit/s, kbit/s, Mbit/s, Gbit/s, B/s, KB/s, MB/s, GB/s                      |
| 3  | Energy          | BTU (ISO), calories, joules, kilojoules, ft·lbf, kWh, ergs, eV            |
| 4  | Information     | bits, bytes, KB, MB, GB, TB, PB, EB, ZB                                   |
| 5  | Length          | mm, cm, inches, feet, yards, metres, km, miles                            |
| 6  | Mass            | grams, ounces, pounds, kilograms, stone, tonnes, tons                     |
| 7  | Metric prefixes | nano, micro, milli, centi, base, kilo, mega, giga, tera                   |
| 8  | Pixel density   | diagonal, width in pixels, height in pixels, pixels per unit              |
| 9  | Power           | BTU/h, watts, kilowatts, mechanical horsepower                            |
| 10 | Pressure        | Pa, kPa, psi, bar, atm, mmHg, inHg, cmH₂O, inH₂O                          |
| 11 | Speed           | km/h, ft/s, mph, m/s, knots, Mach, speed of light                         |
| 12 | Storage         | advertised GB, actual GB, advertised TB, actual TB                        |
| 13 | Temperature     | Centigrade, Fahrenheit, Kelvin                                            |
| 14 | Time            | ms, seconds, minutes, hours, days, weeks, months, years                   |
| 15 | Volume          | mL, litres, metric teaspoons, tablespoons and cups                        |
| 16 | Volume (UK)     | mL, litres, fl oz, pints, quarts, gallons, teaspoons, tablespoons, cups   |
| 17 | Volume (US)     | mL, litres, fl oz, pints, quarts, gallons, teaspoons, tablespoons, cups   |

Notes:

- Information, and the byte rates in Data rate, use binary multiples
  (1 KB = 1024 bytes); the bit rates use decimal prefixes.
- Storage shows the gap between the decimal capacity a drive is sold with
  and the binary capacity it reports.
- Pixel density starts at a 24-unit diagonal and 1920 × 1080 pixels.
  Pixels per unit is computed from the other three fields; writing to it
  has no effect.
- Mach uses 340.3 m/s; a month is 30 days and a year 365.25 days.

## Command line

```
weights-measures --list
weights-measures MODE
weights-measures MODE FIELD VALUE
```

- `--list` prints every mode's id and name.
- `MODE` alone prints all fields of that mode at their current (initial)
  values.
- `MODE FIELD VALUE` enters `VALUE` into field number `FIELD` (counted from
  1) and prints every field of the mode.
- `--config FILE` reads a JSON settings file for the mode to use when
  `MODE` is left out, and writes the mode used back to it. Without a
  settings file (or when it is missing or unreadable) the mode is
  Information (id 4).

Each output line holds the field number, the value to 10 significant
digits, and the field's abbreviation and title keys where it has them. An
unknown mode or a field number outside the mode prints an error and exits
with status 1.

Example: one inch as a length.

```
weights-measures 5 3 1
```

## As a library

```python
from weights_measures.factory import ConversionInterfaceFactory
from weights_measures.cli import convert, format_values

factory = ConversionInterfaceFactory()

# Length (id 5): enter 1 in the inches field (index 2, counted from 0)
values = convert(factory, 5, 2, 1.0)   # list of every field's value
print(format_values(factory.get_conversion_interface(5)))
```

`convert(factory, mode, index, value)` raises `ValueError` for an unknown
mode and `IndexError` for an index outside the mode's fields.

`ConversionInterfaceFactory` holds one live instance of each mode.
`interfaces()` returns `InterfaceType` entries (`type_id`, `name`,
`interface`) in id order, and `get_conversion_interface(type_id)` returns
the mode with that id, or `None`.

Every mode is a `ConversionInterface` (in `weights_measures.interface_base`):

- `value_count()` – how many fields the mode has
- `get_value(index)` / `set_value(index, x)` – read or write a field;
  setting one field changes all the others. Indices run 0–8; an index past
  the mode's fields reads as `0.0` and ignores writes, and one outside 0–8
  raises `IndexError`
- `values()` – all field values in order
- `title(index)` / `abbreviation(index)` – the resource keys naming a field
  (empty string where there is none)

The mode classes live in `weights_measures.interfaces_a` and
`weights_measures.interfaces_b`. The unit classes behind them – `Angle`,
`Area`, `Length`, `Volume` (`units_geometry`); `Energy`, `Power`,
`Pressure`, `Speed`, `Temperature`, `Mass`, `Time` (`units_physics`);
`Metric`, `Information`, `DataRate`, `Storage`, `PixelDensity`
(`units_digital`) – are dataclass-style objects whose units are plain
attributes:

```python
from weights_measures.units_geometry import Length

length = Length()
length.miles = 1
print(length.metres)   # 1609.344
```

The temperature helpers `centigrade_to_fahrenheit`, `centigrade_to_kelvin`,
`fahrenheit_to_centigrade`, `fahrenheit_to_kelvin`, `kelvin_to_centigrade`
and `kelvin_to_fahrenheit` are plain functions in `units_physics`.

`weights_measures.application` gives `application_name()`,
`application_version()`, `help_file_name()` and `platform_name(machine)`
(`"x86"`, `"x64"`, `"ARM"` or `"N/A"`, for the running machine when none is
given).

## Build numbers

```
wm-build-number
```

Reads `Build.rad` from the current directory (starting a new history if it
cannot be opened), stamps the current time, increments the build number
and writes it back, together with a `Build.c` file defining `build_number`
and `build_time` constants. `--build-file` and `--source-file` choose other
paths. The same steps are available as `read_build_information`,
`write_build_information`, `write_build_information_source` and
`BuildInformation.increment()` in `weights_measures.buildinfo`.

## What it does not do

- There is no graphical window; the converter is the command line above
  and the library.
- Mode names, field titles and abbreviations are resource keys such as
  `IDS_LENGTH` or `IDS_ABRV_INCHES`; no table of display text or
  translations comes with the package.