# sevenseg

Driver logic for multiplexed 7-segment LED displays, common anode or common
cathode, with any number of digits and 7 or 8 segment lines (the eighth is the
decimal point).

It shows integers, hexadecimal values, fixed-point and floating-point numbers,
temperatures with a degree sign and an optional C/F unit, raw segment
patterns, and text that can scroll left or right. Brightness is dimmed by
software PWM inside `refresh()`.

## Installation

```
pip install sevenseg
```

## Wiring pins

`sevenseg.display.SevSeg` drives objects of type `Pin`. The bundled `Pin`
only records its state (`is_output`, `level`); subclass it and override
`configure_output`, `high` and `low` to reach your board's GPIO.

Give `Config` one pin per digit, rightmost digit first, and 7 or 8 segment
pins ordered A, B, C, D, E, F, G and DP. `Config` also takes `hardware`
(`DisplayType.COMMON_ANODE` by default, or `DisplayType.COMMON_CATHODE`),
`pwm_type` (`PwmType.SOFTWARE` by default) and `use_leading_zeros`
(`False` by default).

## Usage

```python
from sevenseg.display import Config, DisplayType, Pin, SevSeg, TemperatureUnit

config = Config(
    digit_pins=[Pin() for _ in range(4)],
    segment_pins=[Pin() for _ in range(8)],
    hardware=DisplayType.COMMON_CATHODE,
)
display = SevSeg(config)

display.set_number(-42)
display.set_number_with_decimal(1234, 2)        # 12.34
display.set_number_float(3.14, 2)               # 3.14
display.set_hex(0xBEEF)
display.set_temperature_with_unit(21.5, 0, TemperatureUnit.CELSIUS)
display.set_segments([0b00001111, 0b10111001])  # rightmost digit first
display.set_text("Hello")
display.scroll_text_left()

while True:
    display.refresh()                           # call at >100 Hz to avoid flicker
```

Buffer position 0 is the rightmost digit; decimal point positions count from
the right starting at 0. `display.buffer` returns the current patterns, and
`width`, `enabled` and `brightness` report the display's state.

Text is written from the left. Text longer than the display gets a blank gap
after it and can be moved with `scroll_text_left()` and `scroll_text_right()`;
text that fits does not scroll.

Other controls: `clear()` blanks every digit, `off()` disables the display and
switches all pins off at once, `on()` enables it again (restoring 100 %
brightness if it was 0), `toggle(enable)` enables or disables it for
blinking, `set_brightness(percent)` sets brightness (values above 100 are
clamped, 0 disables the display), and `display_test(delay_ms)` lights every
segment of every digit in turn, refreshing and sleeping by itself.

## Errors

The constructor and the setters raise `DisplayError` (a subclass of
`ValueError`) when:

- no digit pins, or other than 7 or 8 segment pins, are given;
- a number does not fit on the display;
- a character cannot be shown;
- a decimal point is requested on a display with only 7 segment lines, or at
  a position outside the display;
- more segment patterns are given than there are digits, or a pattern is not
  a byte;
- a temperature is asked of a display with too few digits (two, or three with
  a unit), or the decimal places are out of range.

`set_brightness` raises `ValueError` for a negative value.

## Lookup helpers

`sevenseg.segments` holds the pattern table `SEGMENT_CODES` and the helpers
`segment_code(index)`, `char_to_segment(char)`,
`is_character_supported(char)` and `count_digits(number, base)`. Digits,
letters (case-insensitive), space, `-`, `.`, `*` (degree sign) and `_` are
supported; `M` and `W` map to a blank pattern.

## What it does not do

- It does not talk to any GPIO hardware itself; you supply `Pin` subclasses.
- It does not handle timing: call `refresh()` often, and drive scrolling and
  blinking on your own schedule.
- `PwmType.HARDWARE` does no hardware dimming; with it, `refresh()` simply
  skips the software PWM.
- It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```