"""Driving a multiplexed seven-segment display through output pins."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .segments import (
    BLANK,
    DECIMAL_POINT,
    DEGREE,
    LETTER_C,
    LETTER_F,
    MINUS,
    ZERO,
    char_to_segment,
    count_digits,
    is_character_supported,
    segment_code,
)

__all__ = [
    "DisplayError",
    "DisplayType",
    "PwmType",
    "TemperatureUnit",
    "Pin",
    "Config",
    "SevSeg",
]

_PWM_PERIOD = 10


class DisplayError(ValueError):
    """Raised when a value cannot be shown or the display is misconfigured."""


class DisplayType(Enum):
    """Wiring of the display's common terminal."""

    COMMON_ANODE = "common_anode"
    COMMON_CATHODE = "common_cathode"


class PwmType(Enum):
    """How brightness is controlled."""

    SOFTWARE = "software"
    HARDWARE = "hardware"


class TemperatureUnit(Enum):
    """Unit symbol shown after a temperature."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class Pin:
    """A digital output line.

    This implementation only remembers its state; subclass it and override
    the methods to drive real hardware.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.is_output = False
        self.level: bool | None = None

    def configure_output(self) -> None:
        """Put the pin into output mode."""
        self.is_output = True

    def high(self) -> None:
        """Drive the pin high."""
        self.level = True

    def low(self) -> None:
        """Drive the pin low."""
        self.level = False

    def __repr__(self) -> str:
        return f"Pin(name={self.name!r}, level={self.level!r})"


@dataclass
class Config:
    """Wiring and behaviour of a display.

    ``digit_pins`` select the digits, rightmost first as they appear in the
    buffer; ``segment_pins`` are A to G and optionally the decimal point.
    """

    digit_pins: Sequence[Pin]
    segment_pins: Sequence[Pin]
    hardware: DisplayType = DisplayType.COMMON_ANODE
    pwm_type: PwmType = PwmType.SOFTWARE
    use_leading_zeros: bool = False


class SevSeg:
    """A multiplexed seven-segment display.

    Buffer position 0 is the rightmost digit. ``refresh`` lights one digit
    per call and must be called often to keep the display visible.
    """

    def __init__(self, config: Config) -> None:
        digit_pins = list(config.digit_pins)
        segment_pins = list(config.segment_pins)
        if not digit_pins:
            raise DisplayError("at least one digit pin is required")
        if not 7 <= len(segment_pins) <= 8:
            raise DisplayError(
                f"7 or 8 segment pins are required, got {len(segment_pins)}"
            )

        for pin in (*digit_pins, *segment_pins):
            pin.configure_output()

        self._hardware = config.hardware
        self._pwm_type = config.pwm_type
        self._digit_pins = digit_pins
        self._segment_pins = segment_pins
        self._use_leading_zeros = config.use_leading_zeros

        self._enabled = True
        self._brightness = 100

        self._scroll_position = 0
        self._text_pattern: list[int] = []

        self._pwm_counter = 0
        self._current_digit = 0
        self._buffer = [BLANK_CODE] * len(digit_pins)

        self._clear_digit_pins()
        self._clear_segment_pins()

    # ---- state -----------------------------------------------------------

    @property
    def width(self) -> int:
        """Number of digits on the display."""
        return len(self._digit_pins)

    @property
    def buffer(self) -> tuple[int, ...]:
        """Segment patterns per digit, rightmost digit first."""
        return tuple(self._buffer)

    @property
    def enabled(self) -> bool:
        """Whether the display is switched on."""
        return self._enabled

    @property
    def brightness(self) -> int:
        """Brightness in percent."""
        return self._brightness

    def is_character_supported(self, char: str) -> bool:
        """Tell whether a single character can be displayed."""
        return is_character_supported(char)

    # ---- control ---------------------------------------------------------

    def display_test(self, delay_ms: int) -> None:
        """Light each segment of each digit in turn, refreshing by itself."""
        for digit in range(self.width):
            for segment in range(len(self._segment_pins)):
                self._buffer[digit] = 1 << segment
                for _ in range(delay_ms):
                    self.refresh()
                    time.sleep(0.001)
                self._buffer[digit] = BLANK_CODE

    def toggle(self, enable: bool) -> None:
        """Enable or disable the display, e.g. to make it blink."""
        self._enabled = enable

    def clear(self) -> None:
        """Blank every digit."""
        self._buffer = [BLANK_CODE] * self.width

    def off(self) -> None:
        """Disable the display and switch all pins off at once."""
        self._enabled = False
        self._clear_digit_pins()
        self._clear_segment_pins()

    def on(self) -> None:
        """Enable the display, restoring full brightness if it was zero."""
        self._enabled = True
        if self._brightness == 0:
            self._brightness = 100

    def set_brightness(self, brightness: int) -> None:
        """Set brightness in percent; values above 100 are clamped to 100."""
        if brightness < 0:
            raise ValueError(f"brightness cannot be negative: {brightness}")
        self._enabled = brightness != 0
        self._brightness = min(brightness, 100)

    # ---- content ---------------------------------------------------------

    def set_number(self, number: int) -> None:
        """Show a decimal integer, right aligned."""
        self._require_fits(number, 10)
        self._fill_number_background()

        negative = number < 0
        number = abs(number)
        position = 0
        if number == 0:
            self._buffer[0] = segment_code(ZERO)
            position = 1
        else:
            while number > 0 and position < self.width:
                number, digit = divmod(number, 10)
                self._buffer[position] = segment_code(digit)
                position += 1

        if negative:
            self._buffer[position] = segment_code(MINUS)

    def set_number_float(self, number: float, decimal_places: int) -> None:
        """Show a number with a fixed count of decimal places."""
        if decimal_places <= 0:
            raise DisplayError("decimal_places must be positive")
        scaled = int(number * 10**decimal_places)
        self.set_number_with_decimal(scaled, decimal_places)

    def set_number_with_decimal(
        self, number: int, decimal_point_position: int
    ) -> None:
        """Show an integer with a decimal point on the digit at that position.

        Positions count from the right, starting at 0.
        """
        self.set_number_with_decimals(number, [decimal_point_position])

    def set_number_with_decimals(
        self, number: int, decimal_point_positions: Iterable[int]
    ) -> None:
        """Show an integer with decimal points on several digits."""
        positions = list(decimal_point_positions)
        if not positions:
            raise DisplayError("at least one decimal point position is required")
        for position in positions:
            if not 0 <= position < self.width:
                raise DisplayError(
                    f"decimal point position {position} is outside the display"
                )
        if len(self._segment_pins) < 8:
            raise DisplayError("a decimal point segment pin is required")

        self.set_number(number)
        for position in positions:
            self._buffer[position] |= segment_code(DECIMAL_POINT)

    def set_hex(self, number: int) -> None:
        """Show a non-negative integer in hexadecimal."""
        if not 0 <= number < 2**32:
            raise DisplayError(f"hex value out of range: {number}")
        self._require_fits(number, 16)
        self._fill_number_background()

        if number == 0:
            self._buffer[0] = segment_code(ZERO)
            return
        position = 0
        while number > 0 and position < self.width:
            number, digit = divmod(number, 16)
            self._buffer[position] = segment_code(digit)
            position += 1

    def set_temperature(self, temperature: float, decimal_places: int) -> None:
        """Show a temperature followed by a degree sign."""
        if self.width <= 1:
            raise DisplayError("at least two digits are required")
        if decimal_places < 0:
            raise DisplayError("decimal_places cannot be negative")

        # One extra digit holds the degree sign.
        scaled = int(temperature * 10 ** (decimal_places + 1))
        self._require_fits(scaled, 10)

        if decimal_places > 0:
            self.set_number_with_decimal(scaled, decimal_places + 1)
        else:
            self.set_number(scaled)

        self._buffer[0] = segment_code(DEGREE)

    def set_temperature_with_unit(
        self, temperature: float, decimal_places: int, unit: TemperatureUnit
    ) -> None:
        """Show a temperature followed by a degree sign and C or F."""
        if self.width <= 2:
            raise DisplayError("at least three digits are required")

        adjusted = decimal_places + 1 if decimal_places > 0 else decimal_places
        self.set_temperature(temperature * 10, adjusted)

        self._buffer[1] = segment_code(DEGREE)
        letter = LETTER_F if unit is TemperatureUnit.FAHRENHEIT else LETTER_C
        self._buffer[0] = segment_code(letter)

    def set_segments(self, pattern: Sequence[int]) -> None:
        """Show raw segment patterns, rightmost digit first.

        Digits beyond the pattern are blanked.
        """
        patterns = list(pattern)
        if len(patterns) > self.width:
            raise DisplayError(
                f"{len(patterns)} patterns do not fit on {self.width} digits"
            )
        for value in patterns:
            if not 0 <= value <= 0xFF:
                raise DisplayError(f"segment pattern out of range: {value}")
        self._buffer = patterns + [BLANK_CODE] * (self.width - len(patterns))

    def set_text(self, text: str) -> None:
        """Show text from the left; longer text can then be scrolled."""
        self.clear()
        self._scroll_position = 0
        self._text_pattern = []

        try:
            pattern = [char_to_segment(char) for char in text]
        except ValueError as exc:
            raise DisplayError(str(exc)) from exc

        if len(pattern) > self.width:
            # A blank gap separates the end of the text from its start.
            pattern.extend([BLANK_CODE] * self.width)
        self._text_pattern = pattern
        self._update_from_text()

    def scroll_text_left(self) -> None:
        """Scroll the text one digit to the left."""
        length = len(self._text_pattern)
        if length <= self.width:
            return
        self._scroll_position = (self._scroll_position + 1) % length
        self._update_from_text()

    def scroll_text_right(self) -> None:
        """Scroll the text one digit to the right."""
        length = len(self._text_pattern)
        if length <= self.width:
            return
        self._scroll_position = (self._scroll_position - 1) % length
        self._update_from_text()

    def refresh(self) -> bool:
        """Light the next digit; return whether a digit was lit."""
        self._clear_digit_pins()

        lit = self._enabled
        if self._pwm_type is PwmType.SOFTWARE:
            lit = lit and self._software_pwm_phase()
        if not lit:
            return False

        self._set_segment_pins()
        digit_pin = self._digit_pins[self._current_digit]
        if self._hardware is DisplayType.COMMON_CATHODE:
            digit_pin.low()
        else:
            digit_pin.high()

        self._current_digit = (self._current_digit + 1) % self.width
        return True

    # ---- internals -------------------------------------------------------

    def _require_fits(self, number: int, base: int) -> None:
        if count_digits(number, base) > self.width:
            raise DisplayError(f"{number} does not fit on {self.width} digits")

    def _fill_number_background(self) -> None:
        fill = segment_code(ZERO) if self._use_leading_zeros else BLANK_CODE
        self._buffer = [fill] * self.width

    def _clear_digit_pins(self) -> None:
        for pin in self._digit_pins:
            if self._hardware is DisplayType.COMMON_CATHODE:
                pin.high()
            else:
                pin.low()

    def _clear_segment_pins(self) -> None:
        for pin in self._segment_pins:
            if self._hardware is DisplayType.COMMON_CATHODE:
                pin.low()
            else:
                pin.high()

    def _set_segment_pins(self) -> None:
        pattern = self._buffer[self._current_digit]
        cathode = self._hardware is DisplayType.COMMON_CATHODE
        for bit, pin in enumerate(self._segment_pins):
            segment_on = bool(pattern & (1 << bit))
            if segment_on == cathode:
                pin.high()
            else:
                pin.low()

    def _software_pwm_phase(self) -> bool:
        self._pwm_counter = (self._pwm_counter + 1) % _PWM_PERIOD
        level = (self._brightness + 9) // 10
        return level > 0 and (level >= _PWM_PERIOD or self._pwm_counter < level)

    def _update_from_text(self) -> None:
        width = self.width
        pattern = self._text_pattern
        if len(pattern) > width:
            window = [
                pattern[(self._scroll_position + i) % len(pattern)]
                for i in range(width)
            ]
        else:
            window = pattern + [BLANK_CODE] * (width - len(pattern))
        self._buffer = window[::-1]


BLANK_CODE = segment_code(BLANK)