from unittest import mock

import pytest

from sevenseg.display import (
    Config,
    DisplayError,
    DisplayType,
    Pin,
    PwmType,
    SevSeg,
    TemperatureUnit,
)
from sevenseg.segments import (
    BLANK,
    DECIMAL_POINT,
    DEGREE,
    LETTER_C,
    LETTER_F,
    MINUS,
    ZERO,
    char_to_segment,
    segment_code,
)


def make_display(
    digits=2,
    segments=8,
    hardware=DisplayType.COMMON_CATHODE,
    leading_zeros=False,
    pwm_type=PwmType.SOFTWARE,
):
    config = Config(
        digit_pins=[Pin(f"d{i}") for i in range(digits)],
        segment_pins=[Pin(f"s{i}") for i in range(segments)],
        hardware=hardware,
        pwm_type=pwm_type,
        use_leading_zeros=leading_zeros,
    )
    return SevSeg(config), config


BLANK_CODE = segment_code(BLANK)


@pytest.mark.parametrize("digits,segments", [(0, 8), (2, 6), (2, 9)])
def test_invalid_config_raises(digits, segments):
    with pytest.raises(DisplayError):
        make_display(digits=digits, segments=segments)


def test_init_configures_and_clears_pins_cathode():
    display, config = make_display()
    assert all(p.is_output for p in config.digit_pins + config.segment_pins)
    assert all(p.level is True for p in config.digit_pins)
    assert all(p.level is False for p in config.segment_pins)
    assert display.width == 2
    assert display.enabled is True
    assert display.brightness == 100


def test_init_clears_pins_anode():
    _, config = make_display(hardware=DisplayType.COMMON_ANODE)
    assert all(p.level is False for p in config.digit_pins)
    assert all(p.level is True for p in config.segment_pins)


def test_set_number():
    display, _ = make_display()
    display.set_number(42)
    assert display.buffer == (segment_code(2), segment_code(4))


def test_set_number_negative():
    display, _ = make_display()
    display.set_number(-5)
    assert display.buffer == (segment_code(5), segment_code(MINUS))


@pytest.mark.parametrize("number", [100, -10])
def test_set_number_too_large(number):
    display, _ = make_display()
    with pytest.raises(DisplayError):
        display.set_number(number)


def test_set_number_leading_zeros():
    display, _ = make_display(digits=4, leading_zeros=True)
    display.set_number(7)
    assert display.buffer == (segment_code(7),) + (segment_code(ZERO),) * 3


def test_set_number_blank_padding_and_zero():
    display, _ = make_display(digits=4)
    display.set_number(7)
    assert display.buffer == (segment_code(7),) + (BLANK_CODE,) * 3
    display.set_number(0)
    assert display.buffer == (segment_code(ZERO),) + (BLANK_CODE,) * 3


def test_set_hex():
    display, _ = make_display()
    display.set_hex(0xAF)
    assert display.buffer == (segment_code(0xF), segment_code(0xA))


@pytest.mark.parametrize("number", [0x100, -1])
def test_set_hex_out_of_range(number):
    display, _ = make_display()
    with pytest.raises(DisplayError):
        display.set_hex(number)


def test_set_number_with_decimal():
    display, _ = make_display()
    display.set_number_with_decimal(42, 1)
    assert display.buffer == (
        segment_code(2),
        segment_code(4) | segment_code(DECIMAL_POINT),
    )


def test_set_number_with_decimals_multiple():
    display, _ = make_display(digits=4)
    display.set_number_with_decimals(1234, [1, 2])
    dp = segment_code(DECIMAL_POINT)
    assert display.buffer == (
        segment_code(4),
        segment_code(3) | dp,
        segment_code(2) | dp,
        segment_code(1),
    )


def test_decimal_errors():
    display, _ = make_display()
    with pytest.raises(DisplayError):
        display.set_number_with_decimals(42, [])
    with pytest.raises(DisplayError):
        display.set_number_with_decimal(42, 2)
    seven, _ = make_display(segments=7)
    with pytest.raises(DisplayError):
        seven.set_number_with_decimal(42, 1)


def test_set_number_float_matches_scaled_integer():
    display, _ = make_display()
    display.set_number_float(4.25, 1)
    reference, _ = make_display()
    reference.set_number_with_decimal(42, 1)
    assert display.buffer == reference.buffer


def test_set_number_float_requires_places():
    display, _ = make_display()
    with pytest.raises(DisplayError):
        display.set_number_float(4.2, 0)


def test_set_temperature():
    display, _ = make_display(digits=3)
    display.set_temperature(25, 0)
    assert display.buffer == (
        segment_code(DEGREE),
        segment_code(5),
        segment_code(2),
    )


def test_set_temperature_needs_two_digits():
    display, _ = make_display(digits=1)
    with pytest.raises(DisplayError):
        display.set_temperature(5, 0)


@pytest.mark.parametrize(
    "unit,letter",
    [(TemperatureUnit.CELSIUS, LETTER_C), (TemperatureUnit.FAHRENHEIT, LETTER_F)],
)
def test_set_temperature_with_unit(unit, letter):
    display, _ = make_display(digits=4)
    display.set_temperature_with_unit(25, 0, unit)
    assert display.buffer == (
        segment_code(letter),
        segment_code(DEGREE),
        segment_code(5),
        segment_code(2),
    )


def test_set_temperature_with_unit_needs_three_digits():
    display, _ = make_display(digits=2)
    with pytest.raises(DisplayError):
        display.set_temperature_with_unit(5, 0, TemperatureUnit.CELSIUS)


def test_set_segments():
    display, _ = make_display(digits=4)
    display.set_segments([0b00001111, 0b10111001])
    assert display.buffer == (0b00001111, 0b10111001, BLANK_CODE, BLANK_CODE)
    with pytest.raises(DisplayError):
        display.set_segments([0] * 5)


def test_set_text_short():
    display, _ = make_display(digits=4)
    display.set_text("Hi")
    assert display.buffer == (
        BLANK_CODE,
        BLANK_CODE,
        char_to_segment("i"),
        char_to_segment("H"),
    )


def test_set_text_unsupported():
    display, _ = make_display()
    with pytest.raises(DisplayError):
        display.set_text("H!")
    assert display.buffer == (BLANK_CODE, BLANK_CODE)


def test_scroll_left_window():
    display, _ = make_display()
    display.set_text("abc")
    assert display.buffer == (char_to_segment("b"), char_to_segment("a"))
    display.scroll_text_left()
    assert display.buffer == (char_to_segment("c"), char_to_segment("b"))


def test_scroll_full_cycle_returns_to_start():
    display, _ = make_display()
    display.set_text("abc")
    start = display.buffer
    # "abc" plus a two-digit blank gap
    for _ in range(len("abc") + display.width):
        display.scroll_text_left()
    assert display.buffer == start


def test_scroll_left_then_right_is_identity():
    display, _ = make_display()
    display.set_text("hello")
    start = display.buffer
    display.scroll_text_left()
    display.scroll_text_right()
    assert display.buffer == start
    display.scroll_text_right()
    display.scroll_text_left()
    assert display.buffer == start


def test_scroll_short_text_is_noop():
    display, _ = make_display(digits=4)
    display.set_text("Go")
    start = display.buffer
    display.scroll_text_left()
    assert display.buffer == start


def test_refresh_cathode_drives_pins():
    display, config = make_display()
    display.set_number(42)
    assert display.refresh() is True
    digits, segments = config.digit_pins, config.segment_pins
    assert [p.level for p in digits] == [False, True]
    code = segment_code(2)
    assert [p.level for p in segments] == [
        bool(code & (1 << i)) for i in range(len(segments))
    ]
    assert display.refresh() is True
    assert [p.level for p in digits] == [True, False]


def test_refresh_anode_inverts_pins():
    display, config = make_display(hardware=DisplayType.COMMON_ANODE)
    display.set_number(42)
    assert display.refresh() is True
    assert [p.level for p in config.digit_pins] == [True, False]
    code = segment_code(2)
    assert [p.level for p in config.segment_pins] == [
        not (code & (1 << i)) for i in range(len(config.segment_pins))
    ]


def test_brightness_zero_disables():
    display, _ = make_display()
    display.set_brightness(0)
    assert display.enabled is False
    assert display.refresh() is False
    display.on()
    assert display.brightness == 100
    assert display.refresh() is True


def test_brightness_half_duty_cycle():
    display, _ = make_display()
    display.set_brightness(50)
    lit = [display.refresh() for _ in range(10)]
    assert sum(lit) == 5


def test_brightness_clamped():
    display, _ = make_display()
    display.set_brightness(150)
    assert display.brightness == 100
    with pytest.raises(ValueError):
        display.set_brightness(-1)


def test_hardware_pwm_ignores_duty_cycle():
    display, _ = make_display(pwm_type=PwmType.HARDWARE)
    display.set_brightness(10)
    assert all(display.refresh() for _ in range(10))


def test_off_clears_pins_and_on_restores():
    display, config = make_display()
    display.set_number(88)
    display.refresh()
    display.off()
    assert display.enabled is False
    assert all(p.level is False for p in config.segment_pins)
    assert all(p.level is True for p in config.digit_pins)
    assert display.refresh() is False
    display.on()
    assert display.refresh() is True


def test_toggle():
    display, _ = make_display()
    display.toggle(False)
    assert display.refresh() is False
    display.toggle(True)
    assert display.refresh() is True


def test_clear():
    display, _ = make_display(digits=3)
    display.set_number(123)
    display.clear()
    assert display.buffer == (BLANK_CODE,) * 3


def test_is_character_supported():
    display, _ = make_display()
    assert display.is_character_supported("a") is True
    assert display.is_character_supported("_") is True
    assert display.is_character_supported("!") is False


def test_display_test_cycles_and_blanks():
    display, _ = make_display(digits=2, segments=8)
    display.set_number(42)
    with mock.patch("time.sleep") as sleep:
        display.display_test(2)
    assert sleep.call_count == 2 * 8 * 2
    assert display.buffer == (BLANK_CODE, BLANK_CODE)