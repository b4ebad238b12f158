import math

import pytest

from cstrkit.scanf import ScanResult, parse_integer, parse_real, sscanf


# --- %c -------------------------------------------------------------------


@pytest.mark.parametrize(
    "fmt, text, count, values",
    [
        ("%c", "\t\n\n  1 \n  \t", 1, ("\t",)),
        ("%c", "\t\n\n   \n  \ta", 1, ("\t",)),
        ("%c%c%c", "\t\n\n  123 \n  \t", 3, ("\t", "\n", "\n")),
        ("%c %c \t%c", "\t\n\n  1    2 3 \n  \t", 3, ("\t", "1", "2")),
        ("%c %c \t%c", "\t\n\n  123 \n  \t", 3, ("\t", "1", "2")),
        ("%c %*c \t%c", "\t\n\n  123 \n  \t", 2, ("\t", "2")),
    ],
)
def test_char_conversions(fmt, text, count, values):
    result = sscanf(text, fmt)
    assert result == ScanResult(count, values)


# --- %hd, %d, %ld ---------------------------------------------------------

_COMMON_CASES = [
    ("%{}d", "123", 1, (123,)),
    ("%{}d", "-123", 1, (-123,)),
    ("%{}d", "+123", 1, (123,)),
    ("%3{}d", "-123", 1, (-12,)),
    ("%4{}d", "-123", 1, (-123,)),
    ("%10{}d", "-123", 1, (-123,)),
    ("%1{}d", "-123", 0, (0,)),
    ("%3{}d", "+123", 1, (12,)),
    ("%4{}d", "+123", 1, (123,)),
    ("%10{}d", "+123", 1, (123,)),
    ("%1{}d", "+123", 0, (0,)),
    ("%*1{}d", "+123", 0, ()),
    ("%*{}d", "123", 0, ()),
    ("%{}d", "\u22129223372036854775808", 0, (0,)),
    ("%{}d", "\u22129223372036854775809", 0, (0,)),
    ("%{}d", "\u2212922337203685477582309", 0, (0,)),
]


@pytest.mark.parametrize("size", ["h", "", "l"])
@pytest.mark.parametrize("template, text, count, values", _COMMON_CASES)
def test_decimal_common(size, template, text, count, values):
    assert sscanf(text, template.format(size)) == ScanResult(count, values)


@pytest.mark.parametrize(
    "fmt, text, expected",
    [
        ("%hd", "2147483647", -1),
        ("%hd", "+2147483648", 0),
        ("%hd", "214743483648", -31488),
        ("%hd", "-2147483648", 0),
        ("%hd", "-2147483649", -1),
        ("%hd", "-214748364239", 561),
        ("%hd", "9223372036854775807", -1),
        ("%hd", "9223372036854775808", -1),
        ("%hd", "922337203685477582309", -1),
        ("%d", "2147483647", 2147483647),
        ("%d", "+2147483648", -2147483648),
        ("%d", "214743483648", -4881152),
        ("%d", "-2147483648", -2147483648),
        ("%d", "-2147483649", 2147483647),
        ("%d", "-214748364239", 561),
        ("%d", "9223372036854775807", -1),
        ("%d", "9223372036854775808", -1),
        ("%d", "922337203685477582309", -1),
        ("%ld", "2147483647", 2147483647),
        ("%ld", "+2147483648", 2147483648),
        ("%ld", "214743483648", 214743483648),
        ("%ld", "-2147483648", -2147483648),
        ("%ld", "-2147483649", -2147483649),
        ("%ld", "-214748364239", -214748364239),
        ("%ld", "9223372036854775807", 9223372036854775807),
        ("%ld", "9223372036854775808", 9223372036854775807),
        ("%ld", "922337203685477582309", 9223372036854775807),
    ],
)
def test_decimal_limits(fmt, text, expected):
    assert sscanf(text, fmt) == ScanResult(1, (expected,))


# --- real numbers ---------------------------------------------------------


@pytest.mark.parametrize(
    "fmt, text, count, values",
    [
        ("%f %f %f", "123 +198 -87", 3, (123.0, 198.0, -87.0)),
        ("%fg %f w%fx", "75g +19.8w -87.x", 3, (75.0, 19.8, -87.0)),
        ("%f", "Nap", 0, (0.0,)),
        ("%f", "Np", 0, (0.0,)),
        ("%f", "iNd", 0, (0.0,)),
        ("%f", "id", 0, (0.0,)),
        (
            "%f %f %f %f",
            "34.56e3 83.2e-4 .43e+1 +2.43e3",
            4,
            (34560.0, 0.00832, 4.3, 2430.0),
        ),
        (
            "%1f %1f %2f %1f",
            "34.5+6e3 83.2e-4 .43e+1 +2.43e3",
            3,
            (3.0, 4.0, 0.5, 0.0),
        ),
        ("%*f %7f %*f %*f", "34.5+6e3 83.2e-4 +43e+1 +2.43e3", 1, (6000.0,)),
        ("%fr %7f p", "34.5r 83.2ep4", 2, (34.5, 83.2)),
        ("%1f %1f %1f %1f", "34 32. +45.e +23E3 -0.3e4", 4, (3.0, 4.0, 3.0, 2.0)),
        ("%2f %2f %2f %2f", "34 3. +45.e +23E3 -0.3e4", 4, (34.0, 3.0, 4.0, 5.0)),
        ("%3f %3f %4f %3f", "34 3. +45.e +23E3 -0.3e4", 3, (34.0, 3.0, 45.0, 0.0)),
        ("%4f %4f %4f %4f", "34 3. +45.e +23E3 -0.3e4", 3, (34.0, 3.0, 45.0, 0.0)),
        (
            "%f %fx %2f1 %2fx %*f %*f",
            "1.1 2.x 1.1 2.x 1.1 2.x",
            4,
            (1.1, 2.0, 1.0, 2.0),
        ),
        (
            "%f %4f %5fq %6f %*f q%*f",
            "1.3e1 1.4eq2 1.3e1q 1.4 1.3eq 1.4e2",
            2,
            (13.0, 1.4, 0.0),
        ),
    ],
)
def test_real_conversions(fmt, text, count, values):
    result = sscanf(text, fmt)
    assert result.count == count
    assert result.values == pytest.approx(values, rel=1e-6)


def test_real_nan_and_infinity():
    result = sscanf("NAN nan -INF +inf", "%f %f %f %f")
    assert result.count == 4
    first, second, third, fourth = result.values
    assert math.isnan(first)
    assert math.isnan(second)
    assert third == -math.inf
    assert fourth == math.inf


def test_float_is_single_precision_and_long_double_is_not():
    assert sscanf("0.1", "%f").values == (0.10000000149011612,)
    assert sscanf("0.1", "%Lf").values == (0.1,)


# --- other conversions ----------------------------------------------------


def test_prefixed_integer_bases():
    assert sscanf("0x1A", "%i") == ScanResult(1, (26,))
    assert sscanf("017", "%i") == ScanResult(1, (15,))
    assert sscanf("-42", "%i") == ScanResult(1, (-42,))


def test_octal_and_hex():
    assert sscanf("777 ff FF", "%o %x %X") == ScanResult(3, (511, 255, 255))


def test_unsigned_wraps():
    assert sscanf("-1", "%u") == ScanResult(1, (4294967295,))
    assert sscanf("70000", "%hu") == ScanResult(1, (4464,))


def test_pointer():
    assert sscanf("0x1f", "%p") == ScanResult(1, (31,))


def test_words():
    assert sscanf("hello world", "%s %s") == ScanResult(2, ("hello", "world"))


def test_count_of_characters_read():
    assert sscanf("12 abc", "%d %n") == ScanResult(1, (12, 3))


def test_percent_literal():
    assert sscanf("100%", "%d%%") == ScanResult(1, (100,))


def test_empty_input_gives_minus_one():
    assert sscanf("", "%d") == ScanResult(-1, ())


def test_input_ending_before_conversion_gives_minus_one():
    assert sscanf("7", "%d %d").count == -1


def test_lone_sign_under_width_stops_scan():
    assert sscanf("+5 7", "%1d %d") == ScanResult(0, (0,))


def test_failed_integer_leaves_zero():
    assert sscanf("5 x", "%d %d") == ScanResult(1, (5, 0))


def test_literal_mismatch_stops():
    assert sscanf("a1", "b%d") == ScanResult(0, ())


# --- parse_integer / parse_real ------------------------------------------


def test_parse_integer_plain():
    assert parse_integer("123abc", 0, 10, None, "d") == (123, 3, True)


def test_parse_integer_width():
    assert parse_integer("12345", 0, 10, 3, "d") == (123, 3, True)


def test_parse_integer_no_digits():
    assert parse_integer("zz", 0, 10, None, "d") == (0, 0, False)


def test_parse_integer_overflow_and_underflow_long():
    assert parse_integer("9223372036854775808", 0, 10, None, "l") == (
        9223372036854775807,
        19,
        True,
    )
    assert parse_integer("-9223372036854775809", 0, 10, None, "l") == (
        -9223372036854775808,
        20,
        True,
    )


def test_parse_integer_underflow_short_gives_zero():
    assert parse_integer("-9223372036854775809", 0, 10, None, "h") == (0, 20, True)


def test_parse_integer_hex_digits():
    assert parse_integer("0xAf", 0, 16, None, "d") == (175, 4, True)


def test_parse_real_with_exponent():
    assert parse_real("1.5e2x", 0, None) == (150.0, 5, True)


def test_parse_real_infinity():
    assert parse_real("-inf", 0, None) == (-math.inf, 4, True)


def test_parse_real_width():
    assert parse_real("2.5", 0, 2) == (2.0, 2, True)


def test_parse_real_nothing():
    assert parse_real("x", 0, None) == (0.0, 0, False)