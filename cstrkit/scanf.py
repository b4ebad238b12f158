"""Formatted input in the manner of C's sscanf, returning the stored values."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

_WHITESPACE = " \t\n"
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)
_HEX_LETTERS = frozenset("abcdefABCDEF")

# Value replacing an out-of-range result, by size letter.
_ON_OVERFLOW = {"d": -1, "l": _LLONG_MAX, "h": -1, "i": -1}
_ON_UNDERFLOW = {"l": _LLONG_MIN, "h": 0, "i": 0}

# Bit width of the variable a conversion stores into, by size letter.
_BITS = {"h": 16, "d": 32, "i": 32, "l": 64}

_INTEGER_BASES = {"d": 10, "o": 8, "u": 10, "x": 16, "X": 16}
_REAL_CONVERSIONS = "eEfgG"


@dataclass(frozen=True)
class ScanResult:
    """What a scan produced.

    ``count`` is the number of successful assignments, or -1 when the input
    ended before a conversion could start. ``values`` holds every value the
    scan stored, in the order the conversions consumed their targets.
    """

    count: int
    values: tuple = ()


def _char(text: str, index: int) -> str:
    """Character at ``index``, or NUL outside the string."""
    return text[index] if 0 <= index < len(text) else "\0"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to a machine integer of the given width."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _power_of_ten(exponent: int) -> float:
    try:
        return 10.0**exponent
    except OverflowError:
        return math.inf


def _skip_space(text: str, pos: int) -> int:
    while _char(text, pos) in _WHITESPACE:
        pos += 1
    return pos


def _digit_value(ch: str, base: int) -> int | None:
    code = ord(ch)
    if code < ord("0"):
        return None
    is_letter = ch in _HEX_LETTERS
    if not (code <= ord("0") + base - 1 or (base == 16 and is_letter)):
        return None
    return int(ch, 16) if is_letter else code - ord("0")


def parse_integer(text: str, pos: int, base: int, width: int | None, size: str):
    """Read an integer at ``pos``; return ``(value, end, ok)``.

    ``width`` limits the characters read (None for no limit). ``size`` is one
    of ``d``, ``l``, ``h`` or ``i`` and decides what replaces a result that
    overflowed 64 bits. A leading ``0`` and a following ``x`` are consumed
    whatever the base.
    """
    limit = math.inf if width is None else width
    ok = False
    negative = False

    sign = _char(text, pos)
    if sign == "-":
        negative = True
        limit -= 1
        pos += 1
    elif sign == "+":
        pos += 1
        limit -= 1

    if _char(text, pos) == "0" and limit > 0:
        pos += 1
        limit -= 1
        ok = True
        if limit > 0 and _char(text, pos) in "xX":
            pos += 1
            limit -= 1

    result = previous = 0
    overflow = underflow = False
    while limit > 0:
        digit = _digit_value(_char(text, pos), base)
        if digit is None:
            break
        ok = True
        result = _wrap(result * base + (-digit if negative else digit), 64, True)
        pos += 1
        limit -= 1
        if not underflow and previous > 0 and result < previous:
            overflow = True
        elif not overflow and previous < 0 and result > previous:
            underflow = True
        previous = result

    if overflow:
        result = _ON_OVERFLOW.get(size, result)
    if underflow:
        result = _ON_UNDERFLOW.get(size, result)
    return result, pos, ok


def parse_real(text: str, pos: int, width: int | None):
    """Read a decimal real number at ``pos``; return ``(value, end, ok)``.

    Accepts an optional sign, ``nan``/``NAN``/``inf``/``INF``, digits, a
    fraction and a lower-case ``e`` exponent. ``width`` limits the characters
    read (None for no limit).
    """
    limit = math.inf if width is None else width
    ok = False
    negative = False
    result = 0.0

    sign = _char(text, pos)
    if sign == "-":
        negative = True
        limit -= 1
        pos += 1
    elif sign == "+":
        pos += 1
        limit -= 1

    word = text[pos : pos + 3]
    special = None
    if word in ("nan", "NAN"):
        special = math.nan
    if word in ("inf", "INF"):
        special = math.inf
    if special is not None:
        result = -special if negative else special
        pos += 3
        ok = True
        limit = 0

    while limit > 0 and _is_digit(_char(text, pos)):
        ok = True
        digit = int(_char(text, pos))
        result = result * 10 + (-digit if negative else digit)
        pos += 1
        limit -= 1

    if limit > 0 and _char(text, pos) == ".":
        fraction = 0.1
        pos += 1
        limit -= 1
        while limit > 0 and _is_digit(_char(text, pos)):
            ok = True
            digit = int(_char(text, pos))
            result += (-digit if negative else digit) * fraction
            fraction /= 10
            pos += 1
            limit -= 1

    if limit > 0 and _char(text, pos) == "e":
        pos += 1
        limit -= 1
        exp_negative = False
        has_exponent = False
        if limit > 0:
            exp_sign = _char(text, pos)
            if exp_sign == "-":
                exp_negative = True
                limit -= 1
                pos += 1
            elif exp_sign == "+":
                pos += 1
                limit -= 1
        degree = 0
        while limit > 0 and _is_digit(_char(text, pos)):
            has_exponent = True
            digit = int(_char(text, pos))
            degree = degree * 10 + (-digit if exp_negative else digit)
            pos += 1
            limit -= 1
        if has_exponent:
            result = result * _power_of_ten(degree)

    return result, pos, ok


class _Scanner:
    """State of one scan over an input string and a format."""

    def __init__(self, text: str, fmt: str) -> None:
        self.text = text
        self.fmt = fmt
        self.pos = 0
        self.fi = 0
        self.count = 0
        self.values: list = []
        self.separator = False
        self.stop = False
        self.failed = False

    @property
    def _current(self) -> str:
        return _char(self.text, self.pos)

    @property
    def _spec(self) -> str:
        return _char(self.fmt, self.fi)

    def run(self) -> ScanResult:
        while self.fi < len(self.fmt) and not self.stop:
            f = self.fmt[self.fi]
            if f in _WHITESPACE:
                self.separator = True
                self.fi += 1
                continue
            if self.separator and self._current in _WHITESPACE:
                self.pos += 1
                continue
            if self._current == f and f != "%":
                self.pos += 1
                self.fi += 1
                continue
            if f != "%":
                break
            self._directive()
        return ScanResult(-1 if self.failed else self.count, tuple(self.values))

    def _directive(self) -> None:
        self.separator = False
        self.fi += 1
        suppress = self._spec == "*"
        if suppress:
            self.fi += 1

        width = None
        if _is_digit(self._spec):
            parsed, self.fi, _ = parse_integer(self.fmt, self.fi, 10, None, "d")
            parsed = _wrap(parsed, 32, True)
            if parsed > 0:
                width = parsed

        if self._current == "\0" and self._spec not in "ncs":
            self.stop = True
            self.failed = True
            return

        ok = self._convert(self._spec, suppress, width)

        if ok or self._current != "\0":
            self.fi += 1
        elif self._spec not in "ncs":
            self.stop = True
            self.failed = True
        else:
            self.fi += 1

    def _convert(self, spec: str, suppress: bool, width: int | None) -> bool:
        if spec in ("h", "l"):
            self.fi += 1
            conv = self._spec
            if conv == "i":
                return self._scan_prefixed(spec, width)
            if conv in _INTEGER_BASES:
                return self._scan_integer(
                    spec, _INTEGER_BASES[conv], conv == "d", suppress, width
                )
            return False
        if spec == "L":
            self.fi += 1
            if self._spec in _REAL_CONVERSIONS:
                return self._scan_real("L", suppress, width)
            return False
        if spec == "c":
            if not suppress:
                self.values.append(self._current)
                self.count += 1
            self.pos += 1
            return False
        if spec in _INTEGER_BASES:
            return self._scan_integer(
                "d", _INTEGER_BASES[spec], spec == "d", suppress, width
            )
        if spec == "i":
            return self._scan_prefixed("i", width)
        if spec in _REAL_CONVERSIONS:
            return self._scan_real("f", suppress, width)
        if spec == "s":
            return self._scan_word()
        if spec == "p":
            return self._scan_pointer(suppress, width)
        if spec == "n":
            if not suppress:
                self.pos = _skip_space(self.text, self.pos)
                self.values.append(self.pos)
                return True
            return False
        if spec == "%":
            ok = False
            if not suppress:
                self.pos = _skip_space(self.text, self.pos)
                ok = True
            self.pos += 1
            return ok
        return False

    def _check_lone_sign(self, width: int | None, ok: bool) -> None:
        if width is not None and not ok and _char(self.text, self.pos - 1) in "+-":
            self.stop = True

    def _scan_prefixed(self, size: str, width: int | None) -> bool:
        self.pos = _skip_space(self.text, self.pos)
        first = self._current
        second = _char(self.text, self.pos + 1)
        third = _char(self.text, self.pos + 2)
        if first == "0" or (first in "+-" and second == "0"):
            base = 16 if second in "xX" or third in "xX" else 8
        else:
            base = 10
        value, self.pos, ok = parse_integer(self.text, self.pos, base, width, size)
        self.values.append(_wrap(value, _BITS[size], True))
        if ok:
            self.count += 1
        self._check_lone_sign(width, ok)
        return ok

    def _scan_integer(
        self, size: str, base: int, signed: bool, suppress: bool, width: int | None
    ) -> bool:
        self.pos = _skip_space(self.text, self.pos)
        value, self.pos, ok = parse_integer(self.text, self.pos, base, width, size)
        if not suppress:
            self.values.append(_wrap(value, _BITS[size], signed))
            if ok:
                self.count += 1
        self._check_lone_sign(width, ok)
        return ok

    def _scan_real(self, size: str, suppress: bool, width: int | None) -> bool:
        self.pos = _skip_space(self.text, self.pos)
        value, self.pos, ok = parse_real(self.text, self.pos, width)
        if not suppress:
            self.values.append(value if size == "L" else _to_float32(value))
            if ok:
                self.count += 1
            else:
                self.stop = True
        return ok

    def _scan_word(self) -> bool:
        self.pos = _skip_space(self.text, self.pos)
        start = self.pos
        while self._current not in _WHITESPACE and self._current != "\0":
            self.pos += 1
        self.values.append(self.text[start : self.pos])
        ok = self.pos > start
        if ok:
            self.count += 1
        return ok

    def _scan_pointer(self, suppress: bool, width: int | None) -> bool:
        if suppress:
            _, self.pos, ok = parse_integer(self.text, self.pos, 16, width, "d")
            return ok
        self.pos = _skip_space(self.text, self.pos)
        value, self.pos, ok = parse_integer(self.text, self.pos, 16, width, "d")
        self.values.append(_wrap(value, 64, False))
        if ok:
            self.count += 1
        return ok


def sscanf(text: str, fmt: str) -> ScanResult:
    """Scan ``text`` according to the scanf-style format ``fmt``."""
    return _Scanner(text, fmt).run()