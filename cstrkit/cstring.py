"""Byte-buffer and string routines in the manner of C's <string.h>.

Positions are returned as indices (or None when nothing is found). Strings
are immutable, so routines that would modify a string return a new one.
Routines that work on raw memory take a ``bytearray`` and change it in place.
Text arguments are read as C strings: anything after a NUL is ignored.
"""

from __future__ import annotations

from collections.abc import Iterator

_DEFAULT_TRIM = " \t\n\v\f\r"

BytesLike = bytes | bytearray | memoryview


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL."""
    return s.split("\0", 1)[0]


def _codes(data: str | BytesLike) -> list[int]:
    """Character codes of ``data``; a string gets its terminating NUL."""
    if isinstance(data, str):
        return [ord(ch) for ch in data] + [0]
    return list(bytes(data))


def _code(c: int | str, data: str | BytesLike) -> int:
    code = ord(c) if isinstance(c, str) else c
    return code if isinstance(data, str) else code & 0xFF


def _char_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def memchr(data: str | BytesLike, c: int | str, n: int) -> int | None:
    """Index of the first ``c`` among the first ``n`` units of ``data``."""
    codes = _codes(data)
    if n > len(codes):
        raise IndexError(f"cannot search {n} units in a buffer of {len(codes)}")
    target = _code(c, data)
    try:
        return codes[:n].index(target)
    except ValueError:
        return None


def memcmp(a: str | BytesLike, b: str | BytesLike, n: int) -> int:
    """Compare the first ``n`` units; return the difference at the first mismatch."""
    left, right = _codes(a), _codes(b)
    if n > len(left) or n > len(right):
        raise IndexError(f"cannot compare {n} units")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def memmove(
    buffer: bytearray, dest: int, src: int | BytesLike, n: int
) -> bytearray:
    """Copy ``n`` bytes to offset ``dest`` of ``buffer``; overlap is safe.

    ``src`` is either an offset into ``buffer`` or a separate bytes-like
    source. The buffer is changed in place and returned.
    """
    if n < 0 or dest < 0 or dest + n > len(buffer):
        raise IndexError("destination range lies outside the buffer")
    if isinstance(src, int):
        if src < 0 or src + n > len(buffer):
            raise IndexError("source range lies outside the buffer")
        chunk = bytes(buffer[src : src + n])
    else:
        source = bytes(src)
        if n > len(source):
            raise IndexError("source is shorter than the byte count")
        chunk = source[:n]
    buffer[dest : dest + n] = chunk
    return buffer


def memset(buffer: bytearray, c: int | str, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c``; return the buffer."""
    if n < 0 or n > len(buffer):
        raise IndexError("fill range lies outside the buffer")
    value = (ord(c) if isinstance(c, str) else c) & 0xFF
    buffer[:n] = bytes([value]) * n
    return buffer


def strcat(dest: str, src: str) -> str:
    """``dest`` followed by ``src``."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """``dest`` followed by at most ``n`` characters of ``src``."""
    return _cstr(dest) + _cstr(src)[:n]


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL finds the terminator."""
    text = _cstr(s)
    ch = chr(c) if isinstance(c, int) else c
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL finds the terminator."""
    text = _cstr(s)
    ch = chr(c) if isinstance(c, int) else c
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    left, right = _cstr(a), _cstr(b)
    for index in range(n):
        x, y = _char_at(left, index), _char_at(right, index)
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the difference at the first mismatch."""
    left, right = _cstr(a), _cstr(b)
    return strncmp(left, right, max(len(left), len(right)) + 1)


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: ``src`` cut to ``n`` and padded with NULs."""
    return _cstr(src)[:n].ljust(n, "\0")


def strcspn(s: str, reject: str) -> int:
    """Length of the leading part of ``s`` holding no character of ``reject``."""
    banned = set(_cstr(reject))
    text = _cstr(s)
    return next((i for i, ch in enumerate(text) if ch in banned), len(text))


def strspn(s: str, accept: str) -> int:
    """Length of the leading part of ``s`` made only of characters of ``accept``."""
    allowed = set(_cstr(accept))
    text = _cstr(s)
    return next((i for i, ch in enumerate(text) if ch not in allowed), len(text))


def strpbrk(s: str, accept: str) -> int | None:
    """Index of the first character of ``s`` that appears in ``accept``."""
    text = _cstr(s)
    index = strcspn(text, accept)
    return None if index == len(text) else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``; 0 for an empty needle."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


def tokenize(s: str, delim: str) -> Iterator[str]:
    """Yield the non-empty runs of ``s`` separated by characters of ``delim``."""
    separators = set(_cstr(delim))
    token: list[str] = []
    for ch in _cstr(s):
        if ch in separators:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)


def to_upper(s: str | None) -> str | None:
    """``s`` with ASCII letters in upper case; None stays None."""
    if s is None:
        return None
    return "".join(
        chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in _cstr(s)
    )


def to_lower(s: str | None) -> str | None:
    """``s`` with ASCII letters in lower case; None stays None."""
    if s is None:
        return None
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in _cstr(s)
    )


def insert(src: str | None, s: str | None, index: int) -> str | None:
    """``src`` with ``s`` inserted at ``index``; None if either is None."""
    if src is None or s is None:
        return None
    text = _cstr(src)
    if index < 0 or index > len(text):
        raise IndexError(f"insert position {index} outside a string of {len(text)}")
    return text[:index] + _cstr(s) + text[index:]


def trim(src: str | None, trim_chars: str | None) -> str | None:
    """``src`` without leading and trailing characters of ``trim_chars``.

    An empty or missing ``trim_chars`` trims whitespace. None stays None.
    """
    if src is None:
        return None
    chars = _cstr(trim_chars) if trim_chars else _DEFAULT_TRIM
    return _cstr(src).strip(chars)