# cstrkit

This package provides the familiar C string routines for Python strings and
byte buffers. It also includes a `sscanf`-style scanner.

## Install

```
pip install cstrkit
```

## Scanning formatted text

`cstrkit.scanf.sscanf(text, fmt)` reads values out of `text` according to a
C-style format and returns a `ScanResult`.

- **Conversions:** `%c`, `%d`, `%i`, `%o`, `%u`, `%x`, `%X`, `%e`, `%E`, `%f`, `%g`, `%G`, `%s`, `%p`, `%n` and `%%`.
- **Size modifiers:** `h`, `l` and `L`.
- **Field widths** are supported.
- **`*`** suppresses assignment.

```python
from cstrkit.scanf import sscanf

result = sscanf("12 -3.5e1 word", "%d %f %s")
print(result.count)   # 3
print(result.values)  # (12, -35.0, 'word')
```

`ScanResult` has two fields:

- `count` follows `sscanf`'s return value. It is the number of successful assignments. It is `-1` when the input ran out where a conversion needed characters.
- `values` is a tuple of the values the scan stored, in the order the conversions took them.

The stored values take these forms:

- **Integers** are reduced to the width of their C type: 16 bits with `h`, 32 bits by default, and 64 bits with `l`. `%d` and `%i` give signed results. `%o`, `%u` and `%x` give unsigned results.
- **`%f` and related conversions** are rounded to single precision. With `L` they keep full double precision.
- **`%c`** gives a one-character string.
- **`%s`** gives a whitespace-delimited word.
- **`%p`** gives an unsigned 64-bit integer.
- **`%n`** gives the input position reached.

The lower-level helpers both return `(value, end, ok)`:

- `parse_integer(text, pos, base, width, size)` parses one integer starting at `pos`.
- `parse_real(text, pos, width)` parses one real number starting at `pos`.

## String helpers

`cstrkit.cstring` offers versions of the classic routines that suit Python:

- `memchr`, `memcmp`, `memmove`, `memset`
- `strcat`, `strncat`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strncpy`
- `strcspn`, `strspn`, `strpbrk`, `strstr`, `tokenize`
- `to_upper`, `to_lower`, `insert`, `trim`

Their behaviour differs from C in a few ways:

- **Positions** are returned as indices, or `None` when nothing is found.
- **Text routines** return new strings. They read their arguments as C strings, so anything after a NUL is ignored.
- **`memmove` and `memset`** change a `bytearray` in place and return it.
- **`tokenize`** yields the non-empty tokens as a generator.
- **Out-of-range positions and counts** raise `IndexError`.

```python
from cstrkit.cstring import insert, trim, strcspn, tokenize

insert("Hello  World!", "Hello", 6)       # 'Hello Hello World!'
trim("  \t\nHello World!   ", None)       # 'Hello World!'
strcspn("0987654321", "1234567890")       # 0
list(tokenize("a,,b c", ", "))            # ['a', 'b', 'c']
```

## What is not included

There is no formatted-output (`sprintf`-style) routine. There is also no lookup of error-number messages. Use Python's `%` or `str.format` for output, and `os.strerror` for error messages.

## Running the tests

```
pip install cstrkit[test]
pytest
```