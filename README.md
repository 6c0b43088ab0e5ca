# ftkit

Small helpers in the style of the classic C library, with Python behaviour.
The package covers character classification, byte-buffer operations, a singly
linked list, writing to file descriptors, bounded string operations, string
conversion and a compact `printf`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper`. Each takes an integer code point or a one-character string.
The classifiers return a `bool`. The converters change only ASCII letters and
return the same kind of value they were given.

```python
from ftkit.chars import is_alpha, to_upper

is_alpha("q")     # True
to_upper("q")     # 'Q'
to_upper(97)      # 65
```

### `ftkit.memory`

`memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove` work on
`bytes`, `bytearray` and `memoryview`. Any buffer that is written to must be
mutable. A byte count larger than a buffer raises `ValueError`.

- `calloc(num, size)` returns a zero-filled `bytearray`.
- `memchr` returns an index, or `None` when the byte is not found.
- `memcmp` returns the difference of the first unequal pair of bytes, or 0.

### `ftkit.lists`

`Node` holds `content` and `next`. `LinkedList` starts from `head`. It can be
built from an iterable, and it supports `len()` and iteration over contents.
Its methods are `nodes()`, `push_front`, `push_back`, `last`, `clear(delete)`,
`for_each(f)` and `map(f, delete)`. The `map` method returns a new list. If
`f` raises, the contents already produced are passed to `delete` and the
exception propagates. `Node.delete(delete)` passes a node's content to
`delete`.

### `ftkit.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write UTF-8 text to
a raw file descriptor with `os.write`. `put_str_fd` and `put_endl_fd` write
nothing when given `None`.

### `ftkit.strings`

`strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat` and `substr`.
Strings end at their first NUL character. The searches return an index or
`None`. `strlcpy` and `strlcat` return the resulting string together with the
length the untruncated result would have had.

```python
from ftkit.strings import strchr, strlcpy

strchr("hello", "l")     # 2
strlcpy("hello", 3)      # ('he', 5)
```

### `ftkit.transform`

- `atoi(text)`: skips leading whitespace, accepts one optional sign and reads
  digits. A second sign or no digits gives 0.
- `itoa(n)`: the decimal text of `n`.
- `split(s, c)`: splits on `c` and drops empty words.
- `strjoin(s1, s2)`: joins the two strings.
- `strtrim(s, charset)`: strips the characters in `charset` from both ends.
- `strmapi(s, f)`: builds a new string from `f(index, char)`.
- `striteri(buffer, f)`: applies `f(index, char)` in place on a mutable
  sequence of characters. It stops at a NUL element.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted string. `printf(fmt, *args)`
writes to standard output and returns the number of characters written. The
supported conversions are `%c %s %p %d %i %u %x %X %%`:

- `%d` and `%i` wrap the value to a signed 32-bit integer.
- `%u`, `%x` and `%X` wrap the value to an unsigned 32-bit integer.
- `%p` prints a 64-bit address as `0x…`; `None` or 0 prints `0x0`.
- `%s` with `None` prints `(null)`.

An unknown conversion, a missing argument or an argument of the wrong type
raises `FormatError`, which is a subclass of `ValueError`. Helper functions:
`num_len_base`, `utoa`, `utoa_base` and `format_pointer`.

```python
from ftkit.printf import sprintf
from ftkit.transform import split, atoi

sprintf("%s has %d items (%x)", "cart", 42, 255)   # 'cart has 42 items (ff)'
split("  a  b c ", " ")                             # ['a', 'b', 'c']
atoi("   -123abc")                                  # -123
```

## What it does not do

`printf` and `sprintf` accept no flags, field widths, precisions or length
modifiers. Only the conversions listed above are recognised. The package has
no command-line tool. It is used only as a library.