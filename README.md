# ftkit

Helpers for Python code that has to follow C library semantics: ASCII
character tests, in-place byte-buffer operations, NUL-terminated string
functions with bounded copies, string building, and plain writes to file
descriptors. There are no dependencies beyond the standard library.

## Installation

```
pip install ftkit
```

## Conventions

- Strings may be `str`, `bytes` or `bytearray`, and end at their first NUL
  character if they have one.
- Positions are returned as indices; `None` means "not found".
- Lengths and sizes are checked: a negative one, or one that runs past a
  buffer, raises `ValueError`.
- Numbers converted with `itoa` and `putnbr_fd` must fit in a 32-bit signed
  integer, otherwise `OverflowError` is raised.

## Modules

### `ftkit.chars`

`isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower`, `toupper`.
Each takes an integer code or a one-character string and uses the ASCII
ranges only. The tests return `bool`; `tolower` and `toupper` return the
same kind of value they were given.

### `ftkit.memory`

- `memset(buf, c, n)` and `bzero(buf, n)` fill the first `n` bytes of a
  `bytearray` in place.
- `calloc(nmemb, size)` returns a zeroed `bytearray`; a product too large to
  address raises `OverflowError`.
- `memchr(buf, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or 0.
- `memcpy(dest, src, n)` copies into the start of `dest`.
- `memmove(buf, dest, src, n)` moves `n` bytes within one buffer between the
  offsets `src` and `dest`; the regions may overlap.

### `ftkit.strings`

`atoi`, `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, and
the bounded copies `strlcpy(dest, src, size)` and `strlcat(dest, src, size)`,
which write into a `bytearray` and return the length the full result would
have had.

### `ftkit.textops`

`substr`, `strjoin` (a `None` part counts as empty), `strtrim`, `split`
(empty words are dropped), `itoa`, `strmapi(s, f)` (builds a new string from
`f(index, char)`), and `striteri(s, f)`, which calls `f(index, char)` on a
mutable sequence such as a `bytearray` and stores any non-`None` result in
place.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write straight to an
open file descriptor with `os.write`. `putstr_fd` and `putendl_fd` do
nothing when given `None`.

## Examples

```python
from ftkit.chars import isdigit, toupper
from ftkit.memory import calloc, memset
from ftkit.strings import atoi, strchr, strlcpy, strncmp
from ftkit.textops import itoa, split, strtrim
from ftkit.output import putnbr_fd

isdigit("7")                 # True
toupper(ord("a"))            # 65
toupper("a")                 # 'A'

buf = calloc(4, 2)           # bytearray of eight zero bytes
memset(buf, 0x41, 3)         # bytearray(b'AAA\x00\x00\x00\x00\x00')

atoi("  -42abc")             # -42
strncmp("abc", "abd", 2)     # 0
strchr("hello", "l")         # 2
strchr("hello", "z")         # None

dest = bytearray(4)
strlcpy(dest, b"hello", 4)   # 5; dest is now bytearray(b'hel\x00')

split("  hello  world ", " ")   # ['hello', 'world']
strtrim("xxhixx", "x")          # 'hi'
itoa(-2147483648)               # '-2147483648'

putnbr_fd(123, 1)            # writes 123 to standard output
```

## Running the tests

```
pip install -e ".[test]"
pytest
```