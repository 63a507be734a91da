# aisutil

A collection of small utilities for Python 3.10 and later, with no
dependencies outside the standard library.

## Installation

```
pip install aisutil
```

To run the test suite:

```
pip install "aisutil[test]"
pytest
```

## What is inside

### `aisutil.text`

- `to_lower(text)` and `to_upper(text)` change the case of ASCII letters only.
- `prepad(text, width, fill=" ")` pads on the left up to `width`; longer
  text is returned unchanged. `fill` must be one character.
- `trim(text)` strips spaces, tabs, CR and LF from both ends.
- `trim_quotes(text)` strips spaces, single quotes and double quotes from
  both ends.

### `aisutil.tokens`

`StringTokens(text, position=0)` works through a string with a cursor:

- `count_tokens()` counts whitespace-separated tokens;
  `count_tokens(delimiter)` counts the pieces between delimiters. Empty text
  has no tokens.
- `next_token()` skips leading whitespace and returns the next word.
  `next_token(delimiter)` returns everything up to the next single-character
  delimiter, so empty tokens are possible; reading past the last one raises
  `IndexError`.
- `next_colon_token()` returns the rest of the text when the next character
  is `:` (the IRC style of trailing argument), and otherwise the next token.

### `aisutil.mask`

`StringMask(pattern)` matches shell-style wildcards: `*`, `?`, bracket sets
(`[abc]`, `[!abc]`, `[^abc]`) and `\` escapes. `matches(text)` ignores case;
`matches_case(text)` respects it.

### `aisutil.utils`

- `validate_utf8(data)` checks that a bytes-like object is well-formed UTF-8
  with sequences of at most four octets.
- `to_bool(word)` turns `yes`/`no`, `true`/`false` and `on`/`off` (any
  case) into `True` or `False`. Integers in decimal, octal (leading `0`) or
  hexadecimal (`0x`) are true when positive. Anything else gives `None`.
- `base_x_str(number, base, network_byte_order=False)` writes a
  non-negative number in any base from 2 to 85 (`MAX_BASE`), without
  padding; zero gives an empty string. With `network_byte_order` the low
  32 bits are first put into network byte order. Bases above 36 are
  case-sensitive and bases above 62 use ASCII punctuation; the output is
  not Base64.

### `aisutil.timestamp`

`Time(seconds=0, nanoseconds=0)` is an ordered dataclass. `+` and `-`
carry nanoseconds into seconds, `/` returns how many whole times one time
fits into another (as a float), `total_nanoseconds()` gives the whole
value, `set_time()` loads the system clock, and `Time.now()` returns the
current time.

### `aisutil.peakcount`

`PeakCount(value=0, peak=0)` is a counter that remembers its highest value.
Adding a number raises the peak when the value passes it; subtracting never
lowers it. Adding or subtracting another `PeakCount` combines values and
peaks. `increment()`, `decrement()` and `assign(other)` change the value in
place; `int()` and `float()` give the current value.

### `aisutil.digest`

`SHA1Digest(data=None)` hashes bytes, or text as UTF-8. With no data the
digest is all zeroes and `is_null()` is true. Digests compare with `==`,
can be hashed, convert with `bytes()`, split into five 32-bit `words()`,
and `to_str(base, pad)` writes each word in `base`, zero-padded to `pad`.

### `aisutil.sockopts` and `aisutil.sockets`

`aisutil.sockopts` has `get_protocol(name)`, `set_option_int`,
`get_option_int`, `set_option_flag`, `get_option_flag`, `set_linger` and
`get_linger`. Failures raise `SocketError`, a subclass of `OSError`.

`aisutil.sockets.Socket(sock)` wraps an existing `socket.socket`, puts it
into non-blocking mode and exposes `non_blocking`, `reuse_address`,
`priority` (where the system has `SO_PRIORITY`), `single_hop` and `linger`
as properties. It has `fileno()`, `is_okay()`, `close()` and works as a
context manager. Its `local_port` and `remote_port` are `None`, and setting
them raises `SocketError`.

`DomainIP(sock)` accepts IPv4 and IPv6 sockets only. It adds
`maximum_hop_count` (the TTL or unicast hop limit), reports the bound or
connected ports, and remembers ports set with `set_local_port` and
`set_remote_port` (0 to 65535).

## What it does not do

The socket classes only manage options and ports on a socket you create
yourself. They do not bind, connect, listen, accept, read or write, and
they do not parse or store addresses; use the wrapped socket (`.sock`) for
that. There is no command-line program.

## Example

```python
from aisutil.tokens import StringTokens
from aisutil.utils import to_bool, base_x_str
from aisutil.peakcount import PeakCount

tokens = StringTokens("PRIVMSG #chan :hello there")
tokens.next_token()        # "PRIVMSG"
tokens.next_token()        # "#chan"
tokens.next_colon_token()  # "hello there"

to_bool("On")              # True
to_bool("maybe")           # None
base_x_str(255, 16)        # "FF"

people = PeakCount()
people += 3
people -= 2
people.value, people.peak  # (1, 3)
```