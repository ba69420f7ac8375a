"""Reader for Java ``.properties`` files.

Gradle loads ``key.properties`` with ``java.util.Properties``; this module
follows the same grammar so a file that works for Gradle reads identically
here:

- lines starting with ``#`` or ``!`` (after leading whitespace) are comments
- the key ends at the first unescaped ``=``, ``:`` or whitespace
- a trailing odd backslash continues the logical line
- ``\\t \\n \\r \\f \\uXXXX`` escapes; any other escaped char stands for itself
- later keys override earlier ones

Unlike ``Properties.load`` a couple of inputs are rejected instead of being
accepted silently: an entry with an empty key, a broken ``\\u`` escape and
an unpaired surrogate.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from hb.core.result import Err, Ok, Result

from .errors import FileNotFound, MalformedProperties, UnreadableFile

__all__ = ["PropertiesError", "parse_properties", "read_properties"]

# Properties.load(InputStream) decodes as ISO-8859-1
ENCODING = "latin-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


@dataclass(frozen=True, slots=True)
class PropertiesError:
    """Syntax error at a 1-based physical line number."""

    line: int
    reason: str


type PropertiesReadError = FileNotFound | UnreadableFile | MalformedProperties


def _ends_with_continuation(line: str) -> bool:
    count = 0
    for ch in reversed(line):
        if ch != "\\":
            break
        count += 1
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first physical line number, joined logical line)."""
    pending: list[str] = []
    start = 0
    physical = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for number, raw in enumerate(physical, start=1):
        line = raw.lstrip(_WHITESPACE) if pending else raw
        if not pending:
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped[0] in "#!":
                continue
            line = stripped
            start = number
        if _ends_with_continuation(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def _unescape(text: str, line: int) -> Result[str, PropertiesError]:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        i += 1
        if i >= len(text):
            break
        esc = text[i]
        if esc == "u":
            digits = text[i + 1 : i + 5]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                return Err(PropertiesError(line, f"malformed \\u escape: \\u{digits}"))
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_ESCAPES.get(esc, esc))
        i += 1

    # surrogate pairs from two \uXXXX escapes encode one character beyond the BMP
    try:
        joined = "".join(out).encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError:
        return Err(PropertiesError(line, "unpaired surrogate in \\u escape"))
    return Ok(joined)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]

    # Skip whitespace, then at most one '=' or ':', then whitespace again
    while i < n and line[i] in _WHITESPACE:
        i += 1
    if i < n and line[i] in _SEPARATORS:
        i += 1
        while i < n and line[i] in _WHITESPACE:
            i += 1
    return key, line[i:]


def parse_properties(text: str) -> Result[dict[str, str], PropertiesError]:
    """Parse properties text into a dict."""
    entries: dict[str, str] = {}
    for line, logical in _logical_lines(text):
        raw_key, raw_value = _split_entry(logical)
        if not raw_key:
            return Err(PropertiesError(line, "entry has no key"))

        key = _unescape(raw_key, line)
        if isinstance(key, Err):
            return key
        value = _unescape(raw_value, line)
        if isinstance(value, Err):
            return value
        entries[key.value] = value.value
    return Ok(entries)


def read_properties(path: Path) -> Result[dict[str, str], PropertiesReadError]:
    """Read and parse a properties file.

    Returns:
        Ok(dict) when parsed, Err(FileNotFound) when the file does not
        exist, Err(UnreadableFile | MalformedProperties) otherwise.
    """
    try:
        with path.open("r", encoding=ENCODING, newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        return Err(FileNotFound(path))
    except IsADirectoryError:
        return Err(UnreadableFile(path, "is a directory"))
    except PermissionError:
        return Err(UnreadableFile(path, "permission denied"))
    except OSError as e:
        return Err(UnreadableFile(path, e.strerror or str(e)))

    parsed = parse_properties(text)
    if isinstance(parsed, Err):
        return Err(MalformedProperties(path, parsed.error.line, parsed.error.reason))
    return Ok(parsed.value)
