"""Minimal scanner for git config files.

Reads one section of a config file without any dependency on the object
model. The supported grammar is deliberately small: bracketed section
headers, ``key = value`` lines, blank lines, and ``#``/``;`` comments.
Multi-line continuations and ``[include]`` directives are not supported;
values relying on them are not seen.
"""

import re
from typing import Final

_HEADER_RE: Final = re.compile(
    rb'^\[\s*(?P<section>[A-Za-z0-9.-]+)(?:\s+"(?P<subsection>(?:[^"\\]|\\.)*)")?\s*\]'
)
_ESCAPE_RE: Final = re.compile(rb"\\(.)")
_ESCAPES: Final = {b"n": b"\n", b"t": b"\t", b"b": b"\b"}
_COMMENT_CHARS: Final = (b"#", b";")


def _unescape(value: bytes) -> bytes:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), value)


def _header_matches(line: bytes, section: bytes, subsection: bytes | None) -> bool:
    """Check whether a header line opens the wanted section.

    Section names compare case-insensitively, subsection names exactly.
    """
    match = _HEADER_RE.match(line)
    if match is None:
        return False
    if match.group("section").lower() != section.lower():
        return False
    found = match.group("subsection")
    if subsection is None:
        return found is None
    return found is not None and _unescape(found) == subsection


def _clean_value(raw: bytes) -> bytes:
    """Strip a trailing comment and surrounding quotes from a value."""
    out = bytearray()
    in_quotes = False
    escaped = False
    for byte in raw.strip():
        char = bytes((byte,))
        if escaped:
            out += _ESCAPES.get(char, char)
            escaped = False
        elif char == b"\\":
            escaped = True
        elif char == b'"':
            in_quotes = not in_quotes
        elif char in _COMMENT_CHARS and not in_quotes:
            break
        else:
            out += char
    return bytes(out).strip()


def read_config_section(
    data: bytes, section: bytes, subsection: bytes | None = None
) -> dict[bytes, bytes]:
    """Collect the keys of one section of a git config file.

    When a section appears more than once its keys are merged, and a key
    repeated later overrides the earlier value, as git does for
    single-valued keys.

    Args:
        data: Raw config file contents.
        section: Section name, e.g. ``b"branch"``.
        subsection: Quoted subsection name, e.g. ``b"main"``. None matches
            only headers without a subsection.

    Returns:
        Mapping of lowercased key names to their values. Keys given
        without ``=`` map to ``b"true"``.
    """
    values: dict[bytes, bytes] = {}
    in_section = False

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_CHARS):
            continue
        if line.startswith(b"["):
            in_section = _header_matches(line, section, subsection)
            continue
        if not in_section:
            continue

        key, sep, value = line.partition(b"=")
        key = key.strip().lower()
        if not key:
            continue
        values[key] = _clean_value(value) if sep else b"true"

    return values
