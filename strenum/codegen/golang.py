"""Go lexical helpers: keywords and string-literal quoting."""

from __future__ import annotations

import re

GO_KEYWORDS: frozenset[str] = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})

_SIMPLE_ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

_PLAIN_WORD_RE = re.compile(r"[A-Za-z0-9_@%+=:,./-]+")


def go_quote(value: str) -> str:
    """Return *value* as an interpreted Go string literal.

    Mirrors ``strconv.Quote``: printable characters are kept, control and
    non-printable characters become ``\\x``/``\\u``/``\\U`` escapes.  Raw
    bytes carried in the ``surrogateescape`` range (U+DC80..U+DCFF) are
    written back as the ``\\xNN`` byte they stand for.

    Raises:
        ValueError: If *value* holds a lone surrogate that is not a
            ``surrogateescape`` byte.
    """
    out: list[str] = ['"']
    for ch in value:
        code = ord(ch)
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
        elif 0xD800 <= code <= 0xDFFF:
            raise ValueError(f"lone surrogate U+{code:04X} cannot be written as Go source")
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def comment_word(value: str) -> str:
    """Render one invocation argument for a ``//`` comment line.

    Plain words are kept as-is; anything else is Go-quoted so the comment
    never spans more than one line.
    """
    if _PLAIN_WORD_RE.fullmatch(value):
        return value
    return go_quote(value)
