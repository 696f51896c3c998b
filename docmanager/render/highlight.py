"""Editor text sanitization and Pygments token coloring.

Coloring only adds SGR sequences; the visible characters of every line match
the sanitized buffer so pane geometry is unaffected.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from ..config import EDITOR_STYLE
from .ansi import ANSI_ESCAPE_RE

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_SINGLE_LINE_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str, keep_newlines: bool = True) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.).

    With ``keep_newlines=False`` line breaks and tabs are escaped too, so the
    result is safe inside a single pane row.
    """
    pattern = _CONTROL_RE if keep_newlines else _SINGLE_LINE_CONTROL_RE
    if pattern.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if keep_newlines and ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def plain_lines(text: str) -> list[str]:
    """Split buffer text into display lines with control bytes escaped."""
    return sanitize_terminal_text(text).splitlines()


def _lexer_for(filename: str):
    try:
        return get_lexer_for_filename(filename, stripnl=False, stripall=False)
    except ClassNotFound:
        return TextLexer(stripnl=False, stripall=False)


@lru_cache(maxsize=8)
def _colorized_lines(text: str, filename: str, style: str) -> tuple[str, ...]:
    lines = plain_lines(text)
    if not lines:
        return ()
    source = "\n".join(lines) + "\n"
    rendered = pygments_highlight(source, _lexer_for(filename), TerminalFormatter(style=style))
    colored = rendered.splitlines()
    if [ANSI_ESCAPE_RE.sub("", line) for line in colored] != lines:
        return tuple(lines)
    return tuple(colored)


def editor_display_lines(text: str, filename: str = "", style: str = EDITOR_STYLE, color: bool = True) -> list[str]:
    """Return the buffer as display lines, token-colored when ``color`` is set."""
    if not color:
        return plain_lines(text)
    return list(_colorized_lines(text, filename, style))
