"""Terminal text utilities: width measurement, truncation, word wrapping.

Widths are measured per grapheme cluster so that combining marks, emoji
sequences and East Asian wide characters take the number of cells a
terminal actually gives them.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI sequences: ESC[ <params> <final byte>
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[mGKHJ]")

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def graphemes(text: str) -> list[str]:
    """Split *text* into user-perceived characters."""
    return list(grapheme.graphemes(text))


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the number of terminal cells a grapheme cluster occupies.

    Rules:
    1. Control characters and lone combining/format marks -> 0
    2. Emoji sequences (VS16, ZWJ, skin tones, flags) -> 2
    3. Otherwise wcwidth of the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI escape sequences are ignored; tabs count as 3 columns.
    """
    if not text:
        return 0

    stripped = strip_ansi(text).replace("\t", "   ")
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


def truncate_to_width(text: str, max_width: int, ellipsis: str = "") -> str:
    """Cut *text* to at most *max_width* columns at a grapheme boundary.

    When anything is cut, *ellipsis* is appended and counts towards the
    width.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)
    return _take_columns(text, target) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)


# ---------------------------------------------------------------------------
# wrap_text
# ---------------------------------------------------------------------------


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap plain *text* to *width* columns.

    Embedded newlines start new lines.  Words longer than *width* are broken
    mid-word.  Whitespace is kept as written except where a line breaks on
    it.
    """
    if width <= 0:
        return []

    result: list[str] = []
    for physical_line in text.replace("\t", "   ").split("\n"):
        result.extend(_wrap_single_line(physical_line, width))
    return result


def _wrap_single_line(line: str, width: int) -> list[str]:
    if not line:
        return [""]

    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    # Index into ``current`` just past the last space, for word breaks
    last_space: int | None = None

    for g in grapheme.graphemes(line):
        w = grapheme_width(g)
        if current_width + w > width and current_width > 0:
            if g == " ":
                lines.append("".join(current).rstrip(" "))
                current, current_width, last_space = [], 0, None
                continue
            # Leading whitespace is not a word break
            if last_space is not None and "".join(current[:last_space]).strip():
                before = current[:last_space]
                after = current[last_space:]
                lines.append("".join(before).rstrip(" "))
                current = after
                current_width = sum(grapheme_width(c) for c in after)
            last_space = None
            if current_width + w > width and current_width > 0:
                lines.append("".join(current))
                current, current_width = [], 0

        current.append(g)
        current_width += w
        if g == " ":
            last_space = len(current)

    lines.append("".join(current))
    return lines
