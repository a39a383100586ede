"""Terminal text utilities: display width measurement and ANSI stripping.

Provides per-code-point and per-grapheme width functions used by
:class:`~weft.tui.buffer.Buffer` to decide how many cells a character
occupies, plus helpers to measure and strip ANSI-decorated strings.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;?]*[A-Za-z]"               # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"   # OSC
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"    # APC
)

# ---------------------------------------------------------------------------
# Code-point classes
# ---------------------------------------------------------------------------

ZWJ = 0x200D

_REGIONAL_INDICATOR_FIRST = 0x1F1E6
_REGIONAL_INDICATOR_LAST = 0x1F1FF
_SKIN_TONE_FIRST = 0x1F3FB
_SKIN_TONE_LAST = 0x1F3FF


def is_regional_indicator(cp: int) -> bool:
    """Return ``True`` for the flag letters U+1F1E6..U+1F1FF."""
    return _REGIONAL_INDICATOR_FIRST <= cp <= _REGIONAL_INDICATOR_LAST


def is_control(cp: int) -> bool:
    """Return ``True`` for C0/C1 control characters (including DEL)."""
    return cp < 0x20 or 0x7F <= cp <= 0x9F


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


# ---------------------------------------------------------------------------
# Code-point width
# ---------------------------------------------------------------------------

def char_width(cp: int) -> int:
    """Return the number of terminal columns code point *cp* occupies.

    Rules:
    1. Control characters, combining marks, ZWJ, variation selectors and
       skin-tone modifiers -> 0
    2. Regional indicators -> 1 (a *pair* forms a 2-column flag; pairing is
       the caller's job)
    3. Otherwise delegate to wcwidth (East Asian wide / emoji -> 2)
    """
    if 0x20 <= cp < 0x7F:
        return 1
    if is_control(cp):
        return 0
    if cp == ZWJ:
        return 0
    if _SKIN_TONE_FIRST <= cp <= _SKIN_TONE_LAST:
        return 0
    if is_regional_indicator(cp):
        return 1
    w = _wcwidth.wcwidth(chr(cp))
    if w < 0:
        return 0
    return min(w, 2)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Emoji sequences (VS16, ZWJ, skin tones, flag pairs) are two columns
    wide; everything else takes the width of its first code point.
    """
    if not g:
        return 0

    if len(g) == 1:
        return char_width(ord(g))

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == ZWJ:
            return 2
        if _SKIN_TONE_FIRST <= cp <= _SKIN_TONE_LAST:
            return 2
        if is_regional_indicator(cp):
            return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return char_width(ord(g[0]))


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove CSI, OSC and APC escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    Escape sequences are ignored and control characters count as zero, the
    same way :meth:`Buffer.set_string` drops them.  Non-ASCII results are
    cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)
