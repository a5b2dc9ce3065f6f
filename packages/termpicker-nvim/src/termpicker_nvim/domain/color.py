"""Color notations understood by termpicker.

termpicker prints the selected color in one of several notations and
accepts any of them back through ``--color``. This module recognizes
those notations in free text such as a visual selection or a line of
picker output.
"""

from __future__ import annotations

import re
from enum import Enum


class ColorFormat(Enum):
    """Color notations emitted by termpicker.

    Declaration order is the search order used by extract_color().
    """

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CMYK = "cmyk"
    OKLCH = "oklch"
    ANSI_FOREGROUND = "ansi_foreground"
    ANSI_BACKGROUND = "ansi_background"


_INT = r"\s*[0-9]+\s*"
_PCT = r"\s*[0-9]+%\s*"
_DEC = r"[0-9.]+"

_PATTERNS: dict[ColorFormat, str] = {
    # #B7416E
    ColorFormat.HEX: r"#[0-9A-Fa-f]{6}",
    # rgb(183, 65, 110)
    ColorFormat.RGB: rf"rgb\({_INT},{_INT},{_INT}\)",
    # hsl(337, 48%, 49%)
    ColorFormat.HSL: rf"hsl\({_INT},{_PCT},{_PCT}\)",
    # cmyk(0%, 64%, 40%, 28%)
    ColorFormat.CMYK: rf"cmyk\({_PCT},{_PCT},{_PCT},{_PCT}\)",
    # oklch(55.2% 0.158 0.10)
    ColorFormat.OKLCH: rf"oklch\(\s*{_DEC}%\s*{_DEC}\s*{_DEC}\s*\)",
    # \X1B[38;2;183;65;110m (literal backslash, as printed by termpicker)
    ColorFormat.ANSI_FOREGROUND: r"\\X1B\[38;2;[0-9]+;[0-9]+;[0-9]+m",
    ColorFormat.ANSI_BACKGROUND: r"\\X1B\[48;2;[0-9]+;[0-9]+;[0-9]+m",
}

_COMPILED: dict[ColorFormat, re.Pattern[str]] = {
    fmt: re.compile(pattern) for fmt, pattern in _PATTERNS.items()
}


def detect_format(text: str | None) -> ColorFormat | None:
    """Return the notation of ``text`` if the whole string is a color.

    Args:
        text: Candidate color string.

    Returns:
        The matching ColorFormat, or None if ``text`` is not exactly a color.
    """
    if not text:
        return None
    for fmt, pattern in _COMPILED.items():
        if pattern.fullmatch(text):
            return fmt
    return None


def is_color(text: str | None) -> bool:
    """Check whether ``text`` is exactly one color in a known notation."""
    return detect_format(text) is not None


def extract_color(text: str | None) -> str | None:
    """Find a color inside text that may contain other content.

    If the whole text is already a color it is returned unchanged.
    Otherwise each notation is searched for in declaration order and the
    first notation with a match wins, regardless of its position.

    Args:
        text: Text to search, e.g. a visual selection.

    Returns:
        The extracted color, or None if no notation matches.
    """
    if not text:
        return None

    if is_color(text):
        return text

    for pattern in _COMPILED.values():
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None
