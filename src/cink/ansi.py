"""Split terminal output into plain text and control sequences.

Live sessions interleave cursor movement, line clears and colours with the
device output. Highlighting only ever touches the text segments; control
sequences are passed through byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass

ESC = "\x1b"
CSI_BRACKET = "["

# ECMA-48 byte ranges
_CSI_PARAM = (0x20, 0x3F)
_CSI_FINAL = (0x40, 0x7E)
_INTERMEDIATE = (0x20, 0x2F)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of plain text or a single complete control sequence."""

    text: str
    is_control: bool


def _in_range(ch: str, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= ord(ch) <= bounds[1]


def _skip_csi(text: str, i: int) -> int:
    """Return the index after a CSI sequence whose parameters start at ``i``."""
    while i < len(text) and _in_range(text[i], _CSI_PARAM):
        i += 1
    if i < len(text) and _in_range(text[i], _CSI_FINAL):
        i += 1
    return i


def _skip_escape(text: str, i: int) -> int:
    """Return the index after a non-CSI escape whose body starts at ``i``."""
    while i < len(text) and _in_range(text[i], _INTERMEDIATE):
        i += 1
    if i < len(text):
        i += 1
    return i


def split_segments(text: str) -> list[Segment]:
    """Split ``text`` into ordered, gap-free text and control segments.

    Concatenating the segment texts reproduces the input exactly. A
    truncated sequence at the end of the input becomes a (short) control
    segment rather than leaking into the text.
    """
    segments: list[Segment] = []
    text_start = 0
    i = 0

    while i < len(text):
        if text[i] != ESC:
            i += 1
            continue

        if text_start < i:
            segments.append(Segment(text[text_start:i], False))

        start = i
        if text[i + 1 : i + 2] == CSI_BRACKET:
            i = _skip_csi(text, i + 2)
        elif i + 1 < len(text):
            i = _skip_escape(text, i + 1)
        else:
            i += 1
        segments.append(Segment(text[start:i], True))
        text_start = i

    if text_start < len(text):
        segments.append(Segment(text[text_start:], False))

    return segments


def strip_ansi(text: str) -> str:
    """Remove every control sequence, keeping only the plain text."""
    if ESC not in text:
        return text
    return "".join(seg.text for seg in split_segments(text) if not seg.is_control)


def has_ansi(text: str) -> bool:
    """Return True if ``text`` contains any terminal control sequence."""
    return ESC in text
