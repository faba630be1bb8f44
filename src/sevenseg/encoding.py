"""
Character encoding - the segment combination that best resembles a character.

Only characters that read recognizably on seven segments are tabulated.
Missing uppercase letters (B, D, G, K, M, N, Q, R, T, V, W, X, Y) fall back
to their lowercase form when one exists (b, d, g, n, q, r, t, y); the rest
(K, M, V, W, X) cannot be shown at all.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .segments import DisplayState, Segment

log = logging.getLogger(__name__)

_T = Segment.TOP
_TR = Segment.TOP_RIGHT
_BR = Segment.BOTTOM_RIGHT
_B = Segment.BOTTOM
_BL = Segment.BOTTOM_LEFT
_TL = Segment.TOP_LEFT
_C = Segment.CENTER


def _state(*segments: Segment) -> DisplayState:
    return DisplayState.of(*segments)


CHARACTER_ENCODINGS: Mapping[str, DisplayState] = MappingProxyType({
    '0': _state(_T, _TR, _BR, _B, _BL, _TL),
    '1': _state(_TR, _BR),
    '2': _state(_T, _TR, _C, _BL, _B),
    '3': _state(_T, _TR, _C, _BR, _B),
    '4': _state(_TL, _TR, _C, _BR),
    '5': _state(_T, _TL, _C, _BR, _B),
    '6': _state(_T, _TL, _C, _BR, _B, _BL),
    '7': _state(_T, _TR, _BR),
    '8': _state(_T, _TR, _BR, _B, _BL, _TL, _C),
    '9': _state(_B, _BR, _TR, _T, _TL, _C),

    'A': _state(_BL, _TL, _T, _TR, _BR, _C),
    'C': _state(_T, _TL, _BL, _B),
    'E': _state(_T, _TL, _BL, _B, _C),
    'F': _state(_T, _TL, _BL, _C),
    'H': _state(_TL, _BL, _C, _TR, _BR),
    'I': _state(_TR, _BR),
    'J': _state(_TR, _BR, _B, _BL),
    'L': _state(_TL, _BL, _B),
    'O': _state(_T, _TR, _BR, _B, _BL, _TL),
    'P': _state(_BL, _TL, _T, _TR, _C),
    'S': _state(_T, _TL, _C, _BR, _B),
    'U': _state(_TL, _BL, _B, _BR, _TR),
    'Z': _state(_T, _TR, _C, _BL, _B),

    'a': _state(_T, _TR, _C, _BL, _B, _BR),
    'b': _state(_C, _BR, _B, _BL, _TL),
    'c': _state(_C, _BL, _B),
    'd': _state(_C, _BL, _B, _BR, _TR),
    'e': _state(_C, _TR, _T, _TL, _BL, _B),
    'f': _state(_BL, _TL, _T, _C),
    'g': _state(_C, _TL, _T, _TR, _BR, _B),
    'h': _state(_TL, _BL, _C, _BR),
    'i': _state(_BR),
    'j': _state(_TR, _BR, _B, _BL),
    'l': _state(_TL, _BL),
    'n': _state(_BL, _C, _BR),
    'o': _state(_C, _BR, _B, _BL),
    'p': _state(_BL, _TL, _T, _TR, _C),
    'q': _state(_BR, _TR, _T, _TL, _C),
    'r': _state(_BL, _C),
    's': _state(_T, _TL, _C, _BR, _B),
    't': _state(_TL, _BL, _B, _C),
    'u': _state(_BL, _B, _BR),
    'y': _state(_TL, _C, _TR, _BR, _B),
    'z': _state(_T, _TR, _C, _BL, _B),

    ' ': _state(),
    '-': _state(_C),
    '_': _state(_B),
    '=': _state(_C, _B),
    "'": _state(_TL),
})


def toggle_case(character: str) -> str:
    """Swap a character's case; uncased characters come back unchanged.

    Only the first character of the result is kept, since some case
    mappings expand (e.g. 'ß'.upper() == 'SS').
    """
    if character.islower():
        toggled = character.upper()
    elif character.isupper():
        toggled = character.lower()
    else:
        return character
    return toggled[:1] or character


def encode(character: str, allow_case_toggle: bool = True) -> Optional[DisplayState]:
    """Look up the display state resembling ``character``.

    Args:
        character: A single character.
        allow_case_toggle: Retry once with the toggled case when the
            character itself is not tabulated.

    Returns:
        The matching DisplayState, or None when the character cannot be
        shown. None means "render blank", never an error.
    """
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")

    state = CHARACTER_ENCODINGS.get(character)
    if state is not None:
        return state

    if allow_case_toggle:
        state = CHARACTER_ENCODINGS.get(toggle_case(character))
        if state is not None:
            return state

    log.debug("No seven-segment encoding for %r", character)
    return None


def display_state_resembling(character: str,
                             allow_case_toggle: bool = True) -> Optional[DisplayState]:
    """Public-surface name for :func:`encode`."""
    return encode(character, allow_case_toggle)
