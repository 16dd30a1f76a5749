import re

import music21
import music21.pitch

from .constants import _DIGIT_TO_PC, _PC_TO_DIGIT, _PC_TO_NOTE
from .operations import mod

# ── Textual pitch-class input ─────────────────────────────────────────────────

_SEPARATORS = re.compile(r"[,\s]+")
_BRACKETS = "[](){}"
_INTEGER = re.compile(r"^[+-]?\d+$")
_COMPACT = re.compile(r"^[0-9TE]{2,}$")
# Letter + up to two accidentals. '#' = sharp; 'b' or '-' = flat (music21 spells flats '-').
_NOTE_NAME = re.compile(r"^([A-Ga-g])(#{0,2}|[b\-]{0,2})$")


def parse_digits(digits: str) -> list[int]:
    """
    Decode a compact digit string into pitch classes.

    One character per pitch class: '0'-'9' literally, 'T' = 10, 'E' = 11,
    e.g. '014T' → [0, 1, 4, 10].
    """
    pcs = []
    for ch in digits:
        pc = _DIGIT_TO_PC.get(ch)
        if pc is None:
            raise ValueError(f"unknown pitch-class digit {ch!r} in {digits!r}")
        pcs.append(pc)
    return pcs


def note_name_to_pc(token: str) -> int:
    """
    Map a note name to its pitch class via music21.

    Accepts up to two sharps or flats: 'C', 'F#', 'Bb', 'E-', 'F##',
    'Ebb', 'Cb' (= 11), 'B#' (= 0).
    """
    m = _NOTE_NAME.match(token)
    if not m:
        raise ValueError(f"not a note name: {token!r}")
    letter, accidentals = m.groups()
    accidentals = accidentals.replace("b", "-")
    try:
        return music21.pitch.Pitch(letter.upper() + accidentals).pitchClass
    except music21.pitch.PitchException as e:
        raise ValueError(f"not a note name: {token!r}") from e


def _parse_token(token: str) -> int:
    if _INTEGER.match(token):
        return mod(int(token))
    return note_name_to_pc(token)


def parse_pitch_classes(text: str) -> list[int]:
    """
    Parse user input into a list of pitch classes (order and duplicates kept).

    Forms accepted:
        "0, 1, 4" / "0 1 4" / "[0,1,4]"  integers, any sign, reduced mod 12
        "014T"                            compact digits (T = 10, E = 11)
        "C E G" / "Bb, D, F#"             note names

    Text with no separator and two or more digit characters is read as the
    compact form, so a lone 10 or 11 needs a trailing comma ("10,").

    Raises:
        ValueError: a token is neither an integer nor a note name.
    """
    text = text.strip().strip(_BRACKETS).strip()
    if not text:
        return []
    if _COMPACT.match(text):
        return parse_digits(text)
    tokens = [t for t in _SEPARATORS.split(text) if t]
    return [_parse_token(t) for t in tokens]


# ── Display ───────────────────────────────────────────────────────────────────

def format_pitch_classes(pcs) -> str:
    """Compact digit string, e.g. [0, 1, 4, 10] → '014T'."""
    return "".join(_PC_TO_DIGIT[mod(pc)] for pc in pcs)


def pitch_class_names(pcs) -> list[str]:
    """Note names for display, e.g. [0, 3, 6] → ['C', 'Eb', 'F#']."""
    return [_PC_TO_NOTE[mod(pc)] for pc in pcs]
