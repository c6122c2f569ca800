"""Convert between note names and tonal pitch classes."""

import re

from .tuning import TuningError, tpc_accidental, tpc_to_letter

# tpc of each natural note on the line of fifths
NATURAL_TPC = {
    "F": 13, "C": 14, "G": 15, "D": 16, "A": 17, "E": 18, "B": 19
}

_NAME_PATTERN = re.compile(r"^([A-Ga-g])(#*|b*)$")
_TOKEN_SEPARATORS = re.compile(r"[\s,;]+")


class InvalidNoteNameError(TuningError):
    """A note name that is not a letter followed by sharps or flats."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid note name: {name!r}")


def name_to_tpc(name: str) -> int:
    """Convert a note name like 'Eb' or 'F##' to its tonal pitch class.

    Format: [A-G] followed by any number of '#' or any number of 'b'.
    Examples: C=14, Eb=11, F#=20, Bbb=5
    """
    match = _NAME_PATTERN.match(name.strip()) if isinstance(name, str) else None
    if not match:
        raise InvalidNoteNameError(name)

    letter = match.group(1).upper()
    accidentals = match.group(2)
    alteration = len(accidentals) if accidentals.startswith("#") else -len(accidentals)
    return NATURAL_TPC[letter] + 7 * alteration


def tpc_to_name(tpc: int) -> str:
    """Spell a tonal pitch class as a letter with sharps or flats."""
    accidental = tpc_accidental(tpc)
    suffix = "#" * accidental if accidental > 0 else "b" * -accidental
    return tpc_to_letter(tpc) + suffix


def split_note_tokens(text: str) -> list[str]:
    """Split on whitespace, commas and semicolons, dropping empties."""
    return [t for t in _TOKEN_SEPARATORS.split(text) if t]


def extract_note_names(text: str) -> list[str]:
    """Extract note names from free text, skipping other words.

    Example: "play C, then Eb and F#." -> ["C", "Eb", "F#"]

    Words are matched whole, so a lone "a" or "b" counts as a note.

    Args:
        text: Input text possibly containing note names

    Returns:
        List of note names in order of appearance
    """
    words = (t.strip(".!?:()\"'") for t in split_note_tokens(text))
    return [w for w in words if _NAME_PATTERN.match(w)]
