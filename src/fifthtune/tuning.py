"""Circle-of-fifths tuning offsets for fifth-based temperaments.

A temperament is described by how far its perfect fifth deviates from the
700-cent 12EDO fifth. Notes are identified by their tonal pitch class
(tpc), the line-of-fifths integer where F=13, C=14, G=15, D=16, A=17,
E=18, B=19 and each step of 7 adds a sharp.
"""

import math
from types import MappingProxyType
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

VERSION = "1.0.0"

# Size in cents of a justly tuned perfect fifth.
JUST_FIFTH = 1200.0 * math.log2(3 / 2)
# Size in cents of a 12EDO perfect fifth.
DEFAULT_FIFTH = 700.0
# Smallest fifth in the diatonic range, equal to the 7EDO fifth.
SMALLEST_DIATONIC_FIFTH = 1200.0 / 7 * 4
# Largest fifth in the diatonic range, equal to the 5EDO fifth.
LARGEST_DIATONIC_FIFTH = 1200.0 / 5 * 3

# Size in cents of the syntonic comma.
SYNTONIC_COMMA = 1200.0 * math.log2(81 / 80)

NOTE_LETTERS = ("C", "D", "E", "F", "G", "A", "B")

# Distance of each natural note from C, in fifths.
CIRCLE_OF_FIFTHS_DISTANCE = MappingProxyType({
    "C": 0,
    "D": 2,
    "E": 4,
    "F": -1,
    "G": 1,
    "A": 3,
    "B": 5,
})

# tpc % 7 -> note letter. Negative residues name the same letters a
# truncating modulo would produce for negative tpcs.
_RESIDUE_LETTERS = MappingProxyType({
    0: "C",
    2: "D", -5: "D",
    4: "E", -3: "E",
    6: "F", -1: "F",
    1: "G", -6: "G",
    3: "A", -4: "A",
    5: "B", -2: "B",
})

# Circle-of-fifths distance from C indexed by non-negative residue.
_RESIDUE_DISTANCE = np.array(
    [CIRCLE_OF_FIFTHS_DISTANCE[_RESIDUE_LETTERS[r]] for r in range(7)]
)


class TuningError(ValueError):
    """Base class for invalid tuning input."""


class UnknownNoteLetterError(TuningError):
    """A note letter outside C, D, E, F, G, A, B."""

    def __init__(self, letter: object):
        self.letter = letter
        super().__init__(f"Unknown note letter: {letter!r}")


class InvalidTpcError(TuningError):
    """A tonal pitch class that does not classify to a note letter."""

    def __init__(self, tpc: object):
        self.tpc = tpc
        super().__init__(f"Invalid tonal pitch class: {tpc!r}")


class Note(NamedTuple):
    """Minimal note record carrying only its tonal pitch class."""

    tpc1: int


def circle_of_fifths_distance(n1: str, n2: str) -> int:
    """Distance between two note letters along the circle of fifths."""
    try:
        return CIRCLE_OF_FIFTHS_DISTANCE[n1] - CIRCLE_OF_FIFTHS_DISTANCE[n2]
    except (KeyError, TypeError):
        bad = n1 if n1 not in NOTE_LETTERS else n2
        raise UnknownNoteLetterError(bad) from None


def tpc_to_letter(tpc: int) -> str:
    """Return the note letter of a tonal pitch class, ignoring accidentals."""
    letter = _RESIDUE_LETTERS.get(tpc % 7)
    if letter is None:
        raise InvalidTpcError(tpc)
    return letter


def tpc_accidental(tpc: int) -> int:
    """Number of sharps (positive) or flats (negative) encoded in *tpc*."""
    return (tpc + 1) // 7 - 2


def circle_of_fifths_tuning_offset(
    note,
    fifth_deviation: float,
    reference_note: str = "A",
) -> float:
    """Return the cents needed to tune *note* for the given fifth deviation.

    Args:
        note: Object with an integer ``tpc1`` attribute, or the tpc itself
        fifth_deviation: Fifth size minus 700 cents
        reference_note: Letter of the note that keeps its 12EDO pitch

    Returns:
        Offset from 12EDO in cents
    """
    tpc = getattr(note, "tpc1", note)
    letter = tpc_to_letter(tpc)
    offset = -circle_of_fifths_distance(letter, reference_note) * fifth_deviation

    # Each semitone of alteration is 7 steps along the circle of fifths.
    offset -= tpc_accidental(tpc) * 7 * fifth_deviation
    return offset


def tuning_offsets(
    tpcs: ArrayLike,
    fifth_deviation: float,
    reference_note: str = "A",
) -> np.ndarray:
    """Vectorized circle_of_fifths_tuning_offset over an array of tpcs."""
    tpcs = np.asarray(tpcs)
    if tpcs.size == 0:
        # [] comes through as float64
        tpcs = tpcs.astype(np.int64)
    if not np.issubdtype(tpcs.dtype, np.integer):
        raise InvalidTpcError(tpcs.dtype)
    if reference_note not in CIRCLE_OF_FIFTHS_DISTANCE:
        raise UnknownNoteLetterError(reference_note)

    distance = _RESIDUE_DISTANCE[tpcs % 7] - CIRCLE_OF_FIFTHS_DISTANCE[reference_note]
    accidental = (tpcs + 1) // 7 - 2
    return -distance * fifth_deviation - accidental * 7 * fifth_deviation


def deviation_from_fifth(fifth_size: float) -> float:
    """Deviation of *fifth_size* from the 12EDO fifth, in cents."""
    return fifth_size - DEFAULT_FIFTH


def comma_fraction_fifth(fraction: float) -> float:
    """Fifth narrowed from just by *fraction* of a syntonic comma.

    1/4 gives quarter-comma meantone, 0 gives Pythagorean tuning.
    """
    return JUST_FIFTH - fraction * SYNTONIC_COMMA


def edo_fifth(divisions: int) -> float:
    """Size of the closest approximation to 3/2 in *divisions*-EDO."""
    if isinstance(divisions, bool) or not isinstance(divisions, int) or divisions < 1:
        raise ValueError(f"EDO divisions must be a positive integer, got {divisions!r}")
    steps = round(divisions * math.log2(3 / 2))
    return steps * 1200.0 / divisions


def is_diatonic_fifth(fifth_size: float) -> bool:
    """Check whether *fifth_size* keeps the diatonic scale in order."""
    return SMALLEST_DIATONIC_FIFTH <= fifth_size <= LARGEST_DIATONIC_FIFTH
