"""fifthtune - Circle-of-fifths tuning offsets for fifth-based temperaments."""

from .tuning import (
    VERSION,
    JUST_FIFTH,
    DEFAULT_FIFTH,
    SMALLEST_DIATONIC_FIFTH,
    LARGEST_DIATONIC_FIFTH,
    SYNTONIC_COMMA,
    CIRCLE_OF_FIFTHS_DISTANCE,
    Note,
    TuningError,
    UnknownNoteLetterError,
    InvalidTpcError,
    circle_of_fifths_distance,
    circle_of_fifths_tuning_offset,
    tuning_offsets,
    deviation_from_fifth,
    comma_fraction_fifth,
    edo_fifth,
    is_diatonic_fifth,
)
from .spelling import InvalidNoteNameError, name_to_tpc, tpc_to_name

__version__ = VERSION
__all__ = [
    "VERSION",
    "JUST_FIFTH",
    "DEFAULT_FIFTH",
    "SMALLEST_DIATONIC_FIFTH",
    "LARGEST_DIATONIC_FIFTH",
    "SYNTONIC_COMMA",
    "CIRCLE_OF_FIFTHS_DISTANCE",
    "Note",
    "TuningError",
    "UnknownNoteLetterError",
    "InvalidTpcError",
    "InvalidNoteNameError",
    "circle_of_fifths_distance",
    "circle_of_fifths_tuning_offset",
    "tuning_offsets",
    "deviation_from_fifth",
    "comma_fraction_fifth",
    "edo_fifth",
    "is_diatonic_fifth",
    "name_to_tpc",
    "tpc_to_name",
]
