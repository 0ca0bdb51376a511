"""chordid: identifies chord names from sounded notes or guitar fret positions"""

from .notes import Note, NoteList
from .intervals import Interval, interval_between
from .chords import ChordCandidate
from .matching import candidate_chords, rank_chords, identify_chords_from_notes
from .guitar import Guitar, note_from_fret, identify_chords_from_frets, standard
from .tuning import tunings, get_tuning, UnknownTuningError
from .parsing import NoteParseError
from .util import log, InvariantError
