from .notes import Note, NoteList
from .parsing import parse_out_note_names, NoteParseError
from .util import log
from . import _settings
from types import MappingProxyType


### guitar tunings: the notes of the six open strings, from lowest to highest.

tuning_note_names = {   # names/aliases for common tunings:
         'standard': ( 'E2',  'A2',  'D3',  'G3',  'B3',  'E4' ),
           'drop_d': ( 'D2',  'A2',  'D3',  'G3',  'B3',  'E4' ),
    'double_drop_d': ( 'D2',  'A2',  'D3',  'G3',  'B3',  'D4' ),
           'open_g': ( 'D2',  'G2',  'D3',  'G3',  'B3',  'D4' ),
        'half_step': ( 'Eb2', 'Ab2', 'Db3', 'Gb3', 'Bb3', 'Eb4'), # the GnR tuning
           'drop_c': ( 'C2',  'G2',  'C3',  'F3',  'A3',  'D4' ),
           'open_d': ( 'D2',  'A2',  'D3',  'F#3', 'A3',  'D4' ),
           'open_e': ( 'E2',  'B2',  'E3',  'G#3', 'B3',  'E4' ),
           'dadgad': ( 'D2',  'A2',  'D3',  'G3',  'A3',  'D4' ), # openDsus4, a.k.a. celtic
               }

# cast string names into Note objects, once, into a read-only table:
tunings = MappingProxyType({name: tuple([Note(nt) for nt in notes]) for name, notes in tuning_note_names.items()})


class UnknownTuningError(ValueError):
    """raised when a tuning identifier matches no known tuning"""
    pass


def tuning_key(tuning_id):
    """normalises a tuning identifier, so that 'Drop D', 'drop-d' and 'DROP_D'
    all refer to the same tuning"""
    return tuning_id.strip().lower().replace('-', '_').replace(' ', '_')

def get_tuning(tuning):
    """returns the six open-string Notes of a tuning, which can be given as:
    a tuning name: 'standard', 'drop_d', 'open_g', etc.
    a string of six note names: 'DADGAD', or 'E2 A2 D3 G3 B3 E4' (with explicit octaves)
    a sequence of six Notes or note names.
    raises UnknownTuningError if the tuning cannot be found or read."""
    if isinstance(tuning, str):
        key = tuning_key(tuning)
        if key in tunings:
            return tunings[key]
        # otherwise, interpret a string that casts to a list of notes, like 'EADGBE':
        try:
            note_names = parse_out_note_names(tuning.strip())
        except NoteParseError as e:
            raise UnknownTuningError(f'Unknown tuning: {tuning!r}') from e
        return custom_tuning(note_names)

    elif isinstance(tuning, (list, tuple)):
        return custom_tuning(tuning)

    raise UnknownTuningError(f'Unknown tuning: {tuning!r}')

def custom_tuning(note_names):
    """builds a tuning from six note names (or Notes).
    names without explicit octaves are placed in a strictly ascending series,
    starting from octave 2 for the lowest string."""
    if len(note_names) != _settings.NUM_STRINGS:
        raise UnknownTuningError(f'A tuning needs exactly {_settings.NUM_STRINGS} open strings, but got: {note_names}')

    if all(isinstance(n, Note) or any(c.isdigit() for c in n) for n in note_names):
        open_strings = tuple(NoteList(list(note_names)))
    else:
        # make into a strictly ascending series of Notes:
        open_strings = []
        for name in note_names:
            note = Note(name, octave=2) if isinstance(name, str) else Note(name.position, 2)
            while len(open_strings) > 0 and note <= open_strings[-1]:
                note = note + 12
            open_strings.append(note)
        open_strings = tuple(open_strings)
    log(f'Read custom tuning: {[n.name for n in open_strings]}')
    return open_strings

def tuning_name(open_strings):
    """returns the registered name of a tuning given its open strings, or a string
    of its note names (like 'DADGAD') if it is not one of the registered tunings"""
    for name, strings in tunings.items():
        if tuple(strings) == tuple(open_strings):
            return name
    return ''.join([s.chroma for s in open_strings])
