from .intervals import interval_between
from .parsing import parse_note_name, parse_out_note_names, preferred_name, is_sharp_ish, is_flat_ish, note_split
from .util import check_range
from . import conversion as conv
from . import _settings


class Note:
    """a pitch class sounded in a specific octave, such as C4 or D#2.

    the pitch class is stored as its 'position' (0-11, where C is 0),
    and the note's 'value' is its semitone distance from C0, which gives
    a total ordering over all notes."""

    def __init__(self, pitch, octave=None, prefer_sharps=None):
        """initialises a Note object from either:
        a string denoting a note name, like 'C#3' or 'Eb' (octave taken from the name,
            or from the octave arg, or DEFAULT_OCTAVE if neither is given)
        an integer pitch class position from 0 to 11 (C=0), with an octave arg
        another Note object, which is copied"""
        self.position, self.octave, self.prefer_sharps = self._parse_input(pitch, octave, prefer_sharps)
        check_range(self.octave, _settings.OCTAVE_RANGE, 'Octave')

    @staticmethod
    def _parse_input(pitch, octave, prefer_sharps):
        """parses pitch, octave input args (and sharp preference)
        returns correct position, octave and sharp preference"""
        if isinstance(pitch, Note):
            position = pitch.position
            octave = pitch.octave if octave is None else octave
            prefer_sharps = pitch.prefer_sharps if prefer_sharps is None else prefer_sharps

        elif isinstance(pitch, str):
            position, name_octave = parse_note_name(pitch)
            if name_octave is not None:
                assert octave is None or octave == name_octave, f'Note name {pitch} conflicts with octave arg: {octave}'
                octave = name_octave
            if prefer_sharps is None:
                # if no preference is set then we infer from the name argument supplied
                note_name, _ = note_split(pitch.strip())
                acc = note_name[1:]
                if len(acc) > 0 and is_flat_ish(acc):
                    prefer_sharps = False
                elif len(acc) > 0 and is_sharp_ish(acc):
                    prefer_sharps = True

        elif isinstance(pitch, int) and not isinstance(pitch, bool):
            if not (0 <= pitch <= 11):
                raise ValueError(f'Note pitch class must be between 0 and 11, but got: {pitch}')
            position = pitch

        else:
            raise TypeError(f'Note must be initialised from a note name, pitch class integer or other Note, not {type(pitch)}')

        if octave is None:
            octave = _settings.DEFAULT_OCTAVE
        if prefer_sharps is None: # fallback on global default
            prefer_sharps = _settings.DEFAULT_SHARPS
        return position, octave, prefer_sharps

    @classmethod
    def cast(cls, note):
        """resolves a note-or-name argument into a Note object.
        Notes are passed through unchanged, and strings are parsed as note names."""
        if isinstance(note, cls):
            return note
        elif isinstance(note, str):
            return cls(note)
        else:
            raise TypeError(f'Expected a Note or note name string, but got: {type(note)}')

    @classmethod
    def from_value(cls, value, prefer_sharps=None):
        """instantiates the Note with this semitone value (12*octave + position)"""
        octave, position = conv.oct_pos(value)
        return cls(position, octave, prefer_sharps=prefer_sharps)

    #### properties:

    @property
    def value(self):
        """semitone value of this note, counted upward from C0"""
        return conv.oct_pos_to_value(self.octave, self.position)

    @property
    def chroma(self):
        """the name of this note's pitch class, e.g. C# or Db"""
        return preferred_name(self.position, self.prefer_sharps)

    def spelled(self, prefer_sharps=True):
        """the name of this note's pitch class under a specific accidental preference"""
        return preferred_name(self.position, prefer_sharps)

    @property
    def name(self):
        return f'{self.chroma}{self.octave}'

    @property
    def pitch(self):
        """frequency of this note in Hz, under 12-tone equal temperament"""
        return conv.value_to_pitch(self.value)

    def is_natural(self):
        """True if this is a white note, False otherwise"""
        return preferred_name(self.position)[1:] == ''

    #### interval calculus:

    def interval_to(self, other):
        """the directed pitch-class interval from this note up to another, from 0 to 11"""
        return interval_between(self, other)

    def compare(self, other):
        """-1 if this note sounds lower than other, 1 if higher, 0 if the same"""
        if self.value < other.value:
            return -1
        elif self.value > other.value:
            return 1
        return 0

    #### operators & magic methods:
    def __add__(self, semitones):
        """returns a new Note that is shifted up by some integer number of semitones,
        carrying into the next octave where necessary"""
        if not isinstance(semitones, int):
            raise TypeError(f'Only integers can be added to Notes, not {type(semitones)}')
        return Note.from_value(self.value + int(semitones), prefer_sharps=self.prefer_sharps)

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note, return the interval distance between them, with other as the root."""
        if isinstance(other, Note):
            return other.interval_to(self)
        elif isinstance(other, int):
            return Note.from_value(self.value - int(other), prefer_sharps=self.prefer_sharps)
        else:
            raise TypeError(f'Only integers and other Notes can be subtracted from Notes, not {type(other)}')

    def __eq__(self, other):
        """Notes are equal to other Notes that share their pitch class and octave"""
        if isinstance(other, str):
            # cast string to Note if possible
            other = Note(other)
        if isinstance(other, Note):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(('Note', self.value))

    def __and__(self, other):
        """Enharmonic equivalence comparison: Compares with another Note
        and returns True if both have the same pitch class, disregarding octave."""
        assert isinstance(other, Note), "Notes can only be enharmonic to other notes"
        return self.position == other.position

    def __lt__(self, other):
        assert isinstance(other, Note), "Notes can only be greater or less than other Notes"
        return self.value < other.value

    def __le__(self, other):
        assert isinstance(other, Note), "Notes can only be greater or less than other Notes"
        return self.value <= other.value

    def __gt__(self, other):
        assert isinstance(other, Note), "Notes can only be greater or less than other Notes"
        return self.value > other.value

    def __ge__(self, other):
        assert isinstance(other, Note), "Notes can only be greater or less than other Notes"
        return self.value >= other.value

    def __str__(self):
        # e.g. '♪C#4'
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']


class NoteList(list):
    """an ordered list of Notes, such as the notes sounded by a fretted guitar chord.
    can be initialised from a list of Notes or note names,
    or from a single string of note names like 'C4 E4 G4' or 'CEG'"""
    def __init__(self, *items):
        if len(items) == 1:
            arg = items[0]
            if isinstance(arg, str):
                items = parse_out_note_names(arg)
            elif isinstance(arg, (list, tuple)):
                items = arg
        notes = [Note.cast(n) for n in items]
        super().__init__(notes)

    @property
    def bass(self):
        """the lowest-sounding note in this list; if more than one note shares
        the lowest pitch, the first one to occur is returned. None if list is empty."""
        bass_note = None
        for note in self:
            if bass_note is None or note.compare(bass_note) == -1:
                bass_note = note
        return bass_note

    @property
    def chromas(self):
        return [n.chroma for n in self]

    @property
    def positions(self):
        return [n.position for n in self]

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{", ".join([n.name for n in self])}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['NoteList']
