from .notes import Note, NoteList
from .matching import candidate_chords, rank_candidates, identify_chords_from_notes
from .tuning import get_tuning, tuning_name
from .display import Fretboard, ChordTable
from .util import log, check_range
from . import parsing, _settings


def note_from_fret(open_string, fret, offset=0):
    """the Note sounded by fretting an open string at some fret, with an optional
    transposition offset (capo or detuning) in semitones applied on top.
    the pitch carries up into higher octaves as needed."""
    check_range(fret, _settings.FRET_RANGE, 'Fret')
    check_range(offset, _settings.OFFSET_RANGE, 'Transposition offset')

    resultant_pitch = open_string.position + fret + offset
    if resultant_pitch < 0:
        resultant_pitch += 12
    octave_carry, position = divmod(resultant_pitch, 12)
    return Note(position, open_string.octave + octave_carry, prefer_sharps=open_string.prefer_sharps)


class Guitar:
    def __init__(self, tuning='standard', offset=0):
        """tuning can be one of:
        a descriptive string: standard, drop_d, open_g, etc.
        or a six-note string like: EADGBE, DADGAD, etc.
        offset is a transposition in semitones applied to every string,
        e.g. 2 for a capo on the 2nd fret, or -1 for tuning down a half step"""
        self.tuned_strings = get_tuning(tuning)
        self.num_strings = len(self.tuned_strings)
        self.offset = check_range(offset, _settings.OFFSET_RANGE, 'Transposition offset')
        self.name = tuning_name(self.tuned_strings)

    # open strings are relative to the transposition offset instead of to the nut:
    @property
    def open_strings(self):
        return [note_from_fret(s, 0, self.offset) for s in self.tuned_strings]

    @property
    def tuning(self):
        """string describing the tuning, such as EADGBE or DADGAD"""
        return ''.join([s.chroma for s in self.tuned_strings])

    def fret(self, frets):
        """simulates plucking each string according to the listed fret diagram, gets the
        resulting notes, and returns them as a NoteList. muted strings are skipped.
        frets can be a list like [None, 3, 2, 0, 1, 0] or a string like 'x32010'"""
        fret_ints = parsing.parse_frets(frets, expected_len=self.num_strings)
        string_notes = []
        for s, f in enumerate(fret_ints):
            if f is None:
                # don't sound this string
                continue
            string_notes.append(note_from_fret(self.tuned_strings[s], f, self.offset))
        notes = NoteList(string_notes)
        log(f'Frets {fret_ints} on {self.name} sound: {notes}')
        return notes

    def __getitem__(self, frets):
        return self.fret(frets)

    def identify(self, frets, bass=None):
        """returns the names of the chords these frets might be playing, from most to least likely"""
        return identify_chords_from_notes(self.fret(frets), bass=bass)

    def __call__(self, frets):
        return self.identify(frets)

    def __contains__(self, item):
        """a Guitar object 'contains' a note if that note is in its open strings"""
        return item in self.open_strings

    def query(self, frets):
        """parses the frets passed, displays the sounded notes, the detected chords,
        and shows the resulting fret diagram. returns the chord names."""
        sounded_notes = self.fret(frets)
        print(f'Sounded notes: {sounded_notes}')

        table = ChordTable(rank_candidates(candidate_chords(sounded_notes)))
        table.show()

        print(self.diagram(frets, title=f'Frets: {frets}'))
        return table.names

    def diagram(self, frets, title=None):
        """returns a text fret diagram showing which note each string is playing"""
        fret_ints = parsing.parse_frets(frets, expected_len=self.num_strings)
        mute = [s+1 for s in range(self.num_strings) if fret_ints[s] is None]
        fret_cells = {(s+1, f): note_from_fret(self.tuned_strings[s], f, self.offset).chroma
                      for s, f in enumerate(fret_ints) if (f is not None and f != 0)}
        index = [s.chroma for s in self.open_strings]
        return Fretboard(fret_cells, index=index, mute=mute, title=title, num_strings=self.num_strings).render()

    def strum(self, frets, delay=0.05, duration=3, block=False):
        """plays the fretted notes as audio, arpeggiated close together from the lowest string"""
        from . import audio
        notes = self.fret(frets)
        wave = audio.strum_wave(notes, delay=delay, duration=duration)
        audio.play_wave(wave, block=block)
        return wave

    def __str__(self):
        lb, rb = self._brackets
        offset_str = f' (offset {self.offset:+d})' if self.offset != 0 else ''
        return f'{lb}Guitar: {self.name}{offset_str}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Guitar']


def identify_chords_from_frets(tuning, frets, offset=0):
    """returns the names of the chords that a fretting pattern might be playing,
    from most to least likely.

    args:
        tuning: a tuning name (like 'standard') or six-note string (like 'DADGAD')
        frets: six frets from the lowest string to the highest, as a list of
            ints (None or False for a muted string) or a string like 'x32010'
        offset: a transposition (capo or detuning) in semitones, applied to all strings

    raises tuning.UnknownTuningError if the tuning is not recognised."""
    return Guitar(tuning, offset=offset).identify(frets)


# default guitar in standard tuning:
standard = Guitar('standard')
