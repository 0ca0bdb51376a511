from ..notes import Note, NoteList
from ..intervals import Interval
from ..parsing import NoteParseError
from .testing_tools import compare
import pytest

def test_note_init():
    compare(Note('C4').position, 0)
    compare(Note('C4').octave, 4)
    compare(Note('a#3').name, 'A#3')
    compare(Note('Db4').name, 'Db4')
    compare(Note(1, 2).name, 'C#2')
    compare(Note(1, 2, prefer_sharps=False).name, 'Db2')

    # octave defaults to 4 when not given:
    compare(Note('G').octave, 4)
    compare(Note('G', 2).octave, 2)

    # accidentals wrap without touching the octave:
    compare(Note('Cb4').name, 'B4')
    compare(Note('B#4').name, 'C4')

    # double sharps and double flats:
    compare(Note('Ebb3'), Note('D3'))
    compare(Note('C𝄪3'), Note('D3'))

    # copying another note:
    compare(Note(Note('F#2')).name, 'F#2')

def test_note_init_errors():
    with pytest.raises(NoteParseError):
        Note('H4')
    with pytest.raises(NoteParseError):
        Note('C4x')
    with pytest.raises(ValueError):
        Note('C9')
    with pytest.raises(ValueError):
        Note(12, 4)
    with pytest.raises(TypeError):
        Note(1.5)
    with pytest.raises(TypeError):
        Note.cast(4)

def test_note_value_and_pitch():
    compare(Note('C0').value, 0)
    compare(Note('C4').value, 48)
    compare(Note('A4').value, 57)
    compare(Note.from_value(40).name, 'E3')
    compare(Note('A4').pitch, 440.0)
    compare(Note('A3').pitch, 220.0)
    compare(Note('C4').pitch, 261.626)

def test_note_arithmetic():
    compare(Note('C4') + 2, Note('D4'))
    compare(Note('B3') + 1, Note('C4'))
    compare(Note('C4') + 15, Note('Eb5'))
    compare(Note('C4') - 1, Note('B3'))
    compare(Note('E4') - Note('C4'), Interval.MAJOR_THIRD)
    compare(Note('C4') - Note('E4'), Interval.MINOR_SIXTH)
    compare(Note('G2').interval_to(Note('D5')), Interval.PERFECT_FIFTH)

    # transposition keeps the accidental preference:
    compare((Note('Eb4') + 2).name, 'F4')
    compare((Note('Eb4') + 3).name, 'Gb4')

def test_note_comparison():
    compare(Note('C4') == 'C4', True)
    compare(Note('C4') == Note('C5'), False)
    compare(Note('C#4') == Note('Db4'), True)
    compare(Note('C4') & Note('C5'), True)
    compare(Note('C4') < Note('B3'), False)
    compare(Note('C4') > Note('B3'), True)
    compare(Note('C4').compare(Note('C4')), 0)
    compare(Note('C4').compare(Note('D4')), -1)
    compare(Note('E4').compare(Note('D4')), 1)
    compare(len({Note('C4'), Note('B#4'), Note('C5')}), 2)
    compare(Note('F#').is_natural(), False)
    compare(Note('F').is_natural(), True)

def test_note_spelling():
    compare(Note('C#4').spelled(False), 'Db')
    compare(Note('Db4').spelled(True), 'C#')
    compare(Note('E4').spelled(False), 'E')
    compare(str(Note('C#4')), '♪C#4')

def test_notelist():
    compare(NoteList('C4 E4 G4'), NoteList(['C4', 'E4', 'G4']))
    compare(NoteList('C4 E4 G4'), NoteList('C4', 'E4', 'G4'))
    compare(NoteList('CEG'), NoteList([Note('C'), Note('E'), Note('G')]))
    compare(NoteList('E2-A2-D3').chromas, ['E', 'A', 'D'])
    compare(NoteList('C4 E4 G4').positions, [0, 4, 7])
    compare(str(NoteList('C4 E4')), '𝄃C4, E4 𝄂')

def test_notelist_bass():
    compare(NoteList('E3 C4 G3').bass, Note('E3'))
    compare(NoteList([]).bass, None)

    # when notes tie for lowest, the first of them is the bass:
    tied = NoteList([Note('C#3'), Note('Db3', prefer_sharps=False)])
    compare(tied.bass.name, 'C#3')

if __name__ == '__main__':
    test_note_init()
    test_note_arithmetic()
    test_notelist()
