from ..tuning import *
from ..notes import Note, NoteList
from .testing_tools import compare
import pytest

def test_registered_tunings():
    compare(list(get_tuning('standard')), NoteList('E2 A2 D3 G3 B3 E4'))
    compare(list(get_tuning('double_drop_d')), NoteList('D2 A2 D3 G3 B3 D4'))
    compare(list(get_tuning('half_step')), NoteList('D#2 G#2 C#3 F#3 A#3 D#4'))
    compare(get_tuning('half_step')[0].name, 'Eb2')
    compare(get_tuning('Drop D'), tunings['drop_d'])
    compare(get_tuning('OPEN-G'), tunings['open_g'])
    for name, strings in tunings.items():
        compare(len(strings), 6)

def test_custom_tunings():
    compare(list(get_tuning('DADGBE')), NoteList('D2 A2 D3 G3 B3 E4'))
    compare(list(get_tuning('CGCFAD')), NoteList('C2 G2 C3 F3 A3 D4'))
    compare(list(get_tuning('E2 A2 D3 G3 B3 E4')), NoteList('E2 A2 D3 G3 B3 E4'))
    compare(list(get_tuning(['E', 'A', 'D', 'G', 'B', 'E'])), NoteList('E2 A2 D3 G3 B3 E4'))
    compare(list(get_tuning(('D2', 'G2', 'D3', 'G3', 'B3', 'D4'))), NoteList('D2 G2 D3 G3 B3 D4'))

def test_tuning_name():
    compare(tuning_name(tunings['open_e']), 'open_e')
    compare(tuning_name(get_tuning('EADGBE')), 'standard')
    compare(tuning_name(get_tuning('EADGBD')), 'EADGBD')

def test_unknown_tunings():
    with pytest.raises(UnknownTuningError):
        get_tuning('ukulele')
    with pytest.raises(UnknownTuningError):
        get_tuning('GCEA')
    with pytest.raises(UnknownTuningError):
        get_tuning(42)
    # unknown tunings are also ValueErrors:
    with pytest.raises(ValueError):
        get_tuning('banjo')
