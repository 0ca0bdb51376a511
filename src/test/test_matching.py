from ..matching import *
from itertools import combinations
from ..notes import Note, NoteList
from .testing_tools import compare

def test_identify_chords_from_notes():
    compare(identify_chords_from_notes(['C4', 'E4', 'G4']), ['C'])
    compare(identify_chords_from_notes(['C4', 'Eb4', 'G4']), ['Cm'])
    compare(identify_chords_from_notes(['C4', 'E4', 'G4', 'Bb4']), ['C7'])
    compare(identify_chords_from_notes(['C4', 'Eb4', 'Gb4']), ['C°'])
    compare(identify_chords_from_notes('A3 C4 E4 G4'), ['Am7'])
    compare(identify_chords_from_notes('E2 B2 E3'), ['E5'])
    compare(identify_chords_from_notes('C4 F4 G4'), ['Csus4'])
    compare(identify_chords_from_notes('E3 G3 C4'), ['C/E'])

def test_ambiguous_chords():
    # a sixth chord over its root outranks the relative minor seventh over its third:
    compare(identify_chords_from_notes('C3 E3 G3 A3'), ['C6', 'Am7/C'])

def test_doubled_notes():
    compare(identify_chords_from_notes('C3 E3 G3 C4'), ['C'])
    compare(identify_chords_from_notes(NoteList('C3 E3 G3 C4 E4')), ['C'])

def test_single_and_empty():
    compare(identify_chords_from_notes(['C4']), ['C(N/C)'])
    compare(identify_chords_from_notes([]), [])
    compare(candidate_chords([]), [])

def test_explicit_bass():
    # equal scores keep the order in which the roots were given:
    compare(identify_chords_from_notes(['C4', 'E4', 'G#4'], bass='D3'), ['C+/D', 'E+/D', 'G#+/D'])
    compare(identify_chords_from_notes([Note('E3'), Note('G3'), Note('C4')], bass=Note('C2')), ['C'])

def test_candidate_chords():
    candidates = candidate_chords('C4 E4 G4')
    compare(len(candidates), 3)
    compare([c.root.name for c in candidates], ['C4', 'E4', 'G4'])
    compare(candidates[0].intervals, frozenset({4, 7}))
    compare(candidates[1].intervals, frozenset({3, 8}))
    compare(candidates[1].bass, Note('C4'))

    # notes that share the root's pitch class in other octaves are not intervals:
    compare(candidate_chords('C3 G3 C4')[0].intervals, frozenset({7}))

def test_probability_cutoff():
    compare(probability_cutoff(4.25), 3.7)
    compare(probability_cutoff(3.8), 2.9)
    compare(probability_cutoff(2.9), 0.9)
    compare(probability_cutoff(0.5), 0.1)
    compare(probability_cutoff(0), 0)
    compare(probability_cutoff(-1), 0)
    compare(probability_cutoff(5, cutoffs=((1, 0.5),)), 0.5)

def test_rank_candidates():
    ranked = rank_candidates(candidate_chords('C4 Eb4 Gb4'))
    compare([c.name for c in ranked], ['C°'])
    compare(rank_candidates([]), [])

    unfiltered = sorted(candidate_chords('C4 Eb4 Gb4'), key=lambda c: c.probability, reverse=True)
    compare([c.name for c in unfiltered], ['C°', 'F#5(6)(b5)/C', 'Ebm6(no5)/C'])

def test_rank_chords_removes_repeats():
    # the same reading from two octaves of the same root is only named once:
    candidates = candidate_chords('C3 E3 G3 C4')
    compare([c.name for c in candidates].count('C'), 2)
    compare(rank_chords(candidates), ['C'])

def all_pitch_class_sets():
    for size in range(1, 13):
        for pcs in combinations(range(12), size):
            yield NoteList([Note(pc, 4) for pc in pcs])

def test_every_chord_has_a_ranked_reading():
    # every nonempty set of notes names at least one chord, without repeats,
    # in descending order of probability:
    failures = []
    for notes in all_pitch_class_sets():
        ranked = rank_candidates(candidate_chords(notes))
        probs = [c.probability for c in ranked]
        names = rank_chords(candidate_chords(notes))
        if len(names) == 0 or len(names) != len(set(names)) or probs != sorted(probs, reverse=True):
            failures.append(notes.chromas)
    compare(failures, [])

def test_candidate_intervals_exclude_the_root():
    failures = []
    for notes in all_pitch_class_sets():
        for candidate in candidate_chords(notes):
            if len(candidate.intervals) >= len(notes) or 0 in candidate.intervals:
                failures.append((notes.chromas, candidate.root.name))
    compare(failures, [])
