### functions for matching chords to an unordered set of sounded notes:
### every sounded note is tried as the root of a chord, each reading is scored,
### and the plausible readings are ranked by score.

from .notes import Note, NoteList
from .chords import ChordCandidate
from .util import log, unique, InvariantError
from . import _settings


def candidate_chords(notes, bass=None):
    """accepts a list of Notes (or note names, or a string that casts to a NoteList)
    and an optional explicit bass note, and returns one ChordCandidate per note,
    reading each note in turn as the chord's root.

    if bass is not given, the lowest sounded note is taken as the bass
    (and if several notes share the lowest pitch, the first of them)."""
    notes = NoteList(notes)
    if len(notes) == 0:
        return []

    bass = notes.bass if bass is None else Note.cast(bass)
    if bass is None:
        raise InvariantError(f'Bass note cannot be determined from notes: {notes}')
    log(f'Finding chords in {notes} over bass: {bass.name}')

    candidates = []
    for root in notes:
        # intervals from this root to every other sounded pitch class:
        intervals = {root.interval_to(note) for note in notes if note.position != root.position}
        candidates.append(ChordCandidate(root, bass, intervals))
    return candidates

def probability_cutoff(max_probability, cutoffs=None):
    """the minimum score a candidate needs in order to be reported,
    given the score of the best candidate.
    walks down a staircase of (trigger, cutoff) pairs and uses the cutoff
    of the first trigger that max_probability exceeds."""
    if cutoffs is None:
        cutoffs = _settings.PROBABILITY_CUTOFFS
    for trigger, cutoff in cutoffs:
        if max_probability > trigger:
            return cutoff
    return _settings.DEFAULT_CUTOFF

def rank_candidates(candidates):
    """filters out candidates that score below the dynamic cutoff,
    and returns the rest sorted by descending probability
    (candidates with equal scores keep their original order)"""
    if len(candidates) == 0:
        return []
    max_probability = max([c.probability for c in candidates])
    cutoff = probability_cutoff(max_probability)
    log(f'Best score is {max_probability}, so keeping candidates that score at least {cutoff}')

    kept = [c for c in candidates if c.probability >= cutoff]
    return sorted(kept, key=lambda c: c.probability, reverse=True)

def rank_chords(candidates):
    """ranks candidates as in rank_candidates, and returns their names,
    without repeats (the first occurrence of each name is kept)"""
    return unique([c.name for c in rank_candidates(candidates)])

def identify_chords_from_notes(notes, bass=None):
    """returns the names of the chords that a set of sounded notes might form,
    from most to least likely. notes can be Notes or note names, and the optional
    bass can be a Note or note name. an empty set of notes gives an empty list.

    e.g. identify_chords_from_notes(['C4', 'E4', 'G4']) == ['C']"""
    return rank_chords(candidate_chords(notes, bass=bass))
