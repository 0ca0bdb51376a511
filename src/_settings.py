
############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### chord names override this per-chord, based on the quality of the chord's third.
DEFAULT_SHARPS = True

### DEFAULT_OCTAVE is the octave given to notes that are named without one,
### e.g. Note('C#') is the same as Note('C#4')
DEFAULT_OCTAVE = 4


# chordid musical objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { 'Note': '♪',
   'ChordCandidate': '♬ ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'NoteList': ['𝄃', ' 𝄂'],
               'Guitar': ['〚', ' 〛'],
            }


############# instrument settings:

# octaves are bounded, as on a piano keyboard (C0 to B8):
OCTAVE_RANGE = (0, 8)

### a guitar has six strings, each with frets from the open string (0) up to 24:
NUM_STRINGS = 6
FRET_RANGE = (0, 24)

### OFFSET_RANGE bounds the transposition offset applied uniformly to all strings,
### i.e. a capo (positive) or a detuning of the whole instrument (negative)
OFFSET_RANGE = (-4, 4)


############# chord recognition settings:

### base scores for each branch of the chord classifier.
### these are hand-tuned heuristics: a triad beats a suspended chord,
### which beats a power chord, which beats a bare dyad, and so on.
TRIAD_SCORE = 4
DIMINISHED_SCORE = 4
AUGMENTED_SCORE = 4
SUSPENDED_SCORE = 3
POWER_SCORE = 2
DYAD_SCORE = 1
NO_CHORD_SCORE = 0

### EXCLUDED_SCORE is assigned to a root hypothesis that cannot possibly be
### the real root (e.g. an inconsistent diminished reading), and must be lower
### than any score a real reading can reach
EXCLUDED_SCORE = -1

### score modifiers:
SEVENTH_BONUS = 0.25       # a seventh on top of a full triad
FLAT_FIFTH_PENALTY = 0.75  # a power/sus chord whose fifth is flattened
SLASH_PENALTY = 0.5        # bass note differs from the root

### PROBABILITY_CUTOFFS is a descending staircase of (trigger, cutoff) pairs:
### the first trigger that the best candidate's score exceeds sets the
### minimum score a candidate must reach to be reported.
PROBABILITY_CUTOFFS = ((3.8, 3.7),
                       (2.9, 2.9),
                       (0.9, 0.9),
                       (0,   0.1))
DEFAULT_CUTOFF = 0


############# audio settings:

### A4_PITCH is the reference frequency in Hz for 12-tone equal temperament
A4_PITCH = 440

### sampling rate for synthesised audio:
SAMPLE_RATE = 44100
