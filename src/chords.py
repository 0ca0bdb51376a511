from .intervals import (Interval, extension_labels, extension_degrees,
                        Unison, MinorSecond, MajorSecond, MinorThird, MajorThird,
                        PerfectFourth, Tritone, PerfectFifth, MinorSixth, MajorSixth,
                        MinorSeventh, MajorSeventh)
from .parsing import sh, fl
from .util import log, InvariantError
from . import _settings

### chord recognition: a ChordCandidate is one hypothesis about which of the
### sounded notes is the root of the chord. its name and probability are
### derived from which interval classes sit above that root.

class ChordCandidate:
    """a reading of a set of sounded pitch classes as a chord built on a specific root.

    attributes:
        root: the Note treated as this chord's root
        bass: the lowest sounded Note, which may differ from the root (a slash chord)
        intervals: frozenset of Intervals from the root to every other sounded pitch class
        kind: which branch of the classifier named this chord, one of
            'triad', 'diminished', 'augmented', 'suspended', 'power', 'dyad', 'none', 'excluded'
        name: display name, e.g. 'Cmaj7' or 'Am/C'
        probability: heuristic score used to rank competing readings
    """
    def __init__(self, root, bass, intervals=()):
        self.root = root
        self.bass = bass
        self.intervals = frozenset(Interval(iv) for iv in intervals)
        if Unison in self.intervals:
            raise InvariantError(f'Chord intervals are relative to the root and cannot include a unison: {sorted(self.intervals)}')

        # spell accidentals by the quality of the third:
        self.prefer_sharps = not self.is_minor()

        self.kind, segments, probability = classify(self.intervals)

        name_segments = [self.root.spelled(self.prefer_sharps)] + segments
        if self.is_inverted():
            name_segments.append(f'/{self.bass.spelled(self.prefer_sharps)}')
            probability -= _settings.SLASH_PENALTY
        self.name = ''.join(name_segments)
        self.probability = probability

        log(f'Root {self.root.name} with intervals {sorted(self.intervals)}: read as {self.kind} chord {self.name} (p={self.probability})')

    def is_minor(self):
        """True if this chord has a minor third over its root and no major third"""
        return (MinorThird in self.intervals) and (MajorThird not in self.intervals)

    def is_inverted(self):
        """True if the bass note is not the root, i.e. this is a slash chord"""
        return self.bass.position != self.root.position

    @property
    def prob(self):
        return self.probability

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'{self._marker}{self.name} (p={self.probability:.2f})'

    _marker = _settings.MARKERS['ChordCandidate']


#### classifier branches

def classify(intervals):
    """decides what kind of chord a set of intervals (relative to some root) makes,
    and returns a tuple of: (kind, name_segments, probability)
    where name_segments is the list of strings that follow the root name."""
    has_third = (MinorThird in intervals) or (MajorThird in intervals)
    has_fifth = PerfectFifth in intervals

    if has_fifth and has_third:
        return ('triad', *triad(intervals))
    elif (MinorThird in intervals) and (Tritone in intervals):
        segments, probability = diminished(intervals)
        kind = 'excluded' if probability == _settings.EXCLUDED_SCORE else 'diminished'
        return (kind, segments, probability)
    elif (MajorThird in intervals) and (MinorSixth in intervals):
        return ('augmented', *augmented(intervals))
    elif has_fifth or (Tritone in intervals):
        return suspended_or_power(intervals)
    elif has_third:
        return ('dyad', *dyad(intervals))
    else:
        segments = fold_extensions(intervals) + ['(N/C)']
        return ('none', segments, _settings.NO_CHORD_SCORE)

def triad(intervals):
    """a third and a perfect fifth: major or minor, plus any extensions"""
    major = MajorThird in intervals
    segments = ['m'] if not major else []
    segments += fold_extensions(intervals, major=major, minor=not major)

    probability = _settings.TRIAD_SCORE
    if (MinorSeventh in intervals) or (MajorSeventh in intervals):
        probability += _settings.SEVENTH_BONUS
    return segments, probability

def diminished(intervals):
    """a minor third and a tritone (as flattened fifth), without a perfect fifth"""
    # if a diminished reading on this root would also need both sevenths,
    # or a sixth alongside a seventh, then this note cannot be the real root:
    both_sevenths = (MinorSeventh in intervals) and (MajorSeventh in intervals)
    sixth_and_seventh = (MajorSixth in intervals) and ((MinorSeventh in intervals) or (MajorSeventh in intervals))
    if both_sevenths or sixth_and_seventh:
        log(f'Diminished reading of {sorted(intervals)} is inconsistent, excluding this root')
        return ['°'], _settings.EXCLUDED_SCORE

    remaining = intervals - {Tritone}
    if MajorSixth in remaining:
        # fully diminished 7th, whose 7th is a doubly-flattened 7th (i.e. a major 6th)
        segments = ['°7'] + fold_extensions(remaining - {MajorSixth}, diminished=True)
    elif MinorSeventh in remaining:
        # half-diminished, i.e. m7b5
        segments = ['m'] + fold_extensions(remaining, diminished=True) + ['(b5)']
    else:
        # plain diminished triad, with major 7th or no 7ths
        segments = ['°'] + fold_extensions(remaining, diminished=True)
    return segments, _settings.DIMINISHED_SCORE

def augmented(intervals):
    """a major third and a minor sixth (as raised fifth), without a perfect fifth"""
    remaining = intervals - {MinorSixth}
    # a minor third alongside the major third is not named here:
    segments = ['+'] + fold_extensions(remaining)
    return segments, _settings.AUGMENTED_SCORE

def suspended_or_power(intervals):
    """a fifth (perfect, or flattened) with no third: either a suspended chord,
    if there is a second or fourth to stand in for the third, or a power chord"""
    flat_fifth = (PerfectFifth not in intervals) and (Tritone in intervals)
    remaining = intervals - {Tritone} if flat_fifth else intervals

    # a major second beats a minor second, and a perfect fourth beats a tritone:
    sus2 = MajorSecond if MajorSecond in remaining else (MinorSecond if MinorSecond in remaining else None)
    sus4 = PerfectFourth if PerfectFourth in remaining else (Tritone if Tritone in remaining else None)

    if (sus2 is not None) or (sus4 is not None):
        kind = 'suspended'
        probability = _settings.SUSPENDED_SCORE
        # name the extensions without the suspended notes, then reattach them:
        suspensions = {sus2, sus4} - {None}
        segments = fold_extensions(remaining - suspensions)
        if sus2 is not None:
            segments.append('sus2(b2)' if sus2 == MinorSecond else 'sus2')
        if sus4 is not None:
            segments.append(f'sus({sh}4)' if sus4 == Tritone else 'sus4')
    else:
        kind = 'power'
        probability = _settings.POWER_SCORE
        segments = ['5'] + fold_extensions(remaining, power=True)

    if flat_fifth:
        segments.append(f'({fl}5)')
        probability -= _settings.FLAT_FIFTH_PENALTY
    return kind, segments, probability

def dyad(intervals):
    """a third with no fifth of any kind"""
    major = MajorThird in intervals
    minor = MinorThird in intervals
    # any minor third marks a dyad as minor, even next to a major third:
    segments = ['m'] if minor else []
    segments += fold_extensions(intervals, major=major, minor=minor and not major) + ['(no5)']
    return segments, _settings.DYAD_SCORE


#### extension folding

def has_accidental(label):
    return label[0] in (sh, fl)

def label_rank(label):
    """flats and minor 7ths come before naturals, which come before sharps and major 7ths"""
    if label[0] == fl or label == '7':
        return 0
    elif label[0] == sh or label == 'maj7':
        return 2
    return 1

def sort_labels(labels):
    """orders the extension labels of a single degree, like ['#9', 'b9'] -> ['b9', '#9']"""
    ranks = [label_rank(l) for l in labels]
    if len(set(ranks)) != len(ranks):
        raise InvariantError(f'Cannot order extension labels: {labels}')
    return [l for _, l in sorted(zip(ranks, labels))]

def extension_map(intervals, major=False):
    """sorts the intervals of a chord into the extension degrees they name,
    returning a dict of degree: [labels]. intervals with no extension meaning
    (thirds, fifths) are ignored, and a minor third only counts (as a #9)
    if the chord is major."""
    degrees = {d: [] for d in extension_degrees}
    for iv in sorted(intervals):
        if iv == MinorThird and not major:
            continue
        if iv in extension_labels:
            degree, label = extension_labels[iv]
            degrees[degree].append(label)
    return degrees

def add_segment(labels):
    """names an added degree: add9, add(b9), add(b9,#9)"""
    labels = sort_labels(labels)
    if len(labels) == 1:
        label = labels[0]
        return f'add({label})' if has_accidental(label) else f'add{label}'
    return f'add({",".join(labels)})'

def fold_remaining(degrees):
    """names every remaining degree as an added note, from the lowest degree up"""
    return [add_segment(degrees[d]) for d in sorted(degrees) if len(degrees[d]) > 0]

def fold_extensions(intervals, major=False, minor=False, power=False, diminished=False):
    """names the extensions of a chord whose quality has already been decided.

    args:
        intervals: the intervals above the root that have not been consumed by the chord quality
        major: True if the chord has a major third (so a minor third is a #9)
        minor: True if the chord is minor, with no major third (a major 7th is then bracketed: m(maj7))
        power: True for power chords, whose extensions are all bracketed: 5(7)
        diminished: True inside diminished chords, where a major 7th keeps its full label

    returns the list of name segments to append after the chord quality."""
    degrees = extension_map(intervals, major=major)
    segments = []

    sevenths = degrees.pop(7)
    if len(sevenths) == 2:
        segments.append('(7, maj7)')
        return segments + fold_remaining(degrees)

    elif len(sevenths) == 1:
        seventh = sevenths[0]
        bracketed = power or (minor and seventh == 'maj7')
        # the next lowest degree above the 7th stacks onto it, e.g. 7 + 9 = 9th chord:
        next_degree = min([d for d in degrees if len(degrees[d]) > 0], default=None)

        if next_degree is None:
            segments.append(f'({seventh})' if bracketed else seventh)
        else:
            labels = sort_labels(degrees.pop(next_degree))
            stackable = (len(labels) == 1) and not has_accidental(labels[0]) and not (diminished and seventh == 'maj7')
            if bracketed:
                segments.append(f'({",".join([seventh] + labels)})')
            elif stackable:
                # e.g. 9, maj9, 13
                prefix = 'maj' if seventh == 'maj7' else ''
                segments.append(f'{prefix}{labels[0]}')
            else:
                # altered or multiple degrees stay bracketed after the 7th, so 7(b9) and never b9:
                # e.g. 7(b9), maj7(#11), 7(b9,#9)
                segments.append(f'{seventh}({",".join(labels)})')
        return segments + fold_remaining(degrees)

    sixths = degrees.pop(13)
    if len(sixths) == 2:
        segments.append('(min6, 6)')
    elif len(sixths) == 1:
        if sixths[0] == f'{fl}13':
            segments.append('(min6)')
        else:
            segments.append('(6)' if power else '6')
    return segments + fold_remaining(degrees)
