from types import MappingProxyType
from enum import IntEnum

class Interval(IntEnum):
    """a directed distance between two pitch classes, in semitones from 0 to 11.
    intervals compare and hash as plain integers, so sets of them behave like sets of ints."""
    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11

    @classmethod
    def from_distance(cls, semitones):
        """the interval class of an arbitrary (possibly negative or compound) semitone distance"""
        return cls(int(semitones) % 12)

    @property
    def short_name(self):
        return interval_short_names[self.value]

    def __str__(self):
        return f'‹{self.short_name}›'

    def __repr__(self):
        return str(self)


interval_short_names = ('P1', 'm2', 'M2', 'm3', 'M3', 'P4',
                        'TT', 'P5', 'm6', 'M6', 'm7', 'M7')

def interval_between(origin, target):
    """the directed pitch-class distance from origin note up to target note,
    always in [0,11] and ignoring octaves"""
    return Interval.from_distance(target.position - origin.position)


# handy shorthand for the intervals that the chord classifier asks about:
Unison = Interval.UNISON
MinorSecond, MajorSecond = Interval.MINOR_SECOND, Interval.MAJOR_SECOND
MinorThird, MajorThird = Interval.MINOR_THIRD, Interval.MAJOR_THIRD
PerfectFourth, Tritone, PerfectFifth = Interval.PERFECT_FOURTH, Interval.TRITONE, Interval.PERFECT_FIFTH
MinorSixth, MajorSixth = Interval.MINOR_SIXTH, Interval.MAJOR_SIXTH
MinorSeventh, MajorSeventh = Interval.MINOR_SEVENTH, Interval.MAJOR_SEVENTH


### extension degrees: the interval classes left over once a chord's quality has been
### decided are named as 7ths, 9ths, 11ths and 13ths above the root.
extension_degrees = (7, 9, 11, 13)

# maps interval class to (degree, label). read-only, built once at import:
extension_labels = MappingProxyType({
    MinorSeventh:  (7, '7'),
    MajorSeventh:  (7, 'maj7'),
    MinorSecond:   (9, 'b9'),
    MajorSecond:   (9, '9'),
    MinorThird:    (9, '#9'),   # only counted when the chord already has a major third
    PerfectFourth: (11, '11'),
    Tritone:       (11, '#11'),
    MinorSixth:    (13, 'b13'),
    MajorSixth:    (13, '13'),
    })
