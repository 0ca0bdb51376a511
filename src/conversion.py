from . import _settings
import math


#### value-octave-position-pitch conversion functions for Notes.
# a note's 'value' is its semitone distance from C0, i.e. 12*octave + position

# get octave and position from note value:
def oct_pos(value): # equivalent to div_mod
    value = int(value)
    oct = math.floor(value / 12)
    pos = value % 12
    return oct, pos

# get note value from octave and position
def oct_pos_to_value(oct, pos):
    value = (12*oct) + pos
    return value

# reference value of A4, from which pitches are calculated:
A4_VALUE = oct_pos_to_value(4, 9)

### pitch-value conversion (12-tone equal temperament)
def value_to_pitch(value):
    """Given a note value, return the corresponding pitch in Hz as a float,
    relative to the reference pitch of A4 given in _settings."""
    pitch = 2 ** ((value - A4_VALUE)/12) * _settings.A4_PITCH
    return round(pitch, 3)

def pitch_to_value(pitch, nearest=True):
    """Given a pitch in Hz, returns the value of the corresponding note.
    If the pitch is not exact, will return the value of the *nearest* note
    instead, unless nearest is False, in which case will return a float of the
    hypothetical real-valued note corresponding to that pitch."""
    exact_value = 12 * math.log(pitch/_settings.A4_PITCH, 2) + A4_VALUE
    if nearest:
        return round(exact_value)
    else:
        return round(exact_value, 2) # rounded only to cents
