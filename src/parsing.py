#### string parsing functions
from .util import unpack_and_reverse_dict, log

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

# chord names are spelled with plain keyboard characters:
fl = 'b'
sh = '#'

def is_accidental(char):
    if len(char) == 0:
        raise ValueError("'' is technically not an accidental but this is an edge case")
    return (char in accidental_offsets.keys())

def is_sharp_ish(acc):
    """returns True for sharps and double sharps"""
    return (accidental_offsets[acc] >= 1)

def is_flat_ish(acc):
    """returns True for flats and double flats"""
    return (accidental_offsets[acc] <= -1)


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
next_natural_note = {natural_note_names[i-1]:natural_note_names[i] for i in range(1,7)}
next_natural_note['B'] = 'C'

# the name of each pitch class (by position, where C is 0) under each accidental preference.
# black notes borrow their flat name from the next natural note up: C# == Db
sharp_note_names = ['C', f'C{sh}', 'D', f'D{sh}', 'E', 'F', f'F{sh}', 'G', f'G{sh}', 'A', f'A{sh}', 'B']
flat_note_names = [n if len(n) == 1 else f'{next_natural_note[n[0]]}{fl}' for n in sharp_note_names]

def preferred_name(position, prefer_sharps=True):
    """the name of the pitch class at this position, spelled with sharps or flats"""
    names = sharp_note_names if prefer_sharps else flat_note_names
    return names[position % 12]


class NoteParseError(ValueError):
    """raised when a string cannot be read as a note name"""
    pass


def begins_with_valid_note_name(name: str):
    """checks if a string begins with a valid note name, i.e. a natural note letter
    followed by an optional accidental of one or two characters.
    returns the length of that note name, or False if there is none."""
    if len(name) == 0 or name[0].upper() not in natural_positions:
        return False
    for acc_len in (2, 1):
        acc = name[1:1+acc_len]
        if len(acc) == acc_len and is_accidental(acc):
            return 1 + acc_len
    return 1

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first few characters
    (like the name of an octave note, e.g. F#3)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise NoteParseError(f'No valid note name found at the start of: {name!r}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_note_name(name):
    """Takes the name of a note as a string, for example 'C4' or 'a#3' or 'Gb',
    and returns its (position, octave) where position is 0-11 (C=0),
    and octave is None if the name does not specify one.

    accidentals wrap around the octave boundary without changing the octave,
    so that 'Cb4' is read as B4 and 'B#4' as C4."""
    if not isinstance(name, str):
        raise NoteParseError(f'Expected a note name string, but got: {type(name)}')
    name = name.strip()
    note_name, remainder = note_split(name, strip=False)

    if remainder == '':
        octave = None
    elif remainder.isdigit():
        octave = int(remainder)
    else:
        raise NoteParseError(f'Could not parse note name: {name!r} (unexpected characters: {remainder!r})')

    letter, acc = note_name[0].upper(), note_name[1:]
    offset = accidental_offsets[acc] if len(acc) > 0 else 0
    position = (natural_positions[letter] + offset) % 12
    return position, octave

def is_valid_note_name(name):
    """returns True if string can be cast to a Note, and False otherwise"""
    try:
        parse_note_name(name)
        return True
    except NoteParseError:
        return False

def parse_out_note_names(note_string):
    """for some string of valid note names, of undetermined length,
    such as e.g.: 'CAC#ADbGbE' or 'E2 A2 D3', parse out the individual notes
    and return a list of the note name strings."""
    assert isinstance(note_string, str), f'parse_out_note_names expected str input but got: {type(note_string)}'

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            note_list = [n for n in note_string.split(char) if n.strip() != '']
            if len(note_list) >= 2 and all(is_valid_note_name(n) for n in note_list):
                return [n.strip() for n in note_list]
            # otherwise continue trying to split the string into notes as normal

    # use note_split to break the string apart note-by-note,
    # taking any trailing octave digits along with each note:
    note_list = []
    rest = note_string.replace(' ', '')
    while len(rest) > 0:
        note_name, rest = note_split(rest)
        digits = ''
        while len(rest) > 0 and rest[0].isdigit():
            digits, rest = digits + rest[0], rest[1:]
        note_list.append(note_name + digits)
    log(f'Parsed {note_string!r} into note names: {note_list}')
    return note_list


################### fret parsing

# characters (and objects) that denote an unplayed string:
mute_chars = {'x', 'X', '-'}

def parse_fret(fret):
    """reads a single fret entry: an int, a digit string, or a mute marker (None, False, 'x')"""
    if fret is None or fret is False:
        return None
    elif isinstance(fret, int) and not isinstance(fret, bool):
        return fret
    elif isinstance(fret, str):
        fret = fret.strip()
        if fret in mute_chars:
            return None
        elif fret.isdigit():
            return int(fret)
    raise ValueError(f'Could not parse fret: {fret!r} (expected an integer, or None/False/x for a muted string)')

def parse_frets(frets, expected_len=None):
    """accepts a string or list of frets and returns a strict list of
    integers (or None for muted strings).
    a string is read one char per string (e.g. 'x32010') if it is exactly
    expected_len long, and is otherwise split on separators (e.g. 'x-10-12-11-10-x')"""
    if isinstance(frets, str):
        if expected_len is None or len(frets) == expected_len:
            # simply parse one fret out of every character:
            fret_list = [parse_fret(f) for f in frets]
        else:
            # assume there must be some sep char:
            for sep in ',- ':
                chunks = [c for c in frets.split(sep) if c.strip() != '']
                if len(chunks) == expected_len:
                    break
            fret_list = [parse_fret(c) for c in chunks]
    elif isinstance(frets, (list, tuple)):
        fret_list = [parse_fret(f) for f in frets]
    else:
        raise TypeError(f'Expected list, tuple or string of frets, but got {type(frets)}')

    if expected_len is not None and len(fret_list) != expected_len:
        raise ValueError(f'Expected {expected_len} frets (one per string), but got {len(fret_list)}: {frets!r}')
    return fret_list
