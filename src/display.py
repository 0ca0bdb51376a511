from .util import log
import math


class Fretboard:
    ### a guitar fretboard display class that is initialised with its data
    ### and then rendered as a text diagram

    # example:
    ### open chord: x32010
    #     Frets: x32010
    #     E ‖    |    |    |
    #     B ‖ C  |    |    |
    #     G ‖    |    |    |
    #     D ‖    | E  |    |
    #     A ‖    |    | C  |
    #     E X    |    |    |
    #          1    2    3

    def __init__(self, cells, index='EADGBE', mute=None, title=None, num_strings=6):
        """args:
        cells: a dict that keys (string,fret) tuples to the contents of what should be displayed in that fret.
            note that strings are indexed from 1, as in guitar terminology: low E is "first string".
            frets are *also* indexed from 1, but there is still a fret 0, i.e. open string.
        index: labels to display at left of fretboard (from lowest string to highest). 'EADGBE' by default.
        mute: list of strings to display mute markers (X) next to.
        title: optional line to display above the diagram."""
        self.index = list(index)
        self.mute = [] if mute is None else mute
        self.title = title
        self.num_strings = num_strings
        assert len(self.index) == num_strings, f'Fretboard index {self.index} does not match number of strings: {num_strings}'

        self.cells = cells
        self.frets_used = [f for (s,f) in self.cells.keys()]

        ### get min and max extent of fretting positions, but be sensitive to all open strings:
        self.max_fret = max(self.frets_used, default=0)
        self.min_fret = 0 if self.max_fret == 0 else min([f for f in self.frets_used if f != 0]) # minimum nonzero fret

    def render(self, start_fret=None, end_fret=None, fret_size=None, fret_labels=True, align='cleft', fret_sep_char='|'):
        """returns the diagram as a string, showing frets between start_fret and end_fret
        (detected from data if either are None), with fret_size characters between each
        vertical fret bar (the longest cell content, or 4, whichever is greater).

        align must be one of: 'left', 'right', 'cleft' or 'cright'. Latter two align to centre, but rounding left or right."""

        ############## determine length of diagram:
        if start_fret is None:
            # for chords high on the neck, truncate the diagram by starting on the minimum fret:
            start_fret = self.min_fret if self.min_fret >= 4 else 1
        if end_fret is None:
            end_fret = max([self.max_fret, start_fret+2]) # at least 3 frets shown

        num_frets_shown = (end_fret - start_fret) + 1
        log(f'Start fret: {start_fret}, end fret: {end_fret}')

        if fret_size is None:
            maxlen = max([len(str(c)) for c in self.cells.values()], default=0)
            fret_size = max([maxlen, 4])

        index_width = max([len(str(i)) for i in self.index]) + 1
        assert len(fret_sep_char) == 1

        if start_fret == 1:
            played_leftborder = '‖'
            muted_leftborder  = 'X'
        else:
            played_leftborder = f' {fret_sep_char}'
            muted_leftborder  = f'X{fret_sep_char}'

        ############## start piecing together contents
        rows = []
        for s in range(1, self.num_strings+1):
            this_string_row = []
            for f in range(num_frets_shown):
                cell_key = (s, start_fret+f)
                if cell_key in self.cells:
                    content = str(self.cells[cell_key])
                    remaining_space = fret_size - len(content)
                    if align == 'cleft':
                        left_space = remaining_space // 2
                    elif align == 'cright':
                        left_space = math.ceil(remaining_space/2)
                    elif align == 'left':
                        left_space = 0
                    elif align == 'right':
                        left_space = remaining_space
                    else:
                        raise ValueError(f"arg 'align' to Fretboard.render must be one of: left, right, cleft, cright")
                    this_cell = ' '*left_space + f'{content:{fret_size - left_space}}'
                else:
                    this_cell = ' ' * fret_size
                this_string_row.append(this_cell + fret_sep_char)

            leftborder = muted_leftborder if s in self.mute else played_leftborder
            leftmargin = f'{self.index[s-1]:{index_width}}{leftborder}'
            rows.append(leftmargin + ''.join(this_string_row))

        # now turn strings upside down, so the highest string is on top:
        final_rows = list(reversed(rows))

        if self.title is not None:
            final_rows = [str(self.title)] + final_rows

        # and finally put fret labels on the bottom if needed:
        if fret_labels:
            footer_margin = ' ' * (index_width + len(played_leftborder))
            footer_cells = [f'{(start_fret + f):^{fret_size}}' for f in range(num_frets_shown)]
            final_rows.append(footer_margin + ' '.join(footer_cells))
        return '\n'.join(final_rows)

    def disp(self, **kwargs):
        print(self.render(**kwargs))

    def __str__(self):
        return self.render()


class ChordTable:
    """a text table of ranked chord readings, one row per distinct chord name,
    showing the name, the root it was read from, and its score"""
    columns = ('Chord', 'Root', 'Score')

    def __init__(self, candidates):
        self.rows = []
        for c in candidates:
            if c.name not in self.names:
                self.rows.append((c.name, c.root.name, f'{c.probability:.2f}'))

    @property
    def names(self):
        return [row[0] for row in self.rows]

    def __len__(self):
        return len(self.rows)

    def render(self, margin=' ', header_border=True):
        widths = [max([len(col)] + [len(row[i]) for row in self.rows]) for i, col in enumerate(self.columns)]
        lines = [margin.join([f'{col:{w}}' for col, w in zip(self.columns, widths)])]
        if header_border:
            lines.append('=' * (sum(widths) + len(margin)*(len(widths)-1)))
        for row in self.rows:
            lines.append(margin.join([f'{cell:{w}}' for cell, w in zip(row, widths)]))
        return '\n'.join(lines)

    def show(self, **kwargs):
        print(self.render(**kwargs))
