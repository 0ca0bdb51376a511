import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()


class InvariantError(Exception):
    """raised when an internal invariant of chord recognition does not hold,
    i.e. something that the closed set of intervals and labels should make unreachable"""
    pass


# generically useful functions used across modules:
def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def unique(lst):
    """returns a list of the unique items in lst, keeping the first
    occurrence of each and preserving their original order"""
    seen = set()
    out = []
    for item in lst:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out

def check_range(value, bounds, what='value'):
    """raises ValueError if integer 'value' falls outside the inclusive (lo, hi) 'bounds'"""
    lo, hi = bounds
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{what} must be an integer, but got: {value!r}')
    if not (lo <= value <= hi):
        raise ValueError(f'{what} must be between {lo} and {hi}, but got: {value}')
    return value
