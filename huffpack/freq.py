from typing import Dict

import numpy as np

NEWLINE = 0x0A

def count_frequencies(data) -> Dict[int, int]:
    """
    Byte histogram of `data` as {symbol: count}, ascending by symbol.
    The newline symbol is always counted once more than it occurs, so the
    table is never empty.
    """
    if isinstance(data, str):
        raise TypeError("count_frequencies expects bytes, not str")
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    hist = np.bincount(arr, minlength=256)
    hist[NEWLINE] += 1
    return {int(s): int(hist[s]) for s in np.flatnonzero(hist)}
