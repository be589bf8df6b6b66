from typing import Dict

import numpy as np

from huffpack.huffman import Code

def compression_percent(original_size: int, compressed_size: int) -> float:
    if original_size == 0:
        return 0.0
    return float(100.0 * (1.0 - compressed_size / original_size))

def expansion_percent(compressed_size: int, decompressed_size: int) -> float:
    if compressed_size == 0:
        return 0.0
    return float(100.0 * (decompressed_size / compressed_size - 1.0))

def entropy_bits(freqs: Dict[int, int]) -> float:
    """Shannon entropy of the symbol distribution, bits/symbol."""
    f = np.array(list(freqs.values()), dtype=np.float64)
    p = f / f.sum()
    return float((p * np.log2(1.0 / p)).sum())

def mean_code_length(freqs: Dict[int, int], codes: Dict[int, Code]) -> float:
    syms = sorted(freqs)
    f = np.array([freqs[s] for s in syms], dtype=np.float64)
    L = np.array([codes[s][1] for s in syms], dtype=np.float64)
    return float((f * L).sum() / f.sum())
