from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, Tuple, Optional

Code = Tuple[int, int]  # (bits as int MSB-first, length)

@dataclass
class _Node:
    freq: int
    order: int
    sym: Optional[int] = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    def __lt__(self, other):  # for heapq: weight, then creation serial
        return (self.freq, self.order) < (other.freq, other.order)

def build_tree(freqs: Dict[int, int]) -> _Node:
    """
    Greedy Huffman merge. Leaves are created in ascending symbol order and
    every node gets a creation serial; equal weights pop by serial, and the
    first node popped becomes the left child.
    """
    if not freqs:
        raise ValueError("cannot build a tree from an empty frequency table")
    pq = [_Node(freq=f, order=i, sym=s) for i, (s, f) in enumerate(sorted(freqs.items()))]
    heapq.heapify(pq)
    serial = len(pq)
    if len(pq) == 1:
        # Edge case: only one symbol -> root with a single left leaf, code "0"
        only = pq[0]
        return _Node(freq=only.freq, order=serial, left=only)
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, _Node(freq=a.freq + b.freq, order=serial, left=a, right=b))
        serial += 1
    return pq[0]

def build_codebook(root: _Node) -> Dict[int, Code]:
    """
    Walk the tree and return {sym: (code_int, code_len)}.
    Left appends a 0 bit, right appends a 1 bit.
    """
    codes: Dict[int, Code] = {}
    stack = [(root, 0, 0)]
    while stack:
        node, code, L = stack.pop()
        if node.sym is not None:
            if L == 0:
                raise ValueError("leaf at root has no codeword")
            codes[node.sym] = (code, L)
            continue
        if node.right is not None:
            stack.append((node.right, (code << 1) | 1, L + 1))
        if node.left is not None:
            stack.append((node.left, code << 1, L + 1))
    return codes

def code_strings(codes: Dict[int, Code]) -> Dict[int, str]:
    return {sym: format(code, f"0{L}b") for sym, (code, L) in codes.items()}

def weighted_path_length(freqs: Dict[int, int], codes: Dict[int, Code]) -> int:
    return sum(f * codes[s][1] for s, f in freqs.items())

def build_decode_table(codes: Dict[int, Code]) -> Dict[Code, int]:
    """Inverse mapping (code_int, code_len) -> sym."""
    out: Dict[Code, int] = {}
    for sym, key in codes.items():
        if key in out:
            raise ValueError(f"duplicate codeword for symbols {out[key]} and {sym}")
        out[key] = sym
    return out
