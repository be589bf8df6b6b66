"""
Text-like side artifact holding the code table.

    HUFF 1 <nbits>
    <sym>:<codeword>
    \\n:<codeword>

One record per symbol in ascending symbol order. The newline symbol is
written as the two bytes backslash, 'n'; every other symbol is its literal
byte. The header carries the exact payload bit length so the decoder can stop
before the padding of the last byte. Tables without a header (as written by
the original command-line tool) are still accepted; their bit length is
unknown.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from huffpack.freq import NEWLINE
from huffpack.huffman import Code, build_decode_table

MAGIC = b"HUFF"
VERSION = 1

SEP = ord(":")
NEWLINE_ESCAPE = b"\\n"

class CodeTableError(ValueError):
    pass

@dataclass
class CodeTable:
    decode: Dict[Code, int]       # (code_int, code_len) -> sym
    nbits: Optional[int] = None   # None for legacy headerless tables

    @property
    def max_length(self) -> int:
        return max((L for _, L in self.decode), default=0)

    def codes(self) -> Dict[int, Code]:
        return {sym: key for key, sym in self.decode.items()}

def write_code_table(codes: Dict[int, Code], nbits: int) -> bytes:
    if nbits < 0:
        raise ValueError("bit length must be non-negative")
    out = bytearray(b"%s %d %d\n" % (MAGIC, VERSION, nbits))
    for sym in sorted(codes):
        code, L = codes[sym]
        if not (0 <= sym <= 255):
            raise ValueError(f"symbol out of range: {sym}")
        if L < 1:
            raise ValueError(f"empty codeword for symbol {sym}")
        out += NEWLINE_ESCAPE if sym == NEWLINE else bytes([sym])
        out.append(SEP)
        out += format(code, f"0{L}b").encode("ascii")
        out.append(NEWLINE)
    return bytes(out)

def _parse_header(line: bytes) -> int:
    parts = line.split(b" ")
    if len(parts) != 3 or parts[0] != MAGIC:
        raise CodeTableError(f"Malformed code table header: {line!r}")
    try:
        ver, nbits = int(parts[1]), int(parts[2])
    except ValueError:
        raise CodeTableError(f"Malformed code table header: {line!r}") from None
    if ver != VERSION:
        raise CodeTableError(f"Unsupported version: {ver}")
    if nbits < 0:
        raise CodeTableError("Malformed code table header: negative bit length")
    return nbits

def _parse_record(line: bytes, lineno: int) -> Tuple[int, str]:
    if line.startswith(NEWLINE_ESCAPE + b":"):
        sym, word = NEWLINE, line[3:]
    elif len(line) >= 2 and line[1] == SEP:
        sym, word = line[0], line[2:]
    else:
        raise CodeTableError(f"Malformed record at line {lineno}: missing separator: {line!r}")
    if not word or word.strip(b"01"):
        raise CodeTableError(f"Malformed record at line {lineno}: bad codeword {word!r}")
    return sym, word.decode("ascii")

def read_code_table(data: bytes) -> CodeTable:
    # Split on newline bytes only; a literal '\r' symbol must survive.
    lines = bytes(data).split(b"\n")
    nbits = None
    start = 0
    if lines and lines[0].startswith(MAGIC + b" "):
        nbits = _parse_header(lines[0])
        start = 1

    codes: Dict[int, Code] = {}
    for lineno, line in enumerate(lines[start:], start=start + 1):
        if not line:
            continue
        sym, word = _parse_record(line, lineno)
        if sym in codes:
            raise CodeTableError(f"Malformed record at line {lineno}: duplicate symbol {sym}")
        codes[sym] = (int(word, 2), len(word))

    if not codes:
        raise CodeTableError("Malformed code table: no records")
    try:
        decode = build_decode_table(codes)
    except ValueError as e:
        raise CodeTableError(f"Malformed code table: {e}") from None
    _check_prefix_free(decode)
    return CodeTable(decode=decode, nbits=nbits)

def _check_prefix_free(decode: Dict[Code, int]):
    # a prefix of some word sorts directly before one of its extensions
    words = sorted(format(c, f"0{L}b") for c, L in decode)
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            raise CodeTableError(f"Malformed code table: {a} is a prefix of {b}")
