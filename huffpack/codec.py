from typing import Dict, Tuple

from huffpack.freq import count_frequencies
from huffpack.huffman import Code, build_tree, build_codebook
from huffpack.bitpack import BitWriter, BitReader
from huffpack.codetable import CodeTable, write_code_table, read_code_table

class EncodeError(ValueError):
    pass

class DecodeError(ValueError):
    pass

def encode_payload(codes: Dict[int, Code], data: bytes) -> Tuple[bytes, int]:
    """
    Returns:
      payload_bytes: codewords packed MSB-first, last byte zero-padded
      nbits: exact number of real bits
    """
    bw = BitWriter()
    for sym in bytes(data):
        try:
            code, L = codes[sym]
        except KeyError:
            raise EncodeError(f"no codeword for symbol {sym}") from None
        bw.write_code(code, L)
    return bw.finish(), bw.bit_length

def decode_payload(payload: bytes, table: CodeTable) -> bytes:
    """
    Match bit prefixes against the table. Stops at table.nbits; a legacy
    table without a bit length runs to the end of the payload and tolerates
    an unmatched all-zero tail inside the final byte.
    """
    payload = bytes(payload)
    try:
        br = BitReader(payload, table.nbits)
    except EOFError as e:
        raise DecodeError(f"Corrupt stream: payload truncated ({e})") from None
    legacy = table.nbits is None
    if not legacy:
        _check_framing(payload, table.nbits)

    decode = table.decode
    max_len = table.max_length
    out = bytearray()
    code = 0
    L = 0
    tail_start = 0
    for pos, bit in enumerate(br):
        code = (code << 1) | bit
        L += 1
        sym = decode.get((code, L))
        if sym is not None:
            out.append(sym)
            code = 0
            L = 0
            tail_start = pos + 1
        elif L >= max_len:
            if legacy and _is_padding(payload, tail_start):
                return bytes(out)
            raise DecodeError(f"Corrupt stream: no codeword matches bits at offset {tail_start}")

    if L:
        if legacy and _is_padding(payload, tail_start):
            return bytes(out)
        raise DecodeError(f"Corrupt stream: {L} unmatched trailing bits")
    return bytes(out)

def _check_framing(payload: bytes, nbits: int):
    if len(payload) != (nbits + 7) // 8:
        raise DecodeError(f"Corrupt stream: trailing data after {nbits} bits "
                          f"({len(payload)} bytes, expected {(nbits + 7) // 8})")
    pad = -nbits % 8
    if pad and payload[-1] & ((1 << pad) - 1):
        raise DecodeError("Corrupt stream: non-zero padding bits")

def _is_padding(payload: bytes, start: int) -> bool:
    # rest of the stream is zero bits inside the final byte
    total = len(payload) * 8
    if start // 8 != (total - 1) // 8:
        return False
    return (payload[-1] & ((1 << (total - start)) - 1)) == 0

def compress(data: bytes) -> Tuple[bytes, bytes]:
    """
    Returns:
      packed: payload bytes
      table: code table artifact (bytes), including the exact bit length
    """
    freqs = count_frequencies(data)
    codes = build_codebook(build_tree(freqs))
    packed, nbits = encode_payload(codes, data)
    return packed, write_code_table(codes, nbits)

def decompress(packed: bytes, table: bytes) -> bytes:
    return decode_payload(packed, read_code_table(table))
