import io
import struct
from typing import Tuple

MAGIC = b"HUFP"   # 4 bytes
VERSION = 1       # 1 byte

# Header (little-endian):
# magic(4) version(1) flags(1) reserved(u16)
# table_len(u32) payload_len(u64)
HEADER_FMT = "<4sBBHIQ"
HEADER_SIZE = struct.calcsize(HEADER_FMT)

def write_header(f, *, table_len: int, payload_len: int, flags: int = 0):
    f.write(struct.pack(HEADER_FMT, MAGIC, VERSION, flags, 0, table_len, payload_len))

def read_header(f):
    data = f.read(HEADER_SIZE)
    if len(data) != HEADER_SIZE:
        raise ValueError("Malformed stream: header too short")
    magic, ver, flags, _, table_len, payload_len = struct.unpack(HEADER_FMT, data)
    if magic != MAGIC:
        raise ValueError("Bad magic number (not HUFP)")
    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")
    return dict(flags=flags, table_len=table_len, payload_len=payload_len)

def write_container(f, table: bytes, payload: bytes):
    write_header(f, table_len=len(table), payload_len=len(payload))
    f.write(table)
    f.write(payload)

def read_container(f) -> Tuple[bytes, bytes]:
    h = read_header(f)
    table = f.read(h["table_len"])
    if len(table) != h["table_len"]:
        raise ValueError("Malformed stream: code table truncated")
    payload = f.read(h["payload_len"])
    if len(payload) != h["payload_len"]:
        raise ValueError("Malformed stream: payload truncated")
    return table, payload

def pack_container(table: bytes, payload: bytes) -> bytes:
    buf = io.BytesIO()
    write_container(buf, table, payload)
    return buf.getvalue()

def unpack_container(data: bytes) -> Tuple[bytes, bytes]:
    f = io.BytesIO(data)
    table, payload = read_container(f)
    if f.read(1):
        raise ValueError("Malformed stream: trailing data after payload")
    return table, payload
