from typing import Optional

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7 between writes)
        self._total = 0

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        if length <= 0:
            raise ValueError("code length must be positive")
        self._cur = (self._cur << length) | (code & ((1 << length) - 1))
        self._nbits += length
        self._total += length
        while self._nbits >= 8:
            self._nbits -= 8
            self._buf.append((self._cur >> self._nbits) & 0xFF)
        self._cur &= (1 << self._nbits) - 1

    @property
    def bit_length(self) -> int:
        """Exact number of bits written, padding excluded."""
        return self._total

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    """
    MSB-first bit reader over a byte string. With `nbits` set, only the first
    `nbits` bits are readable and the rest of the last byte is padding.
    """
    def __init__(self, data: bytes, nbits: Optional[int] = None):
        self.data = data
        total = len(data) * 8
        if nbits is None:
            nbits = total
        elif nbits < 0:
            raise ValueError("bit length must be non-negative")
        elif nbits > total:
            raise EOFError(f"Unexpected end of bitstream: need {nbits} bits, have {total}")
        self.nbits = nbits
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def __len__(self):
        return self.nbits

    @property
    def position(self) -> int:
        return self.i * 8 + self.bit

    def __iter__(self):
        """Yield the remaining bits one at a time without copying the data."""
        data = self.data
        while self.position < self.nbits:
            byte = data[self.i]
            stop = min(8, self.nbits - self.i * 8)
            for k in range(self.bit, stop):
                yield (byte >> (7 - k)) & 1
            if stop == 8:
                self.i += 1
                self.bit = 0
            else:
                self.bit = stop
