from huffpack.freq import count_frequencies
from huffpack.huffman import build_tree, build_codebook
from huffpack.codetable import CodeTableError
from huffpack.codec import compress, decompress, EncodeError, DecodeError

__version__ = "1.0.0"

__all__ = [
    "compress", "decompress",
    "count_frequencies", "build_tree", "build_codebook",
    "CodeTableError", "EncodeError", "DecodeError",
]
