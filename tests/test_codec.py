import os
import random
import tracemalloc

import pytest

from huffpack import compress, decompress, DecodeError, EncodeError, CodeTableError
from huffpack.freq import count_frequencies, NEWLINE
from huffpack.huffman import build_tree, build_codebook, build_decode_table
from huffpack.codetable import CodeTable, read_code_table
from huffpack.codec import encode_payload, decode_payload


def test_aab_concrete_scenario():
	codes = build_codebook(build_tree(count_frequencies(b"aab")))
	payload, nbits = encode_payload(codes, b"aab\n")
	# a a b \n -> 0 0 11 10 -> 001110(00)
	assert nbits == 6
	assert payload == bytes([0b00111000])
	assert decode_payload(payload, CodeTable(decode=build_decode_table(codes), nbits=nbits)) == b"aab\n"


def test_compress_aab():
	packed, table = compress(b"aab")
	assert packed == bytes([0b00110000])
	assert table == b"HUFF 1 4\n\\n:10\na:0\nb:11\n"
	assert decompress(packed, table) == b"aab"


@pytest.mark.parametrize("data", [
	b"",
	b"x",
	b"\n",
	b"\n\n\n",
	b"zzzzzzzzzzzz",
	bytes(range(256)),
	bytes(reversed(range(256))) * 3,
	b"Hello World\n" * 50,
	b"\r\n:\\n\\" * 10,
])
def test_roundtrip(data):
	packed, table = compress(data)
	assert decompress(packed, table) == data


def test_roundtrip_random_10kb():
	rng = random.Random(42)
	data = bytes(rng.getrandbits(8) for _ in range(10 * 1024))
	packed, table = compress(data)
	assert decompress(packed, table) == data


@pytest.mark.timeout(120)
def test_roundtrip_random_1mb():
	data = os.urandom(1024 * 1024)
	packed, table = compress(data)
	assert decompress(packed, table) == data


def test_skewed_text_actually_compresses():
	data = b"aaaaaaaabbbbccd\n" * 256
	packed, _ = compress(data)
	assert len(packed) < len(data) // 2


def test_empty_input():
	packed, table = compress(b"")
	assert packed == b""
	assert table == b"HUFF 1 0\n\\n:0\n"
	assert decompress(packed, table) == b""


def test_deterministic():
	data = b"the same input twice, the same output twice\n" * 20
	assert compress(data) == compress(data)


def test_all_zero_codeword_not_decoded_from_padding():
	# newline is the only symbol, code "0"; padding is also zeros
	packed, table = compress(b"\n\n\n")
	assert packed == b"\x00"
	assert read_code_table(table).nbits == 3
	assert decompress(packed, table) == b"\n\n\n"


def test_headerless_table_decodes_padding_as_data():
	packed, table = compress(b"\n\n\n")
	legacy = table.split(b"\n", 1)[1]
	assert decompress(packed, legacy) == b"\n" * 8


def test_headerless_table_ignores_unmatched_zero_padding():
	# A=1 B=01 C=001; A B A + 0000 padding
	legacy = b"A:1\nB:01\nC:001\n"
	assert decompress(bytes([0b10110000]), legacy) == b"ABA"


def test_headerless_table_rejects_nonzero_tail():
	legacy = b"A:1\nB:01\nC:001\n"
	with pytest.raises(DecodeError):
		decompress(bytes([0b10110001]), legacy)


def test_overlong_candidate_is_corruption():
	table = b"HUFF 1 8\nA:1\nB:01\nC:001\n"
	with pytest.raises(DecodeError, match="no codeword"):
		decompress(b"\x00", table)


def test_unmatched_trailing_bits():
	table = b"HUFF 1 2\nA:1\nB:01\nC:001\n"
	with pytest.raises(DecodeError, match="unmatched"):
		decompress(b"\x00", table)


def test_truncated_stream():
	packed, table = compress(b"This is a test" * 100)
	with pytest.raises(DecodeError, match="truncated"):
		decompress(packed[:-3], table)


def test_corrupted_table():
	packed, _ = compress(b"Hello World" * 50)
	with pytest.raises(CodeTableError):
		decompress(packed, b"garbage\n")


def test_encode_unknown_symbol():
	with pytest.raises(EncodeError) as exc:
		encode_payload({ord("a"): (0, 1)}, b"ab")
	assert isinstance(exc.value, ValueError)
	assert str(exc.value) == "no codeword for symbol 98"


@pytest.mark.timeout(120)
def test_decoder_memory_stays_near_payload_size():
	packed, table = compress(os.urandom(1024 * 1024))
	tracemalloc.start()
	try:
		out = decompress(packed, table)
		_, peak = tracemalloc.get_traced_memory()
	finally:
		tracemalloc.stop()
	assert len(out) == 1024 * 1024
	assert peak < 16 * len(packed)


def test_trailing_bytes_after_payload():
	packed, table = compress(b"hello world\n")
	with pytest.raises(DecodeError, match="trailing data"):
		decompress(packed + b"\xff\xff\xff", table)


def test_nonzero_padding_bits():
	packed, table = compress(b"aab")
	assert packed == bytes([0b00110000])
	with pytest.raises(DecodeError, match="padding"):
		decompress(bytes([0b00110001]), table)


def test_headerless_table_allows_extra_bytes():
	legacy = b"A:1\nB:01\nC:001\n"
	# A B A C B + seven zero bits in the last byte
	assert decompress(bytes([0b10110010, 0b10000000]), legacy) == b"ABACB"


def test_compress_rejects_str():
	with pytest.raises(TypeError):
		compress("text")


def test_newline_code_present_even_when_absent_from_input():
	_, table = compress(b"abc")
	assert NEWLINE in read_code_table(table).codes()
