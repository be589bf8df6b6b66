import pytest

from huffpack.freq import count_frequencies
from huffpack.huffman import build_tree, build_codebook
from huffpack.metrics import compression_percent, expansion_percent, entropy_bits, mean_code_length


def test_compression_percent():
	assert compression_percent(200, 50) == pytest.approx(75.0)
	assert compression_percent(0, 5) == 0.0


def test_expansion_percent():
	assert expansion_percent(50, 200) == pytest.approx(300.0)
	assert expansion_percent(0, 10) == 0.0


def test_entropy():
	assert entropy_bits({1: 1, 2: 1}) == pytest.approx(1.0)
	assert entropy_bits({1: 7}) == 0.0


def test_mean_code_length_bounds():
	freqs = count_frequencies(b"aab")
	codes = build_codebook(build_tree(freqs))
	assert mean_code_length(freqs, codes) == pytest.approx(1.5)
	assert entropy_bits(freqs) <= mean_code_length(freqs, codes) < entropy_bits(freqs) + 1
