import argparse
import os
import sys

from huffpack.codec import compress
from huffpack.codetable import read_code_table
from huffpack.container import write_container
from huffpack.freq import count_frequencies
from huffpack.metrics import compression_percent, entropy_bits, mean_code_length

TABLE_SUFFIX = ".huff"

def encode_file(input_path: str, output_path: str, *, table_path=None, container=False, quiet=False) -> int:
    """Compress one file; returns the number of bytes written."""
    with open(input_path, "rb") as f:
        data = f.read()

    packed, table = compress(data)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    if container:
        with open(output_path, "wb") as f:
            write_container(f, table, packed)
        written = os.path.getsize(output_path)
    else:
        table_path = table_path or output_path + TABLE_SUFFIX
        with open(output_path, "wb") as f:
            f.write(packed)
        with open(table_path, "wb") as f:
            f.write(table)
        written = len(packed)

    if not quiet:
        freqs = count_frequencies(data)
        codes = read_code_table(table).codes()
        print(f"[encode] wrote {output_path}" + ("" if container else f" (table {table_path})"))
        print(f"[encode] symbols={len(freqs)}, entropy={entropy_bits(freqs):.3f} bits, "
              f"mean_code_len={mean_code_length(freqs, codes):.3f} bits")
        print(f"[encode] original={len(data)} bytes, compressed={written} bytes, "
              f"reduction={compression_percent(len(data), written):.2f}%")
    return written

def build_parser():
    ap = argparse.ArgumentParser(description="Static Huffman compressor")
    ap.add_argument("--input", required=True, help="path to input file")
    ap.add_argument("--output", required=True, help="path to compressed payload")
    ap.add_argument("--table", default=None, help=f"path to code table (default: OUTPUT{TABLE_SUFFIX})")
    ap.add_argument("--container", action="store_true", help="write table and payload into one file")
    ap.add_argument("--quiet", action="store_true", help="no summary output")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        encode_file(args.input, args.output, table_path=args.table,
                    container=args.container, quiet=args.quiet)
    except (OSError, ValueError) as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
