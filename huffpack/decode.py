import argparse
import os
import sys

from huffpack.codec import decompress
from huffpack.container import read_container
from huffpack.encode import TABLE_SUFFIX
from huffpack.metrics import expansion_percent

def decode_file(input_path: str, output_path: str, *, table_path=None, container=False, quiet=False) -> int:
    """Decompress one file; returns the number of bytes written."""
    if container:
        with open(input_path, "rb") as f:
            table, packed = read_container(f)
        read_size = os.path.getsize(input_path)
    else:
        table_path = table_path or input_path + TABLE_SUFFIX
        with open(input_path, "rb") as f:
            packed = f.read()
        with open(table_path, "rb") as f:
            table = f.read()
        read_size = len(packed)

    data = decompress(packed, table)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(data)

    if not quiet:
        print(f"[decode] wrote {output_path}")
        print(f"[decode] compressed={read_size} bytes, decompressed={len(data)} bytes, "
              f"increase={expansion_percent(read_size, len(data)):.2f}%")
    return len(data)

def build_parser():
    ap = argparse.ArgumentParser(description="Static Huffman decompressor")
    ap.add_argument("--input", required=True, help="path to compressed payload")
    ap.add_argument("--output", required=True, help="path to decompressed output")
    ap.add_argument("--table", default=None, help=f"path to code table (default: INPUT{TABLE_SUFFIX})")
    ap.add_argument("--container", action="store_true", help="input is a single-file container")
    ap.add_argument("--quiet", action="store_true", help="no summary output")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        decode_file(args.input, args.output, table_path=args.table,
                    container=args.container, quiet=args.quiet)
    except (OSError, ValueError) as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
