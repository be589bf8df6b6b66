import argparse
import sys

from huffpack.encode import encode_file
from huffpack.decode import decode_file

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Huffman file compressor (c = compress, d = decompress)")
    ap.add_argument("action", choices=["c", "d"])
    ap.add_argument("input")
    ap.add_argument("output")
    args = ap.parse_args(argv)

    run = encode_file if args.action == "c" else decode_file
    try:
        run(args.input, args.output)
    except (OSError, ValueError) as e:
        print(f"[huffc] error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
