import argparse
import logging
import sys

from .pipeline import convert
from .errors import Fluke2PngError
from .hexdump import format_hexdump


def main(argv=None):
    p = argparse.ArgumentParser(
        prog="fluke2png",
        description="Convert Fluke thermal imaging raw files (.IS2) to 16-bit grayscale PNG.",
    )
    p.add_argument("input", help="Input .is2 file")
    p.add_argument("output", help="Output .png file")
    p.add_argument("--hexdump", action="store_true", help="Print the raw file header as hexdump")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every conversion step")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        res = convert(args.input, args.output)
    except Fluke2PngError as exc:
        if args.hexdump and exc.header is not None:
            print(format_hexdump(exc.header))
        print(f"error: {exc.stage}: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.hexdump:
        print(format_hexdump(res.header))

    print(f"saved {res.output} ({res.width}x{res.height}), range=(0x{res.extrema.min:04x},0x{res.extrema.max:04x})")


if __name__ == "__main__":
    main()
