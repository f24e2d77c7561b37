import argparse
import sys

import cv2
import numpy as np

from .constants import WIDTH, HEIGHT, HEADER_SIZE
from .container import encode_samples


def to_gray16(img):
    # img: HxW or HxWxC as returned by cv2.imread(..., IMREAD_UNCHANGED)
    if img.ndim == 3:
        code = cv2.COLOR_BGRA2GRAY if img.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        img = cv2.cvtColor(img, code)
    if img.dtype == np.uint8:
        # widen so 0xff becomes 0xffff
        return img.astype(np.uint16) * 257
    return img.astype(np.uint16)


def build_container(pixels, header=None):
    """Pack a HEIGHTxWIDTH uint16 array into IS2 container bytes."""
    pixels = np.asarray(pixels)
    if pixels.shape != (HEIGHT, WIDTH):
        raise ValueError(f"expected {WIDTH}x{HEIGHT} pixels, got shape {pixels.shape}")
    if header is None:
        header = bytes(HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise ValueError(f"header must be {HEADER_SIZE} bytes, got {len(header)}")
    return bytes(header) + encode_samples(pixels)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Convert an image to a Fluke IS2 raw file for testing.")
    ap.add_argument("input", help="Input image path (any format OpenCV supports)")
    ap.add_argument("--out", required=True, help="Output .is2 path")
    ap.add_argument("--header", help=f"File holding the {HEADER_SIZE} header bytes to embed (default: zeros)")
    args = ap.parse_args(argv)

    img = cv2.imread(args.input, cv2.IMREAD_UNCHANGED)
    if img is None:
        print(f"ERROR: failed to read image: {args.input}", file=sys.stderr)
        sys.exit(1)

    gray = to_gray16(img)
    if gray.shape != (HEIGHT, WIDTH):
        gray = cv2.resize(gray, (WIDTH, HEIGHT), interpolation=cv2.INTER_AREA)

    header = None
    if args.header:
        try:
            with open(args.header, "rb") as f:
                header = f.read()
        except OSError as exc:
            print(f"ERROR: failed to read header: {exc}", file=sys.stderr)
            sys.exit(1)

    try:
        data = build_container(gray, header)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    with open(args.out, "wb") as f:
        f.write(data)

    print(f"OK: wrote {args.out} ({WIDTH}x{HEIGHT}, 16-bit)")


if __name__ == "__main__":
    main()
