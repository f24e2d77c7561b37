from collections import namedtuple

import numpy as np

from .constants import WIDTH, HEIGHT, HEADER_SIZE, SAMPLE_BYTES
from .errors import Fluke2PngError, ShortReadError, SourceIOError

# samples are stored big-endian on the wire
WIRE_DTYPE = np.dtype(">u2")


class RawContainer(namedtuple("RawContainer", "header payload width height")):
    """Opaque header bytes plus the still-encoded pixel payload."""

    __slots__ = ()

    def pixels(self):
        return decode_samples(self.payload, self.width, self.height)


def read_blob(source, size):
    """Read exactly `size` bytes from `source` or raise.

    Streaming sources may hand out fewer bytes than asked for, so keep
    reading until `size` is reached or the source runs dry.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")

    buf = bytearray()
    while len(buf) < size:
        try:
            data = source.read(size - len(buf))
        except OSError as exc:
            raise SourceIOError(f"read failed: {exc}") from exc
        if not data:
            raise ShortReadError(size, len(buf))
        buf.extend(data)
    return bytes(buf)


def read_container(source, width=WIDTH, height=HEIGHT, header_size=HEADER_SIZE):
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid size {width}x{height}")
    header = read_blob(source, header_size)
    try:
        payload = read_blob(source, width * height * SAMPLE_BYTES)
    except Fluke2PngError as exc:
        exc.header = header
        raise
    return RawContainer(header, payload, width, height)


def load_container(path, width=WIDTH, height=HEIGHT, header_size=HEADER_SIZE):
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise SourceIOError(f"could not open input file {path}: {exc}") from exc
    with f:
        return read_container(f, width, height, header_size)


def decode_samples(payload, width, height):
    """Wire bytes -> host order uint16 array of shape (height, width)."""
    if len(payload) != width * height * SAMPLE_BYTES:
        raise ValueError(
            f"payload size mismatch: got {len(payload)} bytes, "
            f"expected {width * height * SAMPLE_BYTES}"
        )
    arr = np.frombuffer(payload, dtype=WIRE_DTYPE)
    return arr.astype(np.uint16).reshape(height, width)


def encode_samples(pixels):
    """Host order array -> wire bytes, row-major."""
    return np.ascontiguousarray(pixels, dtype=WIRE_DTYPE).tobytes()
