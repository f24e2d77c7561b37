import struct

import numpy as np
import pytest

from fluke2png.constants import WIDTH, HEIGHT, HEADER_SIZE


def make_is2(path, pixels, header=None):
    if header is None:
        header = bytes(range(256)) + bytes(HEADER_SIZE - 256)
    with open(path, "wb") as f:
        f.write(header)
        f.write(np.asarray(pixels, dtype=">u2").tobytes())
    return path


@pytest.fixture
def gradient():
    return (np.arange(WIDTH * HEIGHT, dtype=np.uint32) % 4000 + 1000).astype(np.uint16).reshape(HEIGHT, WIDTH)


@pytest.fixture
def is2_file(tmp_path, gradient):
    return make_is2(tmp_path / "capture.is2", gradient)


def ihdr(png):
    """(width, height, depth, colour, compression, filter, interlace) of a PNG."""
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    assert png[12:16] == b"IHDR"
    return struct.unpack(">IIBBBBB", png[16:29])
