import io
import logging
import os

import numpy as np
from PIL import Image

from .errors import EncodeError

logger = logging.getLogger(__name__)


def _to_image(pixels):
    arr = np.asarray(pixels)
    if arr.ndim != 2 or 0 in arr.shape:
        raise EncodeError(f"expected a non-empty 2-D pixel array, got shape {arr.shape}")
    # Pillow picks mode I;16 for a native uint16 array, which the PNG plugin
    # writes as 16-bit grayscale (colour type 0)
    return Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint16))


def _save(img, f):
    try:
        img.save(f, format="PNG")
    except Exception as exc:
        raise EncodeError(f"PNG encoding failed: {exc}") from exc


def encode_png(pixels):
    with _to_image(pixels) as img, io.BytesIO() as out:
        _save(img, out)
        return out.getvalue()


def write_png(destination, pixels):
    """Write `pixels` as a 16-bit grayscale PNG to a path or binary stream.

    When given a path, the file is removed again if encoding fails half way.
    """
    with _to_image(pixels) as img:
        if hasattr(destination, "write"):
            _save(img, destination)
            return

        try:
            f = open(destination, "wb")
        except OSError as exc:
            raise EncodeError(f"could not open output file {destination}: {exc}") from exc
        try:
            with f:
                _save(img, f)
        except BaseException:
            try:
                os.remove(destination)
            except OSError:
                logger.warning("could not remove partial output %s", destination)
            raise
