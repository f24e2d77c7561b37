from collections import namedtuple

import numpy as np

from .constants import SAMPLE_MAX

Extrema = namedtuple("Extrema", "min max")


def find_extrema(pixels):
    arr = np.asarray(pixels)
    if arr.size == 0:
        raise ValueError("empty pixel buffer")
    return Extrema(int(arr.min()), int(arr.max()))


def normalize(pixels, extrema=None):
    """Stretch samples so that `extrema.min` maps to 0 and `extrema.max` to
    SAMPLE_MAX, linearly in between.

    Values are rounded half to even and clamped to the sample range. A flat
    image (max == min) has no range to stretch and comes out all zeros.
    Returns a new uint16 array; `pixels` is left untouched.
    """
    arr = np.asarray(pixels)
    if extrema is None:
        extrema = find_extrema(arr)
    vmin, vmax = extrema

    span = vmax - vmin
    if span == 0:
        return np.zeros(arr.shape, dtype=np.uint16)

    # multiply before dividing so exact halves stay exact
    out = np.rint((arr.astype(np.float64) - vmin) * SAMPLE_MAX / span)
    return out.clip(0, SAMPLE_MAX).astype(np.uint16)
