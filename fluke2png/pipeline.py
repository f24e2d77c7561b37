import logging
from collections import namedtuple

from .container import load_container
from .encoder import write_png
from .levels import find_extrema, normalize

logger = logging.getLogger(__name__)

ConversionResult = namedtuple("ConversionResult", "header extrema width height output")


def convert(source_path, destination_path):
    """Read an IS2 capture, stretch its levels and save it as a 16-bit PNG.

    Nothing is written unless the whole input could be read.
    """
    logger.debug("reading %s", source_path)
    container = load_container(source_path)
    pixels = container.pixels()

    extrema = find_extrema(pixels)
    logger.debug("min pixel value 0x%04x, max pixel value 0x%04x", *extrema)
    if extrema.min == extrema.max:
        logger.warning("%s has no dynamic range, writing a flat image", source_path)

    normalized = normalize(pixels, extrema)

    logger.debug("writing %s", destination_path)
    write_png(destination_path, normalized)

    return ConversionResult(
        container.header, extrema, container.width, container.height, destination_path
    )
