from .constants import WIDTH, HEIGHT, HEADER_SIZE, SAMPLE_MAX
from .errors import Fluke2PngError, ShortReadError, SourceIOError, EncodeError
from .container import RawContainer, read_blob, read_container, load_container, decode_samples
from .levels import Extrema, find_extrema, normalize
from .encoder import encode_png, write_png
from .pipeline import ConversionResult, convert

__version__ = "0.1.0"
