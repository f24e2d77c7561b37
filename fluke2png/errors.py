class Fluke2PngError(Exception):
    """Base class for conversion failures. `stage` names the failing step."""

    stage = "convert"
    # raw header bytes, when the failure happened after the header was read
    header = None


class ShortReadError(Fluke2PngError):
    stage = "read"

    def __init__(self, wanted, got):
        super().__init__(f"file too short: wanted {wanted} bytes, got {got}")
        self.wanted = wanted
        self.got = got


class SourceIOError(Fluke2PngError):
    stage = "read"


class EncodeError(Fluke2PngError):
    stage = "encode"
