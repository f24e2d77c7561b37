def _printable(b):
    return chr(b) if 0x21 <= b <= 0x7E else "."


def format_hexdump(data, width=32, group=4):
    """Render bytes like `hexdump`: hex columns in groups of `group` bytes,
    then the printable characters of the same line."""
    ngroups = -(-width // group)
    hex_width = width * 2 + ngroups - 1

    lines = []
    for off in range(0, len(data), width):
        chunk = data[off:off + width]
        groups = [chunk[i:i + group].hex() for i in range(0, len(chunk), group)]
        text = "".join(_printable(b) for b in chunk)
        lines.append(f"{' '.join(groups):<{hex_width}} {text}")
    return "\n".join(lines)
