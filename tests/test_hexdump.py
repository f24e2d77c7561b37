from fluke2png.hexdump import format_hexdump


def test_full_line():
    line = format_hexdump(bytes(range(0x41, 0x61)))
    hexpart, text = line[:71], line[72:]
    assert hexpart.split() == ["41424344", "45464748", "494a4b4c", "4d4e4f50",
                               "51525354", "55565758", "595a5b5c", "5d5e5f60"]
    assert text == "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`"


def test_partial_line_is_padded():
    full, last = format_hexdump(bytes(32) + b"\x00ab ").split("\n")
    assert len(full) == 71 + 1 + 32
    assert last.startswith("00616220 ")
    assert last.index(".ab.") == 72
    assert last.endswith(".ab.")


def test_empty():
    assert format_hexdump(b"") == ""
