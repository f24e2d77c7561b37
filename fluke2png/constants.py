# Fluke IS2 raw capture layout
WIDTH = 160
HEIGHT = 120
HEADER_SIZE = 366

SAMPLE_BYTES = 2
SAMPLE_MAX = 0xFFFF

PAYLOAD_SIZE = WIDTH * HEIGHT * SAMPLE_BYTES
CONTAINER_SIZE = HEADER_SIZE + PAYLOAD_SIZE
