"""Central configuration for bitmap decoding, encoding and editing.

All fixed layout values and tunable thresholds are defined here with
descriptive names. The codec and the transformations import them from here
so a change to the on-disk layout or to a filter's behavior stays local.
"""

# =============================================================================
# CONTAINER LAYOUT
# =============================================================================

# Size of the container header ("BM", file size, reserved, pixel offset)
FILE_HEADER_SIZE = 14

# Size of the BITMAPINFOHEADER format header written on encode
INFO_HEADER_SIZE = 40

# Byte position of the pixel array in files written by the encoder
PIXEL_ARRAY_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE

# Signature written at byte 0 (not verified on read)
SIGNATURE = b"BM"

# Scanlines are padded with zero bytes to a multiple of this many bytes
ROW_ALIGNMENT = 4

# =============================================================================
# PIXEL FORMAT
# =============================================================================

# Bits per pixel written by the encoder (3 bytes: blue, green, red)
BITS_PER_PIXEL = 24

# Bit depths the decoder accepts. 32-bit rows carry a 4th byte that is skipped.
SUPPORTED_BITS_PER_PIXEL = (24, 32)

# Compression method accepted and written (0 = BI_RGB, uncompressed)
COMPRESSION_NONE = 0

# Number of color planes (always 1)
COLOR_PLANES = 1

# Print resolution in pixels per meter (~72 DPI)
PIXELS_PER_METER = 2835

# =============================================================================
# TONE CURVES
# =============================================================================

# Clarendon: pixels with a channel average at or above this are brightened
CLARENDON_BRIGHT_THRESHOLD = 170

# Clarendon: pixels with a channel average below this are darkened
CLARENDON_DARK_THRESHOLD = 90

# High contrast: channel average at or above this becomes white, else black
HIGH_CONTRAST_THRESHOLD = 128

# =============================================================================
# PALETTE REDUCTION
# =============================================================================

# Channel sum at or above this maps to white
PALETTE_WHITE_SUM = 550

# Channel sum at or below this maps to black
PALETTE_BLACK_SUM = 150

# =============================================================================
# OUTPUT NAMING
# =============================================================================

# Extension used for derived output files
OUTPUT_EXTENSION = ".bmp"

# Separator between the source stem and the user label
OUTPUT_LABEL_SEPARATOR = "_"
