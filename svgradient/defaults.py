# No dependencies
"""Bit depths and geometry constants shared across the package."""

CHANNEL_MAX_8 = 0xFF
CHANNEL_MAX_16 = 0xFFFF

# 8-bit -> 16-bit widening multiplies by 0x101 so 0xFF maps to 0xFFFF
WIDEN_8_TO_16 = 0x101

# blended 16-bit channels are reduced to 8 bits by this shift
OUTPUT_SHIFT = 8

# a focus outside the radius is pulled in to (radius - FOCUS_INSET) pixels
FOCUS_INSET = 1.0

NUM_CHANNELS = 4
