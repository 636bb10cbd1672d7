"""8x8 monochrome icons, one byte per row, most significant bit on the left."""

ICON_W = 8
ICON_H = 8

OIL_ICON = bytes([
    0b00011000,
    0b00111100,
    0b01111110,
    0b00111100,
    0b01111110,
    0b00111100,
    0b00011000,
    0b00000000,
])

TEMP_ICON = bytes([
    0b00011000,
    0b00011000,
    0b00011000,
    0b00011000,
    0b00111100,
    0b00111100,
    0b00011000,
    0b00000000,
])

FUEL_ICON = bytes([
    0b00111100,
    0b01111110,
    0b01000010,
    0b01011010,
    0b01011010,
    0b01000010,
    0b01111110,
    0b00111100,
])

# Coil spiral
GLOW_ICON = bytes([
    0b00011000,
    0b00011000,
    0b01111110,
    0b00000110,
    0b01111110,
    0b01100000,
    0b01111110,
    0b00011000,
])

# Degree mark drawn between a temperature and its unit letter
DEGREE_W = 2
DEGREE_H = 2
DEGREE_MARK = bytes([
    0b11000000,
    0b11000000,
])
