"""Window, text, and placeholder-art constants."""

FPS = 60
TITLE = "Frogger - tick-driven arcade demo"

# Canvas text style (matches the core's TEXT_FONT / TEXT_COLOR)
FONT_NAME = "sans"
FONT_SIZE = 24
TEXT_COLOR = (0xA1, 0x2A, 0x04)

BG_COLOR = (255, 255, 255)

# Source art is 101x171 with transparent padding; placeholders keep that size.
SPRITE_SIZE = (101, 171)

# Flat colours used when an image file is missing, keyed by file stem prefix.
PLACEHOLDER_COLORS: dict[str, tuple[int, int, int, int]] = {
    "water": (60, 120, 220, 255),
    "stone": (140, 140, 140, 255),
    "grass": (70, 170, 70, 255),
    "enemy": (200, 40, 40, 255),
    "char": (240, 200, 60, 255),
    "Gem": (40, 90, 240, 255),
    "start": (0, 0, 0, 0),
}
DEFAULT_PLACEHOLDER = (255, 0, 255, 255)
