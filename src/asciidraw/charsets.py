# Glyph ramps are ordered darkest-first: index 0 is drawn for black pixels.
DEFAULT_CHARS = "@%#*+=-:. "

# Longer ASCII ramp for wide renders
DENSE = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Unicode shade blocks: U+2588 full, U+2593 dark, U+2592 medium, U+2591 light
BLOCKS = "█▓▒░ "

# Short ramp for low-resolution previews
SIMPLE = "#+-. "

RAMPS = {
    "default": DEFAULT_CHARS,
    "dense": DENSE,
    "blocks": BLOCKS,
    "simple": SIMPLE,
}
