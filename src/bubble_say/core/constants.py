"""Shared constants for bubble layout."""

# Wrapping
DEFAULT_WIDTH = 40
MIN_WIDTH = 4

# Border glyphs
TOP_BORDER = "_"
BOTTOM_BORDER = "-"

# Side glyphs as (left, right) pairs
SIDES_SINGLE: tuple[str, str] = ("|", "|")
SIDES_FIRST: tuple[str, str] = ("/", "\\")
SIDES_MIDDLE: tuple[str, str] = ("|", "|")
SIDES_LAST: tuple[str, str] = ("\\", "/")

# Connector tail
TAIL_OFFSET = 3   # Column of the first tail glyph, from the box's left edge
TAIL_LENGTH = 2   # Number of connector lines
SPEECH_TAIL = "\\"
THOUGHT_TAIL = "o"

# Messages from the original say/think demo
DEMO_SAY = "I am a cow!"
DEMO_THINK = "呼んだ?"
