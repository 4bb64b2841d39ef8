"""Core data structures for bubble rendering."""

from bubble_say.core.style import BubbleStyle
from bubble_say.core.block import RenderedBlock
from bubble_say.core.width import display_width

__all__ = ["BubbleStyle", "RenderedBlock", "display_width"]
