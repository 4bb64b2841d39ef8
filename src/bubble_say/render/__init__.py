"""Renderers for turning messages into bubbles."""

from bubble_say.render.bubble import BubbleRenderer, render
from bubble_say.render.wrap import hard_break, wrap

__all__ = ["BubbleRenderer", "render", "wrap", "hard_break"]
