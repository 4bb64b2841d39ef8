"""
bubble-say: ASCII speech and thought bubbles

Wrap a message, box it, and add a tail pointing at wherever your
figure sits.

Quick Start:
    >>> import bubble_say
    >>> print(bubble_say.say("I am a cow!"), end="")
    >>> print(bubble_say.think("Hmm..."), end="")
    >>> block = bubble_say.render("Hello", "thought", max_width=20)
    >>> block.content_lines
    ('| Hello |',)

Features:
    - Greedy word wrapping with hard breaks for over-long words
    - Speech (\\) and thought (o) connector tails
    - Optional East Asian wide-character width approximation
    - Command line interface: bubble-say say|think|demo
"""

__version__ = "0.1.0"

# Core types
from bubble_say.core.style import BubbleStyle
from bubble_say.core.block import RenderedBlock
from bubble_say.core.constants import DEFAULT_WIDTH
from bubble_say.errors import BubbleError, InvalidConfiguration

# Rendering
from bubble_say.render.bubble import BubbleRenderer, render


def say(text: str, width: int = DEFAULT_WIDTH, east_asian: bool = False) -> str:
    """Render text in a speech bubble."""
    return render(text, BubbleStyle.SPEECH, width, east_asian=east_asian).render()


def think(text: str, width: int = DEFAULT_WIDTH, east_asian: bool = False) -> str:
    """Render text in a thought bubble."""
    return render(text, BubbleStyle.THOUGHT, width, east_asian=east_asian).render()


__all__ = [
    # Version
    "__version__",
    # Core types
    "BubbleStyle",
    "RenderedBlock",
    # Errors
    "BubbleError",
    "InvalidConfiguration",
    # Rendering
    "BubbleRenderer",
    "render",
    "say",
    "think",
]
