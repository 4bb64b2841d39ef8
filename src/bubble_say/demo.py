"""The say/think demo: one speech bubble, then one thought bubble."""

import sys
from typing import TextIO

from bubble_say.core.block import RenderedBlock
from bubble_say.core.constants import DEMO_SAY, DEMO_THINK
from bubble_say.core.style import BubbleStyle
from bubble_say.render.bubble import render


def demo_blocks(east_asian: bool = False) -> list[RenderedBlock]:
    """Render the two demo bubbles."""
    return [
        render(DEMO_SAY, BubbleStyle.SPEECH, east_asian=east_asian),
        render(DEMO_THINK, BubbleStyle.THOUGHT, east_asian=east_asian),
    ]


def run(out: TextIO | None = None, east_asian: bool = False) -> None:
    """Write the demo bubbles to a stream (stdout by default)."""
    out = out or sys.stdout
    for block in demo_blocks(east_asian=east_asian):
        out.write(block.render())


if __name__ == "__main__":
    run()
