"""Render messages as ASCII speech and thought bubbles."""

from bubble_say.core.block import RenderedBlock
from bubble_say.core.constants import (
    BOTTOM_BORDER,
    DEFAULT_WIDTH,
    MIN_WIDTH,
    SIDES_FIRST,
    SIDES_LAST,
    SIDES_MIDDLE,
    SIDES_SINGLE,
    TAIL_LENGTH,
    TAIL_OFFSET,
    TOP_BORDER,
)
from bubble_say.core.style import BubbleStyle
from bubble_say.core.width import pad_to
from bubble_say.errors import InvalidConfiguration
from bubble_say.render.wrap import measure_for, wrap


def _side_glyphs(index: int, count: int) -> tuple[str, str]:
    """Pick the (left, right) side glyphs for content line `index` of `count`."""
    if count == 1:
        return SIDES_SINGLE
    if index == 0:
        return SIDES_FIRST
    if index == count - 1:
        return SIDES_LAST
    return SIDES_MIDDLE


def validate_width(max_width: int) -> int:
    """Check a wrap width, raising InvalidConfiguration if it is unusable."""
    if isinstance(max_width, bool) or not isinstance(max_width, int):
        raise InvalidConfiguration(f"max_width must be an integer, got {max_width!r}")
    if max_width < MIN_WIDTH:
        raise InvalidConfiguration(f"max_width must be >= {MIN_WIDTH}, got {max_width}")
    return max_width


class BubbleRenderer:
    """
    Render a message as a boxed bubble with a connector tail.

    The message is word-wrapped to `max_width` display columns, boxed
    with `_`/`-` borders and side glyphs, and followed by a two-line tail
    pointing down toward where a figure would sit.

    Example:
        >>> block = BubbleRenderer(40).render("I am a cow!", BubbleStyle.SPEECH)
        >>> print(block)
        _____________
        | I am a cow! |
        -------------
           \\
            \\
    """

    def __init__(self, max_width: int = DEFAULT_WIDTH, east_asian: bool = False):
        self.max_width = validate_width(max_width)
        self.east_asian = east_asian

    def render(
        self,
        message: str,
        style: BubbleStyle | str = BubbleStyle.SPEECH,
    ) -> RenderedBlock:
        """Render a message to a RenderedBlock."""
        style = BubbleStyle.parse(style)
        measure = measure_for(self.east_asian)

        wrapped = wrap(message, self.max_width, measure)
        box_width = max(measure(line) for line in wrapped)

        lines: list[str] = [TOP_BORDER * (box_width + 2)]

        for index, line in enumerate(wrapped):
            left, right = _side_glyphs(index, len(wrapped))
            lines.append(f"{left} {pad_to(line, box_width, self.east_asian)} {right}")

        lines.append(BOTTOM_BORDER * (box_width + 2))
        lines.extend(self.connector(style))

        return RenderedBlock(
            lines=tuple(lines),
            style=style,
            box_width=box_width,
            content_count=len(wrapped),
        )

    @staticmethod
    def connector(style: BubbleStyle) -> list[str]:
        """Build the tail lines for a bubble style."""
        glyph = style.tail_glyph
        return [' ' * (TAIL_OFFSET + row) + glyph for row in range(TAIL_LENGTH)]


def render(
    message: str,
    style: BubbleStyle | str = BubbleStyle.SPEECH,
    max_width: int = DEFAULT_WIDTH,
    east_asian: bool = False,
) -> RenderedBlock:
    """Render a message as a bubble in one call."""
    return BubbleRenderer(max_width, east_asian=east_asian).render(message, style)
