"""Bubble style selection."""

from enum import Enum

from bubble_say.core.constants import SPEECH_TAIL, THOUGHT_TAIL
from bubble_say.errors import InvalidConfiguration


class BubbleStyle(Enum):
    """Kind of bubble, which decides the connector glyphs."""
    SPEECH = "speech"
    THOUGHT = "thought"
    
    @property
    def tail_glyph(self) -> str:
        """Glyph used to draw the connector tail."""
        return SPEECH_TAIL if self is BubbleStyle.SPEECH else THOUGHT_TAIL
    
    @classmethod
    def parse(cls, value: "BubbleStyle | str") -> "BubbleStyle":
        """Accept a member or a case-insensitive style name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise InvalidConfiguration(
                f"Unknown bubble style: {value!r} (expected one of: {names})"
            ) from None
