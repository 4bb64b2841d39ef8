"""RenderedBlock - the text produced for one bubble."""

from dataclasses import dataclass
from typing import Any

from bubble_say.core.style import BubbleStyle


@dataclass(frozen=True, slots=True)
class RenderedBlock:
    """
    Lines of a rendered bubble, top to bottom.
    
    Layout is always: top border, ``content_count`` content lines,
    bottom border, then the connector tail.
    """
    lines: tuple[str, ...]
    style: BubbleStyle
    box_width: int
    content_count: int
    
    @property
    def border_lines(self) -> tuple[str, str]:
        """Top and bottom border lines."""
        return self.lines[0], self.lines[self.content_count + 1]
    
    @property
    def content_lines(self) -> tuple[str, ...]:
        """Lines holding the wrapped message."""
        return self.lines[1:self.content_count + 1]
    
    @property
    def connector_lines(self) -> tuple[str, ...]:
        """Tail lines below the bottom border."""
        return self.lines[self.content_count + 2:]
    
    def render(self) -> str:
        """Render to text with one line per row and a trailing newline."""
        return '\n'.join(self.lines) + '\n'
    
    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "style": self.style.value,
            "box_width": self.box_width,
            "content_count": self.content_count,
            "lines": list(self.lines),
        }
    
    def __str__(self) -> str:
        return '\n'.join(self.lines)
