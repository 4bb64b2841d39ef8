"""Greedy word wrapping measured in display columns."""

from functools import partial
from typing import Callable

from bubble_say.core.width import display_width

Measure = Callable[[str], int]


def hard_break(word: str, max_width: int, measure: Measure = display_width) -> list[str]:
    """
    Split a word into chunks no wider than max_width.
    
    A single character wider than max_width still gets a chunk of its own.
    """
    chunks: list[str] = []
    current = ""
    
    for char in word:
        if current and measure(current + char) > max_width:
            chunks.append(current)
            current = char
        else:
            current += char
    
    if current:
        chunks.append(current)
    
    return chunks


def wrap(message: str, max_width: int, measure: Measure = display_width) -> list[str]:
    """
    Wrap a message into lines no wider than max_width.
    
    Words are split on any whitespace and rejoined with single spaces.
    Words wider than max_width are hard-broken at column boundaries.
    Always returns at least one line.
    """
    lines: list[str] = []
    current = ""
    
    for word in message.split():
        if measure(word) > max_width:
            if current:
                lines.append(current)
            lines.extend(hard_break(word, max_width, measure))
            current = ""
            continue
        
        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    
    if current or not lines:
        lines.append(current)
    
    return lines


def measure_for(east_asian: bool) -> Measure:
    """Get the width function for the chosen approximation."""
    return partial(display_width, east_asian=east_asian)
