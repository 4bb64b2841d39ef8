"""Display width approximation for terminal columns."""

import unicodedata


def char_width(char: str, east_asian: bool = False) -> int:
    """
    Get the number of terminal columns a single character occupies.
    
    By default every code point is one column. With ``east_asian`` set,
    wide and fullwidth characters count as two columns and combining
    marks as zero.
    """
    if not east_asian:
        return 1
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str, east_asian: bool = False) -> int:
    """Get the number of terminal columns a string occupies."""
    if not east_asian:
        return len(text)
    return sum(char_width(char, east_asian=True) for char in text)


def pad_to(text: str, width: int, east_asian: bool = False) -> str:
    """Right-pad text with spaces to the given display width."""
    return text + ' ' * max(0, width - display_width(text, east_asian))
