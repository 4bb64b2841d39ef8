"""Exceptions raised by bubble-say."""


class BubbleError(Exception):
    """Base class for bubble-say errors."""


class InvalidConfiguration(BubbleError, ValueError):
    """Raised when a renderer is given an unusable setting such as a too-small width."""
