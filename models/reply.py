"""
models/reply.py
---------------
The outbound message a command handler produces.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reply:
    """
    One outbound message for the originating chat.

    Attributes:
        text: Plain text to send. Ignored for dice replies.
        dice: Send the platform's animated dice instead of text.
    """
    text: str = ""
    dice: bool = False

    @classmethod
    def with_text(cls, text: str) -> "Reply":
        return cls(text=text)

    @classmethod
    def roll_dice(cls) -> "Reply":
        return cls(dice=True)
