"""
models/execution.py
-------------------
Per-dispatch context and the record logged when a dispatch ends.
"""

from dataclasses import dataclass
from typing import Optional

from telegram import Update

from models.command import Command

UNKNOWN = "unknown"


@dataclass(frozen=True)
class ExecutionContext:
    """
    Who sent a command and where to reply.

    Attributes:
        chat_id: Chat the reply goes to.
        user_id: Sender's Telegram ID, or None for anonymous senders
            (channel posts, anonymous group admins).
        username: Sender's @username, if they have one.
    """
    chat_id: int
    user_id: Optional[int] = None
    username: Optional[str] = None

    @classmethod
    def from_update(cls, update: Update) -> "ExecutionContext":
        """Snapshot the sender and chat of an inbound update."""
        user = update.effective_user
        return cls(
            chat_id=update.effective_chat.id,
            user_id=user.id if user else None,
            username=user.username if user else None,
        )


@dataclass(frozen=True)
class ExecutionRecord:
    """
    Outcome of one dispatch. Logged once, never stored.

    Attributes:
        context: Sender and chat of the command.
        command: The dispatched command.
        succeeded: Whether the reply was delivered.
        duration_ms: Wall time of the whole dispatch.
        error: Reply-send failure, when there was one.
    """
    context: ExecutionContext
    command: Command
    succeeded: bool
    duration_ms: float
    error: Optional[BaseException] = None

    def __str__(self) -> str:
        ctx = self.context
        user_id = ctx.user_id if ctx.user_id is not None else UNKNOWN
        username = ctx.username or UNKNOWN
        line = (
            f"Command: {self.command!r} | User: {user_id} (@{username}) | "
            f"Chat: {ctx.chat_id} | {self.duration_ms:.0f}ms"
        )
        if self.error is not None:
            line += f" | {type(self.error).__name__}: {self.error}"
        return line
