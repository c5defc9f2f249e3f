"""
services/reply_sink.py
----------------------
Delivers handler replies to Telegram.
"""

from typing import Protocol

from telegram import Bot

from models.reply import Reply


class ReplySink(Protocol):
    """Anything that can deliver a Reply to a chat."""

    async def send(self, chat_id: int, reply: Reply) -> None:
        ...


class TelegramReplySink:
    """ReplySink backed by a python-telegram-bot ``Bot``."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send(self, chat_id: int, reply: Reply) -> None:
        """
        Send one reply.

        Raises:
            telegram.error.TelegramError: If Telegram rejects or drops the request.
        """
        if reply.dice:
            await self.bot.send_dice(chat_id=chat_id)
        else:
            await self.bot.send_message(chat_id=chat_id, text=reply.text)
