"""
handlers/fallback_handler.py
----------------------------
Handles command-like text that matches no known command.
This path bypasses the dispatcher and its execution logging.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

UNRECOGNIZED_TEXT = "🤖 I didn't recognize that command. Type /help to see what I can do!"


async def unrecognized_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Reply with a fixed hint pointing at /help."""
    logger.debug(f"Unrecognized command text in chat {update.effective_chat.id}")
    await update.effective_message.reply_text(UNRECOGNIZED_TEXT)
