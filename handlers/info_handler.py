"""
handlers/info_handler.py
------------------------
Handles /help, /about, /id and /time.
"""

from datetime import datetime, timezone

from models.command import About, Help, Id, Time, help_text
from models.execution import ExecutionContext
from models.reply import Reply
from services.api_service import ApiService

ABOUT_TEXT = "I'm Titanio 🤖, a Telegram bot built with 💖 and python-telegram-bot!"


async def handle_help(command: Help, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /help - list every command with its description."""
    return Reply.with_text(help_text())


async def handle_about(command: About, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /about."""
    return Reply.with_text(ABOUT_TEXT)


async def handle_id(command: Id, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /id - show the sender's user ID and the chat ID."""
    if context.user_id is None:
        return Reply.with_text(
            f"❓ Could not determine your user ID.\n💬 Chat ID: {context.chat_id}"
        )
    return Reply.with_text(f"👤 Your user ID: {context.user_id}\n💬 Chat ID: {context.chat_id}")


async def handle_time(command: Time, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /time - current UTC time."""
    now = datetime.now(timezone.utc)
    return Reply.with_text(f"Current UTC time: 🕒 {now:%Y-%m-%d %H:%M:%S}")
