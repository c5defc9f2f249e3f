"""
handlers/system_handler.py
--------------------------
Handles /start and /ping.
"""

from models.command import Ping, Start
from models.execution import ExecutionContext
from models.reply import Reply
from services.api_service import ApiService

WELCOME_TEXT = "Welcome! I'm Titanio, your helpful bot 🤖!"
PONG_TEXT = "🏓 Pong! The bot is alive!"


async def handle_start(command: Start, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /start - greet the user."""
    return Reply.with_text(WELCOME_TEXT)


async def handle_ping(command: Ping, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /ping - liveness check."""
    return Reply.with_text(PONG_TEXT)
