"""
handlers/fun_handler.py
-----------------------
Handles /roll and /joke.
"""

from handlers.error_replies import describe_service_error
from models.command import Joke, Roll
from models.execution import ExecutionContext
from models.reply import Reply
from services.api_service import ApiService
from services.errors import ServiceError
from utils.logger import get_logger

logger = get_logger(__name__)


async def handle_roll(command: Roll, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /roll - send Telegram's animated dice 🎲."""
    return Reply.roll_dice()


async def handle_joke(command: Joke, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /joke - a random safe-mode joke."""
    try:
        joke = await api.get_joke()
    except ServiceError as e:
        logger.error(f"Joke fetch failed for chat {context.chat_id}: {e}")
        return Reply.with_text(describe_service_error(e, "joke"))
    return Reply.with_text(joke)
