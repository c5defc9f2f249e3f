"""
dispatcher.py
-------------
Routes a parsed Command to its handler and delivers the reply.

Every Command type maps to exactly one handler; a missing route is a
startup error, not a runtime fallthrough. Unknown command names never
reach the dispatcher (see handlers/fallback_handler.py).
"""

from typing import Awaitable, Callable, Dict, Type

from telegram import Message, Update
from telegram.ext import ContextTypes, filters

from handlers.fallback_handler import unrecognized_command
from handlers.fun_handler import handle_joke, handle_roll
from handlers.info_handler import handle_about, handle_help, handle_id, handle_time
from handlers.system_handler import handle_ping, handle_start
from handlers.utility_handler import handle_currency, handle_echo, handle_weather
from middleware.execution_log import track_execution
from models.command import (
    COMMAND_TYPES,
    About,
    Command,
    Currency,
    Echo,
    Help,
    Id,
    Joke,
    Ping,
    Roll,
    Start,
    Time,
    Weather,
    is_addressed_to,
    is_command_text,
    parse_command,
)
from models.execution import ExecutionContext
from models.reply import Reply
from services.api_service import ApiService
from services.reply_sink import ReplySink
from utils.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[Command, ExecutionContext, ApiService], Awaitable[Reply]]

DISPATCHER_KEY = "dispatcher"

ROUTES: Dict[Type[Command], Handler] = {
    Start: handle_start,
    Ping: handle_ping,
    Help: handle_help,
    About: handle_about,
    Id: handle_id,
    Time: handle_time,
    Echo: handle_echo,
    Weather: handle_weather,
    Currency: handle_currency,
    Roll: handle_roll,
    Joke: handle_joke,
}


class CommandDispatcher:
    """Shared by all in-flight updates; holds only read-only collaborators."""

    def __init__(self, api: ApiService, sink: ReplySink, routes: Dict[Type[Command], Handler] = ROUTES):
        missing = [cmd.__name__ for cmd in COMMAND_TYPES if cmd not in routes]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")
        self.api = api
        self.sink = sink
        self._routes = dict(routes)

    @track_execution
    async def dispatch(self, command: Command, context: ExecutionContext) -> None:
        """
        Run the command's handler once and send its reply.

        Raises:
            Whatever the reply sink raises when delivery fails. Upstream
            API failures are already turned into replies by the handlers.
        """
        handler = self._routes[type(command)]
        reply = await handler(command, context, self.api)
        await self.sink.send(context.chat_id, reply)


class CommandTextFilter(filters.MessageFilter):
    """
    Matches any text starting with the command prefix.

    Unlike ``filters.COMMAND`` it does not need a ``bot_command`` entity,
    which Telegram omits for names like ``/привет`` or a bare ``/``.
    """

    def filter(self, message: Message) -> bool:
        return is_command_text(message.text)


COMMAND_TEXT = CommandTextFilter(name="COMMAND_TEXT")


async def handle_command_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Telegram entry point for every ``/command`` message.

    Known commands go through the CommandDispatcher stored in
    ``bot_data``; anything else gets the fallback reply. Commands
    addressed to another bot (``/help@other_bot``) are ignored.
    """
    message = update.effective_message
    if message is None or not message.text:
        return

    if not is_addressed_to(message.text, context.bot.username):
        logger.debug(f"Ignoring command for another bot in chat {update.effective_chat.id}")
        return

    command = parse_command(message.text)
    if command is None:
        await unrecognized_command(update, context)
        return

    dispatcher: CommandDispatcher = context.bot_data[DISPATCHER_KEY]
    await dispatcher.dispatch(command, ExecutionContext.from_update(update))
