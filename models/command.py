"""
models/command.py
-----------------
The closed set of bot commands and the parser that produces them.

Each command is an immutable dataclass. Commands that take an argument
hold the verbatim text that followed the command token; nothing is parsed
further at this layer.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Type


@dataclass(frozen=True)
class Command:
    """Base class of every supported command."""
    name: ClassVar[str]
    description: ClassVar[str]


@dataclass(frozen=True)
class Start(Command):
    name = "start"
    description = "Start the bot."


@dataclass(frozen=True)
class Ping(Command):
    name = "ping"
    description = "Check if the bot is alive."


@dataclass(frozen=True)
class Help(Command):
    name = "help"
    description = "Display this help message."


@dataclass(frozen=True)
class About(Command):
    name = "about"
    description = "Show bot information."


@dataclass(frozen=True)
class Id(Command):
    name = "id"
    description = "Show your user ID and chat ID."


@dataclass(frozen=True)
class Time(Command):
    name = "time"
    description = "Show the current UTC time."


@dataclass(frozen=True)
class Echo(Command):
    name = "echo"
    description = "Echo a message."
    text: str = ""


@dataclass(frozen=True)
class Weather(Command):
    name = "weather"
    description = "Check weather in a city."
    city: str = ""


@dataclass(frozen=True)
class Currency(Command):
    name = "currency"
    description = "Convert currency (e.g. '100 USD EUR')."
    raw_args: str = ""


@dataclass(frozen=True)
class Roll(Command):
    name = "roll"
    description = "Roll a dice."


@dataclass(frozen=True)
class Joke(Command):
    name = "joke"
    description = "Tell a random joke."


# Display order for /help and the bot menu.
COMMAND_TYPES: Tuple[Type[Command], ...] = (
    Start, Ping, Help, About, Id, Time, Echo, Weather, Currency, Roll, Joke,
)

_BY_NAME: Dict[str, Type[Command]] = {cmd.name: cmd for cmd in COMMAND_TYPES}

# Commands whose single field receives the argument text.
_ARGUMENT_FIELD: Dict[Type[Command], str] = {
    Echo: "text",
    Weather: "city",
    Currency: "raw_args",
}

_COMMAND_RE = re.compile(
    r"/(?P<name>[^\s@]+)(?:@(?P<mention>\S*))?(?:\s+(?P<args>.*))?\Z", re.DOTALL
)


def is_command_text(text: Optional[str]) -> bool:
    """True if the text starts with the command prefix."""
    return bool(text) and text.startswith("/")


def is_addressed_to(text: str, bot_username: Optional[str]) -> bool:
    """
    False when the command names another bot (``/help@other_bot``).

    Commands without a ``@botname`` suffix are addressed to every bot.
    """
    match = _COMMAND_RE.match(text or "")
    mention = match.group("mention") if match else None
    if not mention:
        return True
    return mention.lower() == (bot_username or "").lower()


def parse_command(text: str) -> Optional[Command]:
    """
    Parse ``/name [args]`` into a Command.

    The name is matched case-insensitively and may carry a ``@botname``
    suffix. Everything after the first whitespace run is passed verbatim
    to commands that take an argument; other commands ignore it.

    Returns:
        The matching Command, or None when the text is not a known command.
    """
    match = _COMMAND_RE.match(text or "")
    if not match:
        return None

    command_type = _BY_NAME.get(match.group("name").lower())
    if command_type is None:
        return None

    field_name = _ARGUMENT_FIELD.get(command_type)
    if field_name is None:
        return command_type()
    return command_type(**{field_name: match.group("args") or ""})


def help_text() -> str:
    """Render the list of available commands."""
    lines = ["Available commands:"]
    lines.extend(f"/{cmd.name} - {cmd.description}" for cmd in COMMAND_TYPES)
    return "\n".join(lines)
