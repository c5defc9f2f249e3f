"""
handlers/utility_handler.py
---------------------------
Handles /echo, /weather and /currency.
Upstream calls are delegated to ApiService; every ServiceError is
turned into a reply here, so these handlers never fail a dispatch.
"""

from handlers.error_replies import describe_service_error
from models.command import Currency, Echo, Weather
from models.execution import ExecutionContext
from models.reply import Reply
from models.requests import CurrencyRequest, InvalidArgumentsError
from services.api_service import ApiService
from services.errors import ServiceError
from utils.logger import get_logger

logger = get_logger(__name__)

ECHO_USAGE = "Usage: /echo <text>"
WEATHER_USAGE = "⚠️ Please enter a valid city name.\nExample: /weather London"
CURRENCY_USAGE = "Usage: /currency <amount> <from> <to>\nExample: /currency 100 USD EUR"


async def handle_echo(command: Echo, context: ExecutionContext, api: ApiService) -> Reply:
    """Handle /echo - repeat the text after the command."""
    if not command.text.strip():
        return Reply.with_text(ECHO_USAGE)
    return Reply.with_text(f"You said: {command.text}")


async def handle_weather(command: Weather, context: ExecutionContext, api: ApiService) -> Reply:
    """
    Handle /weather - current conditions for a city.

    Usage:
        /weather London
        /weather New York
    """
    city = command.city.strip()
    if not city:
        return Reply.with_text(WEATHER_USAGE)

    try:
        snapshot = await api.get_weather(city)
    except ServiceError as e:
        logger.error(f"Weather lookup failed for chat {context.chat_id}: {e}")
        return Reply.with_text(describe_service_error(e, "weather"))

    return Reply.with_text(
        f"🌤️ Weather in {snapshot.city}: {snapshot.temperature_c}°C, {snapshot.description}"
    )


async def handle_currency(command: Currency, context: ExecutionContext, api: ApiService) -> Reply:
    """
    Handle /currency - convert an amount between two currencies.

    Usage:
        /currency 100 USD EUR
    """
    try:
        request = CurrencyRequest.parse(command.raw_args)
    except InvalidArgumentsError as e:
        logger.info(f"Rejected /currency arguments {command.raw_args!r}: {e}")
        return Reply.with_text(CURRENCY_USAGE)

    try:
        result = await api.convert_currency(request.amount, request.from_code, request.to_code)
    except ServiceError as e:
        logger.error(f"Currency conversion failed ({request}): {e}")
        return Reply.with_text(describe_service_error(e, "currency"))

    return Reply.with_text(
        f"🔄 {format(request.amount, 'f')} {request.from_code} = {result} {request.to_code}"
    )
