"""
main.py
-------
Entry point for the Titanio Telegram bot.

Responsibilities:
    - Build the shared ApiService (one HTTP client for the whole process).
    - Configure and start the Telegram bot with the command dispatcher.
    - Close the HTTP client on shutdown.
"""

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    ContextTypes,
    MessageHandler,
    TypeHandler,
)

from config import (
    CURRENCY_API_URL,
    EXCHANGERATE_TOKEN,
    HTTP_TIMEOUT_SECONDS,
    JOKE_API_URL,
    TELEGRAM_BOT_TOKEN,
    WEATHER_API_URL,
)
from dispatcher import COMMAND_TEXT, DISPATCHER_KEY, CommandDispatcher, handle_command_update
from models.command import COMMAND_TYPES
from services.api_service import ApiService
from services.reply_sink import TelegramReplySink
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register the bot commands menu in Telegram."""
    commands = [BotCommand(cmd.name, cmd.description) for cmd in COMMAND_TYPES]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def on_startup(application: Application) -> None:
    """Verify the token, wire the dispatcher and register the menu."""
    me = await application.bot.get_me()
    logger.info(f"Bot initialized as @{me.username or '<unknown>'}")

    api_service = ApiService(
        EXCHANGERATE_TOKEN,
        weather_url=WEATHER_API_URL,
        joke_url=JOKE_API_URL,
        currency_url=CURRENCY_API_URL,
        timeout=HTTP_TIMEOUT_SECONDS,
    )
    if not api_service.has_currency_token:
        logger.warning("EXCHANGERATE_TOKEN not set, /currency will report it as unavailable.")

    application.bot_data[DISPATCHER_KEY] = CommandDispatcher(
        api_service, TelegramReplySink(application.bot)
    )
    await set_bot_commands(application)


async def on_shutdown(application: Application) -> None:
    """Release the shared HTTP client."""
    dispatcher = application.bot_data.get(DISPATCHER_KEY)
    if dispatcher is not None:
        await dispatcher.api.aclose()


async def log_unhandled_update(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Catch-all for updates no other handler took."""
    logger.warning(f"Unhandled update: {update}")


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log failures that escaped a handler, e.g. a reply that could not be sent."""
    logger.error(f"Error in dispatcher while handling {update}", exc_info=context.error)


def build_application(token: str) -> Application:
    """Create the Telegram application with all handlers registered."""
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(True)
        .post_init(on_startup)
        .post_shutdown(on_shutdown)
        .build()
    )

    app.add_handler(MessageHandler(COMMAND_TEXT, handle_command_update))
    # Same group: only runs when no command handler matched.
    app.add_handler(TypeHandler(Update, log_unhandled_update))
    app.add_error_handler(log_error)
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set in .env")
        raise SystemExit(1)

    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN)

    logger.info("🚀 Titanio is running! Press Ctrl+C to stop.")
    app.run_polling(allowed_updates=Update.ALL_TYPES)
    logger.info("Titanio stopped.")


if __name__ == "__main__":
    main()
