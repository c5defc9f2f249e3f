"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── exchangerate.host ─────────────────────────────────────
# Empty means "not configured": every /currency reply reports it.
EXCHANGERATE_TOKEN: str = os.getenv("EXCHANGERATE_TOKEN", "")

# ── Upstream APIs ─────────────────────────────────────────
WEATHER_API_URL: str = os.getenv("WEATHER_API_URL", "https://wttr.in")
JOKE_API_URL: str = os.getenv("JOKE_API_URL", "https://v2.jokeapi.dev")
CURRENCY_API_URL: str = os.getenv("CURRENCY_API_URL", "https://api.exchangerate.host")

HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
