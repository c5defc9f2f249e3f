"""
services/api_service.py
-----------------------
Outbound HTTP calls to the three upstream APIs (weather, jokes, currency).

One ApiService owns one httpx.AsyncClient for the lifetime of the process
and is shared by every handler. It holds no mutable state after
construction, so concurrent dispatches can use it freely.

Failures are raised as ``services.errors.ServiceError`` subclasses.
Nothing here retries: each command is a single best-effort attempt.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, Optional, TypeVar
from urllib.parse import quote

import httpx

from models.upstream import (
    ExchangeRateResponse,
    WeatherResponse,
    WeatherSnapshot,
    parse_joke,
)
from services.errors import (
    MissingCredentialError,
    MissingFieldError,
    NetworkError,
    NotFoundError,
    ParseError,
    UnexpectedStatusError,
    UpstreamError,
)
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

CURRENCY_TOKEN_NAME = "EXCHANGERATE_TOKEN"


class ApiService:
    """Shared HTTP client and API credentials container."""

    def __init__(
        self,
        exchange_token: Optional[str] = None,
        *,
        weather_url: str = "https://wttr.in",
        joke_url: str = "https://v2.jokeapi.dev",
        currency_url: str = "https://api.exchangerate.host",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            exchange_token: exchangerate.host access key. Empty or None
                makes every conversion fail with MissingCredentialError.
            weather_url: Base URL of wttr.in.
            joke_url: Base URL of JokeAPI.
            currency_url: Base URL of exchangerate.host.
            timeout: Per-call timeout in seconds.
            client: Pre-built client, mainly for tests. Created when omitted.
        """
        self._exchange_token = exchange_token or None
        self._weather_url = weather_url.rstrip("/")
        self._joke_url = joke_url.rstrip("/")
        self._currency_url = currency_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def has_currency_token(self) -> bool:
        return self._exchange_token is not None

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
        logger.info("API service HTTP client closed.")

    # ── Primitives ────────────────────────────────────────

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """Issue a GET; transport failures become NetworkError."""
        try:
            return await self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(url, e) from e

    @staticmethod
    def _decode(response: httpx.Response, url: str, parser: Callable[[Any], T]) -> T:
        """Deserialize a JSON body; any shape mismatch becomes ParseError."""
        try:
            return parser(response.json())
        except ValueError as e:
            raise ParseError(url, e) from e

    async def fetch_json(
        self,
        url: str,
        parser: Callable[[Any], T],
        params: Optional[Dict[str, Any]] = None,
    ) -> T:
        """
        GET ``url`` and parse its JSON body.

        Args:
            url: Endpoint URL. Keep credentials in ``params`` so they never
                end up in error messages.
            parser: Turns decoded JSON into the expected type, raising
                ValueError (pydantic's ValidationError included) on mismatch.
            params: Query parameters.

        Raises:
            NetworkError: Connect, timeout or DNS failure.
            ParseError: Body is not JSON or does not fit ``parser``.
        """
        response = await self._get(url, params)
        return self._decode(response, url, parser)

    # ── Domain operations ─────────────────────────────────

    async def get_weather(self, city: str) -> WeatherSnapshot:
        """
        Current weather for ``city`` from wttr.in.

        Raises:
            NotFoundError: wttr.in answered 404 for the city.
            UnexpectedStatusError: Any other non-success status.
            NetworkError, ParseError, MissingFieldError
        """
        url = f"{self._weather_url}/{quote(city, safe='')}"
        response = await self._get(url, {"format": "j1"})

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError("City", city)
        if not response.is_success:
            raise UnexpectedStatusError(url, response.status_code)

        data = self._decode(response, url, WeatherResponse.model_validate)
        if not data.current_condition:
            raise MissingFieldError("current_condition", url)

        current = data.current_condition[0]
        description = current.weather_desc[0].value if current.weather_desc else "unknown"
        return WeatherSnapshot(city=city, temperature_c=current.temp_c, description=description)

    async def get_joke(self) -> str:
        """
        A random safe-mode joke from JokeAPI.

        Two-part jokes are joined with the setup and delivery on separate lines.

        Raises:
            NetworkError, ParseError
        """
        # "safe-mode" is a bare flag, so the query string is kept literal.
        url = f"{self._joke_url}/joke/Any?safe-mode&type=single,twopart"
        joke = await self.fetch_json(url, parse_joke)
        return joke.text()

    async def convert_currency(self, amount: Decimal, from_code: str, to_code: str) -> float:
        """
        Convert ``amount`` between two currencies via exchangerate.host.

        Raises:
            MissingCredentialError: No access key configured. No request is made.
            UpstreamError: The API reported ``success: false``.
            MissingFieldError: ``success: true`` without a ``result``.
            NetworkError, ParseError
        """
        if self._exchange_token is None:
            raise MissingCredentialError(CURRENCY_TOKEN_NAME)

        url = f"{self._currency_url}/convert"
        params = {
            "access_key": self._exchange_token,
            "from": from_code.upper(),
            "to": to_code.upper(),
            "amount": format(amount, "f"),
        }
        data = await self.fetch_json(url, ExchangeRateResponse.model_validate, params)

        if not data.success:
            error = data.error
            raise UpstreamError(
                url,
                error.info if error else None,
                error.code if error else None,
            )
        if data.result is None:
            raise MissingFieldError("result", url)
        return data.result
