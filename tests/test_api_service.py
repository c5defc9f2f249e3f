from decimal import Decimal

import httpx
import pytest

from conftest import CURRENCY_URL, JOKE_URL
from services.errors import (
    MissingCredentialError,
    MissingFieldError,
    NetworkError,
    NotFoundError,
    ParseError,
    UnexpectedStatusError,
    UpstreamError,
)

WEATHER_PAYLOAD = {
    "current_condition": [
        {"temp_C": "18", "weatherDesc": [{"value": "Partly cloudy"}]},
    ],
}


# ── fetch_json ────────────────────────────────────────────

@pytest.mark.asyncio
async def test_fetch_json_maps_transport_failure_to_network_error(make_api):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api, _ = make_api(handler)
    with pytest.raises(NetworkError) as exc_info:
        await api.fetch_json(f"{JOKE_URL}/joke/Any", dict)

    assert exc_info.value.url == f"{JOKE_URL}/joke/Any"
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_json_maps_timeout_to_network_error(make_api):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    api, _ = make_api(handler)
    with pytest.raises(NetworkError):
        await api.fetch_json(f"{JOKE_URL}/joke/Any", dict)


@pytest.mark.asyncio
async def test_fetch_json_maps_non_json_body_to_parse_error(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(ParseError) as exc_info:
        await api.fetch_json(f"{JOKE_URL}/joke/Any", dict)
    assert exc_info.value.url == f"{JOKE_URL}/joke/Any"


# ── get_weather ───────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_weather_success(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json=WEATHER_PAYLOAD))

    snapshot = await api.get_weather("London")

    assert snapshot.city == "London"
    assert snapshot.temperature_c == "18"
    assert snapshot.description == "Partly cloudy"
    request = transport.requests[0]
    assert request.url.path == "/London"
    assert request.url.params["format"] == "j1"


@pytest.mark.asyncio
async def test_get_weather_encodes_city_into_path(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json=WEATHER_PAYLOAD))

    await api.get_weather("New York/Queens")

    assert transport.requests[0].url.raw_path.startswith(b"/New%20York%2FQueens")


@pytest.mark.asyncio
async def test_get_weather_404_is_not_found_without_parsing(make_api):
    # Body is deliberately not JSON: a parse attempt would raise ParseError.
    api, _ = make_api(lambda request: httpx.Response(404, text="Unknown location"))

    with pytest.raises(NotFoundError) as exc_info:
        await api.get_weather("Atlantis")

    assert exc_info.value.resource == "City"
    assert exc_info.value.identifier == "Atlantis"


@pytest.mark.asyncio
async def test_get_weather_other_status_is_unexpected(make_api):
    api, _ = make_api(lambda request: httpx.Response(503, text="busy"))

    with pytest.raises(UnexpectedStatusError) as exc_info:
        await api.get_weather("London")
    assert exc_info.value.status == 503


@pytest.mark.asyncio
async def test_get_weather_empty_description_becomes_unknown(make_api):
    payload = {"current_condition": [{"temp_C": "-3", "weatherDesc": []}]}
    api, _ = make_api(lambda request: httpx.Response(200, json=payload))

    snapshot = await api.get_weather("Oslo")

    assert snapshot.temperature_c == "-3"
    assert snapshot.description == "unknown"


@pytest.mark.asyncio
async def test_get_weather_without_conditions_is_missing_field(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, json={"current_condition": []}))

    with pytest.raises(MissingFieldError) as exc_info:
        await api.get_weather("Oslo")
    assert exc_info.value.field == "current_condition"


@pytest.mark.asyncio
async def test_get_weather_wrong_shape_is_parse_error(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, json={"weather": "nice"}))

    with pytest.raises(ParseError):
        await api.get_weather("Oslo")


# ── get_joke ──────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_joke_single_is_returned_unchanged(make_api):
    joke = "I would tell a UDP joke, but you might not get it."
    api, transport = make_api(lambda request: httpx.Response(200, json={"type": "single", "joke": joke}))

    assert await api.get_joke() == joke
    url = transport.requests[0].url
    assert url.path == "/joke/Any"
    assert "safe-mode" in url.query.decode()
    assert url.params["type"] == "single,twopart"


@pytest.mark.asyncio
async def test_get_joke_two_part_is_joined_on_separate_lines(make_api):
    payload = {"type": "twopart", "setup": "Why?", "delivery": "Because."}
    api, _ = make_api(lambda request: httpx.Response(200, json=payload))

    assert await api.get_joke() == "Why?\nBecause."


@pytest.mark.asyncio
async def test_get_joke_unknown_shape_is_parse_error(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, json={"error": True, "message": "nope"}))

    with pytest.raises(ParseError):
        await api.get_joke()


# ── convert_currency ──────────────────────────────────────

@pytest.mark.asyncio
async def test_convert_currency_without_token_makes_no_request(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json={"success": True, "result": 1}), token=None)

    with pytest.raises(MissingCredentialError) as exc_info:
        await api.convert_currency(Decimal("100"), "USD", "EUR")

    assert exc_info.value.name == "EXCHANGERATE_TOKEN"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_convert_currency_empty_token_counts_as_missing(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json={}), token="")

    with pytest.raises(MissingCredentialError):
        await api.convert_currency(Decimal("1"), "USD", "EUR")
    assert transport.requests == []


@pytest.mark.asyncio
async def test_convert_currency_success_sends_expected_params(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json={"success": True, "result": 92.5}))

    result = await api.convert_currency(Decimal("100"), "usd", "eur")

    assert result == 92.5
    params = transport.requests[0].url.params
    assert transport.requests[0].url.path == "/convert"
    assert params["access_key"] == "test-token"
    assert params["from"] == "USD"
    assert params["to"] == "EUR"
    assert params["amount"] == "100"


@pytest.mark.asyncio
async def test_convert_currency_sends_amount_in_plain_notation(make_api):
    api, transport = make_api(lambda request: httpx.Response(200, json={"success": True, "result": 1.08}))

    await api.convert_currency(Decimal("1e2"), "USD", "EUR")
    await api.convert_currency(Decimal("0.0000001"), "USD", "EUR")

    assert [r.url.params["amount"] for r in transport.requests] == ["100", "0.0000001"]


@pytest.mark.asyncio
async def test_convert_currency_success_without_result_is_missing_field(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, json={"success": True}))

    with pytest.raises(MissingFieldError) as exc_info:
        await api.convert_currency(Decimal("100"), "USD", "EUR")
    assert exc_info.value.field == "result"


@pytest.mark.asyncio
async def test_convert_currency_failure_carries_upstream_message(make_api):
    payload = {
        "success": False,
        "error": {"code": 402, "info": "You have entered an invalid \"to\" property."},
    }
    api, _ = make_api(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(UpstreamError) as exc_info:
        await api.convert_currency(Decimal("100"), "USD", "XXX")

    assert exc_info.value.message == "You have entered an invalid \"to\" property."
    assert exc_info.value.code == 402


@pytest.mark.asyncio
async def test_convert_currency_failure_without_details_uses_placeholder(make_api):
    api, _ = make_api(lambda request: httpx.Response(200, json={"success": False}))

    with pytest.raises(UpstreamError) as exc_info:
        await api.convert_currency(Decimal("100"), "USD", "EUR")
    assert exc_info.value.message == UpstreamError.DEFAULT_MESSAGE


@pytest.mark.asyncio
async def test_convert_currency_errors_never_contain_the_token(make_api):
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    api, _ = make_api(handler)
    with pytest.raises(NetworkError) as exc_info:
        await api.convert_currency(Decimal("5"), "USD", "EUR")

    assert exc_info.value.url == f"{CURRENCY_URL}/convert"
    assert "test-token" not in str(exc_info.value)
