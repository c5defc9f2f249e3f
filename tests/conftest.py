import httpx
import pytest

from models.execution import ExecutionContext
from services.api_service import ApiService

WEATHER_URL = "https://weather.test"
JOKE_URL = "https://jokes.test"
CURRENCY_URL = "https://currency.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


class FakeSink:
    """ReplySink that stores replies instead of sending them."""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send(self, chat_id, reply):
        if self.error is not None:
            raise self.error
        self.sent.append((chat_id, reply))


@pytest.fixture
def make_api():
    """Build an ApiService whose HTTP calls are answered by ``handler``."""
    def factory(handler, token="test-token"):
        transport = RecordingTransport(handler)
        api = ApiService(
            token,
            weather_url=WEATHER_URL,
            joke_url=JOKE_URL,
            currency_url=CURRENCY_URL,
            client=httpx.AsyncClient(transport=transport),
        )
        return api, transport
    return factory


@pytest.fixture
def exec_context():
    return ExecutionContext(chat_id=42, user_id=7, username="alice")
