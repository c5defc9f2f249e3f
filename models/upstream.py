"""
models/upstream.py
------------------
Response shapes of the three third-party APIs, plus the domain values
ApiService builds from them.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError


# ── wttr.in ───────────────────────────────────────────────

class WeatherDescription(BaseModel):
    """Weather description, e.g. "Sunny", "Light rain"."""
    value: str


class CurrentCondition(BaseModel):
    """A single snapshot of current weather."""
    temp_c: str = Field(alias="temp_C")
    weather_desc: List[WeatherDescription] = Field(default_factory=list, alias="weatherDesc")


class WeatherResponse(BaseModel):
    """Top-level payload of ``GET /{city}?format=j1``."""
    current_condition: List[CurrentCondition]


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current weather for one city.

    Attributes:
        city: The city as the user typed it.
        temperature_c: Temperature in Celsius, verbatim from the upstream.
        description: Condition text, or "unknown" when the upstream sent none.
    """
    city: str
    temperature_c: str
    description: str


# ── JokeAPI ───────────────────────────────────────────────

class SingleJoke(BaseModel):
    """A single-line joke."""
    joke: str

    def text(self) -> str:
        return self.joke


class TwoPartJoke(BaseModel):
    """A setup + delivery style joke."""
    setup: str
    delivery: str

    def text(self) -> str:
        return f"{self.setup}\n{self.delivery}"


Joke = Union[SingleJoke, TwoPartJoke]

# Shapes tried in order; JokeAPI sends no discriminant field.
_JOKE_SHAPES = (SingleJoke, TwoPartJoke)


def parse_joke(payload: Any) -> Joke:
    """
    Resolve a JokeAPI payload into one of the known joke shapes.

    Raises:
        ValueError: If the payload matches none of them.
    """
    failures = []
    for shape in _JOKE_SHAPES:
        try:
            return shape.model_validate(payload)
        except ValidationError as e:
            failures.append(f"{shape.__name__}: {e.error_count()} validation error(s)")
    raise ValueError("payload matches no joke shape (" + "; ".join(failures) + ")")


# ── exchangerate.host ─────────────────────────────────────

class ExchangeRateErrorInfo(BaseModel):
    """Error details returned by exchangerate.host."""
    code: Optional[int] = None
    info: Optional[str] = None


class ExchangeRateResponse(BaseModel):
    """JSON payload of ``GET /convert``."""
    success: bool
    result: Optional[float] = None
    error: Optional[ExchangeRateErrorInfo] = None
