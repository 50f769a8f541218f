# api operations grouped by endpoint family, built on Client's request primitives

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Tuple

import requests

from .models import Location

if TYPE_CHECKING:
    from .client import Client

CURRENT_WEATHER_PATH = "data/2.5/weather"


class CurrentWeatherService:
    """Current weather data endpoints.

    API docs: https://openweathermap.org/current
    """

    def __init__(self, client: "Client"):
        self._client = client

    def by_city(self, name: str, timeout: Optional[float] = None) -> Tuple[Location, requests.Response]:
        # single city path: build -> send -> decode
        req = self._client.new_request("GET", CURRENT_WEATHER_PATH, params={"q": name})
        location, resp = self._client.do(req, Location, timeout=timeout)
        return location, resp
