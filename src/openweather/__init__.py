"""
Client library for the OpenWeatherMap current weather API.

    from openweather import Client, use_metric_units

    client = Client.from_env(use_metric_units)
    location, _ = client.current.by_city("Montreal")
"""

__version__ = "0.1.0"

__all__ = [
    'Client', 'CurrentWeatherService', 'check_response',
    'OpenWeatherError', 'ConfigurationError', 'RequestError', 'ResponseDecodeError', 'ErrorResponse',
    'with_http_client', 'with_user_agent', 'with_base_url', 'with_units',
    'use_metric_units', 'use_imperial_units',
    'Units', 'Location', 'Coordinates', 'Weather', 'Condition', 'Wind', 'Clouds', 'Precipitation',
]

from .client import (
    Client,
    ConfigurationError,
    ErrorResponse,
    OpenWeatherError,
    RequestError,
    ResponseDecodeError,
    check_response,
)
from .models import Clouds, Condition, Coordinates, Location, Precipitation, Units, Weather, Wind
from .options import (
    use_imperial_units,
    use_metric_units,
    with_base_url,
    with_http_client,
    with_units,
    with_user_agent,
)
from .service import CurrentWeatherService
