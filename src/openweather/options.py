# construction options for Client, applied in order by Client.__init__
# each option either configures the client or raises ConfigurationError

from __future__ import annotations
from urllib.parse import urlsplit

import requests

from .client import Client, ConfigurationError, Opt
from .models import Units


def with_http_client(session: requests.Session) -> Opt:
    """Use ``session`` to send requests (proxies, adapters, mounted transports)."""
    def opt(client: Client) -> None:
        if session is None or not callable(getattr(session, "send", None)):
            raise ConfigurationError("requests.Session: cannot be None")
        client._session = session
    return opt


def with_user_agent(user_agent: str) -> Opt:
    def opt(client: Client) -> None:
        client.user_agent = user_agent
    return opt


def with_base_url(base_url: str) -> Opt:
    """Send requests to ``base_url`` instead of the public API host."""
    def opt(client: Client) -> None:
        try:
            parts = urlsplit(base_url)
        except ValueError as exc:
            raise ConfigurationError(f"invalid base URL {base_url!r}: {exc}") from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"invalid base URL {base_url!r}: expected http(s)://host")
        client.base_url = base_url
    return opt


def with_units(units: Units) -> Opt:
    def opt(client: Client) -> None:
        if not isinstance(units, Units):
            raise ConfigurationError(f"unknown unit system {units!r}")
        client.units = units
    return opt


use_metric_units = with_units(Units.METRIC)
use_imperial_units = with_units(Units.IMPERIAL)
