# OOP boundary for external i/o
# all http, auth and error mapping for the OpenWeatherMap API lives here,
# the service and models on top of it stay free of transport details

from __future__ import annotations
import json
import logging
import os
import re
from typing import Any, Callable, Optional, Tuple
from urllib.parse import urljoin, urlsplit

import requests

from . import __version__
from .models import Units
from .service import CurrentWeatherService

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_USER_AGENT = f"openweather-python/{__version__}"
API_KEY_ENV = "OPEN_WEATHER_API_KEY"

MEDIA_TYPE_JSON = "application/json"
PARAM_API_KEY = "appid"
PARAM_UNITS = "units"

# RFC 7230 token, anything else is not a valid request method
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class OpenWeatherError(RuntimeError):
    # root of every error raised by this package, transport errors excepted
    pass


class ConfigurationError(OpenWeatherError):
    pass


class RequestError(OpenWeatherError):
    pass


class ResponseDecodeError(OpenWeatherError):
    pass


class ErrorResponse(OpenWeatherError):
    """Reports a non-2xx answer from the API.

    Carries the response that caused it, so callers can still inspect the
    status code and headers, plus the server supplied ``message``.
    """

    def __init__(self, response: requests.Response, message: str = ""):
        self.response = response
        self.message = message
        request = response.request
        self.method = request.method if request is not None else ""
        self.url = request.url if request is not None else response.url
        self.status_code = response.status_code
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


Opt = Callable[["Client"], None]


class Client:
    # holds provider details like base URL, auth, units and the http session
    # everything is set once during __init__ and only read afterwards

    def __init__(self, api_key: str, *opts: Opt):
        self.base_url = DEFAULT_BASE_URL
        self.user_agent = DEFAULT_USER_AGENT
        self.units = Units.STANDARD
        self._api_key = api_key
        self._session: requests.Session = requests.Session()

        # first failing option aborts construction
        for opt in opts:
            opt(self)

        self.current = CurrentWeatherService(self)

    @classmethod
    def from_env(cls, *opts: Opt) -> "Client":
        api_key = os.environ.get(API_KEY_ENV)
        if api_key is None:
            raise ConfigurationError(
                f"{API_KEY_ENV} environment variable is not set: cannot initialize client"
            )
        return cls(api_key, *opts)

    @property
    def api_key(self) -> str:
        return self._api_key

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[dict] = None,
    ) -> requests.PreparedRequest:
        """Build an authenticated request for ``path``.

        ``path`` is resolved against the base URL and must be relative, without a
        leading slash. A non-None ``body`` is sent JSON encoded. The API key and the
        configured unit system are appended to the query string.
        """
        if not method or not _METHOD_RE.match(method):
            raise RequestError(f"invalid method {method!r}")

        target = urlsplit(path)
        if path.startswith("/") or target.scheme or target.netloc:
            raise RequestError(f"path must be relative to the base URL (got {path!r})")
        url = urljoin(self.base_url, path)

        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as exc:
                raise RequestError(f"cannot encode request body: {exc}") from exc

        query = list((params or {}).items())
        query.append((PARAM_API_KEY, self._api_key))
        if self.units is not Units.STANDARD:
            query.append((PARAM_UNITS, self.units.value))

        headers = {
            "User-Agent": self.user_agent,
            "Content-Type": MEDIA_TYPE_JSON,
            "Accept": MEDIA_TYPE_JSON,
        }

        try:
            return requests.Request(
                method.upper(), url, params=query, data=data, headers=headers
            ).prepare()
        except requests.RequestException as exc:
            # MissingSchema, InvalidURL and friends, all raised before any i/o
            raise RequestError(f"cannot build request for {path!r}: {exc}") from exc

    def do(
        self,
        request: requests.PreparedRequest,
        target: Any = None,
        timeout: Optional[float] = None,
    ) -> Tuple[Any, requests.Response]:
        """Send ``request`` and decode the answer into ``target``.

        ``target`` may be None (no decoding), a writable sink that receives the raw
        body, a model class exposing ``from_dict``, or any callable applied to the
        decoded JSON. Returns ``(result, response)``; non-2xx answers raise
        :class:`ErrorResponse`. Network failures propagate as ``requests`` errors.
        """
        log.debug("%s %s", request.method, urlsplit(request.url).path)
        resp = self._session.send(request, timeout=timeout)
        log.debug("%s %s -> %s", request.method, urlsplit(request.url).path, resp.status_code)

        check_response(resp)

        if target is None:
            return None, resp

        if hasattr(target, "write"):
            target.write(resp.content)
            return target, resp

        try:
            data = resp.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"Invalid JSON from {request.url}: {exc}") from exc

        decode = getattr(target, "from_dict", target)
        try:
            return decode(data), resp
        except (KeyError, TypeError, ValueError) as exc:
            raise ResponseDecodeError(f"Unexpected payload shape from {request.url}: {exc}") from exc


def check_response(resp: requests.Response) -> None:
    # anything outside 2xx is an api error, the body usually reads {"message": "..."}
    if 200 <= resp.status_code <= 299:
        return

    message = ""
    text = resp.text or ""
    if text:
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = str(payload.get("message", ""))
        else:
            message = text

    raise ErrorResponse(resp, message)
