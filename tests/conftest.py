# shared fixtures: a dummy http session so tests never hit the network

import json
from pathlib import Path
from urllib.parse import urlsplit

import pytest
import requests

from openweather import Client, with_base_url, with_http_client

BASE_URL = "http://testserver"
DATA_DIR = Path(__file__).parent / "data"


class DummySession:
    # stands in for requests.Session, records what was sent and replays canned answers
    def __init__(self):
        self.routes = {}
        self.sent = []
        self.timeouts = []

    def reply(self, path, status=200, body=""):
        self.routes[path] = (status, body)

    def send(self, request, timeout=None):
        self.sent.append(request)
        self.timeouts.append(timeout)
        path = urlsplit(request.url).path
        status, body = self.routes.get(path, (404, '{"message": "not found"}'))
        resp = requests.Response()
        resp.status_code = status
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def client(session):
    return Client("key123", with_base_url(BASE_URL), with_http_client(session))


@pytest.fixture
def location_payload():
    return json.loads((DATA_DIR / "location.json").read_text())
