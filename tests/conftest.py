"""Pytest configuration and fixtures."""

import json

import pytest
import requests

from cryptoticker.models import Currency

BITCOIN_PAYLOAD = {
  "id": "bitcoin",
  "name": "Bitcoin",
  "symbol": "BTC",
  "rank": "1",
  "price_usd": "50000.0",
  "price_btc": "1.0",
  "24h_volume_usd": "28000000000.0",
  "market_cap_usd": "950000000000.0",
  "available_supply": "19000000.0",
  "total_supply": "19000000.0",
  "percent_change_1h": "0.12",
  "percent_change_24h": "-1.5",
  "percent_change_7d": "4.2",
  "last_updated": "1700000000",
}


class FakeResponse:
  def __init__(self, status_code=200, body=None, text=None):
    self.status_code = status_code
    self.text = text if text is not None else json.dumps(body)

  @property
  def ok(self):
    return 200 <= self.status_code < 400

  def json(self):
    return json.loads(self.text)


class FakeApi:
  """Stands in for requests.get; records every URL it was asked for."""

  def __init__(self, routes=None):
    self.routes = routes or {}
    self.calls = []

  def __call__(self, url, timeout=None, headers=None):
    self.calls.append(url)
    asset_id = url.rstrip("/").rsplit("/", 1)[-1]
    route = self.routes.get(asset_id)
    if route is None:
      return FakeResponse(404, {"error": "id not found"})
    if isinstance(route, Exception):
      raise route
    if isinstance(route, FakeResponse):
      return route
    return FakeResponse(200, route)


@pytest.fixture
def bitcoin_payload():
  return dict(BITCOIN_PAYLOAD)


@pytest.fixture
def bitcoin(bitcoin_payload):
  return Currency.model_validate(bitcoin_payload)


@pytest.fixture
def fake_api(monkeypatch, bitcoin_payload):
  api = FakeApi({"bitcoin": [bitcoin_payload]})
  monkeypatch.setattr(requests, "get", api)
  return api


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
  """Keeps real environment settings and .env files out of the tests."""
  for var in ("CRYPTOTICKER_API_URL", "CRYPTOTICKER_CACHE_DIR", "CRYPTOTICKER_TIMEOUT"):
    monkeypatch.delenv(var, raising=False)
  monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg"))
  monkeypatch.chdir(tmp_path)
