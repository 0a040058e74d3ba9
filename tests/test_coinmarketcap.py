import pytest
import requests

from cryptoticker.config import Settings
from cryptoticker.errors import DecodeError, NotFound, TransportFailure
from cryptoticker.factory import ProviderFactory
from cryptoticker.interfaces import CurrencyFetcher
from cryptoticker.providers.coinmarketcap import CoinMarketCapProvider, build_url

from conftest import FakeResponse

BASE_URL = "https://api.example.test/v1/ticker/"


@pytest.fixture
def fetch():
  return CoinMarketCapProvider(base_url=BASE_URL).get_fetcher(CurrencyFetcher)


def test_build_url_appends_asset_id():
  assert build_url(BASE_URL, "bitcoin") == BASE_URL + "bitcoin"
  assert build_url(BASE_URL.rstrip("/"), "bitcoin") == BASE_URL + "bitcoin"


def test_fetch_returns_first_element(fetch, fake_api):
  currency = fetch("bitcoin")
  assert currency.id == "bitcoin"
  assert currency.price_usd == "50000.0"
  assert fake_api.calls == [BASE_URL + "bitcoin"]


def test_non_success_status_is_not_found(fetch, fake_api):
  with pytest.raises(NotFound) as exc_info:
    fetch("unknowncoin123")
  assert exc_info.value.asset_id == "unknowncoin123"
  assert exc_info.value.status_code == 404


def test_connection_error_is_transport_failure(fetch, fake_api):
  fake_api.routes["bitcoin"] = requests.exceptions.ConnectionError("refused")
  with pytest.raises(TransportFailure) as exc_info:
    fetch("bitcoin")
  assert exc_info.value.asset_id == "bitcoin"
  assert len(fake_api.calls) == 1


@pytest.mark.parametrize(
  "response",
  [
    FakeResponse(200, text="<html>maintenance</html>"),
    FakeResponse(200, []),
    FakeResponse(200, {"id": "bitcoin"}),
    FakeResponse(200, [{"id": "bitcoin"}]),
  ],
  ids=["not-json", "empty-array", "not-an-array", "invalid-record"],
)
def test_bad_bodies_are_decode_errors(fetch, fake_api, response):
  fake_api.routes["bitcoin"] = response
  with pytest.raises(DecodeError):
    fetch("bitcoin")


def test_provider_rejects_unknown_capability():
  provider = CoinMarketCapProvider()
  assert provider.supports(CurrencyFetcher)
  with pytest.raises(TypeError):
    provider.get_fetcher(object)


def test_factory_uses_settings(fake_api):
  settings = Settings(api_url="https://mirror.example.test/ticker")
  provider = ProviderFactory(settings).create("coinmarketcap")
  provider.get_fetcher(CurrencyFetcher)("bitcoin")
  assert fake_api.calls == ["https://mirror.example.test/ticker/bitcoin"]


def test_factory_rejects_unknown_provider():
  with pytest.raises(ValueError, match="not found"):
    ProviderFactory().create("coingecko")


def test_sends_plain_user_agent(fetch, monkeypatch, bitcoin_payload):
  seen = {}

  def fake_get(url, timeout=None, headers=None):
    seen.update(headers)
    return FakeResponse(200, [bitcoin_payload])

  monkeypatch.setattr(requests, "get", fake_get)
  fetch("bitcoin")
  assert seen["User-Agent"] == "cryptoticker/0.2.0"
