from __future__ import annotations

import functools
import logging
from collections.abc import Callable

import requests
from pydantic import ValidationError

from cryptoticker.config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from cryptoticker.errors import DecodeError, NotFound, TransportFailure
from cryptoticker.interfaces import CurrencyFetcher
from cryptoticker.models import Currency

# --- Module Constants ---
_HEADERS = {"User-Agent": "cryptoticker/0.2.0"}

# --- Private Fetcher Implementation ---


def build_url(base_url: str, asset_id: str) -> str:
  if not base_url.endswith("/"):
    base_url += "/"
  return base_url + asset_id


def _fetch_currency_impl(
  asset_id: str, base_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> Currency:
  """Fetches one asset from the ticker endpoint.

  A single attempt is made. The endpoint answers with a JSON array holding
  one object; only the first element is used.

  Raises:
    TransportFailure: If no HTTP response was received
    NotFound: If the API answered with a non-success status
    DecodeError: If the body is not a non-empty JSON array of currencies
  """
  url = build_url(base_url, asset_id)
  logging.debug(f"Fetching ticker for '{asset_id}' from {url}")

  try:
    response = requests.get(url, timeout=timeout, headers=_HEADERS)
  except requests.exceptions.RequestException as e:
    raise TransportFailure(asset_id, str(e)) from e

  if not response.ok:
    raise NotFound(asset_id, response.status_code)

  try:
    data = response.json()
  except ValueError as e:
    raise DecodeError(asset_id, f"response is not valid JSON: {e}") from e

  if not isinstance(data, list):
    raise DecodeError(asset_id, f"expected a JSON array, got {type(data).__name__}")
  if not data:
    raise DecodeError(asset_id, "response array is empty")

  try:
    currency = Currency.model_validate(data[0])
  except ValidationError as e:
    raise DecodeError(asset_id, str(e)) from e

  logging.debug(f"Fetched '{asset_id}': price_usd={currency.price_usd}")
  return currency


# --- Public Provider Class ---


class CoinMarketCapProvider:
  """CoinMarketCap v1 public ticker endpoint.

  Free-tier provider; no API key is needed.
  """

  def __init__(
    self, base_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT_SECONDS
  ):
    self._capabilities = {
      CurrencyFetcher: functools.partial(
        _fetch_currency_impl, base_url=base_url, timeout=timeout
      ),
    }

  def supports(self, interface_class: type) -> bool:
    return interface_class in self._capabilities

  def get_fetcher(self, interface_class: type) -> Callable[[str], Currency]:
    if not self.supports(interface_class):
      raise TypeError(f"This provider does not support {interface_class.__name__}")
    return self._capabilities[interface_class]
