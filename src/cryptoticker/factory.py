from __future__ import annotations

import importlib
from dataclasses import dataclass

from cryptoticker.config import Settings


@dataclass
class ProviderMetadata:
  class_path: str


_PROVIDERS = {
  "coinmarketcap": ProviderMetadata(
    class_path="cryptoticker.providers.coinmarketcap.CoinMarketCapProvider"
  ),
}

DEFAULT_PROVIDER = "coinmarketcap"


class ProviderFactory:
  def __init__(self, settings: Settings | None = None):
    self._settings = settings or Settings()

  @staticmethod
  def _import_from_string(path: str) -> type:
    """Helper to dynamically import a class from a string path."""
    module_name, class_name = path.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)

  def create(self, provider_name: str = DEFAULT_PROVIDER):
    """Creates a provider instance based on its registered name."""
    metadata = _PROVIDERS.get(provider_name)
    if not metadata:
      raise ValueError(f"Provider '{provider_name}' not found.")

    provider_class = self._import_from_string(metadata.class_path)
    return provider_class(
      base_url=self._settings.api_url, timeout=self._settings.timeout
    )
