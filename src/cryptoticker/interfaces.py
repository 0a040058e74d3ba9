from abc import ABC, abstractmethod

from cryptoticker.models import Currency


class CurrencyFetcher(ABC):
  """Abstract base class for single-asset price fetching functionality."""

  @abstractmethod
  def fetch_currency(self, asset_id: str) -> Currency:
    """Fetches the latest snapshot for one asset.

    Args:
      asset_id: Canonical asset id, e.g. "bitcoin"

    Returns:
      The Currency record for that asset

    Raises:
      TransportFailure, NotFound, DecodeError
    """
    pass
