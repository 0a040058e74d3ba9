from __future__ import annotations

from datetime import timedelta
from pathlib import Path


class TickerError(Exception):
  """Base class for every failure the ticker can report for an asset."""

  pass


class TransportFailure(TickerError):
  """The HTTP request never produced a response."""

  def __init__(self, asset_id: str, message: str):
    self.asset_id = asset_id
    self.message = message
    super().__init__(f"Request for '{asset_id}' failed: {message}")


class NotFound(TickerError):
  """The API answered with a non-success status for this asset id."""

  def __init__(self, asset_id: str, status_code: int):
    self.asset_id = asset_id
    self.status_code = status_code
    super().__init__(f"Ticker ID '{asset_id}' not valid (HTTP {status_code}).")


class DecodeError(TickerError):
  """A response body or cache file could not be turned into a Currency.

  `source` is the asset id for API responses and the file path for cache
  entries.
  """

  def __init__(self, source: str | Path, message: str):
    self.source = source
    self.message = message
    super().__init__(f"Could not decode currency from {source}: {message}")


class IOFailure(TickerError):
  """Reading or writing a cache file failed."""

  def __init__(self, path: Path, message: str):
    self.path = path
    self.message = message
    super().__init__(f"Cache I/O error on {path}: {message}")


class CacheMissing(IOFailure):
  """No cache entry exists yet for the asset."""

  def __init__(self, path: Path):
    super().__init__(path, "no cache entry")


class ClockAnomaly(TickerError):
  """A cache file reports a modification time later than the current time."""

  def __init__(self, path: Path, skew: timedelta):
    self.path = path
    self.skew = skew
    super().__init__(
      f"Cache entry {path} was modified {skew.total_seconds():.0f}s in the future."
    )
