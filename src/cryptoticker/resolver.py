from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

from cryptoticker.cache import cache_path, read_entry, write_entry
from cryptoticker.errors import CacheMissing, ClockAnomaly, DecodeError
from cryptoticker.models import Currency

CACHE_TTL = timedelta(minutes=30)

Fetcher = Callable[[str], Currency]


def resolve(
  asset_id: str,
  use_cache: bool,
  ttl: timedelta = CACHE_TTL,
  *,
  fetcher: Fetcher,
  cache_dir: Path,
  now: datetime | None = None,
) -> Currency:
  """Returns a fresh-enough Currency for `asset_id`.

  With caching off this is a plain fetch. With caching on, an entry younger
  than `ttl` is returned as is; a missing, corrupt, future-dated or stale
  entry triggers one fetch whose result is written back before returning.
  Fetch and write failures propagate unchanged.
  """
  if not use_cache:
    return fetcher(asset_id)

  path = cache_path(cache_dir, asset_id)
  try:
    cached, age = read_entry(path, now=now)
  except CacheMissing:
    logging.debug(f"No cache entry for '{asset_id}'")
  except DecodeError as e:
    logging.warning(f"Discarding corrupt cache entry: {e}")
  except ClockAnomaly as e:
    logging.warning(f"Ignoring cache entry: {e}")
  else:
    if age < ttl:
      logging.debug(f"Cache hit for '{asset_id}' (age {age})")
      return cached
    logging.debug(f"Cache entry for '{asset_id}' is stale (age {age})")

  currency = fetcher(asset_id)
  write_entry(path, currency)
  return currency


class TickerResolver:
  """Binds a fetcher and caching policy so callers only pass an asset id."""

  def __init__(
    self,
    fetcher: Fetcher,
    cache_dir: Path,
    use_cache: bool = True,
    ttl: timedelta = CACHE_TTL,
  ):
    self._fetcher = fetcher
    self._cache_dir = Path(cache_dir)
    self._use_cache = use_cache
    self._ttl = ttl

  @property
  def use_cache(self) -> bool:
    return self._use_cache

  def __call__(self, asset_id: str) -> Currency:
    return resolve(
      asset_id,
      self._use_cache,
      self._ttl,
      fetcher=self._fetcher,
      cache_dir=self._cache_dir,
    )
