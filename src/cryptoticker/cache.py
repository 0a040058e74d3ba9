from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pydantic import ValidationError

from cryptoticker.errors import CacheMissing, ClockAnomaly, DecodeError, IOFailure
from cryptoticker.models import Currency


def cache_path(cache_dir: Path, asset_id: str) -> Path:
  return Path(cache_dir) / f"{asset_id}.json"


def read_entry(path: Path, now: datetime | None = None) -> tuple[Currency, timedelta]:
  """Loads a cached Currency and reports how long ago its file was written.

  The file's own modification time is the freshness clock; the payload holds
  nothing but the record.

  Args:
    path: Location of the cache entry
    now: Timezone-aware reference time for the age, defaults to the current
      UTC time

  Returns:
    The cached record and the entry's age

  Raises:
    CacheMissing: If the file does not exist
    IOFailure: If the file exists but cannot be read
    DecodeError: If the content is not a valid Currency
    ClockAnomaly: If the file's mtime lies in the future
  """
  path = Path(path)
  try:
    raw = path.read_bytes()
    modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
  except FileNotFoundError:
    raise CacheMissing(path) from None
  except OSError as e:
    raise IOFailure(path, str(e)) from e

  try:
    currency = Currency.model_validate_json(raw)
  except (ValidationError, UnicodeDecodeError) as e:
    raise DecodeError(path, str(e)) from e

  age = (now or datetime.now(timezone.utc)) - modified
  if age < timedelta(0):
    raise ClockAnomaly(path, -age)

  return currency, age


def write_entry(path: Path, currency: Currency) -> None:
  """Writes the record to `path`, replacing whatever was there."""
  path = Path(path)
  try:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
      f.write(currency.to_json())
  except OSError as e:
    raise IOFailure(path, str(e)) from e
  logging.debug(f"Cached '{currency.id}' to {path}")
