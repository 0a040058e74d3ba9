from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_API_URL = "https://api.coinmarketcap.com/v1/ticker/"
DEFAULT_TIMEOUT_SECONDS = 10.0

_ENV_API_URL = "CRYPTOTICKER_API_URL"
_ENV_CACHE_DIR = "CRYPTOTICKER_CACHE_DIR"
_ENV_TIMEOUT = "CRYPTOTICKER_TIMEOUT"


def default_cache_dir() -> Path:
  """Per-user cache directory, honouring XDG_CACHE_HOME when it is set."""
  xdg_cache = os.getenv("XDG_CACHE_HOME")
  base = Path(xdg_cache) if xdg_cache else Path.home() / ".cache"
  return base / "cryptoticker"


@dataclass(frozen=True)
class Settings:
  api_url: str = DEFAULT_API_URL
  cache_dir: Path = field(default_factory=default_cache_dir)
  timeout: float = DEFAULT_TIMEOUT_SECONDS

  @classmethod
  def from_env(cls) -> Settings:
    """Builds settings from environment variables (after load_dotenv()).

    Raises:
        ValueError: If CRYPTOTICKER_TIMEOUT is not a positive number.
    """
    timeout_raw = os.getenv(_ENV_TIMEOUT)
    timeout = DEFAULT_TIMEOUT_SECONDS
    if timeout_raw:
      try:
        timeout = float(timeout_raw)
      except ValueError:
        raise ValueError(
          f"Invalid value for '{_ENV_TIMEOUT}': {timeout_raw!r} is not a number."
        ) from None
      if timeout <= 0:
        raise ValueError(f"'{_ENV_TIMEOUT}' must be positive, got {timeout_raw}.")

    cache_dir_raw = os.getenv(_ENV_CACHE_DIR)
    return cls(
      api_url=os.getenv(_ENV_API_URL) or DEFAULT_API_URL,
      cache_dir=Path(cache_dir_raw).expanduser() if cache_dir_raw else default_cache_dir(),
      timeout=timeout,
    )
