from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Iterable
from typing import TextIO

from cryptoticker.errors import TickerError
from cryptoticker.models import Currency

ERASE_TO_EOL = "\x1b[K"

_SHORT_CODES = {
  "bitcoin": "btc",
  "ethereum": "eth",
  "litecoin": "ltc",
  "ripple": "xrp",
  "monero": "xmr",
  "bitcoin-cash": "bch",
  "dogecoin": "doge",
  "cardano": "ada",
}


def short_display(asset_id: str) -> str:
  return _SHORT_CODES.get(asset_id, asset_id)


def format_token(asset_id: str, currency: Currency) -> str:
  return f"{short_display(asset_id)}:{currency.price_display()} "


def format_error(asset_id: str, error: TickerError, debug: bool) -> str:
  """Placeholder token in normal mode, the full error on its own line in debug mode."""
  if debug:
    return f"{asset_id}: {error}\n"
  return f"{asset_id}:error "


def render_pass(
  assets: Iterable[str], resolve: Callable[[str], Currency], debug: bool = False
) -> str:
  """Resolves every asset in order and joins their tokens into one line.

  A failure on one asset only replaces that asset's token.
  """
  tokens = []
  for asset_id in assets:
    try:
      currency = resolve(asset_id)
    except TickerError as e:
      logging.debug(f"Failed to resolve '{asset_id}': {e}")
      tokens.append(format_error(asset_id, e, debug))
      continue
    tokens.append(format_token(asset_id, currency))
  return "".join(tokens)


def overwrite_line(stream: TextIO, line: str, erase: bool = True) -> None:
  """Redraws the current terminal line with `line`."""
  stream.write("\r" + line)
  if erase:
    stream.write(ERASE_TO_EOL)
  stream.flush()


def run(
  assets: list[str],
  resolve: Callable[[str], Currency],
  *,
  repeat: bool = False,
  interval: float = 90,
  debug: bool = False,
  stream: TextIO | None = None,
  sleep: Callable[[float], None] | None = None,
) -> None:
  """Renders the ticker once, or forever every `interval` seconds when `repeat` is set."""
  if stream is None:
    stream = sys.stdout
  sleep = sleep or time.sleep
  while True:
    overwrite_line(stream, render_pass(assets, resolve, debug), erase=repeat)
    if not repeat:
      break
    sleep(interval)
