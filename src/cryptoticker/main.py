from __future__ import annotations

import functools
import logging
import sys

import click
from dotenv import load_dotenv

from cryptoticker import render
from cryptoticker.config import Settings
from cryptoticker.factory import DEFAULT_PROVIDER, ProviderFactory
from cryptoticker.interfaces import CurrencyFetcher
from cryptoticker.resolver import TickerResolver

# --- Setup ---


def setup_logging(debug: bool) -> None:
  # stdout carries the ticker line, so logs go to stderr.
  logging.basicConfig(
    level=logging.DEBUG if debug else logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
  )


# --- Error Handling Decorator ---


def cli_error_handler(func):
  """Decorator to handle common CLI errors, log them, and exit."""

  @functools.wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except KeyboardInterrupt:
      click.echo()
      sys.exit(0)
    except (ValueError, TypeError) as e:
      logging.error(f"Error: {e}")
      sys.exit(1)
    except Exception as e:
      logging.error(f"An unexpected error occurred: {e}", exc_info=True)
      sys.exit(1)

  return wrapper


# --- Private Helper ---


def _build_resolver(settings: Settings, use_cache: bool) -> TickerResolver:
  data_provider = ProviderFactory(settings).create(DEFAULT_PROVIDER)
  fetch_currency = data_provider.get_fetcher(CurrencyFetcher)
  return TickerResolver(fetch_currency, settings.cache_dir, use_cache=use_cache)


# --- CLI Command ---


@click.command()
@click.version_option(package_name="cryptoticker")
@click.argument("tickers", metavar="TICKER...", nargs=-1, required=True)
@click.option(
  "-i", "--interval", is_flag=True, help="Sets the ticker to repeat on a time interval."
)
@click.option(
  "-t",
  "--interval-time",
  type=click.IntRange(min=0),
  default=90,
  show_default=True,
  help="Sets the time interval for the ticker, in seconds.",
)
@click.option("-d", "--debug", is_flag=True, help="Shows verbose error messages.")
@click.option("-v", "--verbose", is_flag=True, hidden=True)
@click.option("--no-cache", is_flag=True, help="Always fetch from the API.")
@cli_error_handler
def cli(tickers, interval, interval_time, debug, verbose, no_cache):
  """Shows cryptoprices in a convenient ticker format for tmux.

  TICKER is the name of the currency, like bitcoin or ethereum.
  """
  debug = debug or verbose
  setup_logging(debug)
  load_dotenv()

  settings = Settings.from_env()
  resolver = _build_resolver(settings, use_cache=not no_cache)
  logging.debug(
    f"Rendering {list(tickers)} (interval={interval}, every {interval_time}s, "
    f"cache={resolver.use_cache} at {settings.cache_dir})"
  )

  render.run(
    list(tickers),
    resolver,
    repeat=interval,
    interval=interval_time,
    debug=debug,
  )


def main(args: list[str] | None = None) -> None:
  """Console entry point. Usage errors are reported on stdout."""
  try:
    rv = cli.main(args=args, prog_name="cryptoticker", standalone_mode=False)
  except click.ClickException as e:
    e.show(file=sys.stdout)
    sys.exit(e.exit_code)
  except click.exceptions.Abort:
    click.echo()
    sys.exit(1)
  sys.exit(rv or 0)


if __name__ == "__main__":
  main()
