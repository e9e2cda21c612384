from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlencode

import requests

from finnhub_client.codec import Codec
from finnhub_client.config import ClientConfig, make_config
from finnhub_client.endpoints import Endpoint, Exchange, Resolution
from finnhub_client.exceptions import DecodeError
from finnhub_client.models import (
  Candle,
  CompanyProfile,
  EnrichedSymbol,
  Quote,
  SymbolLookup,
)

# Sentinel so that an explicit ``timeout=None`` (wait forever) can be told apart
# from "use the configured timeout".
_USE_CONFIGURED = object()


def _to_epoch(value: int | datetime) -> int:
  """Converts a datetime to whole Unix seconds; ints pass through.

  Naive datetimes are taken as UTC, not local time.
  """
  if isinstance(value, datetime):
    if value.tzinfo is None:
      value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
  return int(value)


class FinnhubClient:
  """Synchronous client for the Finnhub REST API.

  ``token``, ``session``, ``codec`` and ``timeout`` are plain attributes and
  may be replaced at any time. Every operation issues exactly one GET on the
  session and decodes the body with the codec.

  Errors:
    - ``requests.exceptions.RequestException`` from the session propagates
      unchanged (connection refused, timeouts, ...).
    - ``DecodeError`` when the body does not fit the expected record.
    - ``UnknownExchangeError`` from ``get_symbols`` before any request is made.

  Non-2xx responses are decoded like any other body.
  """

  def __init__(self, config: ClientConfig | None = None):
    if config is None:
      config = make_config()

    self.token: str | None = config.token
    self.session: requests.Session = config.session
    self.codec: Codec = config.codec
    self.timeout: float | None = config.timeout
    self._owns_session = config.owns_session

  @classmethod
  def from_env(cls, **overrides: Any) -> FinnhubClient:
    """Creates a client from the FINNHUB_API_KEY environment variable."""
    return cls(ClientConfig.from_env(**overrides))

  # --- Resource handling ---

  def close(self) -> None:
    """Closes the session, but only if this client created it."""
    if self._owns_session:
      self.session.close()

  def __enter__(self) -> FinnhubClient:
    return self

  def __exit__(self, exc_type, exc_val, exc_tb) -> None:
    self.close()

  # --- Request plumbing ---

  def build_url(self, endpoint: Endpoint, **params: Any) -> str:
    """Builds the signed URL for an endpoint.

    The token always comes first, followed by ``params`` in the order given.
    Values are URL-encoded.
    """
    query = {"token": self.token if self.token is not None else ""}
    query.update({key: str(value) for key, value in params.items()})
    return f"{endpoint.url}?{urlencode(query)}"

  def _redact(self, url: str) -> str:
    if not self.token:
      return url
    return url.replace(urlencode({"token": self.token}), "token=***", 1)

  def _get(self, endpoint: Endpoint, target: Any, timeout: Any, **params: Any) -> Any:
    url = self.build_url(endpoint, **params)
    if timeout is _USE_CONFIGURED:
      timeout = self.timeout

    logging.debug(f"GET {endpoint.name}: {self._redact(url)}")
    with self.session.get(url, timeout=timeout) as response:
      if not response.ok:
        logging.warning(
          f"Finnhub {endpoint.name} request returned HTTP {response.status_code}; "
          "decoding body as-is."
        )
      body = response.text

    try:
      return self.codec.decode(body, target)
    except ValueError as e:
      logging.error(f"Failed to decode {endpoint.name} response: {e}")
      raise DecodeError(
        f"Response does not match {getattr(target, '__name__', target)}",
        endpoint=endpoint.name,
        body=body,
      ) from e

  # --- Operations ---

  def get_quote(self, symbol: str, timeout: Any = _USE_CONFIGURED) -> Quote:
    """Fetches the real-time quote for ``symbol``."""
    return self._get(Endpoint.QUOTE, Quote, timeout, symbol=symbol)

  def get_candle(
    self,
    symbol: str,
    resolution: str | Resolution,
    start_epoch: int | datetime,
    end_epoch: int | datetime,
    timeout: Any = _USE_CONFIGURED,
  ) -> Candle:
    """Fetches candles for a date or a range.

    Set ``start_epoch`` equal to ``end_epoch`` for a single day.

    Args:
      symbol: Ticker symbol, upper-cased before sending.
      resolution: One of 1, 5, 15, 30, 60, D, W, M. Some are not available on
        every exchange. Not validated here.
      start_epoch: Range start in seconds (not milliseconds), or a datetime.
      end_epoch: Range end, as above.
      timeout: Per-call timeout overriding the configured one.

    Returns:
      A Candle with arrays for open, high, low, close and volume plus a status.
    """
    if isinstance(resolution, Resolution):
      resolution = resolution.value

    return self._get(
      Endpoint.CANDLE,
      Candle,
      timeout,
      symbol=symbol.upper(),
      resolution=resolution,
      **{"from": _to_epoch(start_epoch), "to": _to_epoch(end_epoch)},
    )

  def get_company_profile(
    self, symbol: str, timeout: Any = _USE_CONFIGURED
  ) -> CompanyProfile:
    return self._get(Endpoint.COMPANY_PROFILE, CompanyProfile, timeout, symbol=symbol)

  def get_symbols(
    self, exchange_name: str | Exchange, timeout: Any = _USE_CONFIGURED
  ) -> list[EnrichedSymbol]:
    """Lists the symbols traded on an exchange, in the order the API returns them.

    Raises:
      UnknownExchangeError: If ``exchange_name`` is not a known exchange. No
        request is made in that case.
    """
    exchange = Exchange.lookup(exchange_name)
    return self._get(
      Endpoint.SYMBOL, list[EnrichedSymbol], timeout, exchange=exchange.code
    )

  def search_symbol(self, query: str, timeout: Any = _USE_CONFIGURED) -> SymbolLookup:
    """Searches for symbols matching a free-text query."""
    return self._get(Endpoint.SYMBOL_LOOKUP, SymbolLookup, timeout, q=query)
