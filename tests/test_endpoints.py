import pytest

from finnhub_client.endpoints import Endpoint, Exchange, Resolution
from finnhub_client.exceptions import FinnhubError, UnknownExchangeError


def test_endpoint_urls():
  assert Endpoint.QUOTE.url == "https://finnhub.io/api/v1/quote"
  assert Endpoint.CANDLE.url == "https://finnhub.io/api/v1/stock/candle"
  assert Endpoint.COMPANY_PROFILE.url == "https://finnhub.io/api/v1/stock/profile2"
  assert Endpoint.SYMBOL.url == "https://finnhub.io/api/v1/stock/symbol"
  assert Endpoint.SYMBOL_LOOKUP.url == "https://finnhub.io/api/v1/search"


def test_resolution_values():
  assert [r.value for r in Resolution] == ["1", "5", "15", "30", "60", "D", "W", "M"]


def test_exchange_codes_are_unique():
  codes = [e.code for e in Exchange]
  assert len(codes) == len(set(codes))


@pytest.mark.parametrize(
  "name, expected",
  [
    ("US_EXCHANGES", Exchange.US_EXCHANGES),
    ("tokyo_stock_exchange", Exchange.TOKYO_STOCK_EXCHANGE),
    ("L", Exchange.LONDON_STOCK_EXCHANGE),
    ("HK", Exchange.HONG_KONG_EXCHANGES),
    (Exchange.XETRA, Exchange.XETRA),
  ],
)
def test_exchange_lookup(name, expected):
  assert Exchange.lookup(name) is expected


@pytest.mark.parametrize("name", ["NASDAQ_MOON", "", "l", "us "])
def test_exchange_lookup_unknown(name):
  with pytest.raises(UnknownExchangeError) as exc_info:
    Exchange.lookup(name)

  assert isinstance(exc_info.value, FinnhubError)
  assert isinstance(exc_info.value, LookupError)
  assert exc_info.value.name == name
