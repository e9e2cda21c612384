from __future__ import annotations

from enum import Enum

from finnhub_client.exceptions import UnknownExchangeError

# --- Module-level Constants ---
_BASE_URL = "https://finnhub.io/api/v1"


class Endpoint(Enum):
  """Fixed Finnhub REST endpoints, one per client operation."""

  QUOTE = f"{_BASE_URL}/quote"
  CANDLE = f"{_BASE_URL}/stock/candle"
  COMPANY_PROFILE = f"{_BASE_URL}/stock/profile2"
  SYMBOL = f"{_BASE_URL}/stock/symbol"
  SYMBOL_LOOKUP = f"{_BASE_URL}/search"

  @property
  def url(self) -> str:
    return self.value


class Resolution(Enum):
  """Candle resolutions documented by the API.

  Passing a plain string works too; the client does not validate it.
  """

  ONE_MINUTE = "1"
  FIVE_MINUTES = "5"
  FIFTEEN_MINUTES = "15"
  THIRTY_MINUTES = "30"
  SIXTY_MINUTES = "60"
  DAY = "D"
  WEEK = "W"
  MONTH = "M"


class Exchange(Enum):
  """Stock exchanges supported by the symbol listing endpoint."""

  US_EXCHANGES = "US"
  NYSE_EURONEXT_AMSTERDAM = "AS"
  ATHENS_EXCHANGE = "AT"
  ASX = "AX"
  BUENOS_AIRES_STOCK_EXCHANGE = "BA"
  BOLSA_DE_VALORES_DE_COLOMBIA = "BC"
  BOERSE_BERLIN = "BE"
  STOCK_EXCHANGE_OF_THAILAND = "BK"
  BSE_LTD = "BO"
  NYSE_EURONEXT_BRUSSELS = "BR"
  CANADIAN_NATIONAL_STOCK_EXCHANGE = "CN"
  OMX_NORDIC_EXCHANGE_COPENHAGEN = "CO"
  DUBAI_FINANCIAL_MARKET = "DB"
  XETRA = "DE"
  BOERSE_DUESSELDORF = "DU"
  DEUTSCHE_BOERSE = "F"
  NASDAQ_OMX_HELSINKI = "HE"
  HONG_KONG_EXCHANGES = "HK"
  HANSEATISCHE_WERTPAPIERBOERSE_HAMBURG = "HM"
  NASDAQ_OMX_ICELAND = "IC"
  IRISH_STOCK_EXCHANGE = "IR"
  BORSA_ISTANBUL = "IS"
  INDONESIA_STOCK_EXCHANGE = "JK"
  JOHANNESBURG_STOCK_EXCHANGE = "JO"
  BURSA_MALAYSIA = "KL"
  KOREA_EXCHANGE_KOSDAQ = "KQ"
  KOREA_EXCHANGE = "KS"
  LONDON_STOCK_EXCHANGE = "L"
  NYSE_EURONEXT_LISBON = "LS"
  BOLSA_DE_MADRID = "MC"
  MOSCOW_EXCHANGE = "ME"
  ITALIAN_STOCK_EXCHANGE = "MI"
  BOERSE_MUENCHEN = "MU"
  BOLSA_MEXICANA_DE_VALORES = "MX"
  NATIONAL_STOCK_EXCHANGE_OF_INDIA = "NS"
  NEW_ZEALAND_EXCHANGE = "NZ"
  OSLO_BORS = "OL"
  NYSE_EURONEXT_PARIS = "PA"
  QATAR_EXCHANGE = "QA"
  BOVESPA = "SA"
  BOERSE_STUTTGART = "SG"
  SINGAPORE_EXCHANGE = "SI"
  SANTIAGO_STOCK_EXCHANGE = "SN"
  SAUDI_STOCK_EXCHANGE = "SR"
  SHANGHAI_STOCK_EXCHANGE = "SS"
  NASDAQ_OMX_STOCKHOLM = "ST"
  SWISS_EXCHANGE = "SW"
  SHENZHEN_STOCK_EXCHANGE = "SZ"
  TOKYO_STOCK_EXCHANGE = "T"
  TEL_AVIV_STOCK_EXCHANGE = "TA"
  TORONTO_STOCK_EXCHANGE = "TO"
  TAIWAN_STOCK_EXCHANGE = "TW"
  TSX_VENTURE_EXCHANGE = "V"
  VIENNA_STOCK_EXCHANGE = "VI"
  WARSAW_STOCK_EXCHANGE = "WA"

  @property
  def code(self) -> str:
    return self.value

  @classmethod
  def lookup(cls, name: str | Exchange) -> Exchange:
    """Resolves an exchange by member name or by exchange code.

    Member names are tried exactly, then case-insensitively; the exchange
    code must match exactly.

    Raises:
      UnknownExchangeError: If nothing matches.
    """
    if isinstance(name, cls):
      return name

    if name in cls.__members__:
      return cls.__members__[name]

    upper = name.upper()
    if upper in cls.__members__:
      return cls.__members__[upper]

    for exchange in cls:
      if exchange.code == name:
        return exchange

    raise UnknownExchangeError(name)
