from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ApiRecord(BaseModel):
  """Base for records decoded from API responses.

  Fields are looked up by their JSON key (alias) and unknown keys are ignored.
  """

  model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Quote(_ApiRecord):
  """Real-time quote for a symbol."""

  current: float | None = Field(default=None, alias="c")
  high: float | None = Field(default=None, alias="h")
  low: float | None = Field(default=None, alias="l")
  open: float | None = Field(default=None, alias="o")
  previous_close: float | None = Field(default=None, alias="pc")
  timestamp: int | None = Field(default=None, alias="t")  # Unix seconds
  change: float | None = Field(default=None, alias="d")
  percent_change: float | None = Field(default=None, alias="dp")


class Candle(_ApiRecord):
  """OHLCV candles for a symbol, as parallel arrays.

  ``status`` is ``"ok"`` when data was found and ``"no_data"`` otherwise, in
  which case the arrays are usually absent.
  """

  open: list[float] | None = Field(default=None, alias="o")
  high: list[float] | None = Field(default=None, alias="h")
  low: list[float] | None = Field(default=None, alias="l")
  close: list[float] | None = Field(default=None, alias="c")
  volume: list[float] | None = Field(default=None, alias="v")
  timestamp: list[int] | None = Field(default=None, alias="t")
  status: str | None = Field(default=None, alias="s")


class CompanyProfile(_ApiRecord):
  """General information about a company."""

  country: str | None = None
  currency: str | None = None
  exchange: str | None = None
  name: str | None = None
  ticker: str | None = None
  ipo: str | None = None  # YYYY-MM-DD
  market_capitalization: float | None = Field(
    default=None, alias="marketCapitalization"
  )
  share_outstanding: float | None = Field(default=None, alias="shareOutstanding")
  logo: str | None = None
  phone: str | None = None
  weburl: str | None = None
  industry: str | None = Field(default=None, alias="finnhubIndustry")
  address: str | None = None
  city: str | None = None
  state: str | None = None
  description: str | None = None
  isin: str | None = None
  cusip: str | None = None
  sedol: str | None = None
  employee_total: int | None = Field(default=None, alias="employeeTotal")
  gsector: str | None = None
  gind: str | None = None
  naics: str | None = None


class EnrichedSymbol(_ApiRecord):
  """A symbol listed on an exchange."""

  symbol: str | None = None
  display_symbol: str | None = Field(default=None, alias="displaySymbol")
  description: str | None = None
  type: str | None = None
  currency: str | None = None
  figi: str | None = None
  mic: str | None = None


class SymbolLookupInfo(_ApiRecord):
  symbol: str | None = None
  display_symbol: str | None = Field(default=None, alias="displaySymbol")
  description: str | None = None
  type: str | None = None


class SymbolLookup(_ApiRecord):
  """Result of a free-text symbol search."""

  count: int | None = None
  result: list[SymbolLookupInfo] | None = None
