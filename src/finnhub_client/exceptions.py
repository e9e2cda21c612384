from __future__ import annotations


class FinnhubError(Exception):
  """Base class for errors raised by the Finnhub client itself.

  Transport failures are not wrapped: they surface as the
  ``requests.exceptions.RequestException`` raised by the session.
  """

  pass


class DecodeError(FinnhubError, ValueError):
  """
  Exception raised when a response body cannot be decoded.

  This covers malformed JSON as well as JSON that does not fit the
  expected record type.
  """

  def __init__(self, message: str, endpoint: str | None = None, body: str | None = None):
    """
    Initialize the DecodeError.

    Args:
      message: Error message describing the failure
      endpoint: Name of the endpoint whose response failed to decode
      body: The raw response body
    """
    self.message = message
    self.endpoint = endpoint
    self.body = body
    super().__init__(f"{message} (Endpoint: {endpoint})" if endpoint else message)


class UnknownExchangeError(FinnhubError, LookupError):
  """Raised when an exchange name is not part of the known enumeration."""

  def __init__(self, name: str):
    self.name = name
    super().__init__(f"Exchange '{name}' is not supported.")
