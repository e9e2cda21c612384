from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import requests
from dotenv import load_dotenv

from finnhub_client.codec import Codec, JsonCodec

DEFAULT_TIMEOUT = 30
API_KEY_ENV_VAR = "FINNHUB_API_KEY"
TIMEOUT_ENV_VAR = "FINNHUB_TIMEOUT"


@dataclass
class ClientConfig:
  """Settings a FinnhubClient is built from.

  The session is the caller's transport handle and may be shared between
  clients. When no session is given one is created here and ``owns_session``
  is set, so the client knows it may close it.
  """

  token: str | None = None
  session: requests.Session | None = None
  codec: Codec = field(default_factory=JsonCodec)
  timeout: float | None = DEFAULT_TIMEOUT
  owns_session: bool = field(init=False, default=False)

  def __post_init__(self) -> None:
    if self.session is None:
      self.session = requests.Session()
      self.owns_session = True

  @classmethod
  def from_env(cls, **overrides) -> ClientConfig:
    """Builds a config from FINNHUB_API_KEY (and FINNHUB_TIMEOUT), reading .env first.

    Raises:
      ValueError: If the API key is not set or the timeout is not a number.
    """
    load_dotenv()

    token = os.getenv(API_KEY_ENV_VAR)
    if not token:
      raise ValueError(f"Missing required env var '{API_KEY_ENV_VAR}'")

    timeout = DEFAULT_TIMEOUT
    raw_timeout = os.getenv(TIMEOUT_ENV_VAR)
    if raw_timeout:
      try:
        timeout = float(raw_timeout)
      except ValueError as e:
        raise ValueError(
          f"Env var '{TIMEOUT_ENV_VAR}' must be a number, got '{raw_timeout}'"
        ) from e

    logging.info(f"Loaded Finnhub configuration from '{API_KEY_ENV_VAR}'.")
    overrides.setdefault("timeout", timeout)
    return make_config(token=token, **overrides)


def make_config(
  token: str | None = None,
  session: requests.Session | None = None,
  codec: Codec | None = None,
  timeout: float | None = DEFAULT_TIMEOUT,
) -> ClientConfig:
  """Creates a ClientConfig, filling in a new session and the default codec if unset."""
  return ClientConfig(
    token=token,
    session=session,
    codec=codec if codec is not None else JsonCodec(),
    timeout=timeout,
  )
