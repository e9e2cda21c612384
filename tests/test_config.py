from unittest.mock import MagicMock, patch

import pytest
import requests

from finnhub_client.client import FinnhubClient
from finnhub_client.codec import JsonCodec
from finnhub_client.config import DEFAULT_TIMEOUT, ClientConfig, make_config


@pytest.fixture(autouse=True)
def no_dotenv():
  """Keeps a developer's .env file out of the tests."""
  with patch("finnhub_client.config.load_dotenv") as mock:
    yield mock


def test_make_config_defaults():
  config = make_config(token="abc")

  assert config.token == "abc"
  assert isinstance(config.session, requests.Session)
  assert isinstance(config.codec, JsonCodec)
  assert config.timeout == DEFAULT_TIMEOUT
  assert config.owns_session


def test_make_config_keeps_given_parts():
  session = MagicMock(spec=requests.Session)
  codec = JsonCodec(strict=True)

  config = make_config(token="abc", session=session, codec=codec, timeout=None)

  assert config.session is session
  assert config.codec is codec
  assert config.timeout is None
  assert not config.owns_session


def test_config_ownership_follows_session():
  assert ClientConfig(token="abc").owns_session
  assert isinstance(ClientConfig(token="abc").session, requests.Session)
  assert not ClientConfig(token="abc", session=MagicMock(spec=requests.Session)).owns_session


def test_client_without_codec_gets_default():
  client = FinnhubClient(make_config(token="abc"))

  assert client.codec is not None
  assert isinstance(client.codec, JsonCodec)


def test_client_without_config():
  client = FinnhubClient()

  assert client.token is None
  assert client.codec is not None
  assert isinstance(client.session, requests.Session)


def test_from_env(monkeypatch, no_dotenv):
  monkeypatch.setenv("FINNHUB_API_KEY", "env-token")
  monkeypatch.delenv("FINNHUB_TIMEOUT", raising=False)

  config = ClientConfig.from_env()

  no_dotenv.assert_called_once()
  assert config.token == "env-token"
  assert config.timeout == DEFAULT_TIMEOUT


def test_from_env_timeout(monkeypatch):
  monkeypatch.setenv("FINNHUB_API_KEY", "env-token")
  monkeypatch.setenv("FINNHUB_TIMEOUT", "2.5")

  client = FinnhubClient.from_env()

  assert client.token == "env-token"
  assert client.timeout == 2.5


def test_from_env_overrides(monkeypatch):
  monkeypatch.setenv("FINNHUB_API_KEY", "env-token")
  monkeypatch.setenv("FINNHUB_TIMEOUT", "2.5")
  session = MagicMock(spec=requests.Session)

  config = ClientConfig.from_env(session=session, timeout=10)

  assert config.session is session
  assert config.timeout == 10


def test_from_env_missing_key(monkeypatch):
  monkeypatch.delenv("FINNHUB_API_KEY", raising=False)

  with pytest.raises(ValueError, match="FINNHUB_API_KEY"):
    ClientConfig.from_env()


def test_from_env_bad_timeout(monkeypatch):
  monkeypatch.setenv("FINNHUB_API_KEY", "env-token")
  monkeypatch.setenv("FINNHUB_TIMEOUT", "soon")

  with pytest.raises(ValueError, match="FINNHUB_TIMEOUT"):
    ClientConfig.from_env()
