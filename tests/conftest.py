"""Common fixtures for the client tests."""

from unittest.mock import MagicMock

import pytest
import requests

from finnhub_client.client import FinnhubClient
from finnhub_client.config import make_config

TOKEN = "sandbox_c0ffee"


def make_response(body: str, status: int = 200) -> MagicMock:
  """Mock of a requests.Response usable as a context manager."""
  response = MagicMock(spec=requests.Response)
  response.text = body
  response.status_code = status
  response.ok = status < 400
  response.__enter__.return_value = response
  response.__exit__.return_value = False
  return response


@pytest.fixture
def session():
  return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
  return FinnhubClient(make_config(token=TOKEN, session=session))


def requested_url(session) -> str:
  """Returns the URL of the single GET issued on the mock session."""
  session.get.assert_called_once()
  return session.get.call_args[0][0]
