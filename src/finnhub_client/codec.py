from __future__ import annotations

import functools
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Codec(Protocol):
  """Decodes a raw JSON response body into the requested type.

  Implementations signal a bad body by raising ``ValueError`` (pydantic's
  ``ValidationError`` and ``json.JSONDecodeError`` both are).
  """

  def decode(self, payload: str | bytes, target: Any) -> Any: ...


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
  return TypeAdapter(target)


class JsonCodec:
  """Default codec, validating JSON straight into pydantic types."""

  def __init__(self, strict: bool | None = None):
    self.strict = strict

  def decode(self, payload: str | bytes, target: type[T]) -> T:
    return _adapter(target).validate_json(payload, strict=self.strict)
