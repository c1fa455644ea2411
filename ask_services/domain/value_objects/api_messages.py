"""Value objects exchanged between the invocation engine and a transport."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union

Header = Tuple[str, str]
HeaderSource = Union[Mapping[str, str], Iterable[Header]]


def normalize_headers(headers: Optional[HeaderSource]) -> Tuple[Header, ...]:
  """Return headers as an ordered tuple of (key, value) pairs."""
  if not headers:
    return ()
  if isinstance(headers, Mapping):
    return tuple((str(key), str(value)) for key, value in headers.items())
  return tuple((str(key), str(value)) for key, value in headers)


@dataclass(frozen=True)
class ApiClientRequest:
  """Request sent from a service client to an ApiClient implementation."""

  url: str
  method: str
  headers: Tuple[Header, ...] = ()
  body: Optional[str] = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'headers', normalize_headers(self.headers))

  def header(self, key: str) -> Optional[str]:
    """Return the first header value matching ``key`` (case-insensitive)."""
    wanted = key.lower()
    for name, value in self.headers:
      if name.lower() == wanted:
        return value
    return None


@dataclass(frozen=True)
class ApiClientResponse:
  """Response returned by an ApiClient implementation.

  ``status_code`` normally carries the HTTP status returned by the server.
  Transports return non-2xx responses as regular values; translating them
  into errors is the caller's job.
  """

  status_code: int
  headers: Tuple[Header, ...] = ()
  body: Optional[str] = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'headers', normalize_headers(self.headers))
