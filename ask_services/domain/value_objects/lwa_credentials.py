"""Value objects for Login With Amazon (LWA) authentication."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple


class LwaGrantType(str, Enum):
  """Grant types accepted by the LWA token endpoint."""
  CLIENT_CREDENTIALS = 'client_credentials'


@dataclass(frozen=True)
class AuthenticationConfiguration:
  """Client id / secret pair used to request LWA tokens."""

  client_id: str
  client_secret: str

  def __post_init__(self) -> None:
    if not self.client_id or not self.client_secret:
      raise ValueError('client_id and client_secret are required for client_credentials grant')

  def __repr__(self) -> str:
    return f'AuthenticationConfiguration(client_id={self.client_id!r}, client_secret=***)'


@dataclass(frozen=True)
class AccessTokenRequest:
  """Parameters of a single token exchange."""

  client_id: str
  client_secret: str
  scope: str
  grant_type: LwaGrantType = LwaGrantType.CLIENT_CREDENTIALS

  def to_form_fields(self) -> List[Tuple[str, str]]:
    """Build the form payload in the order the token endpoint documents."""
    return [
      ('grant_type', self.grant_type.value),
      ('client_secret', self.client_secret),
      ('client_id', self.client_id),
      ('scope', self.scope),
    ]


@dataclass(frozen=True)
class AccessTokenResponse:
  """Token endpoint payload."""

  access_token: str
  expires_in: int
  scope: Optional[str] = None
  token_type: str = 'bearer'

  @staticmethod
  def from_response(response_data: Mapping[str, Any]) -> 'AccessTokenResponse':
    """Create an AccessTokenResponse from the parsed JSON body."""
    return AccessTokenResponse(
      access_token=response_data['access_token'],
      expires_in=int(response_data['expires_in']),
      scope=response_data.get('scope'),
      token_type=response_data.get('token_type', 'bearer'),
    )


@dataclass(frozen=True)
class AccessToken:
  """A cached token and the epoch-millisecond instant it stops being valid."""

  token: str
  expiry: float

  def is_valid_at(self, now_millis: float, offset_millis: float = 0) -> bool:
    """True when the token outlives ``now_millis`` by more than ``offset_millis``."""
    return self.expiry > now_millis + offset_millis
