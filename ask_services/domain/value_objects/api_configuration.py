"""Configuration shared by every service client built from it."""
from __future__ import annotations

from dataclasses import dataclass

from ask_services.ports.output.api_client import ApiClient


@dataclass
class ApiConfiguration:
  """Dependencies a service client needs to reach the skills API.

  One instance is shared by reference across all clients created from it.
  ``authorization_value`` stays mutable so the embedding application can
  swap in the token of the request it is currently handling.
  """

  api_client: ApiClient
  authorization_value: str
  api_endpoint: str

  def __post_init__(self) -> None:
    if self.api_client is None:
      raise ValueError('api_client is required')
    if not self.api_endpoint:
      raise ValueError('api_endpoint is required')
