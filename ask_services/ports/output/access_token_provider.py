"""Output port for obtaining scoped LWA access tokens."""
from __future__ import annotations

from typing import Protocol


class AccessTokenProvider(Protocol):
  """Interface for obtaining bearer tokens scoped to one capability.

  Service clients that authenticate with skill credentials instead of the
  per-request authorization value depend on this port, keeping the token
  exchange and its cache out of the endpoint wrappers.
  """

  async def get_access_token_for_scope(self, scope: str) -> str:
    """Return a token valid for ``scope`` for at least the safety margin.

    Args:
      scope: OAuth scope such as ``alexa::proactive_events``

    Returns:
      Bearer token string

    Raises:
      RequiredParameterError: If scope is None
      AskServiceError: If the token exchange fails
    """
    ...
