"""Output port for dispatching HTTP requests."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from ask_services.domain.value_objects.api_messages import ApiClientRequest, ApiClientResponse


@runtime_checkable
class ApiClient(Protocol):
  """Basic contract for API request execution.

  Implementations own sockets, TLS, timeouts and cancellation. They resolve
  normally for any status code the server returns; only connectivity-level
  problems should raise.
  """

  async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
    """Dispatch ``request`` and return the server's response.

    Args:
      request: Fully built request (URL, method, headers, optional body)

    Returns:
      ApiClientResponse with status code, headers and raw body

    Raises:
      Exception: Any connectivity failure; the caller annotates it
    """
    ...
