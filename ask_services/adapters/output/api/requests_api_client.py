"""Requests-based ApiClient implementation."""
from __future__ import annotations

import asyncio
from typing import Optional

import requests

from ask_services.domain.value_objects.api_messages import ApiClientRequest, ApiClientResponse
from ask_services.ports.output.api_client import ApiClient

DEFAULT_TIMEOUT = 30.0


class RequestsApiClient(ApiClient):
  """Performs HTTP calls using the requests library.

  requests is blocking, so each call runs in the default executor to keep
  the event loop free. Non-2xx responses are returned as-is.
  """

  def __init__(
    self,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
  ) -> None:
    self._timeout = timeout
    self._session = session or requests.Session()

  async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
    return await asyncio.to_thread(self._send, request)

  def _send(self, request: ApiClientRequest) -> ApiClientResponse:
    response = self._session.request(
      request.method,
      request.url,
      headers=dict(request.headers),
      data=request.body.encode('utf-8') if request.body is not None else None,
      timeout=self._timeout,
    )
    return ApiClientResponse(
      status_code=response.status_code,
      headers=tuple(response.headers.items()),
      body=response.text or None,
    )

  def close(self) -> None:
    self._session.close()
