"""Shared fixtures for the service client tests."""
from __future__ import annotations

import asyncio
import json
from typing import List, Optional, Union

import pytest

from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.domain.value_objects.api_messages import ApiClientRequest, ApiClientResponse
from ask_services.domain.value_objects.lwa_credentials import AuthenticationConfiguration


class FakeApiClient:
  """ApiClient that records requests and replays queued responses.

  Queue items are either ApiClientResponse instances or exceptions to raise.
  When the queue is empty an empty 200 response is returned.
  """

  def __init__(self) -> None:
    self.requests: List[ApiClientRequest] = []
    self._queue: List[Union[ApiClientResponse, Exception]] = []

  def respond(self, status_code: int = 200, body: Optional[object] = None, raw: Optional[str] = None) -> None:
    text = raw if raw is not None else (json.dumps(body) if body is not None else None)
    self._queue.append(ApiClientResponse(status_code=status_code, body=text))

  def fail(self, error: Exception) -> None:
    self._queue.append(error)

  async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
    self.requests.append(request)
    await asyncio.sleep(0)
    if not self._queue:
      return ApiClientResponse(status_code=200)
    item = self._queue.pop(0)
    if isinstance(item, Exception):
      raise item
    return item

  @property
  def last_request(self) -> ApiClientRequest:
    return self.requests[-1]


@pytest.fixture
def api_client():
  """Create a recording fake transport."""
  return FakeApiClient()


@pytest.fixture
def api_configuration(api_client):
  """Create an ApiConfiguration bound to the fake transport."""
  return ApiConfiguration(
    api_client=api_client,
    authorization_value='test-token',
    api_endpoint='https://api.example.com',
  )


@pytest.fixture
def authentication_configuration():
  return AuthenticationConfiguration(client_id='client-id', client_secret='client-secret')
