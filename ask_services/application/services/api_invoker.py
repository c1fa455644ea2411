"""Request/response lifecycle shared by every service client."""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Mapping, Optional

from ask_services.domain.services.url_builder import build_url
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.domain.value_objects.api_messages import (
  ApiClientRequest,
  ApiClientResponse,
  Header,
)
from ask_services.ports.output.errors import (
  UNKNOWN_ERROR_MESSAGE,
  ResponseParseError,
  ServiceCallError,
  ServiceError,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = 'application/json'
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


def is_code_successful(status_code: int) -> bool:
  return 200 <= status_code < 300


def bearer_headers(authorization_value: str, content_type: str = JSON_CONTENT_TYPE) -> List[Header]:
  """Headers every authenticated JSON call starts from."""
  return [
    ('Content-type', content_type),
    ('Authorization', f'Bearer {authorization_value}'),
  ]


class ApiInvoker:
  """Builds requests, dispatches them through the configured ApiClient and
  interprets the responses.

  Service clients hold an invoker instead of inheriting from it; each one
  only supplies the method, path, parameter maps and error table of the
  operation it represents.
  """

  def __init__(self, api_configuration: ApiConfiguration) -> None:
    if api_configuration is None:
      raise ValueError('ApiConfiguration cannot be None.')
    self._api_configuration = api_configuration

  @property
  def api_configuration(self) -> ApiConfiguration:
    return self._api_configuration

  async def invoke(
    self,
    method: str,
    endpoint: str,
    path: str,
    path_params: Optional[Mapping[str, object]],
    query_params: Optional[Mapping[str, object]],
    header_params: Iterable[Header],
    body: Any,
    errors: Optional[Mapping[int, str]],
    non_json_body: bool = False,
  ) -> Any:
    """Execute one service operation.

    Args:
      method: HTTP method, such as 'POST', 'GET', 'DELETE'
      endpoint: Base API URL
      path: Path pattern with ``{name}`` placeholders
      path_params: Values for the placeholders
      query_params: Query parameters to append
      header_params: Ordered (key, value) header pairs
      body: Body to send, or None for no body
      errors: Maps recognised status codes to messages
      non_json_body: Send ``body`` verbatim instead of JSON-encoding it

    Returns:
      Parsed JSON body of a successful response, or None when it is empty

    Raises:
      ServiceCallError: The ApiClient failed to complete the call
      ResponseParseError: The response body is not valid JSON
      ServiceError: The status code is outside [200, 300)
    """
    url = build_url(endpoint, path, query_params, path_params)
    request_body = None
    if body is not None:
      request_body = body if non_json_body else json.dumps(body)

    request = ApiClientRequest(
      url=url,
      method=method,
      headers=tuple(header_params or ()),
      body=request_body,
    )

    logger.debug('Dispatching %s %s', method, url)
    try:
      response = await self._api_configuration.api_client.invoke(request)
    except Exception as exc:  # noqa: BLE001
      logger.warning('Call to %s %s failed: %s', method, url, exc)
      raise ServiceCallError(str(exc)) from exc

    parsed_body = self._parse_body(response)

    if is_code_successful(response.status_code):
      return parsed_body

    message = UNKNOWN_ERROR_MESSAGE
    if errors and response.status_code in errors:
      message = errors[response.status_code]

    logger.warning('%s %s returned %s: %s', method, url, response.status_code, message)
    raise ServiceError(message, status_code=response.status_code, response=parsed_body)

  @staticmethod
  def _parse_body(response: ApiClientResponse) -> Any:
    if not response.body:
      return None
    try:
      return json.loads(response.body)
    except ValueError as exc:
      raise ResponseParseError(response.body) from exc
