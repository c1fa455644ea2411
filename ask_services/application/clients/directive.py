"""Client for the progressive response (directive) API."""
from __future__ import annotations

from typing import Any, Mapping

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError


class DirectiveServiceClient:
  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def enqueue(self, send_directive_request: Mapping[str, Any]) -> None:
    """Send a directive (e.g. a speak progressive response) to the device."""
    if send_directive_request is None:
      raise RequiredParameterError('send_directive_request', 'enqueue')

    error_definitions = {
      204: 'Directive sent successfully.',
      400: 'Directive not valid.',
      401: 'Not Authorized.',
      403: 'The skill is not allowed to send directives at the moment.',
      0: 'Unexpected error.',
    }

    await self._invoker.invoke(
      'POST',
      self._api_configuration.api_endpoint,
      '/v1/directives',
      {},
      {},
      bearer_headers(self._api_configuration.authorization_value),
      send_directive_request,
      error_definitions,
    )
