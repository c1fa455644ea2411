"""Client for the reminders API."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError

_UNAUTHENTICATED = (
  'UserAuthenticationException. Request is not authorized/authenticated e.g. If customer '
  'does not have permission to create a reminder.'
)
_THROTTLED = 'RateExceededException e.g. When the skill is throttled for exceeding the max rate'

_READ_ERRORS = {
  200: 'Success',
  401: _UNAUTHENTICATED,
  429: _THROTTLED,
  500: 'Internal Server Error',
}


class ReminderManagementServiceClient:
  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def delete_reminder(self, alert_token: str) -> None:
    if alert_token is None:
      raise RequiredParameterError('alert_token', 'delete_reminder')
    await self._call('DELETE', '/v1/alerts/reminders/{alertToken}', _READ_ERRORS, alert_token)

  async def get_reminder(self, alert_token: str) -> Dict[str, Any]:
    if alert_token is None:
      raise RequiredParameterError('alert_token', 'get_reminder')
    return await self._call('GET', '/v1/alerts/reminders/{alertToken}', _READ_ERRORS, alert_token)

  async def update_reminder(self, alert_token: str, reminder_request: Mapping[str, Any]) -> Dict[str, Any]:
    if alert_token is None:
      raise RequiredParameterError('alert_token', 'update_reminder')
    if reminder_request is None:
      raise RequiredParameterError('reminder_request', 'update_reminder')

    error_definitions = {
      200: 'Success',
      400: 'Bad Request',
      404: 'NotFoundException e.g. Retured when reminder is not found',
      409: _UNAUTHENTICATED,
      429: _THROTTLED,
      500: 'Internal Server Error',
    }
    return await self._call(
      'PUT', '/v1/alerts/reminders/{alertToken}', error_definitions, alert_token, reminder_request,
    )

  async def get_reminders(self) -> Dict[str, Any]:
    """List every reminder the skill created for the customer."""
    return await self._call('GET', '/v1/alerts/reminders/', _READ_ERRORS)

  async def create_reminder(self, reminder_request: Mapping[str, Any]) -> Dict[str, Any]:
    if reminder_request is None:
      raise RequiredParameterError('reminder_request', 'create_reminder')

    error_definitions = {
      200: 'Success',
      400: 'Bad Request',
      403: 'Forbidden',
      429: _THROTTLED,
      500: 'Internal Server Error',
      503: 'Service Unavailable',
      504: 'Gateway Timeout',
    }
    return await self._call(
      'POST', '/v1/alerts/reminders/', error_definitions, body=reminder_request,
    )

  async def _call(
    self,
    method: str,
    path: str,
    errors: Dict[int, str],
    alert_token: Optional[str] = None,
    body: Any = None,
  ) -> Any:
    path_params = {'alertToken': alert_token} if alert_token is not None else {}
    return await self._invoker.invoke(
      method,
      self._api_configuration.api_endpoint,
      path,
      path_params,
      {},
      bearer_headers(self._api_configuration.authorization_value),
      body,
      errors,
    )
