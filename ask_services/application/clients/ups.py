"""Client for the customer profile and device settings (UPS) API."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError

_COMMON_ERRORS = {
  204: 'The query did not return any results.',
  401: 'The authentication token is malformed or invalid.',
  403: 'The authentication token does not have access to resource.',
  429: 'The skill has been throttled due to an excessive number of requests.',
  0: 'An unexpected error occurred.',
}
_PROFILE_ERRORS = {200: 'Successfully retrieved the requested information.', **_COMMON_ERRORS}
_SETTING_ERRORS = {200: 'Successfully get the setting', **_COMMON_ERRORS}


class UpsServiceClient:
  """Reads customer profile fields and per-device system settings."""

  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def get_profile_email(self) -> Optional[str]:
    return await self._get('/v2/accounts/~current/settings/Profile.email', _PROFILE_ERRORS)

  async def get_profile_given_name(self) -> Optional[str]:
    return await self._get('/v2/accounts/~current/settings/Profile.givenName', _PROFILE_ERRORS)

  async def get_profile_mobile_number(self) -> Optional[Dict[str, Any]]:
    """Returns a ``{countryCode, phoneNumber}`` mapping."""
    return await self._get('/v2/accounts/~current/settings/Profile.mobileNumber', _PROFILE_ERRORS)

  async def get_profile_name(self) -> Optional[str]:
    return await self._get('/v2/accounts/~current/settings/Profile.name', _PROFILE_ERRORS)

  async def get_system_distance_units(self, device_id: str) -> Optional[str]:
    """Returns ``METRIC`` or ``IMPERIAL``."""
    return await self._get_device_setting('get_system_distance_units', device_id, 'System.distanceUnits')

  async def get_system_temperature_unit(self, device_id: str) -> Optional[str]:
    """Returns ``CELSIUS`` or ``FAHRENHEIT``."""
    return await self._get_device_setting('get_system_temperature_unit', device_id, 'System.temperatureUnit')

  async def get_system_time_zone(self, device_id: str) -> Optional[str]:
    return await self._get_device_setting('get_system_time_zone', device_id, 'System.timeZone')

  async def _get_device_setting(self, operation_id: str, device_id: str, setting: str) -> Any:
    if device_id is None:
      raise RequiredParameterError('device_id', operation_id)
    return await self._get(
      f'/v2/devices/{{deviceId}}/settings/{setting}',
      _SETTING_ERRORS,
      path_params={'deviceId': device_id},
    )

  async def _get(
    self, path: str, errors: Dict[int, str], path_params: Optional[Dict[str, str]] = None
  ) -> Any:
    return await self._invoker.invoke(
      'GET',
      self._api_configuration.api_endpoint,
      path,
      path_params or {},
      {},
      bearer_headers(self._api_configuration.authorization_value),
      None,
      errors,
    )
