"""Client for the device address settings API."""
from __future__ import annotations

from typing import Any, Dict

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError

_ADDRESS_ERRORS = {
  204: 'No content could be queried out',
  403: "The authentication token is invalid or doesn't have access to the resource",
  405: 'The method is not supported',
  429: 'The request is throttled',
  0: 'Unexpected error',
}


class DeviceAddressServiceClient:
  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def get_country_and_postal_code(self, device_id: str) -> Dict[str, Any]:
    """Get the country and postal code of ``device_id``."""
    return await self._get_address(
      'get_country_and_postal_code',
      device_id,
      '/v1/devices/{deviceId}/settings/address/countryAndPostalCode',
      {200: 'Successfully get the country and postal code of the deviceId', **_ADDRESS_ERRORS},
    )

  async def get_full_address(self, device_id: str) -> Dict[str, Any]:
    """Get the full address of ``device_id``."""
    return await self._get_address(
      'get_full_address',
      device_id,
      '/v1/devices/{deviceId}/settings/address',
      {200: 'Successfully get the address of the device', **_ADDRESS_ERRORS},
    )

  async def _get_address(
    self, operation_id: str, device_id: str, path: str, errors: Dict[int, str]
  ) -> Dict[str, Any]:
    if device_id is None:
      raise RequiredParameterError('device_id', operation_id)

    return await self._invoker.invoke(
      'GET',
      self._api_configuration.api_endpoint,
      path,
      {'deviceId': device_id},
      {},
      bearer_headers(self._api_configuration.authorization_value),
      None,
      errors,
    )
