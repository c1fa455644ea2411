"""Factory that builds service clients from one shared ApiConfiguration."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from ask_services.application.clients.device_address import DeviceAddressServiceClient
from ask_services.application.clients.directive import DirectiveServiceClient
from ask_services.application.clients.list_management import ListManagementServiceClient
from ask_services.application.clients.monetization import MonetizationServiceClient
from ask_services.application.clients.proactive_events import ProactiveEventsServiceClient
from ask_services.application.clients.reminder_management import ReminderManagementServiceClient
from ask_services.application.clients.ups import UpsServiceClient
from ask_services.application.services.lwa_service_client import LwaServiceClient
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.domain.value_objects.lwa_credentials import AuthenticationConfiguration
from ask_services.ports.output.errors import ServiceClientFactoryError

T = TypeVar('T')


class ServiceClientFactory:
  """Instantiates service clients, resolving their ApiConfiguration.

  Construction failures are reported as ServiceClientFactoryError naming the
  client that could not be built.
  """

  def __init__(
    self,
    api_configuration: ApiConfiguration,
    authentication_configuration: Optional[AuthenticationConfiguration] = None,
  ) -> None:
    self._api_configuration = api_configuration
    self._authentication_configuration = authentication_configuration

  @property
  def api_configuration(self) -> ApiConfiguration:
    return self._api_configuration

  def get_device_address_service_client(self) -> DeviceAddressServiceClient:
    return self._build(DeviceAddressServiceClient)

  def get_directive_service_client(self) -> DirectiveServiceClient:
    return self._build(DirectiveServiceClient)

  def get_list_management_service_client(self) -> ListManagementServiceClient:
    return self._build(ListManagementServiceClient)

  def get_monetization_service_client(self) -> MonetizationServiceClient:
    return self._build(MonetizationServiceClient)

  def get_reminder_management_service_client(self) -> ReminderManagementServiceClient:
    return self._build(ReminderManagementServiceClient)

  def get_ups_service_client(self) -> UpsServiceClient:
    return self._build(UpsServiceClient)

  def get_proactive_events_service_client(self) -> ProactiveEventsServiceClient:
    return self._build(
      ProactiveEventsServiceClient,
      lambda configuration: ProactiveEventsServiceClient(
        configuration, self._authentication_configuration,
      ),
    )

  def get_lwa_service_client(self) -> LwaServiceClient:
    return self._build(
      LwaServiceClient,
      lambda configuration: LwaServiceClient(configuration, self._authentication_configuration),
    )

  def _build(
    self,
    client_cls: Callable[..., T],
    constructor: Optional[Callable[[ApiConfiguration], T]] = None,
  ) -> T:
    build = constructor or client_cls
    try:
      return build(self._api_configuration)
    except Exception as exc:  # noqa: BLE001
      raise ServiceClientFactoryError(client_cls.__name__, exc) from exc
