"""Tests for the service client factory."""

import pytest

from ask_services.application.clients.device_address import DeviceAddressServiceClient
from ask_services.application.clients.directive import DirectiveServiceClient
from ask_services.application.clients.list_management import ListManagementServiceClient
from ask_services.application.clients.monetization import MonetizationServiceClient
from ask_services.application.clients.proactive_events import ProactiveEventsServiceClient
from ask_services.application.clients.reminder_management import ReminderManagementServiceClient
from ask_services.application.clients.ups import UpsServiceClient
from ask_services.application.services.lwa_service_client import LwaServiceClient
from ask_services.application.services.service_client_factory import ServiceClientFactory
from ask_services.ports.output.errors import ServiceClientFactoryError


class TestServiceClientFactory:
  @pytest.mark.parametrize('getter, expected', [
    ('get_device_address_service_client', DeviceAddressServiceClient),
    ('get_directive_service_client', DirectiveServiceClient),
    ('get_list_management_service_client', ListManagementServiceClient),
    ('get_monetization_service_client', MonetizationServiceClient),
    ('get_reminder_management_service_client', ReminderManagementServiceClient),
    ('get_ups_service_client', UpsServiceClient),
  ])
  def test_builds_clients(self, api_configuration, getter, expected):
    factory = ServiceClientFactory(api_configuration)

    assert isinstance(getattr(factory, getter)(), expected)

  def test_builds_credentialed_clients(self, api_configuration, authentication_configuration):
    factory = ServiceClientFactory(api_configuration, authentication_configuration)

    assert isinstance(factory.get_proactive_events_service_client(), ProactiveEventsServiceClient)
    assert isinstance(factory.get_lwa_service_client(), LwaServiceClient)

  def test_missing_credentials_are_reported(self, api_configuration):
    factory = ServiceClientFactory(api_configuration)

    with pytest.raises(ServiceClientFactoryError) as exc_info:
      factory.get_proactive_events_service_client()

    message = str(exc_info.value)
    assert message.startswith('ServiceClientFactory Error while initializing ProactiveEventsServiceClient: ')
    assert 'AuthenticationConfiguration' in message
    assert isinstance(exc_info.value.__cause__, ValueError)

  def test_missing_configuration_is_reported(self):
    factory = ServiceClientFactory(None)

    with pytest.raises(ServiceClientFactoryError, match='UpsServiceClient'):
      factory.get_ups_service_client()
