"""Tests for the endpoint wrappers built on the invocation engine."""

import json
from unittest.mock import AsyncMock

import pytest

from ask_services.application.clients.device_address import DeviceAddressServiceClient
from ask_services.application.clients.directive import DirectiveServiceClient
from ask_services.application.clients.list_management import ListManagementServiceClient
from ask_services.application.clients.monetization import MonetizationServiceClient
from ask_services.application.clients.proactive_events import (
  ProactiveEventsServiceClient,
  SkillStage,
)
from ask_services.application.clients.reminder_management import ReminderManagementServiceClient
from ask_services.application.clients.ups import UpsServiceClient
from ask_services.ports.output.errors import RequiredParameterError, ServiceError

AUTH_HEADERS = (('Content-type', 'application/json'), ('Authorization', 'Bearer test-token'))


class TestDeviceAddressServiceClient:
  @pytest.mark.asyncio
  async def test_full_address(self, api_configuration, api_client):
    api_client.respond(200, {'city': 'Seattle'})
    client = DeviceAddressServiceClient(api_configuration)

    address = await client.get_full_address('device/1')

    assert address == {'city': 'Seattle'}
    request = api_client.last_request
    assert request.method == 'GET'
    assert request.url == 'https://api.example.com/v1/devices/device%2F1/settings/address'
    assert request.headers == AUTH_HEADERS

  @pytest.mark.asyncio
  async def test_country_and_postal_code_error_table(self, api_configuration, api_client):
    api_client.respond(403)
    client = DeviceAddressServiceClient(api_configuration)

    with pytest.raises(ServiceError) as exc_info:
      await client.get_country_and_postal_code('d1')

    assert exc_info.value.status_code == 403
    assert "doesn't have access" in exc_info.value.message

  @pytest.mark.asyncio
  async def test_requires_device_id(self, api_configuration, api_client):
    client = DeviceAddressServiceClient(api_configuration)

    with pytest.raises(RequiredParameterError, match='device_id'):
      await client.get_full_address(None)

    assert api_client.requests == []

  @pytest.mark.asyncio
  async def test_reads_authorization_value_per_call(self, api_configuration, api_client):
    client = DeviceAddressServiceClient(api_configuration)
    api_configuration.authorization_value = 'rotated'

    await client.get_full_address('d1')

    assert api_client.last_request.header('Authorization') == 'Bearer rotated'


class TestDirectiveServiceClient:
  @pytest.mark.asyncio
  async def test_enqueue_posts_json(self, api_configuration, api_client):
    api_client.respond(204)
    directive = {'header': {'requestId': 'r1'}, 'directive': {'type': 'VoicePlayer.Speak', 'speech': 'hi'}}

    result = await DirectiveServiceClient(api_configuration).enqueue(directive)

    assert result is None
    assert api_client.last_request.url == 'https://api.example.com/v1/directives'
    assert json.loads(api_client.last_request.body) == directive


class TestListManagementServiceClient:
  @pytest.mark.asyncio
  async def test_uses_fixed_endpoint(self, api_configuration, api_client):
    await ListManagementServiceClient(api_configuration).get_lists_metadata()

    assert api_client.last_request.url == 'https://api.amazonalexa.com/v2/householdlists/'

  @pytest.mark.asyncio
  async def test_delete_list_item_not_found(self, api_configuration, api_client):
    api_client.respond(404)

    with pytest.raises(ServiceError) as exc_info:
      await ListManagementServiceClient(api_configuration).delete_list_item('L1', 'I1')

    assert exc_info.value.message == 'Not Found'
    assert api_client.last_request.method == 'DELETE'
    assert api_client.last_request.url == 'https://api.amazonalexa.com/v2/householdlists/L1/items/I1/'

  @pytest.mark.asyncio
  async def test_get_list_with_status(self, api_configuration, api_client):
    await ListManagementServiceClient(api_configuration).get_list('L1', 'active')

    assert api_client.last_request.url == 'https://api.amazonalexa.com/v2/householdlists/L1/active/'

  @pytest.mark.asyncio
  async def test_create_list_item(self, api_configuration, api_client):
    api_client.respond(201, {'id': 'I9', 'value': 'milk'})

    item = await ListManagementServiceClient(api_configuration).create_list_item(
      'L1', {'value': 'milk', 'status': 'active'},
    )

    assert item['id'] == 'I9'
    assert api_client.last_request.method == 'POST'
    assert json.loads(api_client.last_request.body) == {'value': 'milk', 'status': 'active'}

  @pytest.mark.asyncio
  async def test_update_list_conflict(self, api_configuration, api_client):
    api_client.respond(409)

    with pytest.raises(ServiceError, match='Conflict'):
      await ListManagementServiceClient(api_configuration).update_list('L1', {'name': 'x'})

  @pytest.mark.asyncio
  async def test_update_list_item_requires_body(self, api_configuration, api_client):
    with pytest.raises(RequiredParameterError, match='update_list_item_request'):
      await ListManagementServiceClient(api_configuration).update_list_item('L1', 'I1', None)

    assert api_client.requests == []


class TestMonetizationServiceClient:
  @pytest.mark.asyncio
  async def test_in_skill_products_query(self, api_configuration, api_client):
    api_client.respond(200, {'inSkillProducts': []})

    await MonetizationServiceClient(api_configuration).get_in_skill_products(
      'en-US', purchasable='PURCHASABLE', max_results=10,
    )

    request = api_client.last_request
    assert request.url == (
      'https://api.example.com/v1/users/~current/skills/~current/inSkillProducts'
      '?purchasable=PURCHASABLE&maxResults=10'
    )
    assert request.headers == (
      ('Content-type', 'application/json'),
      ('Accept-Language', 'en-US'),
      ('Authorization', 'Bearer test-token'),
    )

  @pytest.mark.asyncio
  async def test_in_skill_products_without_filters(self, api_configuration, api_client):
    await MonetizationServiceClient(api_configuration).get_in_skill_products('en-US')

    assert '?' not in api_client.last_request.url

  @pytest.mark.asyncio
  async def test_in_skill_product_requires_language(self, api_configuration):
    with pytest.raises(RequiredParameterError):
      await MonetizationServiceClient(api_configuration).get_in_skill_product(None, 'p1')


class TestProactiveEventsServiceClient:
  @pytest.mark.asyncio
  async def test_uses_scoped_token_for_live_stage(self, api_configuration, authentication_configuration, api_client):
    token_provider = AsyncMock()
    token_provider.get_access_token_for_scope.return_value = 'lwa-token'
    client = ProactiveEventsServiceClient(
      api_configuration, authentication_configuration, token_provider=token_provider,
    )
    api_client.respond(202)

    await client.create_proactive_event({'referenceId': 'ref'}, SkillStage.LIVE)

    token_provider.get_access_token_for_scope.assert_awaited_once_with('alexa::proactive_events')
    request = api_client.last_request
    assert request.url == 'https://api.example.com/v1/proactiveEvents'
    assert request.header('Authorization') == 'Bearer lwa-token'

  @pytest.mark.asyncio
  async def test_development_stage_path(self, api_configuration, authentication_configuration, api_client):
    api_client.respond(200, {'access_token': 'T', 'expires_in': 3600})
    api_client.respond(202)
    client = ProactiveEventsServiceClient(api_configuration, authentication_configuration)

    await client.create_proactive_event({'referenceId': 'ref'}, 'DEVELOPMENT')

    token_request, event_request = api_client.requests
    assert token_request.url == 'https://api.amazon.com/auth/O2/token'
    assert event_request.url == 'https://api.example.com/v1/proactiveEvents/stages/development'
    assert event_request.header('Authorization') == 'Bearer T'

  @pytest.mark.asyncio
  @pytest.mark.parametrize('stage', [None, 'development', 'STAGING'])
  async def test_unrecognised_stage_goes_live(self, api_configuration, authentication_configuration, api_client, stage):
    token_provider = AsyncMock()
    token_provider.get_access_token_for_scope.return_value = 'lwa-token'
    client = ProactiveEventsServiceClient(
      api_configuration, authentication_configuration, token_provider=token_provider,
    )

    await client.create_proactive_event({'referenceId': 'ref'}, stage)

    assert api_client.last_request.url == 'https://api.example.com/v1/proactiveEvents'

  def test_requires_authentication_configuration(self, api_configuration):
    with pytest.raises(ValueError):
      ProactiveEventsServiceClient(api_configuration, None)


class TestReminderManagementServiceClient:
  @pytest.mark.asyncio
  async def test_get_reminders(self, api_configuration, api_client):
    api_client.respond(200, {'totalCount': '0', 'alerts': []})

    result = await ReminderManagementServiceClient(api_configuration).get_reminders()

    assert result['alerts'] == []
    assert api_client.last_request.url == 'https://api.example.com/v1/alerts/reminders/'

  @pytest.mark.asyncio
  async def test_update_reminder_not_found(self, api_configuration, api_client):
    api_client.respond(404)

    with pytest.raises(ServiceError) as exc_info:
      await ReminderManagementServiceClient(api_configuration).update_reminder('tok', {'trigger': {}})

    assert exc_info.value.message.startswith('NotFoundException')
    assert api_client.last_request.method == 'PUT'
    assert api_client.last_request.url == 'https://api.example.com/v1/alerts/reminders/tok'

  @pytest.mark.asyncio
  async def test_create_reminder_gateway_timeout(self, api_configuration, api_client):
    api_client.respond(504)

    with pytest.raises(ServiceError, match='Gateway Timeout'):
      await ReminderManagementServiceClient(api_configuration).create_reminder({'trigger': {}})

  @pytest.mark.asyncio
  async def test_delete_requires_token(self, api_configuration):
    with pytest.raises(RequiredParameterError, match='delete_reminder'):
      await ReminderManagementServiceClient(api_configuration).delete_reminder(None)


class TestUpsServiceClient:
  @pytest.mark.asyncio
  async def test_profile_email(self, api_configuration, api_client):
    api_client.respond(200, raw='"user@example.com"')

    email = await UpsServiceClient(api_configuration).get_profile_email()

    assert email == 'user@example.com'
    assert api_client.last_request.url == 'https://api.example.com/v2/accounts/~current/settings/Profile.email'

  @pytest.mark.asyncio
  async def test_profile_no_content(self, api_configuration, api_client):
    api_client.respond(204)

    assert await UpsServiceClient(api_configuration).get_profile_name() is None

  @pytest.mark.asyncio
  async def test_time_zone(self, api_configuration, api_client):
    api_client.respond(200, raw='"America/Los_Angeles"')

    zone = await UpsServiceClient(api_configuration).get_system_time_zone('d1')

    assert zone == 'America/Los_Angeles'
    assert api_client.last_request.url == 'https://api.example.com/v2/devices/d1/settings/System.timeZone'

  @pytest.mark.asyncio
  async def test_throttled(self, api_configuration, api_client):
    api_client.respond(429)

    with pytest.raises(ServiceError, match='throttled'):
      await UpsServiceClient(api_configuration).get_system_distance_units('d1')
