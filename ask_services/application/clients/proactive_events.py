"""Client for the proactive events API."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.application.services.lwa_service_client import LwaServiceClient
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.domain.value_objects.lwa_credentials import AuthenticationConfiguration
from ask_services.ports.output.access_token_provider import AccessTokenProvider
from ask_services.ports.output.errors import RequiredParameterError

PROACTIVE_EVENTS_SCOPE = 'alexa::proactive_events'


class SkillStage(str, Enum):
  """Stage of the skill the events are sent to."""
  DEVELOPMENT = 'DEVELOPMENT'
  LIVE = 'LIVE'


class ProactiveEventsServiceClient:
  """Sends proactive events, authenticating with skill credentials via LWA.

  Unlike the other clients, the bearer token is not the per-request
  authorization value but an LWA token for ``alexa::proactive_events``.
  """

  def __init__(
    self,
    api_configuration: ApiConfiguration,
    authentication_configuration: AuthenticationConfiguration,
    token_provider: Optional[AccessTokenProvider] = None,
  ) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)
    self._token_provider = token_provider or LwaServiceClient(
      api_configuration, authentication_configuration,
    )

  async def create_proactive_event(
    self,
    create_proactive_event_request: Mapping[str, Any],
    stage: SkillStage = SkillStage.LIVE,
  ) -> None:
    """Create a proactive event for the given skill stage."""
    if create_proactive_event_request is None:
      raise RequiredParameterError('create_proactive_event_request', 'create_proactive_event')

    access_token = await self._token_provider.get_access_token_for_scope(PROACTIVE_EVENTS_SCOPE)

    path = '/v1/proactiveEvents'
    if stage == SkillStage.DEVELOPMENT:
      path += '/stages/development'

    error_definitions = {
      202: 'Request accepted',
      400: (
        'A required parameter is not present or is incorrectly formatted, or the requested '
        'creation of a resource has already been completed by a previous request. '
      ),
      403: "The authentication token is invalid or doesn't have authentication to access the resource",
      409: 'A skill attempts to create duplicate events using the same referenceId for the same customer.',
      429: 'The client has made more calls than the allowed limit.',
      500: 'The ProactiveEvents service encounters an internal error for a valid request.',
      0: 'Unexpected error',
    }

    await self._invoker.invoke(
      'POST',
      self._api_configuration.api_endpoint,
      path,
      {},
      {},
      bearer_headers(access_token),
      create_proactive_event_request,
      error_definitions,
    )
