"""LWA client that exchanges skill credentials for scoped access tokens."""
from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import urlencode

from ask_services.application.services.api_invoker import FORM_CONTENT_TYPE, ApiInvoker
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.domain.value_objects.lwa_credentials import (
  AccessToken,
  AccessTokenRequest,
  AccessTokenResponse,
  AuthenticationConfiguration,
)
from ask_services.ports.output.access_token_provider import AccessTokenProvider
from ask_services.ports.output.errors import RequiredParameterError, TokenResponseError

logger = logging.getLogger(__name__)

LWA_ENDPOINT = 'https://api.amazon.com'
LWA_TOKEN_PATH = '/auth/O2/token'


class LwaServiceClient(AccessTokenProvider):
  """Fetches LWA access tokens and caches them per scope.

  A cached token is reused while it stays valid for longer than
  ``EXPIRY_OFFSET_MILLIS``; otherwise a new client_credentials exchange is
  made and overwrites the entry. Concurrent misses for the same scope are
  not coalesced: each issues its own exchange and the last one stored wins.
  """

  EXPIRY_OFFSET_MILLIS = 60000

  def __init__(
    self,
    api_configuration: ApiConfiguration,
    authentication_configuration: AuthenticationConfiguration,
    clock: Callable[[], float] = time.time,
  ) -> None:
    if authentication_configuration is None:
      raise ValueError('AuthenticationConfiguration cannot be None.')
    self._invoker = ApiInvoker(api_configuration)
    self._authentication_configuration = authentication_configuration
    self._clock = clock
    self._scope_token_store: Dict[str, AccessToken] = {}

  async def get_access_token_for_scope(self, scope: str) -> str:
    """Return a token for ``scope``, exchanging credentials on a cache miss."""
    if scope is None:
      raise RequiredParameterError('scope')

    cached = self._scope_token_store.get(scope)
    if cached and cached.is_valid_at(self._now_millis(), self.EXPIRY_OFFSET_MILLIS):
      logger.debug('Using cached LWA token for scope %s', scope)
      return cached.token

    logger.debug('Requesting LWA token for scope %s', scope)
    access_token_request = AccessTokenRequest(
      client_id=self._authentication_configuration.client_id,
      client_secret=self._authentication_configuration.client_secret,
      scope=scope,
    )
    access_token_response = await self.generate_access_token(access_token_request)

    self._scope_token_store[scope] = AccessToken(
      token=access_token_response.access_token,
      expiry=self._now_millis() + access_token_response.expires_in * 1000,
    )
    return access_token_response.access_token

  async def generate_access_token(
    self, access_token_request: AccessTokenRequest
  ) -> AccessTokenResponse:
    """POST a client_credentials grant to the LWA token endpoint."""
    if access_token_request is None:
      raise RequiredParameterError('access_token_request', 'generate_access_token')

    header_params = [('Content-type', FORM_CONTENT_TYPE)]
    # Scopes such as alexa::proactive_events go out with their colons intact.
    body = urlencode(access_token_request.to_form_fields(), safe=':')

    error_definitions = {
      200: 'Token request sent.',
      400: 'Bad Request',
      401: 'Authentication Failed',
      500: 'Internal Server Error',
    }

    response_data = await self._invoker.invoke(
      'POST',
      LWA_ENDPOINT,
      LWA_TOKEN_PATH,
      {},
      {},
      header_params,
      body,
      error_definitions,
      non_json_body=True,
    )
    if (
      not isinstance(response_data, Mapping)
      or 'access_token' not in response_data
      or 'expires_in' not in response_data
    ):
      raise TokenResponseError(response_data)
    try:
      return AccessTokenResponse.from_response(response_data)
    except (TypeError, ValueError) as exc:
      raise TokenResponseError(response_data) from exc

  def cached_token(self, scope: str) -> Optional[AccessToken]:
    """Return the cached entry for ``scope`` without validating it."""
    return self._scope_token_store.get(scope)

  def clear_cache(self) -> None:
    """Clear all cached tokens."""
    self._scope_token_store.clear()

  def _now_millis(self) -> float:
    return self._clock() * 1000
