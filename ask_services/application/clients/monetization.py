"""Client for the in-skill products (monetization) API."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError

_UNAUTHORIZED = "The authentication token is invalid or doesn't have access to make this request"


class MonetizationServiceClient:
  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def get_in_skill_products(
    self,
    accept_language: str,
    purchasable: Optional[str] = None,
    entitled: Optional[str] = None,
    product_type: Optional[str] = None,
    next_token: Optional[str] = None,
    max_results: Optional[int] = None,
  ) -> Dict[str, Any]:
    """List in-skill products, optionally filtered; pages with ``next_token``."""
    if accept_language is None:
      raise RequiredParameterError('accept_language', 'get_in_skill_products')

    query_params: Dict[str, str] = {}
    if purchasable is not None:
      query_params['purchasable'] = purchasable
    if entitled is not None:
      query_params['entitled'] = entitled
    if product_type is not None:
      query_params['productType'] = product_type
    if next_token is not None:
      query_params['nextToken'] = next_token
    if max_results is not None:
      query_params['maxResults'] = str(max_results)

    error_definitions = {
      200: 'Returns a list of In-Skill products on success.',
      400: 'Invalid request',
      401: _UNAUTHORIZED,
      500: 'Internal Server Error',
    }

    return await self._invoker.invoke(
      'GET',
      self._api_configuration.api_endpoint,
      '/v1/users/~current/skills/~current/inSkillProducts',
      {},
      query_params,
      self._headers(accept_language),
      None,
      error_definitions,
    )

  async def get_in_skill_product(self, accept_language: str, product_id: str) -> Dict[str, Any]:
    """Fetch one in-skill product by id."""
    if accept_language is None:
      raise RequiredParameterError('accept_language', 'get_in_skill_product')
    if product_id is None:
      raise RequiredParameterError('product_id', 'get_in_skill_product')

    error_definitions = {
      200: 'Returns an In-Skill Product on success.',
      400: 'Invalid request.',
      401: _UNAUTHORIZED,
      404: 'Requested resource not found.',
      500: 'Internal Server Error.',
    }

    return await self._invoker.invoke(
      'GET',
      self._api_configuration.api_endpoint,
      '/v1/users/~current/skills/~current/inSkillProducts/{productId}',
      {'productId': product_id},
      {},
      self._headers(accept_language),
      None,
      error_definitions,
    )

  def _headers(self, accept_language: str) -> list:
    headers = bearer_headers(self._api_configuration.authorization_value)
    headers.insert(1, ('Accept-Language', accept_language))
    return headers
