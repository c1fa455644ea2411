"""Client for the household lists API."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.errors import RequiredParameterError

# Household lists are served from a fixed host regardless of the configured endpoint.
LIST_MANAGEMENT_ENDPOINT = 'https://api.amazonalexa.com/'


def _errors(*entries: tuple) -> Dict[int, str]:
  table = dict(entries)
  table.setdefault(500, 'Internal Server Error')
  return table


class ListManagementServiceClient:
  """Reads and edits the customer's household lists and list items."""

  def __init__(self, api_configuration: ApiConfiguration) -> None:
    self._api_configuration = api_configuration
    self._invoker = ApiInvoker(api_configuration)

  async def get_lists_metadata(self) -> Dict[str, Any]:
    """Retrieve the metadata for all customer lists."""
    return await self._call(
      'GET',
      '/v2/householdlists/',
      errors=_errors((200, 'Success'), (403, 'Forbidden')),
    )

  async def delete_list(self, list_id: str) -> None:
    """Delete a custom list."""
    self._require('delete_list', list_id=list_id)
    await self._call(
      'DELETE',
      '/v2/householdlists/{listId}/',
      path_params={'listId': list_id},
      errors=_errors(
        (200, 'Success'), (403, 'Forbidden'), (404, 'Not Found'), (0, 'Internal Server Error'),
      ),
    )

  async def delete_list_item(self, list_id: str, item_id: str) -> None:
    """Delete an item from the given list."""
    self._require('delete_list_item', list_id=list_id, item_id=item_id)
    await self._call(
      'DELETE',
      '/v2/householdlists/{listId}/items/{itemId}/',
      path_params={'listId': list_id, 'itemId': item_id},
      errors=_errors(
        (200, 'Success'), (403, 'Forbidden'), (404, 'Not Found'), (0, 'Internal Server Error'),
      ),
    )

  async def get_list_item(self, list_id: str, item_id: str) -> Dict[str, Any]:
    """Retrieve a single list item."""
    self._require('get_list_item', list_id=list_id, item_id=item_id)
    return await self._call(
      'GET',
      '/v2/householdlists/{listId}/items/{itemId}/',
      path_params={'listId': list_id, 'itemId': item_id},
      errors=_errors(
        (200, 'Success'), (403, 'Forbidden'), (404, 'Not Found'), (0, 'Internal Server Error'),
      ),
    )

  async def update_list_item(
    self, list_id: str, item_id: str, update_list_item_request: Mapping[str, Any]
  ) -> Dict[str, Any]:
    """Update an item's value or status."""
    self._require(
      'update_list_item',
      list_id=list_id,
      item_id=item_id,
      update_list_item_request=update_list_item_request,
    )
    return await self._call(
      'PUT',
      '/v2/householdlists/{listId}/items/{itemId}/',
      path_params={'listId': list_id, 'itemId': item_id},
      body=update_list_item_request,
      errors=_errors(
        (200, 'Success'), (403, 'Forbidden'), (404, 'Not Found'), (409, 'Conflict'),
        (0, 'Internal Server Error'),
      ),
    )

  async def create_list_item(
    self, list_id: str, create_list_item_request: Mapping[str, Any]
  ) -> Dict[str, Any]:
    """Add an item to a list."""
    self._require(
      'create_list_item', list_id=list_id, create_list_item_request=create_list_item_request,
    )
    return await self._call(
      'POST',
      '/v2/householdlists/{listId}/items/',
      path_params={'listId': list_id},
      body=create_list_item_request,
      errors=_errors(
        (201, 'Success'), (400, 'Bad Request'), (403, 'Forbidden'), (404, 'Not found'),
        (0, 'Internal Server Error'),
      ),
    )

  async def update_list(self, list_id: str, update_list_request: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename a list or change its state."""
    self._require('update_list', list_id=list_id, update_list_request=update_list_request)
    return await self._call(
      'PUT',
      '/v2/householdlists/{listId}/',
      path_params={'listId': list_id},
      body=update_list_request,
      errors=_errors(
        (200, 'Success'), (400, 'Bad Request'), (403, 'Forbidden'), (404, 'List not found'),
        (409, 'Conflict'), (0, 'Internal Server Error'),
      ),
    )

  async def get_list(self, list_id: str, status: str) -> Dict[str, Any]:
    """Retrieve a list with the items in the given status (active/completed)."""
    self._require('get_list', list_id=list_id, status=status)
    return await self._call(
      'GET',
      '/v2/householdlists/{listId}/{status}/',
      path_params={'listId': list_id, 'status': status},
      errors=_errors(
        (200, 'Success'), (400, 'Bad Request'), (403, 'Forbidden'), (404, 'Not Found'),
        (0, 'Internal Server Error'),
      ),
    )

  async def create_list(self, create_list_request: Mapping[str, Any]) -> Dict[str, Any]:
    """Create a custom list."""
    self._require('create_list', create_list_request=create_list_request)
    return await self._call(
      'POST',
      '/v2/householdlists/',
      body=create_list_request,
      errors=_errors(
        (201, 'Success'), (400, 'Bad Request'), (403, 'Forbidden'), (409, 'Conflict'),
        (0, 'Internal Server Error'),
      ),
    )

  @staticmethod
  def _require(operation_id: str, **params: Any) -> None:
    for name, value in params.items():
      if value is None:
        raise RequiredParameterError(name, operation_id)

  async def _call(
    self,
    method: str,
    path: str,
    *,
    errors: Dict[int, str],
    path_params: Optional[Dict[str, str]] = None,
    body: Any = None,
  ) -> Any:
    return await self._invoker.invoke(
      method,
      LIST_MANAGEMENT_ENDPOINT,
      path,
      path_params or {},
      {},
      bearer_headers(self._api_configuration.authorization_value),
      body,
      errors,
    )
