"""Application handler behind the command line adapter."""
from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Optional

from ask_services.application.commands.service_call_command import ServiceCallCommand
from ask_services.application.queries.call_result import CallResult, CallStatus
from ask_services.application.services.api_invoker import ApiInvoker, bearer_headers
from ask_services.application.services.lwa_service_client import LwaServiceClient
from ask_services.application.services.service_client_factory import ServiceClientFactory
from ask_services.ports.output.errors import AskServiceError, ServiceError


class ServiceCallHandler:
  """Runs service operations and folds their outcome into a CallResult.

  Library errors become ERROR results carrying the error type and, for
  service errors, the status code and response body. Anything else
  propagates.
  """

  def __init__(self, factory: ServiceClientFactory) -> None:
    self._factory = factory
    self._lwa_client: Optional[LwaServiceClient] = None

  async def call(self, command: ServiceCallCommand) -> CallResult:
    configuration = self._factory.api_configuration
    invoker = ApiInvoker(configuration)
    operation = f'{command.method} {command.path}'

    return await self._run(operation, lambda: invoker.invoke(
      command.method,
      command.endpoint or configuration.api_endpoint,
      command.path,
      command.path_params,
      command.query_params,
      bearer_headers(configuration.authorization_value),
      command.body,
      {},
    ))

  async def fetch_token(self, scope: str) -> CallResult:
    async def fetch() -> str:
      if self._lwa_client is None:
        self._lwa_client = self._factory.get_lwa_service_client()
      return await self._lwa_client.get_access_token_for_scope(scope)

    return await self._run(f'token {scope}', fetch)

  async def list_reminders(self) -> CallResult:
    async def fetch() -> Any:
      client = self._factory.get_reminder_management_service_client()
      return await client.get_reminders()

    return await self._run('get_reminders', fetch)

  @staticmethod
  async def _run(operation: str, action: Callable[[], Awaitable[Any]]) -> CallResult:
    start = time.perf_counter()
    try:
      data = await action()
    except AskServiceError as exc:
      result = CallResult(
        status=CallStatus.ERROR,
        operation=operation,
        execution_time=time.perf_counter() - start,
        error=str(exc),
        error_type=type(exc).__name__,
      )
      if isinstance(exc, ServiceError):
        result.status_code = exc.status_code
        result.data = exc.response
      return result

    return CallResult(
      status=CallStatus.SUCCESS,
      operation=operation,
      data=data,
      execution_time=time.perf_counter() - start,
    )
