"""Exceptions raised by service clients."""
from __future__ import annotations

from typing import Any, Optional

CALL_FAILED_PREFIX = 'Call to service failed: '
UNKNOWN_ERROR_MESSAGE = 'Unknown error'


class AskServiceError(Exception):
  """Base exception for every failure surfaced by the service clients."""


class ServiceCallError(AskServiceError):
  """The transport could not complete the call (network failure, timeout...)."""

  def __init__(self, message: str):
    super().__init__(f'{CALL_FAILED_PREFIX}{message}')


class ResponseParseError(AskServiceError):
  """The response carried a body that is not valid JSON."""

  def __init__(self, body: Optional[str]):
    super().__init__(f'Failed trying to parse the response body: {body}')
    self.body = body


class ServiceError(AskServiceError):
  """The service answered with a status code outside [200, 300)."""

  def __init__(
    self,
    message: str = UNKNOWN_ERROR_MESSAGE,
    status_code: int = 0,
    response: Any = None,
  ):
    super().__init__(message)
    self.message = message
    self.status_code = status_code
    self.response = response

  def __repr__(self) -> str:
    return f'ServiceError(status_code={self.status_code}, message={self.message!r})'


class RequiredParameterError(AskServiceError, ValueError):
  """A required argument was None; raised before any network activity."""

  def __init__(self, parameter: str, operation: Optional[str] = None):
    if operation:
      message = f'Required parameter {parameter} was None when calling {operation}.'
    else:
      message = f'{parameter} cannot be None.'
    super().__init__(message)
    self.parameter = parameter
    self.operation = operation


class ServiceClientFactoryError(AskServiceError):
  """A service client could not be constructed by the factory."""

  def __init__(self, client_name: str, cause: Exception):
    super().__init__(f'ServiceClientFactory Error while initializing {client_name}: {cause}')
    self.client_name = client_name


class TokenResponseError(AskServiceError):
  """The token endpoint answered 2xx without a usable access token."""

  def __init__(self, response: Any):
    super().__init__(f'Token response missing access_token or expires_in: {response}')
    self.response = response
