"""Simple dependency wiring helpers."""
from __future__ import annotations

from typing import Optional

from ask_services.adapters.output.api.requests_api_client import RequestsApiClient
from ask_services.application.services.service_client_factory import ServiceClientFactory
from ask_services.common.config import Settings, get_settings
from ask_services.domain.value_objects.api_configuration import ApiConfiguration
from ask_services.ports.output.api_client import ApiClient


def create_api_configuration(
  settings: Optional[Settings] = None, api_client: Optional[ApiClient] = None
) -> ApiConfiguration:
  settings = settings or get_settings()
  return ApiConfiguration(
    api_client=api_client or RequestsApiClient(timeout=settings.http_timeout),
    authorization_value=settings.authorization_value,
    api_endpoint=settings.api_endpoint,
  )


def create_service_client_factory(
  settings: Optional[Settings] = None, api_client: Optional[ApiClient] = None
) -> ServiceClientFactory:
  settings = settings or get_settings()
  return ServiceClientFactory(
    create_api_configuration(settings, api_client),
    settings.authentication_configuration(),
  )
