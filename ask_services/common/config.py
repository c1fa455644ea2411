"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ask_services.domain.value_objects.lwa_credentials import AuthenticationConfiguration

DEFAULT_API_ENDPOINT = 'https://api.amazonalexa.com'


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  api_endpoint: str = DEFAULT_API_ENDPOINT
  authorization_value: str = ''
  client_id: Optional[str] = None
  client_secret: Optional[str] = None
  http_timeout: float = 30.0
  log_level: str = 'WARNING'

  def __post_init__(self) -> None:
    if self.http_timeout <= 0:
      raise ValueError('ASK_HTTP_TIMEOUT must be positive')

  def authentication_configuration(self) -> Optional[AuthenticationConfiguration]:
    """Return LWA credentials, or None when they are not configured."""
    if not self.client_id or not self.client_secret:
      return None
    return AuthenticationConfiguration(client_id=self.client_id, client_secret=self.client_secret)


def load_settings() -> Settings:
  """Build settings from the current environment."""
  timeout = getenv('ASK_HTTP_TIMEOUT', '30')
  try:
    http_timeout = float(timeout)
  except ValueError as exc:
    raise ValueError(f'ASK_HTTP_TIMEOUT must be a number, got {timeout!r}') from exc

  return Settings(
    api_endpoint=getenv('ASK_API_ENDPOINT') or DEFAULT_API_ENDPOINT,
    authorization_value=getenv('ASK_AUTHORIZATION_VALUE', ''),
    client_id=getenv('ASK_CLIENT_ID'),
    client_secret=getenv('ASK_CLIENT_SECRET'),
    http_timeout=http_timeout,
    log_level=getenv('ASK_LOG_LEVEL', 'WARNING').upper(),
  )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  return load_settings()
