"""Command object representing a raw call to a skills API endpoint."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

ALLOWED_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE')


@dataclass(frozen=True)
class ServiceCallCommand:
  """One invocation described by method, path template and parameters."""
  method: str
  path: str
  path_params: Dict[str, str] = field(default_factory=dict)
  query_params: Dict[str, str] = field(default_factory=dict)
  body: Optional[Any] = None
  endpoint: Optional[str] = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'method', (self.method or '').upper())
    if self.method not in ALLOWED_METHODS:
      raise ValueError(f'method must be one of {", ".join(ALLOWED_METHODS)}')
    if not self.path or not self.path.startswith('/'):
      raise ValueError('path must start with "/"')
