"""Application-level call result representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class CallStatus(str, Enum):
  SUCCESS = 'success'
  ERROR = 'error'


@dataclass
class CallResult:
  status: CallStatus
  operation: str
  data: Any = None
  metadata: Dict[str, Any] = field(default_factory=dict)
  execution_time: float = 0.0
  timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
  error: Optional[str] = None
  error_type: Optional[str] = None
  status_code: Optional[int] = None
