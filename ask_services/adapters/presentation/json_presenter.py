"""JSON presenter implementation."""
from __future__ import annotations

import json

from ask_services.application.queries.call_result import CallResult
from ask_services.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present(self, result: CallResult) -> str:
    payload = {
      'status': result.status.value,
      'operation': result.operation,
      'data': result.data,
      'metadata': result.metadata,
      'execution_time': result.execution_time,
      'timestamp': result.timestamp.isoformat(),
      'error': result.error,
      'error_type': result.error_type,
      'status_code': result.status_code,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)

  def present_error(self, error: Exception) -> str:
    return json.dumps(
      {'status': 'error', 'error': str(error), 'error_type': type(error).__name__},
      ensure_ascii=False,
      indent=2,
    )
