"""Plain text presenter."""
from __future__ import annotations

import json

from ask_services.application.queries.call_result import CallResult, CallStatus
from ask_services.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present(self, result: CallResult) -> str:
    lines = [
      '=' * 60,
      f'{result.operation} -> {result.status.value.upper()}',
      '=' * 60,
    ]

    if result.data is not None:
      if isinstance(result.data, str):
        lines.append(result.data)
      else:
        lines.append(json.dumps(result.data, ensure_ascii=False, indent=2, default=str))
    elif result.status == CallStatus.SUCCESS:
      lines.append('(no content)')
    lines.append('')

    for key, value in result.metadata.items():
      lines.append(f'- {key}: {value}')

    lines.append(f'Execution time: {result.execution_time:.2f}s')
    if result.error:
      status = f' [{result.status_code}]' if result.status_code is not None else ''
      lines.append(f'ERROR ({result.error_type}{status}): {result.error}')
    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
