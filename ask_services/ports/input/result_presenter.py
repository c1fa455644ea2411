"""Input port for rendering call outcomes on the command line."""
from __future__ import annotations

from typing import Protocol

from ask_services.application.queries.call_result import CallResult


class ResultPresenter(Protocol):
  """Turns handler output into the text the CLI prints."""

  def present(self, result: CallResult) -> str:
    """Render a SUCCESS or ERROR result produced by the handler."""
    ...

  def present_error(self, error: Exception) -> str:
    """Render an exception that escaped the handler (printed to stderr)."""
    ...
