"""CLI adapter for calling the skills API from a terminal."""
from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Dict, Mapping, Optional, Tuple

import click

from ask_services.application.commands.service_call_command import ALLOWED_METHODS, ServiceCallCommand
from ask_services.application.handlers.service_call_handler import ServiceCallHandler
from ask_services.application.queries.call_result import CallResult, CallStatus
from ask_services.ports.input.result_presenter import ResultPresenter


class CLIAdapter:
  def __init__(
    self,
    handler: ServiceCallHandler,
    presenters: Mapping[str, ResultPresenter],
    default_output: str = 'text',
  ):
    if default_output not in presenters:
      raise ValueError(f'No presenter registered for {default_output!r}')
    self._handler = handler
    self._presenters = dict(presenters)
    self._default_output = default_output

  def build(self) -> click.Group:
    @click.group()
    @click.option(
      '--output',
      type=click.Choice(sorted(self._presenters)),
      default=self._default_output,
      show_default=True,
      help='Result format',
    )
    @click.pass_context
    def cli(ctx: click.Context, output: str) -> None:
      """Call the skills API services."""
      ctx.obj = self._presenters[output]

    @cli.command('token')
    @click.option('--scope', required=True, help='OAuth scope, e.g. alexa::proactive_events')
    @click.pass_obj
    def token(presenter: ResultPresenter, scope: str) -> None:
      """Exchange the configured client credentials for an LWA token."""
      self._execute(presenter, self._handler.fetch_token(scope))

    @cli.command('call')
    @click.argument('method', type=click.Choice(ALLOWED_METHODS, case_sensitive=False))
    @click.argument('path')
    @click.option('--path-param', 'path_params', multiple=True, help='Path parameter as name=value')
    @click.option('--query', 'query_params', multiple=True, help='Query parameter as name=value')
    @click.option('--body', default=None, help='JSON request body')
    @click.option('--endpoint', default=None, help='Override the configured API endpoint')
    @click.pass_obj
    def call(
      presenter: ResultPresenter,
      method: str,
      path: str,
      path_params: Tuple[str, ...],
      query_params: Tuple[str, ...],
      body: Optional[str],
      endpoint: Optional[str],
    ) -> None:
      """Invoke METHOD PATH with the configured authorization value.

      Examples:

        cli call GET /v1/alerts/reminders/

        cli call GET /v2/devices/{deviceId}/settings/System.timeZone --path-param deviceId=amzn1.ask.device.X
      """
      try:
        command = ServiceCallCommand(
          method=method,
          path=path,
          path_params=_parse_pairs(path_params, '--path-param'),
          query_params=_parse_pairs(query_params, '--query'),
          body=_parse_body(body),
          endpoint=endpoint,
        )
      except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
      self._execute(presenter, self._handler.call(command))

    @cli.command('reminders')
    @click.pass_obj
    def reminders(presenter: ResultPresenter) -> None:
      """List the reminders created by the skill."""
      self._execute(presenter, self._handler.list_reminders())

    return cli

  def run(self, args: Optional[list] = None) -> None:
    self.build()(args=args)

  def _execute(self, presenter: ResultPresenter, action: Awaitable[CallResult]) -> None:
    try:
      result = asyncio.run(action)
    except Exception as exc:  # noqa: BLE001
      click.echo(presenter.present_error(exc), err=True)
      raise click.exceptions.Exit(1) from exc
    self._emit(presenter, result)

  @staticmethod
  def _emit(presenter: ResultPresenter, result: CallResult) -> None:
    click.echo(presenter.present(result))
    if result.status == CallStatus.ERROR:
      raise click.exceptions.Exit(1)


def _parse_pairs(values: Tuple[str, ...], option: str) -> Dict[str, str]:
  pairs: Dict[str, str] = {}
  for raw in values:
    name, sep, value = raw.partition('=')
    if not sep or not name:
      raise click.BadParameter(f'expected name=value, got {raw!r}', param_hint=option)
    pairs[name] = value
  return pairs


def _parse_body(body: Optional[str]) -> Any:
  if body is None:
    return None
  try:
    return json.loads(body)
  except ValueError as exc:
    raise click.BadParameter(f'body is not valid JSON: {exc}', param_hint='--body') from exc
