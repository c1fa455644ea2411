"""CLI entrypoint for the skills API service clients."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ask_services.adapters.input.cli.cli_adapter import CLIAdapter
from ask_services.adapters.presentation.json_presenter import JsonPresenter
from ask_services.adapters.presentation.text_presenter import TextPresenter
from ask_services.application.handlers.service_call_handler import ServiceCallHandler
from ask_services.common.config import get_settings
from ask_services.common.container import create_service_client_factory
from ask_services.common.logging_config import configure_logging


def main() -> None:
  settings = get_settings()
  configure_logging(settings.log_level)
  handler = ServiceCallHandler(create_service_client_factory(settings))
  presenters = {'text': TextPresenter(), 'json': JsonPresenter()}
  CLIAdapter(handler, presenters).run()


if __name__ == '__main__':
  main()
