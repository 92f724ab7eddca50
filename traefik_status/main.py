"""Main module entrypoint for local runtime execution.

`api` starts the HTTP service; `status` performs one refresh and prints the
snapshot as JSON.
"""

import argparse
import json

import uvicorn

from traefik_status.api.routers import api_serialize_status_snapshot
from traefik_status.bootstrap import bootstrap_create_application, bootstrap_create_refresh_controller
from traefik_status.config import config_load_settings
from traefik_status.logging_config import logging_configure
from traefik_status.status import status_clock_epoch_ms


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when the `status` snapshot carries an error.
    """

    argument_parser = argparse.ArgumentParser(description="Traefik service status runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "status"),
        help="Runtime command: `api` starts server, `status` prints one status snapshot",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "status":
        settings = config_load_settings()
        logging_configure(log_level=settings.log_level, json_output=settings.log_json)
        controller = bootstrap_create_refresh_controller(settings)
        now_ms = status_clock_epoch_ms()
        snapshot = controller.status_get_current_snapshot(now_ms=now_ms)
        print(json.dumps(api_serialize_status_snapshot(snapshot, now_ms=now_ms), indent=2))
        if snapshot.error is not None:
            raise SystemExit(1)
        return

    settings = config_load_settings()
    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
