"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or prints the API definition document.
"""

import argparse
from collections.abc import Sequence

import uvicorn

from hello_world_api.bootstrap import bootstrap_create_application, bootstrap_load_settings
from hello_world_api.domain import domain_render_api_definition


def main(argv: Sequence[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list. Defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Hello World API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "definition"),
        help="Runtime command: `api` starts server, `definition` prints the API definition document",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = bootstrap_load_settings()

    if parsed_arguments.command == "definition":
        print(domain_render_api_definition(settings))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
