"""Standalone server entrypoint."""

import uvicorn

from form_progress.api.app import create_app
from form_progress.containers import build_container


def main() -> None:
    """Build the application and serve it until interrupted."""
    container = build_container()
    uvicorn.run(
        create_app(container),
        host=container.settings.server_host,
        port=container.settings.server_port,
        log_level=container.settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
