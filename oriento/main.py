"""
Main entry point for the Oriento API.

Run with ``oriento-api`` (console script) or ``python -m oriento.main``.
"""

import uvicorn

from oriento.utils.config import log_level, server_settings


def run() -> None:
    settings = server_settings()
    uvicorn.run(
        "oriento.web_app.server:create_app",
        factory=True,
        host=settings["host"],
        port=settings["port"],
        log_level=log_level().lower(),
    )


if __name__ == "__main__":
    run()
