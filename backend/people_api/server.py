"""Command line entry for the People API server."""

from __future__ import annotations

import uvicorn

from people_api.config import get_settings
from people_api.main import app


def run_server() -> None:
    settings = get_settings()
    # Request lines come from RequestLoggingMiddleware
    uvicorn.run(app, host=settings.host, port=settings.port, access_log=False)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
