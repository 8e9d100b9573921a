"""CSS Unit Converter launcher — starts the API server and opens the docs."""

from __future__ import annotations

import socket
import sys
import threading
import time
import webbrowser

import structlog
import uvicorn

from app.config import settings
from app.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def open_browser(port: int) -> None:
    """Wait for the server to start, then open the interactive API docs."""
    url = f"http://127.0.0.1:{port}/docs"
    for _ in range(50):
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=0.1):
                break
        except OSError:
            time.sleep(0.1)
    webbrowser.open(url)


def main() -> None:
    configure_logging(settings.debug)
    port = find_free_port()
    logger.info("starting", url=f"http://127.0.0.1:{port}")

    if "--no-browser" not in sys.argv:
        threading.Thread(target=open_browser, args=(port,), daemon=True).start()

    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
