"""
Run SingletonSort locally.

Starts the API server and opens it in the default browser.
"""

import argparse
import logging
import threading
import webbrowser

import uvicorn

from singletonsort.config import settings
from singletonsort.main import app

logger = logging.getLogger(__name__)

# Seconds to wait before opening the browser so the server is listening
BROWSER_DELAY = 0.5


def open_browser(url: str) -> None:
    """Open the app in a browser. Failure is logged, not raised."""
    try:
        if not webbrowser.open(url):
            logger.warning("No browser available. Please open %s", url)
    except webbrowser.Error as e:
        logger.warning("Failed to open browser automatically: %s", e)
        logger.warning("Please open your browser and navigate to: %s", url)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run the SingletonSort server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser after starting",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    url = f"http://localhost:{args.port}/docs"
    logger.info("Starting %s on http://%s:%d", settings.app_name, args.host, args.port)
    logger.info("Press Ctrl+C to stop the server")

    if not args.no_browser:
        threading.Timer(BROWSER_DELAY, open_browser, args=(url,)).start()

    # uvicorn handles SIGINT/SIGTERM; POST /api/shutdown uses the same server
    config = uvicorn.Config(app, host=args.host, port=args.port, log_config=None)
    server = uvicorn.Server(config)
    app.state.server = server
    server.run()
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
