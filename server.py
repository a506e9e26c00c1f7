#!/usr/bin/env python3
"""Run the web front end locally: `python server.py` from a source checkout.

The page is served from the `static/` directory beside `app.py`, so the
server is not installed as a console script.
"""
import webbrowser

import uvicorn

from config import HOST, LOG_LEVEL, OPEN_BROWSER, PORT
from logging_setup import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    setup_logging(LOG_LEVEL)
    url = f"http://{HOST}:{PORT}"
    logger.info("todo list running at %s", url)
    if OPEN_BROWSER:
        webbrowser.open(url)
    uvicorn.run("app:app", host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
