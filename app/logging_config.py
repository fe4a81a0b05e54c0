import logging
import os
import sys


def setup_logging() -> None:
    """
    Configure the root logger once.

    Console only, ISO-8601 timestamps, level from LOG_LEVEL (default INFO).
    Calling it again is a no-op.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="[%(asctime)s - %(name)s - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root.setLevel(level)
    root.addHandler(handler)

    for noisy in ("sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
