import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger once, at the command line entry point."""
    logging.basicConfig(level=level, format=fmt, handlers=[logging.StreamHandler(sys.stderr)])
