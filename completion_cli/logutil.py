import logging
import sys


# openai/httpx log every request at INFO; keep them out of the contract output
NOISY_LOGGERS = ("openai", "httpx", "httpcore")


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%H:%M:%S"

    logging.basicConfig(level=level, handlers=[handler], format=fmt, datefmt=datefmt, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
