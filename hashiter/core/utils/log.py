import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    # stdout carries the hash points; logs go to stderr
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s [%(name)s:%(funcName)s] %(levelname)-8s : %(message)s',
    )
    logging.getLogger("hashiter").setLevel(level)
