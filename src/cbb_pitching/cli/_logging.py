import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> None:
    """Route tracker logs to stderr so rich tables on stdout stay clean.

    INFO shows run summaries (groups merged, rows linked); ``verbose``
    adds the per-pitcher DEBUG detail from the identity and stats layers.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    logging.captureWarnings(True)
