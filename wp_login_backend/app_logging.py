"""JSON logging for processes that embed the backend."""

import logging
from typing import IO, Optional, Union

from pythonjsonlogger.json import JsonFormatter

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'
RENAMED_FIELDS = {'levelname': 'level', 'asctime': 'timestamp'}

_handler: Optional[logging.Handler] = None


def setup_logger(level: Union[int, str] = logging.DEBUG,
                 stream: Optional[IO[str]] = None) -> logging.Handler:
    """Send root logger records to ``stream`` (stderr by default) as JSON.

    Calling it again swaps the handler installed by the previous call.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(JsonFormatter(FORMAT, rename_fields=RENAMED_FIELDS))
    root.addHandler(_handler)
    root.setLevel(level)
    return _handler
