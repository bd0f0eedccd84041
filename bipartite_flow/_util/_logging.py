import contextlib
import contextvars
import logging
import sys

import colorlog

_LOG_COLORS = {
    "DEBUG": "light_black",
    "INFO": "reset",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}
_input_name = contextvars.ContextVar("input_name", default=None)


def configure_logging(level):
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(make_formatter(color=sys.stderr.isatty()))
    handler.addFilter(_inject_input_name)
    root.addHandler(handler)


def make_formatter(color):
    if color:
        return colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-7s%(reset)s "
            "%(light_black)s%(input_name)s%(name)s%(reset)s %(message)s",
            log_colors=_LOG_COLORS,
        )
    return logging.Formatter("%(levelname)s %(input_name)s%(name)s: %(message)s")


@contextlib.contextmanager
def log_input(name):
    """Tag every record logged inside the block with the input `name`."""
    token = _input_name.set(str(name))
    try:
        yield
    finally:
        _input_name.reset(token)


def _inject_input_name(record):
    name = _input_name.get()
    record.input_name = f"[{name}] " if name else ""
    return True
