import logging
import sys

# Every module logs under this prefix; anything outside it is third-party.
APP_LOGGER = "todo_list"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{APP_LOGGER}.{name}")


class _ThirdPartyFilter(logging.Filter):
    """Pass our own records; hold everything else to WARNING and above."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger with one stderr handler. Call once at startup."""
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
