import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: int | str = logging.INFO) -> None:
    global _handler
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    if _handler is not None and _handler in root.handlers:
        return
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
