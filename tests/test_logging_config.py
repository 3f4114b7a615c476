import logging

from compute_client.logging_config import configure_logging


def test_configure_logging_installs_one_handler(monkeypatch):
    monkeypatch.setattr("compute_client.logging_config._handler", None)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        configure_logging("debug")
        configure_logging(logging.WARNING)
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)
