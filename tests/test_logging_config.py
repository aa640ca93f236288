import logging

from newsroom_api.app.core.logging_config import setup_logging


def test_uvicorn_access_log_is_quieted():
    setup_logging("DEBUG")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_existing_handlers_are_kept():
    root = logging.getLogger()
    before = list(root.handlers)
    root.addHandler(logging.NullHandler())
    try:
        setup_logging("INFO")
        assert len(root.handlers) == len(before) + 1
    finally:
        root.handlers = before
