import logging

from app.setup_logging import HANDLER_NAME, setup_logging


def _ours():
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


def test_repeat_calls_add_one_handler_and_update_level():
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(_ours()) == 1
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    setup_logging("INFO")
