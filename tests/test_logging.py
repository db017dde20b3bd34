from rich.logging import RichHandler

from errchain.utils.logging import get


def test_logger_levels():
    logger = get("debug")
    assert logger.level == 10  # DEBUG
    logger = get("error")
    assert logger.level == 40  # ERROR


def test_handler_installed_once():
    get("info")
    logger = get("warning")
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
