import logging
import sys

_HANDLER_NAME = "spicalc-console"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger with a single stdout handler.
    Safe to call more than once.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(console_handler)

    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_core").setLevel(logging.WARNING)
    return logger
