import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO"):
    """Console logging for the payroll_console package. Safe to call twice."""
    logger = logging.getLogger("payroll_console")
    logger.setLevel(level)

    if not any(getattr(h, "_payroll_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._payroll_console = True
        logger.addHandler(handler)

    # requests/urllib3 connection chatter only when debugging
    logging.getLogger("urllib3").setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)
    return logger
