"""Package-wide logger."""
import logging
import sys

LOGGER_NAME: str = "arithmetic_calculator"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

# Attach the stderr handler only once, even if the module is reloaded
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    # Keep interactive sessions quiet unless something goes wrong
    logger.setLevel(logging.WARNING)
