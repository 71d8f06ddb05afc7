"""Package logger (loguru); handlers are only installed by the command line."""
import sys
from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Silent as a library until an application opts in
logger.disable("tower_of_hanoi")


def configure_logging(level: str = "WARNING") -> None:
    """Replace the active handlers with a single colorized stderr handler at `level`."""
    logger.remove()
    logger.add(sys.stderr, colorize=True, format=LOG_FORMAT, level=level.upper())
    logger.enable("tower_of_hanoi")


# Export the configured logger
log = logger
