import logging
from rich.logging import RichHandler
from src.config import settings

def setup_logger(name: str = "transcript_viewer") -> logging.Logger:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    # connection chatter from requests stays out of DEBUG runs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logging.getLogger(name)

logger = setup_logger()
