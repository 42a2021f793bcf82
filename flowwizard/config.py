"""Runtime settings and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    """Settings read from the environment.

    FLOWWIZARD_LOG_LEVEL: logging level name (default WARNING)
    FLOWWIZARD_VERBOSE: any non-empty value forces DEBUG
    """

    log_level: str = "WARNING"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.environ.get('FLOWWIZARD_LOG_LEVEL', 'WARNING'),
            verbose=bool(os.environ.get('FLOWWIZARD_VERBOSE')),
        )

    @property
    def effective_level(self) -> str:
        return "DEBUG" if self.verbose else self.log_level.upper()


def configure_logging(log_level: str = "WARNING"):
    """Configure logging for the wizard.

    Logs go to stderr so they never mix with JSON or diagram output on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)
    logger.debug("Logging configured at level: %s", log_level)
