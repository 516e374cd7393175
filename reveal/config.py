"""
reveal.config - Environment based configuration

reveal accepts no configuration file and no flags besides --help, so the
only tunables are environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

LOG_LEVEL_VARIABLE = "REVEAL_LOG_LEVEL"
LOG_FILE_VARIABLE = "REVEAL_LOG_FILE"

LOG_LEVELS = {
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
DEFAULT_LOG_LEVEL = "warning"

logger = logging.getLogger(__name__)


def get_logging_config(environ: Optional[Mapping[str, str]] = None) -> Dict:
    """
    Determine logging configuration from the environment

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Dict with 'level' (name from LOG_LEVELS) and 'file' (Path or None)
    """
    if environ is None:
        environ = os.environ

    config = {
        "level": DEFAULT_LOG_LEVEL,
        "file": None,
    }

    level = environ.get(LOG_LEVEL_VARIABLE, "").strip().lower()
    if level in LOG_LEVELS:
        config["level"] = level
    elif level:
        # Logging is not configured yet, this reaches the last resort handler
        logger.warning("Invalid %s '%s', using default %s",
                       LOG_LEVEL_VARIABLE, level, DEFAULT_LOG_LEVEL)

    log_file = environ.get(LOG_FILE_VARIABLE, "").strip()
    if log_file:
        config["file"] = Path(log_file).expanduser()

    return config
