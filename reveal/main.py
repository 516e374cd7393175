#!/usr/bin/env python3
"""
reveal - Directory entries and file contents revealer

Resolves the invocation arguments, then shows help or reveals the path.
"""

import logging
import os
import sys
from typing import Dict, Optional, Sequence

from .args import ArgumentInterpreter, ArgumentSource, print_help_instructions
from .config import LOG_LEVELS, get_logging_config
from .errors import RevealError
from .revealer import PathRevealer

# Package version
from . import __version__


def setup_logging(logging_config: Dict):
    """Setup logging configuration, stdout is reserved for revealed output"""
    level = LOG_LEVELS[logging_config["level"]]

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    log_file = logging_config.get("file")
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)


def print_error(message: str):
    """Report a single diagnostic line on stderr"""
    print(message, file=sys.stderr)


def silence_stdout():
    """Point stdout at devnull so the exit-time flush cannot fail again"""
    try:
        fileno = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # In-memory stream, nothing is flushed to a pipe
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fileno)
    os.close(devnull)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point"""
    try:
        setup_logging(get_logging_config())
        logging.debug("reveal %s started", __version__)

        arguments = ArgumentSource.capture(argv)
        logging.debug("Arguments: %s", arguments)

        invocation = ArgumentInterpreter(arguments).interpret()
        if invocation.show_help:
            print_help_instructions()
            return 0

        PathRevealer().reveal(invocation.path)
        return 0

    except BrokenPipeError:
        # Reader went away, e.g. piped into head
        silence_stdout()
        return 1
    except RevealError as e:
        print_error(e.message)
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 1
    except Exception as e:
        logging.exception("Critical error: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
