"""
Main argument interpreter module for reveal

Answers the two questions asked of the invocation arguments: should the
help instructions be shown, and which existing path should be revealed.
"""

import logging
from pathlib import Path
from typing import NamedTuple, Optional

from ..errors import PathNotFound
from .source import ArgumentSequence


class Invocation(NamedTuple):
    """Outcome of interpreting the arguments"""

    show_help: bool
    path: Optional[Path] = None


class ArgumentInterpreter:
    """Interprets a captured argument sequence"""

    HELP_FLAGS = ("-h", "--help")
    DEFAULT_PATH = "."
    # Index 0 holds the program name
    DEFAULT_ARGUMENTS_LENGTH = 1

    def __init__(self, arguments: ArgumentSequence):
        self.arguments = tuple(arguments)

    def has_enough_arguments(self) -> bool:
        """Check if anything besides the program name was given"""
        return len(self.arguments) > self.DEFAULT_ARGUMENTS_LENGTH

    def wants_help(self) -> bool:
        """Check for an exact help flag anywhere in the arguments"""
        return any(flag in self.arguments for flag in self.HELP_FLAGS)

    def candidate_path(self) -> str:
        """
        Select the path string to resolve

        The last argument always wins, even when it is a flag or when
        several paths were given. Without arguments the current directory
        is used.
        """
        if self.has_enough_arguments():
            return self.arguments[-1]
        return self.DEFAULT_PATH

    def resolve_path(self) -> Path:
        """
        Resolve the candidate to a canonical absolute path

        Returns:
            Absolute path with symlinks and '..' segments resolved

        Raises:
            PathNotFound: if the candidate does not point to an existing
                location, whatever the underlying cause
        """
        candidate = self.candidate_path()

        # Path("") means ".", but an empty argument names nothing
        if not candidate:
            logging.debug("Empty path argument")
            raise PathNotFound(candidate)

        try:
            resolved = Path(candidate).resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            # RuntimeError: symlink loop, ValueError: embedded null byte
            logging.debug("Could not resolve path %r: %s", candidate, e)
            raise PathNotFound(candidate) from e

        logging.debug("Resolved path %r to %s", candidate, resolved)
        return resolved

    def interpret(self) -> Invocation:
        """
        Interpret the arguments for the caller

        Path resolution is skipped entirely when help is requested.

        Raises:
            PathNotFound: if help is not requested and the path is invalid
        """
        if self.wants_help():
            return Invocation(show_help=True)
        return Invocation(show_help=False, path=self.resolve_path())
