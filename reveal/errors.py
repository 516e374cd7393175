"""
reveal.errors - Exceptions raised by reveal

Every error carries the single human-readable message shown to the user.
"""

from typing import Optional


class RevealError(Exception):
    """Base class for errors reported to the user"""

    message = "Could not reveal the path."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class PathNotFound(RevealError):
    """The path candidate could not be canonicalized to an existing location"""

    message = "The path does not exists."

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__()


class RevealFailure(RevealError):
    """An existing path could not be revealed"""
