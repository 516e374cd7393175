"""
reveal - Directory entries and file contents revealer

Resolves the invocation arguments into either a help request or an existing,
canonical path, then reveals that path on stdout.
"""

__version__ = "1.0.0"
__author__ = "skippyr"
__license__ = "MIT"

from .args import ArgumentInterpreter, ArgumentSource, Invocation
from .errors import PathNotFound, RevealError, RevealFailure

__all__ = [
    "ArgumentInterpreter",
    "ArgumentSource",
    "Invocation",
    "PathNotFound",
    "RevealError",
    "RevealFailure",
]
