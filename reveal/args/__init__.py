"""
reveal.args - Command line argument resolution module

Captures the invocation arguments and interprets them into a help request
or a canonical path to reveal.
"""

from .base import ArgumentInterpreter, Invocation
from .help import print_help_instructions
from .source import ArgumentSource

__all__ = [
    "ArgumentInterpreter",      # Main public interface
    "ArgumentSource",           # Captures sys.argv
    "Invocation",               # Result handed to the caller
    "print_help_instructions",  # Help text collaborator
]
