"""
Help instructions for reveal
"""

import sys
from typing import Optional, TextIO

HELP_INSTRUCTIONS = """\
Help Instructions
\tStarting Point
\t\tThis is a program to reveal directory entries and file contents.
\tSyntax
\t\tUse this program with following syntax:
\t\t\treveal [flags] <path>
\t\tThe flags it can accept are:
\t\t\t--help: print these help instructions.
\t\tIf no path is provided, it will consider your current directory.
\t\tIf multiple paths are provided, only the last one will be considered.
"""


def print_help_instructions(stream: Optional[TextIO] = None):
    """Write the help instructions to stderr"""
    if stream is None:
        stream = sys.stderr
    stream.write(HELP_INSTRUCTIONS)
