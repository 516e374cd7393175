"""
Argument capture module for reveal

Reads the process arguments once into an immutable sequence so the
interpreter never touches sys.argv itself.
"""

import sys
from typing import Optional, Sequence, Tuple

ArgumentSequence = Tuple[str, ...]


class ArgumentSource:
    """Captures invocation arguments"""

    @staticmethod
    def capture(argv: Optional[Sequence[str]] = None) -> ArgumentSequence:
        """
        Capture invocation arguments, program name included at index 0

        Args:
            argv: Arguments to capture (defaults to sys.argv)

        Returns:
            Tuple of argument strings in invocation order
        """
        if argv is None:
            argv = sys.argv
        return tuple(argv)
