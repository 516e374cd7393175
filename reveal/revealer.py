"""
reveal.revealer - Reveal a resolved path on stdout

Directories are listed one level deep as absolute entry paths, regular
files are copied byte for byte. Nothing is formatted.
"""

import logging
import shutil
import sys
from pathlib import Path
from typing import BinaryIO, Optional, TextIO

from .errors import RevealFailure


class PathRevealer:
    """Writes directory entries or file contents to output streams"""

    def __init__(self, stdout: Optional[TextIO] = None):
        self.stdout = stdout if stdout is not None else sys.stdout

    def reveal(self, path: Path):
        """
        Reveal an existing canonical path

        Args:
            path: Resolved absolute path

        Raises:
            RevealFailure: if the path cannot be read or is neither a
                directory nor a regular file
        """
        if path.is_dir():
            self.reveal_directory(path)
        elif path.is_file():
            self.reveal_file(path)
        else:
            logging.debug("Unsupported entry type for %s", path)
            raise RevealFailure("Unsupported entry type.")

    def reveal_directory(self, path: Path):
        """Print the absolute path of every entry, sorted by name"""
        try:
            entries = sorted(entry.name for entry in path.iterdir())
        except OSError as e:
            logging.debug("Could not list %s: %s", path, e)
            raise RevealFailure("Could not reveal directory.") from e

        for name in entries:
            print(path / name, file=self.stdout)
        logging.info("Revealed %d entries of %s", len(entries), path)

    def reveal_file(self, path: Path):
        """Copy the file contents to stdout unchanged"""
        target = self._binary_stdout()
        try:
            with open(path, "rb") as f:
                if target is None:
                    self.stdout.write(f.read().decode("utf-8", errors="replace"))
                else:
                    self.stdout.flush()
                    shutil.copyfileobj(f, target)
                    target.flush()
        except BrokenPipeError:
            raise
        except OSError as e:
            logging.debug("Could not read %s: %s", path, e)
            raise RevealFailure("Could not reveal file.") from e
        logging.info("Revealed contents of %s", path)

    def _binary_stdout(self) -> Optional[BinaryIO]:
        # In-memory text streams have no underlying buffer
        return getattr(self.stdout, "buffer", None)
