"""
File Line Iterator

Lazily yields the lines of a text file one at a time, without reading the
whole file into memory. The file is closed as soon as the last line has been
read, or on the first read error; a read error ends the iteration.
"""

import logging


class FileLineIterator:
    """
    Forward-only iterator over the lines of a file.

    Lines are returned without their trailing newline.

    Args:
        file_path (str): Path of the file to read
        encoding (str): Text encoding of the file
        logger (logging.Logger, optional): Logger for read failures

    Raises:
        ValueError: If file_path is None or the file cannot be opened

    Example:
        >>> for line in FileLineIterator("tweets.txt"):
        ...     print(line)
    """

    def __init__(self, file_path, encoding="utf-8", logger=None):
        if file_path is None:
            raise ValueError("file_path cannot be None")

        self.file_path = file_path
        self.logger = logger or logging.getLogger(__name__)
        try:
            self._file = open(file_path, "r", encoding=encoding)
        except OSError as e:
            raise ValueError(f"Cannot open {file_path}: {e}") from e
        self._next_line = None
        self._advance()

    def _advance(self):
        """Read ahead one line so has_next() can answer without consuming."""
        if self._file is None:
            self._next_line = None
            return
        try:
            line = self._file.readline()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Error reading {self.file_path}: {e}")
            line = ""
        if line:
            self._next_line = line.rstrip("\r\n")
        else:
            self._next_line = None
            self.close()

    def has_next(self):
        return self._next_line is not None

    def __iter__(self):
        return self

    def __next__(self):
        if self._next_line is None:
            raise StopIteration
        line = self._next_line
        self._advance()
        return line

    @property
    def closed(self):
        return self._file is None

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
