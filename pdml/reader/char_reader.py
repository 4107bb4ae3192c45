"""Character reader over a PDML source"""

import io
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from pdml.config import config
from pdml.errors import EndOfInput, ReadSizeError, ReaderIOError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


class CharReader:
    """
    Sequential character access with peek and peek-ahead.

    Running out of characters raises :class:`EndOfInput`; that is the normal
    way a reader reports the end of the source, callers decide whether it
    is an error at that point.
    """

    def __init__(self, stream: TextIO, name: str = "<string>"):
        self._stream = stream
        self._buffer = ""
        self._pos = 0
        self._exhausted = False
        self.name = name

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: Optional[str] = None) -> "CharReader":
        try:
            # newline="" keeps CR/LF as written
            stream = open(path, "r", encoding=encoding or config.source_encoding, newline="")
        except (OSError, LookupError) as e:
            raise ReaderIOError(f"Could not open {path}: {e}", e) from e
        logger.debug(f"Opened PDML source {path}")
        return cls(stream, name=str(path))

    @classmethod
    def from_string(cls, text: str, name: str = "<string>") -> "CharReader":
        return cls(io.StringIO(text), name=name)

    def _available(self) -> int:
        return len(self._buffer) - self._pos

    def _fill(self, amount: int) -> int:
        """Buffer at least ``amount`` characters if the stream has them."""
        while self._available() < amount and not self._exhausted:
            try:
                chunk = self._stream.read(CHUNK_SIZE)
            except (OSError, UnicodeDecodeError) as e:
                raise ReaderIOError(f"Error while reading {self.name}: {e}", e) from e
            if not chunk:
                self._exhausted = True
            else:
                self._buffer = self._buffer[self._pos:] + chunk
                self._pos = 0
        return self._available()

    def next_char(self) -> str:
        if self._fill(1) == 0:
            raise EndOfInput()
        char = self._buffer[self._pos]
        self._pos += 1
        return char

    def next_chars(self, amount: int) -> List[str]:
        available = self._fill(amount)
        if available == 0:
            raise EndOfInput()
        if available < amount:
            raise ReadSizeError(amount, available)
        chars = list(self._buffer[self._pos:self._pos + amount])
        self._pos += amount
        return chars

    def peek(self) -> str:
        if self._fill(1) == 0:
            raise EndOfInput()
        return self._buffer[self._pos]

    def peek_many(self, amount: int) -> List[str]:
        """Up to ``amount`` upcoming characters; shorter near the end of input."""
        available = self._fill(amount)
        if available == 0:
            raise EndOfInput()
        return list(self._buffer[self._pos:self._pos + min(amount, available)])

    def advance(self, amount: int):
        self.next_chars(amount)

    def close(self):
        self._stream.close()

    def __enter__(self) -> "CharReader":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
