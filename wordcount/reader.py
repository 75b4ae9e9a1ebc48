import logging
from typing import BinaryIO, Iterator, Optional

from wordcount.config import check_encoding
from wordcount.errors import DecodeError, OpenError, ReadError

logger = logging.getLogger(__name__)


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


class LineSource:
    """
    Lazy sequence of decoded lines bound to an open file.

    Iterating yields each line as text with its terminator stripped.
    A line that cannot be decoded raises DecodeError when it is reached,
    so earlier lines have already been handed out and later ones are never read.
    The file is closed on exhaustion, on the first error, or via close().
    """

    def __init__(self, path: str, handle: BinaryIO, encoding: str) -> None:
        self.path = path
        self.encoding = encoding
        self.line_number = 0
        # raw bytes of the lines handed out so far, terminators excluded
        self.bytes_read = 0
        self._handle: Optional[BinaryIO] = handle

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._handle is None:
            raise StopIteration

        try:
            raw = self._handle.readline()
        except OSError as e:
            self.close()
            raise ReadError(self.path, self.line_number + 1, e) from e

        if not raw:
            self.close()
            raise StopIteration

        self.line_number += 1
        raw = _strip_terminator(raw)
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            self.close()
            raise DecodeError(self.path, self.line_number, self.encoding, e) from e
        self.bytes_read += len(raw)
        return text

    @property
    def closed(self) -> bool:
        return self._handle is None

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_lines(path: str, *, encoding: str = "utf-8") -> LineSource:
    """
    Open `path` and return its lines as a LineSource.
    Raises OpenError right away if the file cannot be opened, and ConfigError
    if `encoding` cannot be decoded line by line.
    """
    check_encoding(encoding)
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise OpenError(path, e) from e

    logger.debug("opened %s (encoding=%s)", path, encoding)
    return LineSource(path, handle, encoding)


__all__ = ["LineSource", "read_lines"]
