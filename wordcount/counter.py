import logging
from typing import Optional

from wordcount.config import load_config
from wordcount.errors import WordCountError
from wordcount.processor import Counts, count_lines_of
from wordcount.reader import read_lines

logger = logging.getLogger(__name__)


def count_file(path: str, *, encoding: Optional[str] = None) -> Counts:
    """
    Count lines, words and bytes in the file at `path`.

    Bytes are counted as read from the file, line terminators excluded.
    The first open, read or decode failure is raised as a WordCountError and
    no partial counts are returned.
    When `encoding` is None the configured default is used.
    """
    if encoding is None:
        encoding = load_config().encoding

    try:
        with read_lines(path, encoding=encoding) as lines:
            counts = count_lines_of(lines, encoding=encoding)
            # bytes as stored on disk, not the re-encoded text
            counts = counts._replace(bytes=lines.bytes_read)
    except WordCountError as e:
        logger.info("counting %s failed: [%s] %s", path, e.code.value, e)
        raise

    logger.debug("%s: %s", path, counts)
    return counts


__all__ = ["count_file"]
