from typing import Iterable, List, NamedTuple


class Counts(NamedTuple):
    lines: int
    words: int
    bytes: int

    def __str__(self) -> str:
        return f"{self.lines} lines, {self.words} words, {self.bytes} bytes"


def count_words(text: str) -> int:
    """
    Count the number of words in a line of text.
    Words are maximal runs of non-whitespace characters.
    """
    return len(text.split())


def count_bytes(text: str, encoding: str = "utf-8") -> int:
    """
    Count the bytes `text` occupies in `encoding`.
    Multi-byte characters count as their encoded length, not as one.
    """
    return len(text.encode(encoding))


def split_lines(text: str) -> List[str]:
    """
    Split text the way the file reader does: on "\\n", dropping a "\\r" right
    before it. A final terminator does not start another line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_lines_of(lines: Iterable[str], *, encoding: str = "utf-8") -> Counts:
    """
    Accumulate (lines, words, bytes) over already-split lines.
    Any exception raised while iterating `lines` propagates untouched.
    """
    line_count = 0
    word_count = 0
    byte_count = 0
    for text in lines:
        line_count += 1
        word_count += count_words(text)
        byte_count += count_bytes(text, encoding)
    return Counts(line_count, word_count, byte_count)


def wc(text: str, encoding: str = "utf-8") -> Counts:
    """
    Return Counts for an in-memory string, analogous to counting a file with
    the same contents.
    """
    return count_lines_of(split_lines(text), encoding=encoding)


__all__ = [
    "Counts",
    "count_words",
    "count_bytes",
    "split_lines",
    "count_lines_of",
    "wc",
]
