from wordcount.counter import count_file
from wordcount.errors import (
    ConfigError,
    DecodeError,
    ErrorCode,
    OpenError,
    ReadError,
    WordCountError,
)
from wordcount.processor import Counts, count_bytes, count_words, wc
from wordcount.reader import LineSource, read_lines

__all__ = [
    "count_file",
    "read_lines",
    "LineSource",
    "Counts",
    "count_words",
    "count_bytes",
    "wc",
    "ErrorCode",
    "WordCountError",
    "OpenError",
    "ReadError",
    "DecodeError",
    "ConfigError",
]
