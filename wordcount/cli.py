import logging
import sys
from typing import Optional, Sequence

from wordcount.config import load_config
from wordcount.counter import count_file
from wordcount.errors import WordCountError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Count the file named by argv[1] and print the result.
    argv[0] is the program name, as in sys.argv; anything after argv[1] is ignored.
    """
    if argv is None:
        argv = sys.argv

    if len(argv) < 2:
        prog = argv[0] if argv else "wordcount"
        print(f"Usage: {prog} <filename>", file=sys.stderr)
        return EXIT_USAGE

    filename = argv[1]
    try:
        config = load_config()
        logging.basicConfig(level=config.log_level, stream=sys.stderr)
        counts = count_file(filename, encoding=config.encoding)
    except WordCountError as e:
        print(f"Error processing file {filename}: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"{filename}: {counts}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
