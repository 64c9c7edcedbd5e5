import logging
import os
import sys
from contextlib import contextmanager
from typing import Generator, Iterable, TextIO

logger = logging.getLogger(__name__)


@contextmanager
def open_output(path: str | None = None) -> Generator[TextIO, None, None]:
    if path is None:
        logger.debug("Writing to stdout")
        yield sys.stdout
        return

    # Never overwrite an existing file
    if os.path.exists(path):
        raise FileExistsError(f"output file '{path}' already exists")

    logger.debug("Writing to %s", path)
    with open(path, "x") as file:
        yield file


def write_lines(out: TextIO, lines: Iterable[str]) -> int:
    count = 0
    for line in lines:
        out.write(line + "\n")
        count += 1
    return count
