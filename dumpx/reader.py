import logging
import os
from typing import BinaryIO, Generator

logger = logging.getLogger(__name__)

# 64kb chunks
IO_BUF_SIZE = 64 * 1024


def open_input(path: str) -> BinaryIO:
    stream = open(path, "rb")
    logger.debug("Reading %s (%d bytes)", path, os.fstat(stream.fileno()).st_size)
    return stream


def iter_chunks(
    stream: BinaryIO, size: int = IO_BUF_SIZE
) -> Generator[bytes, None, None]:
    while True:
        chunk = stream.read(size)
        if not chunk:
            return
        yield chunk
