"""Line-by-line reading that keeps each line's newline."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Iterator, List, Union

_CHUNK_SIZE = 4096


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, split on ``\\n`` only, newlines kept.

    The last line is yielded without a newline when the data does not end
    with one. Works with text and binary streams.
    """
    buffer = None
    newline = None
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        if buffer is None:
            buffer = chunk[:0]
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
        buffer += chunk
        start = 0
        while True:
            index = buffer.find(newline, start)
            if index < 0:
                break
            yield buffer[start : index + 1]
            start = index + 1
        buffer = buffer[start:]
    if buffer:
        yield buffer


def read_lines(path: Union[str, os.PathLike]) -> List[str]:
    """Read a text file into a list of lines, newlines kept and untranslated."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(iter_lines(handle))