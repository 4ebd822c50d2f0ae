"""
Shared input helpers for the puzzle parsers.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Union


def stream_lines(path: Union[str, Path]) -> Iterator[str]:
    """Yield the lines of a text file with trailing newlines removed."""
    with open(path) as f:
        for line in f:
            yield line.rstrip("\r\n")


def read_lines(path: Union[str, Path]) -> List[str]:
    return list(stream_lines(path))


def split_lines(text: Union[str, Iterable[str]]) -> List[str]:
    """Accept either a block of text or an iterable of lines."""
    if isinstance(text, str):
        return text.splitlines()
    return [line.rstrip("\r\n") for line in text]


__all__ = [
    'stream_lines',
    'read_lines',
    'split_lines',
]
