from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO


SOURCE_SUFFIX = '.bf'


class StdinInput:
    """Blocking token reader for the ',' instruction.

    Every call reads fresh lines until one holds a token and returns its first
    whitespace-separated token; the rest of that line is discarded. Raises
    EOFError once the stream is exhausted.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def __call__(self) -> str:
        stream = self.stream if self.stream is not None else sys.stdin
        while True:
            line = stream.readline()
            if not line:
                raise EOFError('no more input')
            tokens = line.split()
            if tokens:
                return tokens[0]


def read_source_file(path: str | Path, *, encoding: str = 'utf-8') -> str:
    p = Path(path)
    if p.suffix != SOURCE_SUFFIX:
        raise ValueError(f"File must be a Brainfuck file ending in {SOURCE_SUFFIX}: {p}")
    with p.open('r', encoding=encoding) as f:
        return ''.join(line.rstrip('\r\n') for line in f)
