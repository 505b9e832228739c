from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .console import read_source_file
from .interpreter import InputSource, Interpreter
from .tape import MEMORY_SIZE


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = MEMORY_SIZE


@dataclass(frozen=True)
class RunResult:
    output: str
    pointer: int
    cells: List[int]


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    input_source: Optional[InputSource] = None,
) -> RunResult:
    tape_size = MEMORY_SIZE if options is None else options.tape_size
    interpreter = Interpreter(tape_size=tape_size, input_source=input_source)
    output = interpreter.run(source)
    tape = interpreter.tape
    return RunResult(output=output, pointer=int(tape.pointer), cells=tape.used_cells())


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    input_source: Optional[InputSource] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(read_source_file(path, encoding=encoding), options=options, input_source=input_source)
