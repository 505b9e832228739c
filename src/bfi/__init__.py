
from .tape import MEMORY_SIZE, Tape
from .interpreter import Interpreter
from .errors import BFIError, InputExhausted, MalformedProgram
from .api import RunOptions, RunResult, run_file, run_string

__all__ = [
    'MEMORY_SIZE',
    'Tape',
    'Interpreter',
    'BFIError',
    'MalformedProgram',
    'InputExhausted',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
