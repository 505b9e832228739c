from __future__ import annotations

from typing import Callable, List, Optional

from .console import StdinInput
from .errors import make_input_error, make_malformed_error
from .tape import MEMORY_SIZE, Tape


InputSource = Callable[[], str]


class Interpreter:
    """
    Brainfuck interpreter

    Executes source text directly, one character at a time, against a Tape it
    owns. The tape survives between run() calls so that program fragments can
    share memory; call reset() to start over.

    Loops are resolved by scanning the source for the matching bracket each
    time a jump is taken, counting nested brackets on the way:
    - '[' on a zero cell scans forward and resumes after the matching ']'
    - ']' on a nonzero cell scans backward and lands on the matching '[',
      which re-tests the cell on the next step
    """

    def __init__(
        self,
        tape: Optional[Tape] = None,
        *,
        tape_size: int = MEMORY_SIZE,
        input_source: Optional[InputSource] = None,
    ):
        self.tape = tape if tape is not None else Tape(tape_size)
        self.input_source = input_source if input_source is not None else StdinInput()
        self.loop_depth = 0

    def run(self, source: str) -> str:
        """
        Execute `source` and return everything it printed.

        Raises:
            MalformedProgram: a taken jump found no matching bracket
            InputExhausted: ',' was executed after the input source ran dry
        """
        tape = self.tape
        output: List[str] = []

        i = 0
        length = len(source)
        while i < length:
            op = source[i]

            if op == '>':
                tape.move_right()
            elif op == '<':
                tape.move_left()
            elif op == '+':
                tape.increment()
            elif op == '-':
                tape.decrement()
            elif op == '.':
                output.append(chr(tape.read() & 0xFF))
            elif op == ',':
                tape.write(self._read_input(i))
            elif op == '[':
                if tape.read() == 0:
                    i = self._match_bracket(source, i, 1)
            elif op == ']':
                if tape.read() != 0:
                    i = self._match_bracket(source, i, -1)
                    continue
            i += 1

        return ''.join(output)

    def reset(self) -> None:
        self.tape.clear()
        self.loop_depth = 0

    # ===== Helpers =====

    def _match_bracket(self, source: str, start: int, step: int) -> int:
        # Same scan in both directions; only the roles of '[' and ']' swap.
        opener, closer = ('[', ']') if step > 0 else (']', '[')
        self.loop_depth = 0
        i = start + step
        try:
            while 0 <= i < len(source):
                ch = source[i]
                if ch == opener:
                    self.loop_depth += 1
                elif ch == closer:
                    if self.loop_depth == 0:
                        return i
                    self.loop_depth -= 1
                i += step
        finally:
            self.loop_depth = 0
        raise make_malformed_error(source=source, position=start)

    def _read_input(self, position: int) -> int:
        try:
            token = self.input_source()
        except EOFError:
            raise make_input_error(position=position) from None
        if not token:
            raise make_input_error(position=position)
        return ord(token[0])
