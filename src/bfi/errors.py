from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(source: str, position: int, *, context: int = 20) -> str:
    # One-line excerpt of the program with a caret under `position`.
    start = max(0, position - context)
    end = min(len(source), position + context + 1)
    excerpt = source[start:end].replace('\n', ' ').replace('\t', ' ')
    prefix = '...' if start > 0 else ''
    suffix = '...' if end < len(source) else ''

    out: List[str] = [
        f"  {prefix}{excerpt}{suffix}",
        "  " + " " * (len(prefix) + position - start) + "^",
    ]
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'malformed':
        if "unmatched '['" in msg:
            return 'Add a closing "]" for this loop or remove the stray "[".'
        if "unmatched ']'" in msg:
            return 'Add an opening "[" for this loop or remove the stray "]".'
        return None
    if kind == 'input':
        if 'end of input' in msg:
            return 'Provide one input character for every "," the program executes.'
        return None
    return None


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class MalformedProgram(BFIError):
    position: int
    bracket: str
    context: str


@dataclass
class InputExhausted(BFIError):
    position: int


def make_malformed_error(*, source: str, position: int) -> MalformedProgram:
    bracket = source[position]
    message = f"unmatched '{bracket}' at position {position}"
    ctx = _build_context(source, position)
    hint = _hint_for(message, kind='malformed')
    hint_block = f"\nHint: {hint}" if hint else ""
    return MalformedProgram(
        message=f"MalformedProgram: {message}\n{ctx}{hint_block}",
        position=position,
        bracket=bracket,
        context=ctx,
    )


def make_input_error(*, position: int) -> InputExhausted:
    message = f"end of input reached by ',' at position {position}"
    hint = _hint_for(message, kind='input')
    hint_block = f"\nHint: {hint}" if hint else ""
    return InputExhausted(
        message=f"InputExhausted: {message}{hint_block}",
        position=position,
    )
