from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from .console import read_source_file
from .errors import BFIError
from .interpreter import Interpreter
from .tape import MEMORY_SIZE

logger = logging.getLogger("bfi")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Brainfuck interpreter.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-f", "--file", metavar="PATH", help="Read the code from a .bf file")
    mode.add_argument("-c", "--code", action="store_true", help="Read the code from the console")
    parser.add_argument("--tape-size", type=int, default=MEMORY_SIZE,
                        help=f"Number of memory cells (default {MEMORY_SIZE})")
    parser.add_argument("--dump", type=int, default=0, metavar="N",
                        help="Print the first N cells after running")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.tape_size <= 0:
        parser.error("--tape-size must be positive")

    try:
        if args.file:
            code = read_source_file(args.file)
            logger.debug("Read %d characters from %s", len(code), args.file)
        else:
            sys.stdout.write("Enter the code: ")
            sys.stdout.flush()
            code = sys.stdin.readline().rstrip("\r\n")

        interpreter = Interpreter(tape_size=args.tape_size)
        start = time.time()
        output = interpreter.run(code)
        end = time.time()
        logger.debug("Execution took %.2f ms", (end - start) * 1000)
    except (BFIError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    if args.dump > 0:
        print(interpreter.tape.dump(args.dump))
    return 0
