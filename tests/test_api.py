#!/usr/bin/env python3
"""
Tests for the run_string / run_file helpers.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi import MEMORY_SIZE, MalformedProgram, RunOptions, RunResult, run_file, run_string

PROGRAMS_DIR = os.path.join(os.path.dirname(__file__), '..', 'examples')


def test_run_string_defaults():
    result = run_string("++++[>++++<-]>.")
    assert isinstance(result, RunResult)
    assert result.output == chr(16)
    assert result.pointer == 1
    assert result.cells == [0, 16]


def test_run_string_options():
    result = run_string("<+", options=RunOptions(tape_size=3))
    assert result.pointer == 2
    assert result.cells == [0, 0, 1]
    assert RunOptions().tape_size == MEMORY_SIZE


def test_run_string_with_input():
    result = run_string(",+.", input_source=lambda: "a")
    assert result.output == "b"


def test_run_string_errors_propagate():
    with pytest.raises(MalformedProgram):
        run_string("[")


def test_run_file_hello_world():
    result = run_file(os.path.join(PROGRAMS_DIR, 'hello_world.bf'))
    assert result.output == "Hello World!\n"


def test_run_file_reverse_pair():
    tokens = iter(["x", "y"])
    result = run_file(os.path.join(PROGRAMS_DIR, 'reverse_pair.bf'), input_source=lambda: next(tokens))
    assert result.output == "yx"
