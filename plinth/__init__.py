# Plinth language package
# This package provides the tokenizer, parser and interpreter for Plinth.
__version__ = '0.1.0'

from .interpreter import run_program, parse_program, Interpreter
from .errors import ParseError, PlinthError

__all__ = [
    'run_program',
    'parse_program',
    'Interpreter',
    'ParseError',
    'PlinthError',
]
