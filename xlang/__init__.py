# xlang language package
# This package provides a lexer, a recursive-descent parser and a
# tree-walking interpreter for the xlang scripting language.
from .errors import ScriptError, LexicalError, ScriptSyntaxError, ScriptRuntimeError
from .lexer import lex
from .parser import parse
from .interpreter import evaluate, parse_program, run_program, Interpreter
from .environment import Environment

__all__ = [
    'lex',
    'parse',
    'evaluate',
    'parse_program',
    'run_program',
    'Interpreter',
    'Environment',
    'ScriptError',
    'LexicalError',
    'ScriptSyntaxError',
    'ScriptRuntimeError',
]
