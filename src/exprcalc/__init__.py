'''
Infix calculator.

Evaluates the kind of expressions people type into a pocket calculator:
arithmetic and powers, parentheses, a few functions and constants, √, !, %,
and |x| for absolute value. Never hands the expression to Python's own
eval(); it is lexed, compiled to postfix by shunting yard, and run on a small
stack machine.

    >>> format_number(compute('100+10%'))
    '110'

Everything is a float. No variables, no symbolic maths, no arbitrary
precision.
'''

from .api import compute, compile_expression
from .cli import CLI
from .compiler import Compiler
from .formatting import format_number
from .lexer import Lexer
from .machine import Machine
from .normalizer import normalize
from .util import CalcError


__all__ = ('compute', 'compile_expression', 'format_number', 'normalize',
           'Lexer', 'Compiler', 'Machine', 'CLI', 'CalcError')
