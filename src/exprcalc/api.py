import logging

from .compiler import Compiler
from .formatting import format_number
from .lexer import Lexer
from .machine import Machine
from .normalizer import normalize
from .tokens import text
from .util import EmptyExpression


logger = logging.getLogger(__name__)


def compile_expression(source):
    '''
    Normalize, lex and compile source into a postfix program.
    '''
    if not source or not source.strip():
        raise EmptyExpression('Enter an expression')
    normalized = normalize(source)
    logger.debug('normalized %r to %r', source, normalized)
    program = Compiler().compile(Lexer().tokenize(normalized))
    logger.debug('compiled %r to %s',
                 source, ' '.join(map(text, program)))
    return program


def compute(source):
    '''
    Evaluate an infix expression and return its value as a float.

    Raises a CalcError subclass if source can't be evaluated; its first
    argument is a message for the user.
    '''
    return Machine().evaluate(compile_expression(source))


__all__ = 'compute', 'compile_expression', 'format_number'
