'''
Lexical tokens, shared by the lexer, compiler and machine.

A compiled program is just a list of these, in postfix order.
'''

from collections import namedtuple


OPEN = '('

ROOT = '\N{SQUARE ROOT}'
# Never typed by the user; the lexer decides which '-' negates.
NEGATE = '_'

FACTORIAL = '!'
PERCENT = '%'


Number = namedtuple('Number', 'value')
Operator = namedtuple('Operator', 'symbol')
Paren = namedtuple('Paren', 'direction')
Comma = namedtuple('Comma', '')
PrefixUnary = namedtuple('PrefixUnary', 'symbol')
PostfixUnary = namedtuple('PostfixUnary', 'symbol')
Function = namedtuple('Function', 'name arity')


def text(token):
    '''
    Render a token the way it would be typed, for dumps and debug logs.
    '''
    if isinstance(token, Number):
        return repr(token.value)
    elif isinstance(token, Paren):
        return token.direction
    elif isinstance(token, Comma):
        return ','
    elif isinstance(token, Function):
        return '{}/{}'.format(token.name, token.arity)
    return token.symbol
