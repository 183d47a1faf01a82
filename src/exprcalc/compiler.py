'''
Infix to postfix, by shunting yard.

See <https://en.wikipedia.org/wiki/Shunting_yard_algorithm>. On top of the
textbook algorithm, functions and prefix operators wait on the stack until
their operand is complete, and postfix operators go straight to the output.
'''

from collections import deque

from .tokens import (Number, Operator, Paren, Comma, PrefixUnary,
                     PostfixUnary, Function, OPEN)
from .util import CalcSyntaxError, UnbalancedParentheses, MisplacedComma
from .machine import Machine, LEFT


def _isopen(token):
    return isinstance(token, Paren) and token.direction == OPEN


def _ispending(token):
    '''
    Return True for stacked tokens still waiting on their operand.
    '''
    return isinstance(token, (Function, PrefixUnary))


class Compiler:
    '''
    Compiles infix tokens (see Lexer) into a postfix program for Machine.

    Does not check arity; the machine does that when it runs out of
    operands.
    '''

    def compile(self, tokens):
        '''
        Return tokens rearranged in postfix order.
        '''
        output = []
        stack = deque()
        for token in tokens:
            if isinstance(token, Number):
                output.append(token)
                # Prefix operators bind to the number right after them, so
                # -2^2 is (-2)^2.
                while stack and isinstance(stack[-1], PrefixUnary):
                    output.append(stack.pop())
            elif _ispending(token):
                stack.append(token)
            elif isinstance(token, PostfixUnary):
                output.append(token)
            elif isinstance(token, Operator):
                self._operator(token, stack, output)
            elif _isopen(token):
                stack.append(token)
            elif isinstance(token, Paren):
                self._close(stack, output)
            elif isinstance(token, Comma):
                self._comma(stack, output)
            else:
                raise CalcSyntaxError('Unexpected {}'.format(repr(token)))
        while stack:
            top = stack.pop()
            if isinstance(top, Paren):
                raise UnbalancedParentheses('Missing closing parenthesis')
            output.append(top)
        return output

    def _operator(self, token, stack, output):
        incoming = Machine.OPERATORS[token.symbol]
        while stack:
            top = stack[-1]
            if _ispending(top):
                output.append(stack.pop())
            elif isinstance(top, Operator) and \
                    self._yields(incoming, Machine.OPERATORS[top.symbol]):
                output.append(stack.pop())
            else:
                break
        stack.append(token)

    def _yields(self, incoming, top):
        '''
        Return True if the stacked operator must run before incoming.
        '''
        if incoming.associativity == LEFT:
            return top.precedence >= incoming.precedence
        return top.precedence > incoming.precedence

    def _close(self, stack, output):
        while stack and not _isopen(stack[-1]):
            output.append(stack.pop())
        if not stack:
            raise UnbalancedParentheses('Unexpected closing parenthesis')
        stack.pop()
        # Closes the call in sin(x), and √ in √(x).
        while stack and _ispending(stack[-1]):
            output.append(stack.pop())

    def _comma(self, stack, output):
        while stack and not _isopen(stack[-1]):
            output.append(stack.pop())
        if not stack:
            raise MisplacedComma('Comma outside function arguments')
