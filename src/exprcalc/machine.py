from collections import deque, namedtuple
from types import MappingProxyType
import operator
import math

from .tokens import (Number, Operator, PrefixUnary, PostfixUnary, Function,
                     ROOT, NEGATE, FACTORIAL, PERCENT)
from .util import (EvalError, InsufficientOperands, MalformedExpression,
                   DivisionByZero, PercentRequiresLeftOperand,
                   InvalidPercentValue, DomainError, NegativeRoot,
                   InvalidFactorialArgument, FactorialOverflow,
                   wrap_user_errors)


LEFT, RIGHT = 'left', 'right'

OperatorSpec = namedtuple('OperatorSpec', 'precedence associativity func')
FunctionSpec = namedtuple('FunctionSpec', 'arity func')


class Percent(namedtuple('Percent', 'value')):
    '''
    A %-suffixed operand whose meaning depends on what consumes it.

    100+10% is 110, but 2*10% is 0.2.
    '''
    __slots__ = ()

    @property
    def fraction(self):
        return self.value / 100


def resolve(operand, op=None, left=None):
    '''
    Reduce an operand to a plain float.

    A Percent consumed by op + or - is a percentage of left; anywhere else
    it is just its fraction.
    '''
    if not isinstance(operand, Percent):
        return operand
    if op in ('+', '-'):
        if left is None:
            raise PercentRequiresLeftOperand(
                'Percent needs a value on its left')
        return left * operand.value / 100
    return operand.fraction


def _divide(left, right):
    if right == 0:
        raise DivisionByZero('Division by zero')
    return left / right


@wrap_user_errors('Cannot raise {0} to {1}')
def _power(base, exponent):
    return math.pow(base, exponent)


def _inverse_trig(f):
    @wrap_user_errors('Cannot compute ' + f.__name__ + '({0})')
    def guarded(x):
        if not -1 <= x <= 1:
            raise DomainError('{}(x) needs x in [-1, 1]'.format(f.__name__))
        return f(x)
    guarded.__name__ = f.__name__
    return guarded


def _plain(f):
    return wrap_user_errors('Cannot compute ' + f.__name__ + '({0})')(f)


@wrap_user_errors('Cannot compute ln({0})')
def _ln(x):
    if x <= 0:
        raise DomainError('ln(x) needs x > 0')
    return math.log(x)


@wrap_user_errors('Cannot compute log({0}, {1})')
def _log(base, x):
    if base <= 0 or base == 1:
        raise DomainError('log(base, x) needs base > 0 and base != 1')
    if x <= 0:
        raise DomainError('log(base, x) needs x > 0')
    return math.log(x) / math.log(base)


class Machine:
    '''
    Postfix stack machine.

    Runs a compiled program (see Compiler) and leaves one number behind.
    A machine keeps its stack between calls to run(), so use a fresh one, or
    evaluate(), per expression.
    '''

    OPERATORS = MappingProxyType({
        '+': OperatorSpec(1, LEFT, operator.__add__),
        '-': OperatorSpec(1, LEFT, operator.__sub__),
        '*': OperatorSpec(2, LEFT, operator.__mul__),
        '/': OperatorSpec(2, LEFT, _divide),
        '^': OperatorSpec(3, RIGHT, _power),
    })

    FUNCTIONS = MappingProxyType({
        'sin': FunctionSpec(1, _plain(math.sin)),
        'cos': FunctionSpec(1, _plain(math.cos)),
        'tan': FunctionSpec(1, _plain(math.tan)),
        'asin': FunctionSpec(1, _inverse_trig(math.asin)),
        'acos': FunctionSpec(1, _inverse_trig(math.acos)),
        'atan': FunctionSpec(1, _plain(math.atan)),
        'ln': FunctionSpec(1, _ln),
        'log': FunctionSpec(2, _log),
        'abs': FunctionSpec(1, math.fabs),
    })

    CONSTANTS = MappingProxyType({
        '\N{GREEK SMALL LETTER PI}': math.pi,
        'pi': math.pi,
        'e': math.e,
    })

    PREFIX = frozenset({ROOT, NEGATE})
    POSTFIX = frozenset({FACTORIAL, PERCENT})

    FACTORIAL_LIMIT = 170

    def __init__(self):
        self.stack = deque()

    def evaluate(self, program):
        '''
        Run program on an empty stack and return the single value left.
        '''
        self.stack.clear()
        self.run(program)
        if len(self.stack) != 1:
            raise MalformedExpression('Cannot evaluate expression')
        return resolve(self.stack.pop())

    def run(self, program):
        '''
        Feed every instruction of program to the machine.
        '''
        for instruction in program:
            self.feed(instruction)

    def feed(self, instruction):
        '''
        Stack a number, or apply anything else to the stack.
        '''
        if isinstance(instruction, Number):
            self._pshstack(instruction.value)
        elif isinstance(instruction, PrefixUnary):
            self._prefix(instruction.symbol)
        elif isinstance(instruction, PostfixUnary):
            self._postfix(instruction.symbol)
        elif isinstance(instruction, Function):
            self._call(instruction.name)
        elif isinstance(instruction, Operator):
            self._binary(instruction.symbol)
        else:
            raise EvalError('Bad instruction {}'.format(repr(instruction)))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1, what='operation'):
        '''
        Pop specified number of operands from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InsufficientOperands(
                'Not enough operands for {}'.format(what))
        return [self.stack.pop() for _ in range(n)]

    def _prefix(self, symbol):
        value = resolve(self._popstack(what=symbol)[0])
        if symbol == ROOT:
            if value < 0:
                raise NegativeRoot('Cannot take the root of {}'.format(value))
            self._pshstack(math.sqrt(value))
        elif symbol == NEGATE:
            self._pshstack(-value)
        else:
            raise EvalError('Unknown prefix operator {}'.format(symbol))

    def _postfix(self, symbol):
        value = resolve(self._popstack(what=symbol)[0])
        if symbol == FACTORIAL:
            self._pshstack(self.factorial(value))
        elif symbol == PERCENT:
            if math.isnan(value):
                raise InvalidPercentValue('Bad value for percent')
            self._pshstack(Percent(value))
        else:
            raise EvalError('Unknown postfix operator {}'.format(symbol))

    def _call(self, name):
        spec = type(self).FUNCTIONS.get(name)
        if spec is None:
            raise EvalError('Unknown function {}'.format(name))
        # If you don't reverse, log(2, 8) becomes log(8, 2).
        args = reversed(self._popstack(spec.arity, what=name))
        self._pshstack(spec.func(*map(resolve, args)))

    def _binary(self, symbol):
        spec = type(self).OPERATORS.get(symbol)
        if spec is None:
            raise EvalError('Unknown operator {}'.format(symbol))
        right, left = self._popstack(2, what=symbol)
        left = resolve(left)
        right = resolve(right, symbol, left)
        self._pshstack(spec.func(left, right))

    @classmethod
    def factorial(cls, value):
        '''
        Factorial of a whole number, as a float.
        '''
        if not float(value).is_integer() or value < 0:
            raise InvalidFactorialArgument(
                'Factorial needs a whole number >= 0, not {}'.format(value))
        if value > cls.FACTORIAL_LIMIT:
            raise FactorialOverflow(
                'Factorial of {} is too large'.format(value))
        result = 1.0
        for i in range(2, int(value) + 1):
            result *= i
        return result
