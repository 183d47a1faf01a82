from functools import wraps


class CalcError(Exception):
    '''
    Root of every error raised while computing an expression.

    args[0] is always a message fit to show the user.
    '''
    pass


class EmptyExpression(CalcError):
    pass


class LexError(CalcError):
    pass


class UnknownCharacter(LexError):
    def __init__(self, char):
        super().__init__('Unknown character {}'.format(repr(char)), char)
        self.char = char


class MalformedNumber(LexError):
    pass


class MissingFunctionParen(LexError):
    def __init__(self, name):
        super().__init__('{} must be followed by ('.format(name), name)
        self.name = name


class FormatError(CalcError):
    pass


class UnbalancedAbsoluteValue(FormatError):
    pass


class CalcSyntaxError(CalcError):
    pass


class UnbalancedParentheses(CalcSyntaxError):
    pass


class MisplacedComma(CalcSyntaxError):
    pass


class EvalError(CalcError):
    pass


class InsufficientOperands(EvalError):
    pass


class MalformedExpression(EvalError):
    pass


class DivisionByZero(EvalError):
    pass


class PercentRequiresLeftOperand(EvalError):
    pass


class InvalidPercentValue(EvalError):
    pass


class DomainError(EvalError):
    pass


class NegativeRoot(DomainError):
    pass


class InvalidFactorialArgument(DomainError):
    pass


class FactorialOverflow(DomainError):
    pass


def wrap_user_errors(fmt, kind=EvalError):
    '''
    Decorator that converts stray exceptions into CalcErrors of kind.

    fmt is formatted with the wrapped call's arguments. Passes through
    CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise kind(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
