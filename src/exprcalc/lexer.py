from functools import reduce
import operator

import regex

from .tokens import (Number, Operator, Paren, Comma, PrefixUnary,
                     PostfixUnary, Function, OPEN, NEGATE)
from .util import UnknownCharacter, MalformedNumber, MissingFunctionParen
from .machine import Machine


def _alternatives(symbols):
    '''
    Regex alternation of symbols, longest first.
    '''
    ordered = sorted(symbols, key=len, reverse=True)
    return r'(?:' + r'|'.join(map(regex.escape, ordered)) + r')'


class Lexer:
    '''
    Lexer for infix calculator expressions.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Any run of digits and dots; lex() rejects 1.2.3 and a lone dot.
    NUMBER = r'''
              # 1, 12, 1.5, .5, 1.
              [0-9.]+
              '''
    # Python's spelling of ^
    POWER = r'\*\*'
    COMMA = r','
    PAREN = r'[()]'
    SPACE = r'\s+'

    assert not [operator
                for operator
                in Machine.OPERATORS
                if len(operator) != 1]
    OPERATOR = _alternatives(Machine.OPERATORS)
    FUNCTION = _alternatives(Machine.FUNCTIONS)
    CONSTANT = _alternatives(Machine.CONSTANTS)
    # The user types - for negation too; tokenize() tells the two apart.
    PREFIX = _alternatives(Machine.PREFIX - {NEGATE})
    POSTFIX = _alternatives(Machine.POSTFIX)

    # All possible lexemes. Leftmost-longest, so ** beats *, and function
    # names are never split into a constant plus leftover letters.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<power>' + POWER + r')|' \
             r'(?<comma>' + COMMA + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<constant>' + CONSTANT + r')|' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<prefix>' + PREFIX + r')|' \
             r'(?<postfix>' + POSTFIX + r')|' \
             r'(?<paren>' + PAREN + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    # What must follow a function name
    CALL = r'\s*\('

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, raising on the first
        bad one.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                raise UnknownCharacter(line[0])
            lexeme = match.group(0)
            line = line[len(lexeme):]
            groups = self.matchedgroups(match)
            if 'number' in groups and \
               (lexeme.count('.') > 1 or lexeme == '.'):
                raise MalformedNumber('Malformed number {}'.format(lexeme))
            if 'function' in groups and \
               regex.match(type(self).CALL, line) is None:
                raise MissingFunctionParen(lexeme)
            yield match

    def tokenize(self, line):
        '''
        Take a line and return its tokens, in infix order.
        '''
        tokens = []
        for match in self.lex(line):
            if not self.isfeedable(match):
                continue
            previous = tokens[-1] if tokens else None
            tokens.append(self.parse(self.matchedgroups(match), previous))
        return tokens

    def parse(self, groups, previous=None):
        '''
        Turn lexeme groups into a token.

        :param previous: Token before this one, if any. Decides whether -
                         negates or subtracts.
        '''
        if 'number' in groups:
            return Number(float(groups['number']))
        elif 'constant' in groups:
            return Number(Machine.CONSTANTS[groups['constant']])
        elif 'function' in groups:
            name = groups['function']
            return Function(name, Machine.FUNCTIONS[name].arity)
        elif 'power' in groups:
            return Operator('^')
        elif 'comma' in groups:
            return Comma()
        elif 'prefix' in groups:
            return PrefixUnary(groups['prefix'])
        elif 'postfix' in groups:
            return PostfixUnary(groups['postfix'])
        elif 'paren' in groups:
            return Paren(groups['paren'])
        elif 'operator' in groups:
            symbol = groups['operator']
            if symbol == '-' and self.negates(previous):
                return PrefixUnary(NEGATE)
            return Operator(symbol)

    def negates(self, previous):
        '''
        Return True if a - after previous is a negation, not a subtraction.
        '''
        if previous is None:
            return True
        if isinstance(previous, Paren):
            return previous.direction == OPEN
        return isinstance(previous, (Operator, PrefixUnary, Function, Comma))

    def isfeedable(self, match):
        '''
        Return True if lexeme becomes a token.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
