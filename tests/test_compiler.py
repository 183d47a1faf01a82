'''
Shunting yard tests

Programs are spelled out by the postfix fixture, numbers as Python reprs.
'''

from exprcalc.compiler import Compiler
from exprcalc.tokens import Number, Operator, Function
from exprcalc.util import (CalcSyntaxError, UnbalancedParentheses,
                           MisplacedComma)

from pytest import mark, raises


@mark.parametrize('source, expected', [
    ('2+3*4', '2.0 3.0 4.0 * +'),
    ('2*3+4', '2.0 3.0 * 4.0 +'),
    ('2-3-4', '2.0 3.0 - 4.0 -'),
    ('8/4/2', '8.0 4.0 / 2.0 /'),
    ('(2+3)*4', '2.0 3.0 + 4.0 *'),
])
def test_precedence(postfix, source, expected):
    assert postfix(source) == expected


def test_power_is_right_associative(postfix):
    assert postfix('2^3^2') == '2.0 3.0 2.0 ^ ^'


def test_negation_binds_to_next_number(postfix):
    # So -2^2 is (-2)^2.
    assert postfix('-2^2') == '2.0 _ 2.0 ^'
    assert postfix('2^-2') == '2.0 2.0 _ ^'
    assert postfix('2*-3') == '2.0 3.0 _ *'


def test_root(postfix):
    assert postfix('\N{SQUARE ROOT}4+5') == '4.0 \N{SQUARE ROOT} 5.0 +'
    assert postfix('\N{SQUARE ROOT}(4+5)') == '4.0 5.0 + \N{SQUARE ROOT}'


def test_functions(postfix):
    assert postfix('sin(0)+1') == '0.0 sin/1 1.0 +'
    assert postfix('log(2,8)') == '2.0 8.0 log/2'
    assert postfix('log(1+1,2^3)') == '1.0 1.0 + 2.0 3.0 ^ log/2'


def test_negated_call(postfix):
    assert postfix('-sin(0)') == '0.0 sin/1 _'


def test_postfix_operators(postfix):
    assert postfix('5!+10%') == '5.0 ! 10.0 % +'


def test_missing_closing_paren(lexer):
    with raises(UnbalancedParentheses, match='Missing'):
        Compiler().compile(lexer.tokenize('(2+3'))


def test_unexpected_closing_paren(lexer):
    with raises(UnbalancedParentheses, match='Unexpected'):
        Compiler().compile(lexer.tokenize('2+3)'))


def test_misplaced_comma(lexer):
    with raises(MisplacedComma):
        Compiler().compile(lexer.tokenize('1,2'))


def test_syntax_errors_share_a_base(lexer):
    with raises(CalcSyntaxError):
        Compiler().compile(lexer.tokenize(')'))


def test_arity_is_not_checked():
    program = Compiler().compile([Function('log', 2), Number(1.0)])
    assert program == [Number(1.0), Function('log', 2)]


def test_foreign_token():
    with raises(CalcSyntaxError):
        Compiler().compile([Number(1.0), Operator('+'), 'x'])
