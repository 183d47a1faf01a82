from pytest import fixture

from exprcalc.compiler import Compiler
from exprcalc.lexer import Lexer
from exprcalc.tokens import text


@fixture
def lexer():
    return Lexer()


@fixture
def postfix(lexer):
    '''
    Compile an expression and spell out the program, space separated.
    '''
    def compile_to_text(source):
        program = Compiler().compile(lexer.tokenize(source))
        return ' '.join(map(text, program))
    return compile_to_text
