from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .api import compile_expression, compute
from .formatting import format_number, SIGNIFICANT_DIGITS
from .lexer import Lexer
from .normalizer import normalize
from .tokens import text
from .util import CalcError


logger = logging.getLogger(__name__)


def precision(value):
    '''
    Parse a count of significant digits; at least one.
    '''
    digits = int(value)
    if digits < 1:
        raise ArgumentTypeError(
            'need at least 1 significant digit, not {}'.format(digits))
    return digits


class InteractiveInput:
    '''
    Lines typed at a prompt_toolkit prompt, until EOF.
    '''

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Not persistent; nothing is saved.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes, then the compiled postfix program, per line.
        '''
        lexer = Lexer()
        for line in self._lines():
            try:
                print('[groups]\t<repr(lexeme)>')
                for match in lexer.lex(normalize(line)):
                    print(*lexer.matchedgroups(match).keys(),
                          repr(match.group(0)),
                          sep='\t')
                program = compile_expression(line)
                print('postfix:', *map(text, program))
            except CalcError as e:
                self._report(line, e)

    def executor(self):
        '''
        Compute and print every line.
        '''
        for line in self._lines():
            try:
                print(format_number(compute(line), self.args.precision))
            # Abort entire line, makes sense anyway
            except CalcError as e:
                self._report(line, e)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        '''
        Yield non-blank input lines, without their line endings.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if line.strip():
                yield line

    def _report(self, line, error):
        print(error.args[0], file=stderr)
        logger.debug('failed to compute %r', line, exc_info=error)

    def _prompting_input(self):
        '''
        Return an interactive prompt instead of stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log tracebacks of bad '
                                               'expressions')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=precision,
                                          default=SIGNIFICANT_DIGITS,
                                          help='significant digits shown')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(message)s')
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
