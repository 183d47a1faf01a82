'''
CLI tests, driven through -e so stdin is never read.
'''

import sys

import exprcalc.cli
from exprcalc.cli import CLI

from pytest import raises


def run(capfd, *args):
    # cli binds stderr at import; point it at the stream capfd swapped in.
    bound_stderr = exprcalc.cli.stderr
    exprcalc.cli.stderr = sys.stderr
    try:
        CLI().run(args=list(args))
    finally:
        exprcalc.cli.stderr = bound_stderr
    return capfd.readouterr()


def test_expression(capfd):
    assert run(capfd, '-e', '2+3*4').out == '14\n'


def test_several_expressions(capfd):
    assert run(capfd, '-e', '1+1', '0.1+0.2').out == '2\n0.3\n'


def test_blank_lines_skipped(capfd):
    assert run(capfd, '-e', '', '  ', '3').out == '3\n'


def test_error_reported_and_skipped(capfd):
    captured = run(capfd, '-e', '5/0', '2')
    assert captured.out == '2\n'
    assert 'Division by zero' in captured.err


def test_precision(capfd):
    assert run(capfd, '-k', '3', '-e', 'pi').out == '3.14\n'


def test_dump(capfd):
    out = run(capfd, '-D', '-e', '1+2').out
    assert "number\t'1'" in out
    assert 'postfix: 1.0 2.0 +' in out


def test_dump_normalizes_bars(capfd):
    out = run(capfd, '-D', '-e', '|1|').out
    assert "function\t'abs'" in out


def test_raw_grammar(capfd):
    assert '(?<number>' in run(capfd, '-G', '-e').out


def test_precision_must_be_positive(capfd):
    with raises(SystemExit):
        run(capfd, '-k', '-1', '-e', '1+1')
    captured = capfd.readouterr()
    assert captured.out == ''
    assert 'at least 1 significant digit' in captured.err


def test_precision_must_be_a_number(capfd):
    with raises(SystemExit):
        run(capfd, '-k', 'many', '-e', '1+1')
    assert 'precision' in capfd.readouterr().err
