from .tokens import ROOT
from .util import UnbalancedAbsoluteValue


# A bar right after any of these (or at the start) opens |x|.
OPENS_AFTER = frozenset('+-*/^,(' + ROOT)


def _opens(built):
    '''
    Return True if a bar following the text built so far opens a group.
    '''
    stripped = built.rstrip()
    return not stripped or stripped[-1] in OPENS_AFTER


def normalize(text):
    '''
    Rewrite absolute value bars into abs() calls.

    |3-|-2|| becomes abs(3-abs(-2)). Whether a bar opens or closes depends
    only on the character before it.
    '''
    if '|' not in text:
        return text
    built = []
    depth = 0
    for char in text:
        if char != '|':
            built.append(char)
        elif _opens(''.join(built)):
            built.append('abs(')
            depth += 1
        elif depth:
            built.append(')')
            depth -= 1
        else:
            raise UnbalancedAbsoluteValue('Unexpected closing |')
    if depth:
        raise UnbalancedAbsoluteValue('Unclosed |x|')
    return ''.join(built)
