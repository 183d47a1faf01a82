import math


# Enough to hide binary representation noise such as 0.1 + 0.2.
SIGNIFICANT_DIGITS = 12
# Integral results at or above this print in exponent form.
INTEGER_LIMIT = 1e21
# Fractions down to this print positionally; repr() stops at 1e-4.
POSITIONAL_LIMIT = 1e-6


def format_number(value, precision=SIGNIFICANT_DIGITS):
    '''
    Render a result for display.

    Rounds to precision significant digits and drops trailing zeros, so
    0.30000000000000004 shows as 0.3 and 2.0 as 2. Infinities and NaN are
    shown as Python spells them.
    '''
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    rounded = float('{:.{}g}'.format(value, precision))
    if rounded.is_integer() and abs(rounded) < INTEGER_LIMIT:
        return str(int(rounded))
    if POSITIONAL_LIMIT <= abs(rounded) < 1e-4:
        # At most five zeros after the point before the first digit.
        fixed = '{:.{}f}'.format(rounded, precision + 5)
        return fixed.rstrip('0').rstrip('.')
    return repr(rounded)
