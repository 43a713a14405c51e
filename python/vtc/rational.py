# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#

"""
Exact helpers for :class:`fractions.Fraction` values.

Every time value in this package is held as a Fraction so repeated additions,
subtractions and rebases never drift. These helpers cover the two operations
Fraction does not provide with the semantics we need.
"""

import decimal
import math
from fractions import Fraction


def to_fraction(value):
    """
    Convert the given value to an exact :class:`Fraction`.

    :param value: An int, a Fraction, a :class:`decimal.Decimal`, a float or a
                  string like "3/2" or "1.5". Floats are converted exactly, so
                  ``0.1`` gives its full binary expansion.
    :returns: A Fraction.
    :raises: TypeError for unsupported types, ValueError for unparsable strings.
    """
    if isinstance(value, bool):
        raise TypeError("Unsupported rational type %s" % type(value))
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (int, float, decimal.Decimal)):
        return Fraction(value)
    if isinstance(value, str):
        return Fraction(value.strip())
    raise TypeError("Unsupported rational type %s" % type(value))


def round_half_up(value, places=0):
    """
    Round a rational value to the given number of decimal places.

    Ties are rounded away from zero, so 1/2 gives 1 and -1/2 gives -1. This
    is not the banker's rounding the builtin :func:`round` applies to Fractions.

    :param value: A :class:`Fraction`.
    :param places: Number of decimal places to keep, as an int.
    :returns: A Fraction. Its denominator is 1 when places is 0.
    """
    scale = 10 ** places
    scaled = abs(value) * scale
    rounded = math.floor(scaled + Fraction(1, 2))
    if value < 0:
        rounded = -rounded
    return Fraction(rounded, scale)


def floor_divmod(dividend, divisor):
    """
    Return the floor division and remainder of two rational values.

    The quotient is rounded towards negative infinity, not truncated, so
    ``floor_divmod(Fraction(-7), Fraction(2))`` is ``(-4, 1)``.

    :param dividend: A :class:`Fraction`.
    :param divisor: A non zero :class:`Fraction`.
    :returns: A (quotient, remainder) tuple of Fractions where
              ``quotient * divisor + remainder == dividend``.
    :raises: ZeroDivisionError if divisor is 0.
    """
    if divisor == 0:
        raise ZeroDivisionError("Fraction floor division by zero")
    quotient = Fraction(math.floor(dividend / divisor))
    return quotient, dividend - quotient * divisor
