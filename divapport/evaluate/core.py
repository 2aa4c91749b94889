'''Input validation and errors shared by all apportionment methods.'''

import math
from numbers import Integral, Real
from typing import Any, Tuple


class ApportionmentError(Exception):
    '''Base class for all errors raised by the apportionment methods.'''
    pass


class InvalidInput(ApportionmentError, ValueError):
    '''A population or the number of seats is not a real number.'''
    pass


class DegenerateTarget(ApportionmentError, ZeroDivisionError):
    '''The seats cannot be distributed, because a divisor would be zero.'''
    pass


def is_real_number(value: Any) -> bool:
    '''Return True for real numbers other than booleans that fit a float.'''
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _as_number(value: Real) -> Real:
    '''Keep integers exact, turn all other reals into floats.'''
    return value if isinstance(value, Integral) else float(value)


def validate(populations: Any,
             seats: Any,
             ) -> Tuple[Tuple[Real, ...], Real]:
    '''Check the inputs of an apportionment before any arithmetic is done.

    Only the minimum is checked: every population and the number of seats
    must be real numbers, and there must be something to divide by.
    Negative populations or fractional seat counts are accepted here;
    the divisor methods additionally refuse negative seat counts, for which
    their search never finds a divisor giving too few seats.

    Non-integral inputs (e.g. fractions) are converted to floats, so that
    the divisor search ends when the floating point precision is exhausted.

    :param populations: Populations of the entities to apportion among.
    :param seats: Number of seats to apportion.
    :returns: The populations as a tuple and the number of seats.
    :raises InvalidInput: If any population or the seat count is not a real
        number (None, strings, NaN and infinities included), or if the total
        population or the standard divisor is too large for a float.
    :raises DegenerateTarget: If the seat count or the total population is
        zero, so that a divisor would be zero.
    '''
    try:
        populations = tuple(populations)
    except TypeError as e:
        raise InvalidInput(f'populations must be a sequence: {e}') from e
    if not all(is_real_number(pop) for pop in populations) \
            or not is_real_number(seats):
        raise InvalidInput('every input must be a number')
    populations = tuple(_as_number(pop) for pop in populations)
    seats = _as_number(seats)
    if seats == 0:
        raise DegenerateTarget('cannot divide by 0 seats')
    total = sum(populations)
    if total == 0:
        raise DegenerateTarget('cannot apportion a total population of 0')
    try:
        divisor = float(total) / seats
    except OverflowError as e:
        raise InvalidInput(f'total population too large: {e}') from e
    if not math.isfinite(divisor):
        raise InvalidInput('total population too large for the seat count')
    return populations, seats
