'''Arithmetic primitives shared by all apportionment methods.

Plain binary floating point is used throughout (with exact integer sums where
the populations are integers) so that divisors and quotients reproduce the
published reference values bit for bit.

There should normally be no need to use these functions directly.
'''

from numbers import Real
from typing import Iterable, Sequence, Tuple


def total(values: Iterable[Real]) -> Real:
    '''Sum the values from left to right.'''
    return sum(values, 0)


def standard_divisor(populations: Sequence[Real], seats: Real) -> Real:
    '''Return the total population divided by the number of seats.'''
    return total(populations) / seats


def quotients(populations: Sequence[Real], divisor: Real) -> Tuple[Real, ...]:
    '''Divide every population by the divisor.'''
    return tuple(pop / divisor for pop in populations)
