'''Rounding rules used in divisor apportionment methods.

A rounding rule takes the quotient of a population and a divisor and turns it
into a whole number of seats. Each classical divisor method is defined by its
rounding rule alone:

-   Jefferson rounds down (:func:`floor`),
-   Adams rounds up (:func:`ceiling`),
-   Webster rounds to the nearest integer, halves up (:func:`nearest`),
-   Huntington-Hill rounds up if the quotient exceeds the geometric mean of
    the two neighbouring integers (:func:`geometric_mean`).

All of them make the total number of seats a non-increasing function of the
divisor, which is what the divisor search relies on.

The rules are available as plain functions in the `ROUNDING_RULES` dictionary
keyed by their name and as members of the :class:`RoundingRule` enumeration,
which is the form accepted by the divisor methods. `get()` retrieves
a function by name; `construct()` turns a name or a member into a member.
'''

import enum
import math
from numbers import Real
from typing import Union

import divapport.component.core


ROUNDING_RULES = divapport.component.core.Register('rounding rule')

rule_mark = ROUNDING_RULES.mark
get = ROUNDING_RULES.lookup


@rule_mark
def floor(quotient: Real) -> int:
    '''Round down. Used by the Jefferson (D'Hondt) method.'''
    return math.floor(quotient)


@rule_mark
def ceiling(quotient: Real) -> int:
    '''Round up. Used by the Adams method.'''
    return math.ceil(quotient)


@rule_mark
def nearest(quotient: Real) -> int:
    '''Round to the nearest integer, halves up.

    Used by the Webster (Sainte-Laguë) method. Unlike the built-in
    :func:`round`, this never rounds halves to even.
    '''
    lower = math.floor(quotient)
    return lower + 1 if quotient - lower >= 0.5 else lower


@rule_mark
def geometric_mean(quotient: Real) -> int:
    '''Round at the geometric mean of the neighbouring integers.

    Used by the Huntington-Hill (equal proportions) method. A quotient of 7.6
    lies between 7 and 8 whose geometric mean is `sqrt(7 * 8) = 7.483`, so it
    is rounded up. Any positive quotient below one is rounded up to one.
    '''
    lower = math.floor(quotient)
    upper = math.ceil(quotient)
    return upper if math.sqrt(lower * upper) < quotient else lower


class RoundingRule(enum.Enum):
    '''The closed set of rounding rules a divisor method can use.'''
    FLOOR = 'floor'
    CEILING = 'ceiling'
    NEAREST = 'nearest'
    GEOMETRIC_MEAN = 'geometric_mean'

    def apply(self, quotient: Real) -> int:
        '''Round a single quotient to a whole number of seats.'''
        return ROUNDING_RULES[self.value](quotient)


def construct(rule_def: Union[str, RoundingRule]) -> RoundingRule:
    '''Construct a rounding rule from its name, or pass a member through.

    :raises KeyError: If no rule of the given name exists.
    '''
    if isinstance(rule_def, RoundingRule):
        return rule_def
    get(rule_def)
    return RoundingRule(rule_def)
