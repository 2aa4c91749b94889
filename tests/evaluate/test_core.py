import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import divapport
from divapport.evaluate.core import (
    validate, ApportionmentError, InvalidInput, DegenerateTarget
)

ALL_METHODS = [
    divapport.hamilton,
    divapport.jefferson,
    divapport.adams,
    divapport.webster,
    divapport.huntington_hill,
]
VALID_POPS = list(range(10))


@pytest.mark.parametrize('method', ALL_METHODS)
@pytest.mark.parametrize(('populations', 'n_seats'), [
    (['nope'] + VALID_POPS[1:], 10),
    ([None] + VALID_POPS[1:], 10),
    ([float('nan')] + VALID_POPS[1:], 10),
    ([float('inf')] + VALID_POPS[1:], 10),
    ([True] + VALID_POPS[1:], 10),
    (VALID_POPS, None),
    (VALID_POPS, float('nan')),
    (VALID_POPS, '10'),
    (42, 10),
])
def test_invalid_input(method, populations, n_seats):
    with pytest.raises(InvalidInput):
        method(populations, n_seats)


@pytest.mark.parametrize('method', ALL_METHODS)
@pytest.mark.parametrize(('populations', 'n_seats'), [
    (VALID_POPS, 0),
    (VALID_POPS, 0.0),
    ([0, 0, 0], 10),
    ([], 10),
])
def test_degenerate_target(method, populations, n_seats):
    with pytest.raises(DegenerateTarget):
        method(populations, n_seats)


def test_error_hierarchy():
    assert issubclass(InvalidInput, ApportionmentError)
    assert issubclass(InvalidInput, ValueError)
    assert issubclass(DegenerateTarget, ApportionmentError)
    assert issubclass(DegenerateTarget, ZeroDivisionError)


@pytest.mark.parametrize('method', ALL_METHODS[1:])
def test_negative_seats_divisor(method):
    with pytest.raises(DegenerateTarget):
        method(VALID_POPS, -5)


def test_negative_seats_hamilton():
    result = divapport.hamilton([1, 2], -3)
    assert result.divisor == -1
    assert result.pre_allocation_left_over == 0
    assert sum(result.apportionment) == -3


@pytest.mark.parametrize('method', ALL_METHODS)
@pytest.mark.parametrize(('populations', 'n_seats'), [
    ([1e308, 1e308], 2),
    ([10 ** 400, 1], 3),
    ([10 ** 308, 10 ** 308], 3),
    ([1e300, 1], 1e-10),
])
def test_too_large(method, populations, n_seats):
    with pytest.raises(InvalidInput):
        method(populations, n_seats)


@pytest.mark.parametrize('method', ALL_METHODS[1:])
def test_fractions_as_floats(method):
    populations = [9, 5, 9, 1, 3, 5, 8]
    result = method([Fraction(pop) for pop in populations], Fraction(20))
    assert result == method(populations, 20)
    assert result.low.seats < 20 < result.high.seats
    assert isinstance(result.low.modified_divisor, float)
    assert isinstance(result.standard_divisor, float)


def test_validate_passes():
    populations, seats = validate(iter([1, 2.5, Fraction(1, 4)]), 3)
    assert populations == (1, 2.5, 0.25)
    assert isinstance(populations[0], int)
    assert isinstance(populations[2], float)
    assert seats == 3
    assert validate([10], Fraction(3, 2)) == ((10,), 1.5)
    # only the minimum is checked
    assert validate([-5, 10], 2.5) == ((-5, 10), 2.5)
