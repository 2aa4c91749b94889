'''Results of apportionment methods.

Divisor methods return a :data:`DivisorResult`, which is either an
:class:`ExactResult` (a modified divisor was found whose rounded quotients
add up to the number of seats) or a :class:`BracketResult` (no such divisor
exists in floating point arithmetic, so the two closest divisors on either
side are reported). Callers must branch on the result type; the bracket is
a regular outcome, not an error. The Hamilton method always returns
a :class:`RemainderResult`.

All results are immutable and carry their vectors as tuples, in the order of
the populations given.
'''

from __future__ import annotations

import dataclasses
from numbers import Real
from typing import Any, Dict, Tuple, Union

from divapport.persist import camel_serialization, deserialize_fields


@camel_serialization
@dataclasses.dataclass(frozen=True)
class Allocation:
    '''Quotients and rounded seat counts obtained with a single divisor.'''
    modified_divisor: Real
    quotients: Tuple[Real, ...]
    apportionment: Tuple[int, ...]

    @property
    def seats(self) -> int:
        '''Total number of seats allocated with this divisor.'''
        return sum(self.apportionment)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Allocation:
        return deserialize_fields(cls, data)


@camel_serialization
@dataclasses.dataclass(frozen=True)
class ExactResult:
    '''A divisor method result with a modified divisor that fills all seats.

    :param standard_divisor: Total population divided by the number of seats.
    :param pre_allocation: Seats obtained by rounding the quotients at the
        standard divisor; only informative, may not fill all seats.
    :param exact: The allocation at the first modified divisor found to fill
        the seats exactly.
    '''
    is_exact = True

    standard_divisor: Real
    pre_allocation: Tuple[int, ...]
    exact: Allocation

    @property
    def apportionment(self) -> Tuple[int, ...]:
        return self.exact.apportionment

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExactResult:
        return deserialize_fields(cls, data, {'exact': Allocation.from_dict})


@camel_serialization
@dataclasses.dataclass(frozen=True)
class BracketResult:
    '''A divisor method result without an exact modified divisor.

    The two allocations come from adjacent divisors tried by the search
    between which the total number of seats jumps over the target.

    :param standard_divisor: Total population divided by the number of seats.
    :param pre_allocation: Seats obtained by rounding the quotients at the
        standard divisor.
    :param low: The allocation at the closest divisor that gives fewer seats
        than required (this is the larger of the two divisors).
    :param high: The allocation at the closest divisor that gives more seats
        than required.
    '''
    is_exact = False

    standard_divisor: Real
    pre_allocation: Tuple[int, ...]
    low: Allocation
    high: Allocation

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BracketResult:
        return deserialize_fields(cls, data, {
            'low': Allocation.from_dict,
            'high': Allocation.from_dict,
        })


DivisorResult = Union[ExactResult, BracketResult]


@camel_serialization
@dataclasses.dataclass(frozen=True)
class RemainderResult:
    '''A largest remainder (Hamilton) method result with all its steps.

    :param divisor: The standard divisor.
    :param quotients: Populations divided by the standard divisor.
    :param pre_allocation: Quotients rounded down; the guaranteed minimum.
    :param remainders: Fractional parts of the quotients.
    :param pre_allocation_sum: Seats given out in the pre-allocation.
    :param pre_allocation_left_over: Seats remaining after the
        pre-allocation.
    :param left_over_allocation: One for every entity that got one of the
        remaining seats, zero otherwise.
    :param apportionment: The final seat counts.
    '''
    divisor: Real
    quotients: Tuple[Real, ...]
    pre_allocation: Tuple[int, ...]
    remainders: Tuple[Real, ...]
    pre_allocation_sum: int
    pre_allocation_left_over: Real
    left_over_allocation: Tuple[int, ...]
    apportionment: Tuple[int, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RemainderResult:
        return deserialize_fields(cls, data)


AnyResult = Union[ExactResult, BracketResult, RemainderResult]


def from_dict(data: Dict[str, Any]) -> AnyResult:
    '''Rebuild any result from its dictionary form.

    The result type is recognized by the keys present.

    :raises ValueError: If the dictionary is not a serialized result.
    '''
    if 'exact' in data:
        if 'low' in data or 'high' in data:
            raise ValueError('result cannot be both exact and bracketed')
        return ExactResult.from_dict(data)
    elif 'low' in data or 'high' in data:
        return BracketResult.from_dict(data)
    elif 'remainders' in data:
        return RemainderResult.from_dict(data)
    else:
        raise ValueError(f'not a serialized apportionment result: {data!r}')
