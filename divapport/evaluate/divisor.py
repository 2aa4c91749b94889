'''Divisor (modified divisor) apportionment methods.

A divisor method divides every population by a common divisor and rounds the
quotients by its rounding rule. The standard divisor (total population over
seats) rarely fills the seats exactly, so the divisor is adjusted until the
rounded quotients add up to the number of seats. The methods differ only in
the rounding rule:

-   Jefferson (D'Hondt) rounds down and favors larger entities,
-   Adams rounds up and favors smaller entities,
-   Webster (Sainte-Laguë) rounds to the nearest integer,
-   Huntington-Hill (equal proportions) rounds at the geometric mean.

None of them suffers from the Alabama paradox, but all of them can violate
the quota rule.

With heavily tied populations (or few seats), there may be no divisor at all
that fills the seats exactly: the total jumps over the target when several
quotients cross their rounding thresholds at the same divisor. The search
then reports the closest divisors on both sides of the jump as
a :class:`divapport.result.BracketResult`.
'''

import logging
from numbers import Real
from typing import Sequence, Tuple, Union

import divapport.util
import divapport.component.rounding
from divapport.component.rounding import RoundingRule
from divapport.evaluate.core import validate, DegenerateTarget
from divapport.result import (
    Allocation, ExactResult, BracketResult, DivisorResult
)


logger = logging.getLogger(__name__)


def fill_seats(populations: Sequence[Real],
               divisor: Real,
               rule: RoundingRule,
               ) -> Allocation:
    '''Round the quotients of all populations at the given divisor.'''
    quotients = divapport.util.quotients(populations, divisor)
    return Allocation(
        modified_divisor=divisor,
        quotients=quotients,
        apportionment=tuple(rule.apply(quot) for quot in quotients),
    )


class DivisorSearch:
    '''Find a modified divisor that fills the seats exactly.

    The total number of seats is a non-increasing step function of the
    divisor, so the divisor is bisected between the closest known divisor
    that gives too few seats (the under-filling bound) and the closest known
    divisor that gives too many (the over-filling bound). Until both bounds
    are known, the divisor is halved or doubled instead.

    When an iteration fails to replace either bound (the new trial divisor
    is equal to a bound already recorded), the floating point precision is
    exhausted and there is no divisor between the bounds to fill the seats
    exactly. The search then ends with the two bounds. There is no iteration
    limit otherwise.

    :param rounding_rule: The rule to round quotients with, as
        a :class:`RoundingRule` member or its name.
    '''
    def __init__(self, rounding_rule: Union[str, RoundingRule]):
        self.rounding_rule = divapport.component.rounding.construct(
            rounding_rule
        )

    def search(self,
               populations: Sequence[Real],
               seats: Real,
               start_divisor: Real,
               ) -> Union[Allocation, Tuple[Allocation, Allocation]]:
        '''Search for the divisor, starting from the given one.

        :param populations: Populations of the entities.
        :param seats: Number of seats to fill.
        :param start_divisor: The first divisor to try, usually the standard
            divisor.
        :returns: The allocation that fills the seats exactly, or a 2-tuple
            of the closest under-filling and over-filling allocations.
        '''
        divisor = start_divisor
        under_divisor = None
        over_divisor = None
        under = None
        over = None
        n_trials = 0
        while True:
            allocation = fill_seats(populations, divisor, self.rounding_rule)
            n_filled = allocation.seats
            n_trials += 1
            logger.debug('trial %d: divisor %r fills %d seats',
                         n_trials, divisor, n_filled)
            if n_filled == seats:
                logger.debug('divisor %r found after %d trials',
                             divisor, n_trials)
                return allocation
            change = False
            if n_filled < seats:
                # divisor too large
                if divisor != under_divisor:
                    change = True
                    under_divisor = divisor
                    under = allocation
                if over_divisor is not None:
                    divisor = (divisor + over_divisor) / 2
                else:
                    divisor = divisor / 2
            else:
                # divisor too small
                if divisor != over_divisor:
                    change = True
                    over_divisor = divisor
                    over = allocation
                if under_divisor is not None:
                    divisor = (divisor + under_divisor) / 2
                else:
                    divisor = divisor * 2
            if not change:
                logger.debug(
                    'no divisor between %r and %r after %d trials',
                    over_divisor, under_divisor, n_trials
                )
                return under, over


class DivisorMethod:
    '''Apportion seats by a divisor method with the given rounding rule.

    :param rounding_rule: The rule to round quotients with, as
        a :class:`RoundingRule` member or its name. The rule determines the
        method: ``floor`` gives Jefferson, ``ceiling`` Adams, ``nearest``
        Webster and ``geometric_mean`` Huntington-Hill.
    '''
    def __init__(self, rounding_rule: Union[str, RoundingRule]):
        self.rounding_rule = divapport.component.rounding.construct(
            rounding_rule
        )
        self._search = DivisorSearch(self.rounding_rule)

    def evaluate(self,
                 populations: Sequence[Real],
                 seats: Real,
                 ) -> DivisorResult:
        '''Apportion the seats among the entities.

        :param populations: Populations of the entities, in a fixed order.
        :param seats: Number of seats to apportion.
        :returns: An :class:`ExactResult` if a modified divisor filling the
            seats was found, a :class:`BracketResult` otherwise.
        :raises divapport.evaluate.core.InvalidInput: If any input is not
            a number.
        :raises divapport.evaluate.core.DegenerateTarget: If the seat count
            is zero or negative, or the total population is zero.
        '''
        populations, seats = validate(populations, seats)
        if seats < 0:
            raise DegenerateTarget(f'cannot distribute {seats} seats')
        standard_divisor = divapport.util.standard_divisor(populations, seats)
        pre_allocation = fill_seats(
            populations, standard_divisor, self.rounding_rule
        ).apportionment
        outcome = self._search.search(populations, seats, standard_divisor)
        if isinstance(outcome, Allocation):
            logger.info('%s rounding: modified divisor %r fills %s seats',
                        self.rounding_rule.value, outcome.modified_divisor,
                        seats)
            return ExactResult(
                standard_divisor=standard_divisor,
                pre_allocation=pre_allocation,
                exact=outcome,
            )
        else:
            low, high = outcome
            logger.info(
                '%s rounding: no divisor fills %s seats, closest are %r'
                ' (%d seats) and %r (%d seats)',
                self.rounding_rule.value, seats,
                low.modified_divisor, low.seats,
                high.modified_divisor, high.seats,
            )
            return BracketResult(
                standard_divisor=standard_divisor,
                pre_allocation=pre_allocation,
                low=low,
                high=high,
            )


def jefferson(populations: Sequence[Real], seats: Real) -> DivisorResult:
    '''Apportion by the Jefferson (D'Hondt) method, rounding down.

    Favors bigger entities. Can violate the quota rule.
    '''
    return DivisorMethod(RoundingRule.FLOOR).evaluate(populations, seats)


def adams(populations: Sequence[Real], seats: Real) -> DivisorResult:
    '''Apportion by the Adams method, rounding up.

    Favors smaller entities; every entity with a positive population gets at
    least one seat. Can violate the quota rule.
    '''
    return DivisorMethod(RoundingRule.CEILING).evaluate(populations, seats)


def webster(populations: Sequence[Real], seats: Real) -> DivisorResult:
    '''Apportion by the Webster (Sainte-Laguë) method, rounding to nearest.

    Less biased towards bigger entities than Jefferson. Can violate the quota
    rule, but rarely does.
    '''
    return DivisorMethod(RoundingRule.NEAREST).evaluate(populations, seats)


def huntington_hill(populations: Sequence[Real],
                    seats: Real,
                    ) -> DivisorResult:
    '''Apportion by the Huntington-Hill (equal proportions) method.

    Quotients are rounded up if they exceed the geometric mean of the two
    neighbouring integers. Used for the United States House of
    Representatives since 1941.
    '''
    return DivisorMethod(RoundingRule.GEOMETRIC_MEAN).evaluate(
        populations, seats
    )
