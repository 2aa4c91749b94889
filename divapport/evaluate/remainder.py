'''The largest remainder (Hamilton, Hare-Niemeyer) apportionment method.

The populations are divided by the standard divisor and the quotients are
rounded down. The seats that remain are given one each to the entities with
the largest fractional remainders; equal remainders are resolved in favor of
the entity listed first.

The method always satisfies the quota rule (every entity gets its quotient
rounded either up or down) but suffers from the Alabama paradox: adding
a seat may make an entity lose one.
'''

import logging
import math
from numbers import Real
from typing import List, Sequence

import divapport.util
from divapport.evaluate.core import validate
from divapport.result import RemainderResult


logger = logging.getLogger(__name__)


def rank_remainders(remainders: Sequence[Real]) -> List[int]:
    '''Order entity indices by remainder, largest first, ties by index.'''
    return sorted(
        range(len(remainders)),
        key=lambda i: (-remainders[i], i)
    )


class LargestRemainder:
    '''Apportion seats by the largest remainder (Hamilton) method.'''

    def evaluate(self,
                 populations: Sequence[Real],
                 seats: Real,
                 ) -> RemainderResult:
        '''Apportion the seats among the entities.

        :param populations: Populations of the entities, in a fixed order.
        :param seats: Number of seats to apportion.
        :returns: The result with all intermediate steps.
        :raises divapport.evaluate.core.InvalidInput: If any input is not
            a number.
        :raises divapport.evaluate.core.DegenerateTarget: If the seat count
            or the total population is zero. Negative seat counts are
            accepted.
        '''
        populations, seats = validate(populations, seats)
        divisor = divapport.util.standard_divisor(populations, seats)
        quotients = divapport.util.quotients(populations, divisor)
        pre_allocation = tuple(math.floor(quot) for quot in quotients)
        remainders = tuple(
            quot - pre for quot, pre in zip(quotients, pre_allocation)
        )
        pre_allocation_sum = divapport.util.total(pre_allocation)
        left_over = seats - pre_allocation_sum
        n_left_over = min(max(math.ceil(left_over), 0), len(populations))
        left_over_allocation = [0] * len(populations)
        for i in rank_remainders(remainders)[:n_left_over]:
            left_over_allocation[i] = 1
        logger.info('%s seats pre-allocated, %s left over for remainders',
                    pre_allocation_sum, left_over)
        return RemainderResult(
            divisor=divisor,
            quotients=quotients,
            pre_allocation=pre_allocation,
            remainders=remainders,
            pre_allocation_sum=pre_allocation_sum,
            pre_allocation_left_over=left_over,
            left_over_allocation=tuple(left_over_allocation),
            apportionment=tuple(
                pre + extra
                for pre, extra in zip(pre_allocation, left_over_allocation)
            ),
        )


def hamilton(populations: Sequence[Real], seats: Real) -> RemainderResult:
    '''Apportion by the Hamilton (largest remainder) method.'''
    return LargestRemainder().evaluate(populations, seats)
