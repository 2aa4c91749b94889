import sys
import os
import math
import random

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import divapport.evaluate.remainder as rem

POPULATIONS = [
    [2560, 3315, 995, 5012],
    [21878, 9713, 4167, 3252, 1065],
    [9, 5, 9, 1, 3, 5, 8],
    [1, 1, 1, 1, 1, 1],
    [0, 50, 50],
]
SEATS = [1, 3, 20, 43, 1000]

random.seed(1711)
RANDOM_CASES = []
for i in range(25):
    pops = [random.randint(0, 1000000) for j in range(random.randint(1, 15))]
    pops[0] += 1
    RANDOM_CASES.append((pops, random.randint(1, 600)))


@pytest.mark.parametrize(('populations', 'n_seats'), [
    (pops, seats) for pops in POPULATIONS for seats in SEATS
] + RANDOM_CASES)
def test_result(populations, n_seats):
    result = rem.hamilton(populations, n_seats)
    assert sum(result.apportionment) == n_seats
    assert result.pre_allocation_sum == sum(result.pre_allocation)
    assert result.pre_allocation_left_over \
        == n_seats - result.pre_allocation_sum
    assert sum(result.left_over_allocation) \
        == result.pre_allocation_left_over
    for quot, seats, rest in zip(result.quotients, result.apportionment,
                                 result.remainders):
        # quota rule
        assert math.floor(quot) <= seats <= math.floor(quot) + 1
        assert 0 <= rest < 1


def test_ties_by_order():
    result = rem.hamilton([1, 1, 1], 2)
    assert result.remainders[0] == result.remainders[1] == result.remainders[2]
    assert result.apportionment == (1, 1, 0)
    result = rem.hamilton([3, 5, 5, 3], 3)
    assert result.apportionment == (1, 1, 1, 0)


def test_rank_remainders():
    assert rem.rank_remainders([0.3, 0.5, 0.3, 0.9, 0.5]) == [3, 1, 4, 0, 2]
    assert rem.rank_remainders([]) == []


def test_no_left_over():
    result = rem.hamilton([10, 20, 30], 6)
    assert result.pre_allocation_left_over == 0
    assert result.left_over_allocation == (0, 0, 0)
    assert result.apportionment == (1, 2, 3)


def test_idempotent():
    populations = [21878, 9713, 4167, 3252, 1065]
    assert rem.hamilton(populations, 43) == rem.hamilton(populations, 43)
    assert rem.hamilton(populations, 43) \
        == rem.LargestRemainder().evaluate(tuple(populations), 43)


def test_logs(caplog):
    with caplog.at_level('INFO', logger='divapport.evaluate.remainder'):
        rem.hamilton([2560, 3315, 995, 5012], 20)
    assert caplog.messages == [
        '18 seats pre-allocated, 2 left over for remainders'
    ]
