"""A commandline tool for quick apportionment of seats.

Apportions the given number of seats among the given populations by one or
all of the supported methods and shows the resulting seat counts.
"""

import argparse
import json
import logging
import sys
from numbers import Real
from typing import Dict, List

import divapport.system
from divapport.evaluate.core import ApportionmentError
from divapport.result import AnyResult, BracketResult, ExactResult

argparser = argparse.ArgumentParser(
    prog='divapport',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    'populations',
    nargs='+',
    type=float,
    help='populations of the entities to apportion seats among',
)
argparser.add_argument(
    '-n', '--n-seats',
    type=float,
    required=True,
    help='number of seats to apportion',
)
argparser.add_argument(
    '-m', '--method',
    default='hamilton',
    help=(
        'apportionment method: '
        + ', '.join(divapport.system.METHODS.keys())
        + ', or "all" to compare the main ones'
    ),
)
argparser.add_argument(
    '-j', '--json',
    dest='as_json',
    action='store_true',
    help='print full results with all intermediate steps as JSON',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages including the divisor search trace',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages',
)


def main(populations: List[float],
         n_seats: float,
         method: str = 'hamilton',
         as_json: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    populations = [_integral(pop) for pop in populations]
    n_seats = _integral(n_seats)
    if method == 'all':
        method_keys = divapport.system.MAIN_METHODS
    else:
        method_keys = [method]
    results = {}
    try:
        for key in method_keys:
            results[key] = divapport.system.apportion(
                key, populations, n_seats
            )
    except (ApportionmentError, KeyError) as e:
        print(f'divapport: error: {e}', file=sys.stderr)
        return 2
    if as_json:
        show_json(results)
    else:
        for key, result in results.items():
            print()
            print(f'{divapport.system.get(key).name} method, {n_seats} seats')
            show_result(populations, result)
    return 0


def _integral(value: float) -> Real:
    return int(value) if value.is_integer() else value


def show_json(results: Dict[str, AnyResult]) -> None:
    """Print the full results keyed by method name as JSON."""
    print(json.dumps(
        {key: result.to_dict() for key, result in results.items()},
        indent=2,
    ))


def show_result(populations: List[Real],
                result: AnyResult,
                ) -> None:
    """Show the seat counts of a single result as a table."""
    if isinstance(result, ExactResult):
        print(f'Modified divisor: {result.exact.modified_divisor:g}')
        columns = [result.exact.apportionment]
        headers = ['Seats']
    elif isinstance(result, BracketResult):
        print(
            'No divisor fills the seats exactly; closest divisors are'
            f' {result.low.modified_divisor!r} ({result.low.seats} seats)'
            f' and {result.high.modified_divisor!r}'
            f' ({result.high.seats} seats)'
        )
        columns = [result.low.apportionment, result.high.apportionment]
        headers = ['Low', 'High']
    else:
        print(f'Standard divisor: {result.divisor:g}')
        columns = [result.apportionment]
        headers = ['Seats']
    left_col = [f'{pop:g}' for pop in populations]
    n_just_chars = max(len(left) for left in left_col + ['Population'])
    print('Population'.rjust(n_just_chars), *(h.rjust(5) for h in headers))
    for i, left in enumerate(left_col):
        print(left.rjust(n_just_chars),
              *(str(col[i]).rjust(5) for col in columns))


if __name__ == '__main__':
    args = argparser.parse_args()
    sys.exit(main(**vars(args)))
