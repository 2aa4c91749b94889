"""Divapport - a library for apportioning seats proportionally to population.

Given the populations of a number of entities (states, districts, parties)
and a number of indivisible seats, the apportionment methods distribute the
seats proportionally and report all of the intermediate arithmetic used to
get there:

-   :func:`hamilton` - the largest remainder method,
-   :func:`jefferson`, :func:`adams`, :func:`webster` and
    :func:`huntington_hill` - the divisor methods, which differ by the
    rounding rule from :mod:`component.rounding`.

The divisor methods return either an exact result with the modified divisor
found, or a bracket of the two closest divisors if no divisor fills the seats
exactly; see :mod:`result`. Methods can also be selected by name through the
:mod:`system` module, or run from the command line with
``python -m divapport``.
"""

from divapport.evaluate import (    # noqa: F401
    ApportionmentError, InvalidInput, DegenerateTarget,
    hamilton, jefferson, adams, webster, huntington_hill,
)
from divapport.result import (    # noqa: F401
    Allocation, ExactResult, BracketResult, RemainderResult,
)
