'''Named apportionment methods.

All methods are registered in the `METHODS` dictionary under their usual
name, and additionally under the names the same method goes by elsewhere
(the Jefferson method is the D'Hondt method of party-list elections, etc.).
'''

from numbers import Real
from typing import Sequence, Union

import divapport.component.core
from divapport.component.rounding import RoundingRule
from divapport.evaluate.divisor import DivisorMethod
from divapport.evaluate.remainder import LargestRemainder
from divapport.result import AnyResult


class ApportionmentMethod:
    """A named apportionment method. Wraps an evaluator.

    :param name: Human-readable name of the method.
    :param evaluator: The evaluator implementing the method.
    """
    def __init__(self,
                 name: str,
                 evaluator: Union[DivisorMethod, LargestRemainder],
                 ):
        self.name = name
        self.evaluator = evaluator

    def evaluate(self, populations: Sequence[Real], seats: Real) -> AnyResult:
        """Return the evaluator's results for the populations given."""
        return self.evaluator.evaluate(populations, seats)

    def __repr__(self):
        return f'<ApportionmentMethod {self.name}>'


METHODS = divapport.component.core.Register('apportionment method')
METHODS.update({
    'hamilton': ApportionmentMethod('Hamilton', LargestRemainder()),
    'jefferson': ApportionmentMethod(
        'Jefferson', DivisorMethod(RoundingRule.FLOOR)
    ),
    'adams': ApportionmentMethod(
        'Adams', DivisorMethod(RoundingRule.CEILING)
    ),
    'webster': ApportionmentMethod(
        'Webster', DivisorMethod(RoundingRule.NEAREST)
    ),
    'huntington_hill': ApportionmentMethod(
        'Huntington-Hill', DivisorMethod(RoundingRule.GEOMETRIC_MEAN)
    ),
})
MAIN_METHODS = list(METHODS.keys())
ALIASES = {
    'largest_remainder': 'hamilton',
    'hare_niemeyer': 'hamilton',
    'd_hondt': 'jefferson',
    'sainte_lague': 'webster',
    'equal_proportions': 'huntington_hill',
}
METHODS.update({alias: METHODS[name] for alias, name in ALIASES.items()})


get = METHODS.lookup


def apportion(method: str,
              populations: Sequence[Real],
              seats: Real,
              ) -> AnyResult:
    '''Apportion the seats by the method of the given name.

    :raises KeyError: If there is no method of that name.
    '''
    return get(method).evaluate(populations, seats)
