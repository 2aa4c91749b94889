'''Apportionment methods.

There are two families of methods. *Divisor methods* (Jefferson, Adams,
Webster, Huntington-Hill) search for a divisor at which the rounded quotients
fill the seats exactly; see :mod:`divisor`. The *largest remainder* method
(Hamilton) rounds down at the standard divisor and gives the remaining seats
by remainders; see :mod:`remainder`.

None of the methods keep any state between calls.
'''

from divapport.evaluate.core import *    # noqa
from divapport.evaluate.divisor import (    # noqa: F401
    DivisorMethod, DivisorSearch, jefferson, adams, webster, huntington_hill
)
from divapport.evaluate.remainder import LargestRemainder, hamilton    # noqa
