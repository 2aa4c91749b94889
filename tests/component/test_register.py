import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
from divapport.component.core import Register


def test_mark():
    register = Register('thing')

    @register.mark
    def some_thing():
        return 42

    assert some_thing() == 42
    assert register == {'some_thing': some_thing}
    assert register.lookup('some_thing') is some_thing


def test_lookup_unknown():
    register = Register('thing')
    register['a'] = 1
    register['b'] = 2
    with pytest.raises(KeyError, match='unknown thing: c, available: a, b'):
        register.lookup('c')
    for bad_name in ('', None, ['a']):
        with pytest.raises(KeyError):
            register.lookup(bad_name)
