import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import divapport
import divapport.system


POPULATIONS = [21878, 9713, 4167, 3252, 1065]


@pytest.mark.parametrize(('name', 'function'), [
    ('hamilton', divapport.hamilton),
    ('jefferson', divapport.jefferson),
    ('adams', divapport.adams),
    ('webster', divapport.webster),
    ('huntington_hill', divapport.huntington_hill),
    ('largest_remainder', divapport.hamilton),
    ('d_hondt', divapport.jefferson),
    ('sainte_lague', divapport.webster),
    ('equal_proportions', divapport.huntington_hill),
])
def test_apportion_by_name(name, function):
    assert divapport.system.apportion(name, POPULATIONS, 43) \
        == function(POPULATIONS, 43)


def test_method_transp():
    method = divapport.system.get('webster')
    assert method.name == 'Webster'
    assert method.evaluate(POPULATIONS, 43) \
        == method.evaluator.evaluate(POPULATIONS, 43)


def test_main_methods():
    assert divapport.system.MAIN_METHODS == [
        'hamilton', 'jefferson', 'adams', 'webster', 'huntington_hill'
    ]


def test_unknown():
    with pytest.raises(KeyError):
        divapport.system.apportion('borda', POPULATIONS, 43)
    with pytest.raises(KeyError):
        divapport.system.get(None)
