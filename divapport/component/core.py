'''Registers of named components.

Rounding rules and apportionment methods are kept in registers: dictionaries
keyed by name that explain which names are available when an unknown one is
requested. There should normally be no need to use this module directly.
'''

from typing import Any, Callable


class Register(dict):
    '''A dictionary of named components of one kind.

    :param kind: What the components are, used in error messages.
    '''
    def __init__(self, kind: str):
        super().__init__()
        self.kind = kind

    def mark(self, func: Callable) -> Callable:
        '''Register a function under its own name; usable as a decorator.'''
        self[func.__name__] = func
        return func

    def lookup(self, name: str) -> Any:
        '''Return the component registered under the name.

        :raises KeyError: If nothing is registered under the name.
        '''
        try:
            return self[name]
        except (KeyError, TypeError):
            raise KeyError(
                f'unknown {self.kind}: {name}, available: '
                + ', '.join(self.keys())
            )
