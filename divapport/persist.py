'''Serialization of apportionment results to plain dictionaries.

Results are dataclasses with snake_case field names; their serialized form
uses camelCase keys so that the dictionaries (and the JSON produced from
them) keep the established interchange shape, e.g. ``standardDivisor`` and
``preAllocation``.
'''

import dataclasses
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Callable, Optional


ATOMIC_TYPES = (int, float, str, bool, type(None))
CONVERTIBLE_TYPES: Dict[type, Callable[[Any], Any]] = {
    Fraction: float,
    Decimal: float,
}

FieldConstructors = Dict[str, Callable[[Any], Any]]

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def camel_serialization(class_: type) -> type:
    '''A decorator to provide a to_dict() method to a dataclass.

    The resulting method serializes all dataclass fields under their
    camelCase names; nested serializable objects and sequences are
    serialized recursively.

    :param class_: The dataclass to add the method to.
    '''
    field_names = [field.name for field in dataclasses.fields(class_)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            camel_case(name): serialize_value(getattr(self, name))
            for name in field_names
        }

    class_.to_dict = to_dict
    return class_


def serialize_value(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    elif isinstance(value, ATOMIC_TYPES):
        return value
    elif type(value) in CONVERTIBLE_TYPES:
        return CONVERTIBLE_TYPES[type(value)](value)
    elif isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def deserialize_fields(class_: type,
                       data: Dict[str, Any],
                       nested: Optional[FieldConstructors] = None,
                       ) -> Any:
    '''Construct a dataclass from its camelCase dictionary form.

    Lists are turned back into tuples; values of fields named in *nested*
    are passed through the given constructor first.

    :raises ValueError: If a field is missing or an unknown key is present.
    '''
    if nested is None:
        nested = {}
    field_names = {field.name for field in dataclasses.fields(class_)}
    kwargs = {}
    for key, value in data.items():
        name = snake_case(key)
        if name not in field_names:
            raise ValueError(f'unknown key for {class_.__name__}: {key}')
        if name in nested:
            value = nested[name](value)
        elif isinstance(value, list):
            value = tuple(value)
        kwargs[name] = value
    missing = field_names - set(kwargs)
    if missing:
        raise ValueError(
            f'missing keys for {class_.__name__}: '
            + ', '.join(sorted(camel_case(name) for name in missing))
        )
    return class_(**kwargs)
