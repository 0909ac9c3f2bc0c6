# Copyright (c) 2020-2026 NASK. All rights reserved.

"""
Primitive shape predicates (*guards*) used by the decoders.
"""

from collections.abc import (
    Mapping,
    Sequence,
)


def is_object(value) -> bool:
    """
    Tell whether the given value is an *object*, i.e., a mapping of
    (supposedly) field names to values.

    Note that neither arrays (sequences) nor callables are objects.

    >>> is_object({})
    True
    >>> is_object({'name': None, 'surname': 'Johnson', 1: 'yes'})
    True
    >>> is_object([])
    False
    >>> is_object(None)
    False
    >>> is_object('eleven')
    False
    >>> is_object(lambda: {})
    False
    """
    return isinstance(value, Mapping)


def is_array(value) -> bool:
    """
    Tell whether the given value is an *array*, i.e., an ordered
    sequence -- but *not* a string or a binary data object.

    >>> is_array([1, 'two', False])
    True
    >>> is_array(())
    True
    >>> is_array('seventy seventeen')
    False
    >>> is_array(b'abc')
    False
    >>> is_array({'a': 'a'})
    False
    >>> is_array(None)
    False
    """
    return (isinstance(value, Sequence)
            and not isinstance(value, (str, bytes, bytearray)))
