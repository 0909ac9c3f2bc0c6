# Copyright (c) 2020-2026 NASK. All rights reserved.

"""
The `begood` package's public exception classes.
"""

import collections
import contextlib
from collections.abc import Generator

from begood.class_helpers import attr_repr
from begood.common_helpers import (
    ascii_str,
    describe_value,
    make_exc_ascii_str,
)
from begood.interfaces import NameOrIndex


#: Exceptions that are never treated as mere decoding failures: they
#: are not recovered from by `fallback()` and they are not swallowed
#: by collection decoders (whatever their `invalidate` option is).
UNRECOVERABLE_EXCEPTIONS = (MemoryError, RecursionError)


class DecodingError(TypeError):

    """
    The base class of exceptions raised by decoders when input data
    are wrong/invalid. It is expected (though not strictly required)
    that a user-friendly error message will be passed as the sole
    argument passed to the constructor.

    An additional feature: the `sublocation()` class method that
    returns a (single-use) context manager, which is used by decoders
    when entering decoding of some nested stuff whose *relative
    location* (within its parent structure) is a key/name (`str`) or
    an index (`int`). The method should be called with that *relative
    location* as the sole argument; thanks to that the `str()`
    representation of any `DecodingError` raised within one or more
    `with` blocks of such context managers will be automatically
    prepended with a *location path* pointing to the problematic data
    item in the whole decoded structure.

    For example:

    >>> def decode_integer_list(input_list):
    ...     result = []
    ...     for index, value in enumerate(input_list):
    ...         with DecodingError.sublocation(index):
    ...             if not isinstance(value, int):
    ...                 raise DecodingError('{!a} is not an integer'.format(value))
    ...             result.append(value)
    ...     return result
    ...
    >>> def decode_dict_of_integer_lists(input_dict):
    ...     result = {}
    ...     for name, sublist in sorted(input_dict.items()):
    ...         with DecodingError.sublocation(name):
    ...             result[name] = decode_integer_list(sublist)
    ...     return result
    ...
    >>> decode_dict_of_integer_lists({'bar': [0, 1, 2], 'foo': [15, 101]})
    {'bar': [0, 1, 2], 'foo': [15, 101]}

    >>> decode_dict_of_integer_lists({'bar': [0, 1, 'spam'], 'foo': [15]})
    Traceback (most recent call last):
      ...
    begood.exceptions.DecodingError: [bar.2] 'spam' is not an integer

    >>> try:
    ...     decode_dict_of_integer_lists({'bar': [0], 'foo': [15, 'ham']})
    ... except DecodingError as exc:
    ...     caught = exc
    ...
    >>> caught.location_path
    ('foo', 1)
    """

    def __init__(self, *args):
        super().__init__(*args)
        self._location_path = collections.deque()

    @property
    def location_path(self):
        """The location path as a tuple of names/indexes."""
        return tuple(self._location_path)

    @property
    def bare_message(self):
        """The ASCII-only message, *without* the location prefix."""
        return ascii_str(super().__str__())

    @classmethod
    @contextlib.contextmanager
    def sublocation(cls, name_or_index, /):
        # type: (NameOrIndex) -> Generator[None, None, None]
        cls._verify_is_name_or_index(name_or_index)
        try:
            yield
        except DecodingError as exc:
            exc._location_path.appendleft(name_or_index)
            raise

    @staticmethod
    def _verify_is_name_or_index(name_or_index):
        # type: (NameOrIndex) -> None
        if not isinstance(name_or_index, (str, int)) or isinstance(name_or_index, bool):
            raise TypeError('{!a} is neither a name (`str`) nor an '
                            'index (`int`)'.format(name_or_index))

    __repr__ = attr_repr('args', '_location_path')

    def __str__(self):
        return self._get_location_prefix() + super().__str__()

    def _get_location_prefix(self):
        if self._location_path:
            path_as_ascii_str = '.'.join(map(ascii_str, self._location_path))
            return '[{}] '.format(path_as_ascii_str)
        return ''


class ShapeMismatchError(DecodingError):

    """
    Raised when the input does not satisfy a structural predicate (is
    not an object, is not an array, a `be()`-made decoder's predicate
    returned a false value...).

    >>> str(ShapeMismatchError.for_value('20'))
    "assertion failed on '20' (str)"
    >>> str(ShapeMismatchError.for_value(None, 'expected an array, got'))
    'expected an array, got None (NoneType)'
    """

    @classmethod
    def for_value(cls, value, message_prefix='assertion failed on'):
        return cls('{} {}'.format(message_prefix, describe_value(value)))



class _CausedByMixin(object):

    """
    Mix-in for exceptions that wrap an error raised by a nested
    decoder (the *cause*).

    Each instance of such a class:

    * exposes the cause as the `cause` attribute;

    * takes over the cause's location path (if the cause is a
      `DecodingError`) -- so that the location path of the resultant
      error points to the innermost offending data item;

    * exposes, as the `root_cause_description` attribute, an ASCII-only
      description of the innermost error (for an error which is not a
      `DecodingError`, including the name of its class); that
      description is included in the error message, in parentheses.
    """

    def _init_cause(self, cause):
        # (to be called after `DecodingError.__init__()`)
        self.cause = cause
        self.root_cause_description = self._describe_root_cause(cause)
        if isinstance(cause, DecodingError):
            self._location_path.extend(cause.location_path)

    @classmethod
    def _format_message(cls, summary, cause):
        root_cause_description = cls._describe_root_cause(cause)
        if root_cause_description is None:
            return summary
        return '{} ({})'.format(summary, root_cause_description)

    @staticmethod
    def _describe_root_cause(cause):
        if isinstance(cause, _CausedByMixin):
            return cause.root_cause_description
        if isinstance(cause, DecodingError):
            return cause.bare_message
        if cause is not None:
            return make_exc_ascii_str(cause)
        return None


class ElementInvalidError(_CausedByMixin, DecodingError):

    """
    Raised by a collection decoder (configured with `invalidate='all'`)
    when the element decoder failed for any element.

    >>> str(ElementInvalidError(ShapeMismatchError.for_value(3)))
    'invalid element (assertion failed on 3 (int))'
    >>> str(ElementInvalidError(ValueError('bad')))
    'invalid element (ValueError: bad)'
    >>> str(ElementInvalidError())
    'invalid element'
    """

    def __init__(self, cause=None):
        super().__init__(self._format_message('invalid element', cause))
        self._init_cause(cause)


class FieldInvalidError(_CausedByMixin, DecodingError):

    """
    Raised by an object decoder when a (not `fallback()`-wrapped)
    field decoder failed.

    >>> exc = FieldInvalidError('age', ShapeMismatchError.for_value('44'))
    >>> exc.field_name
    'age'
    >>> str(exc)
    "invalid field (assertion failed on '44' (str))"

    Typically, it is raised within the field's sublocation, so its
    location path includes the field name:

    >>> with DecodingError.sublocation('age'):
    ...     raise exc
    ...
    Traceback (most recent call last):
      ...
    begood.exceptions.FieldInvalidError: [age] invalid field (assertion failed on '44' (str))

    When wrapping another wrapping error, the location path of the
    latter is taken over, and so is the description of the root cause:

    >>> outer = FieldInvalidError('person', exc)
    >>> outer.location_path
    ('age',)
    >>> with DecodingError.sublocation('person'):
    ...     raise outer
    ...
    Traceback (most recent call last):
      ...
    begood.exceptions.FieldInvalidError: [person.age] invalid field (assertion failed on '44' (str))
    """

    def __init__(self, field_name, cause=None):
        super().__init__(self._format_message('invalid field', cause))
        self.field_name = field_name
        self._init_cause(cause)


class SizeViolationError(DecodingError):

    """
    Raised by a collection decoder when the count of successfully
    decoded elements is less than the configured minimum.

    >>> exc = SizeViolationError('array length', min_size=3, actual_size=2)
    >>> str(exc)
    'array length less than 3 (only 2 valid elements)'
    >>> exc.min_size, exc.actual_size
    (3, 2)
    """

    def __init__(self, what, *, min_size, actual_size):
        self.min_size = min_size
        self.actual_size = actual_size
        super().__init__('{} less than {} (only {} valid elements)'.format(
            what,
            min_size,
            actual_size))
