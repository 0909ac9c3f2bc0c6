# Copyright (c) 2020-2026 NASK. All rights reserved.

import dataclasses
from collections.abc import (
    Callable,
    Iterable,
    Iterator,
    Mapping,
)
from typing import (
    Any,
    ClassVar,
    Union,
)

from begood.class_helpers import (
    MISSING,
    attr_repr,
)
from begood.common_helpers import (
    ascii_str,
    display_value,
    make_exc_ascii_str,
)
from begood.exceptions import (
    UNRECOVERABLE_EXCEPTIONS,
    DecodingError,
    ElementInvalidError,
    FieldInvalidError,
    ShapeMismatchError,
    SizeViolationError,
)
from begood.guards import (
    is_array,
    is_object,
)
from begood.interfaces import (
    Decoder,
    FieldDecoders,
    NameOrIndex,
    Predicate,
    Value,
)
from begood.log_helpers import get_logger
from begood.options import CollectionOptions


LOGGER = get_logger(__name__)


#
# Public abstract classes
#

class BaseDecoder(object):

    """
    An abstract class that makes it easier to define classes of
    decoders, i.e., of objects that support the `Decoder` interface.

    Note that it is not required that a decoder is an instance of a
    `BaseDecoder` subclass. `BaseDecoder` just provides a convenient
    framework to implement decoders (in particular, a few helpers to
    verify the input data).

    ***

    Important: a decoder instance should *not* keep, using its
    attributes, any mutable state. Everything an instance keeps is
    its construction-time configuration, which should be treated as
    read-only from the moment the instance initialization is
    completed.
    """

    def __call__(self, data):
        # type: (Value) -> Value
        """
        An abstract method: the main activity of the decoder.

        The sole positional argument:
            The data to be decoded, provided as an object of
            an unconstrained type.

        Returns:
            The decoded value.

        Raises:
            * `DecodingError` -- to signal that the *data* are wrong;
            * some other exception -- to signal either wrong data (in
              particular, if raised by a user-supplied decoder or
              predicate) or a programming error.

        Each call should be concurrency-safe and independent of
        other calls (whether of earlier, or later, or concurrent
        ones) of the decoder object.
        """
        raise NotImplementedError

    #
    # Non-public, subclass-accessible helpers

    @staticmethod
    def verify_is_object(value):
        # type: (Value) -> None
        """
        Verify that `value` is an object (see: `begood.guards.is_object()`);
        if not, raise `ShapeMismatchError`.
        """
        if not is_object(value):
            raise ShapeMismatchError.for_value(value, 'expected an object, got')

    @staticmethod
    def verify_is_array(value):
        # type: (Value) -> None
        """
        Verify that `value` is an array (see: `begood.guards.is_array()`);
        if not, raise `ShapeMismatchError`.
        """
        if not is_array(value):
            raise ShapeMismatchError.for_value(value, 'expected an array, got')

    @staticmethod
    def verify_is_callable(obj, what):
        # type: (Any, str) -> None
        """
        Verify that the given configuration object (a decoder, a
        predicate...) is callable; if not, raise `TypeError` -- this
        is a programming error, not a decoding failure.
        """
        if not callable(obj):
            raise TypeError('{} {!a} is not callable'.format(what, obj))


class BaseCollectionDecoder(BaseDecoder):

    """
    An abstract class of decoders that apply an element decoder to each
    element of a collection, according to the given `CollectionOptions`.

    Constructor args/kwargs:

        `element_decoder` (positional-only):
            A `Decoder`-compliant object to be applied to each element.

        `options` (optional, positional-only):
            `None` (default), or a `CollectionOptions` instance, or a
            mapping of `CollectionOptions` field names to values.

        Any other kwargs (`invalidate`, `min_size`):
            To override the respective items of `options`.

    The decoding consists of the following steps:

    * the input is verified to be a collection of the appropriate kind
      (if it is not, `ShapeMismatchError` is raised);

    * the element decoder is applied to each element; then, if it
      succeeded, the result is kept; if it failed:

      * if the `invalidate` option is `'single'` -- the element is
        omitted;
      * if the `invalidate` option is `'all'` -- `ElementInvalidError`
        is raised immediately (what means that the `min_size` check is
        never reached);

      (note: exceptions listed in `UNRECOVERABLE_EXCEPTIONS` are never
      treated as an element decoder's failure, they always propagate);

    * if the number of the kept elements is less than the `min_size`
      option, `SizeViolationError` is raised;

    * the kept elements are assembled into a new collection.
    """

    # (to be overridden in subclasses)
    size_description = None     # type: ClassVar[str]

    def __init__(self, element_decoder, options=None, /, **option_kwargs):
        # type: (Decoder, Union[None, CollectionOptions, Mapping[str, Any]], Any) -> None
        self.verify_is_callable(element_decoder, 'element decoder')
        self.element_decoder = element_decoder
        self.options = self._make_options(options, option_kwargs)

    __repr__ = attr_repr('element_decoder', 'options')

    @staticmethod
    def _make_options(options, option_kwargs):
        # type: (...) -> CollectionOptions
        if options is None:
            option_values = {}
        elif isinstance(options, CollectionOptions):
            option_values = dataclasses.asdict(options)
        elif isinstance(options, Mapping):
            option_values = dict(options)
        else:
            raise TypeError(
                'options={!a} is neither a CollectionOptions instance nor '
                'a mapping'.format(options))
        option_values.update(option_kwargs)
        return CollectionOptions(**option_values)

    def __call__(self, data):
        # type: (Value) -> Value
        self.verify_input(data)
        decoded_items = []
        for location, element in self.generate_located_elements(data):
            with DecodingError.sublocation(location):
                try:
                    decoded = self.element_decoder(element)
                except UNRECOVERABLE_EXCEPTIONS:
                    raise
                except Exception as exc:
                    if self.options.invalidates_all:
                        raise ElementInvalidError(exc) from exc
                    LOGGER.debug('Omitting an invalid element at %s (%s).',
                                 ascii_str(location), make_exc_ascii_str(exc))
                    continue
            decoded_items.append((location, decoded))
        if len(decoded_items) < self.options.min_size:
            raise SizeViolationError(
                self.size_description,
                min_size=self.options.min_size,
                actual_size=len(decoded_items))
        return self.assemble_output(decoded_items)

    #
    # Non-public, subclass-overridable/extendable hooks

    def verify_input(self, data):
        # type: (Value) -> None
        """An abstract method: raise `ShapeMismatchError` if `data` is not acceptable."""
        raise NotImplementedError

    def generate_located_elements(self, data):
        # type: (Value) -> Iterator[tuple[NameOrIndex, Value]]
        """An abstract method: yield (*location*, *element*) pairs."""
        raise NotImplementedError

    def assemble_output(self, decoded_items):
        # type: (list[tuple[NameOrIndex, Value]]) -> Value
        """An abstract method: make the output collection from (*location*, *value*) pairs."""
        raise NotImplementedError



#
# Public concrete classes (that implement the `Decoder` interface)
#

class PredicateDecoder(BaseDecoder):

    """
    A decoder that returns the input data intact if the given
    predicate is satisfied by them; otherwise, raises
    `ShapeMismatchError`.

    >>> be_positive = PredicateDecoder(lambda x: isinstance(x, int) and x > 0)
    >>> be_positive(42)
    42
    >>> be_positive(-1)
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: assertion failed on -1 (int)
    >>> be_positive('42')
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: assertion failed on '42' (str)
    """

    def __init__(self, predicate):
        # type: (Predicate) -> None
        self.verify_is_callable(predicate, 'predicate')
        self.predicate = predicate

    __repr__ = attr_repr('predicate')

    def __call__(self, data):
        # type: (Value) -> Value
        if not self.predicate(data):
            raise ShapeMismatchError.for_value(data)
        return data


class FallbackDecoder(BaseDecoder):

    """
    A decoder that applies the wrapped decoder and -- if that decoder
    fails, whatever exception it raises (except those listed in
    `UNRECOVERABLE_EXCEPTIONS`) -- returns the fallback value instead.

    >>> decoder = FallbackDecoder(int, fallback_value=None)
    >>> decoder('42')
    42
    >>> decoder('forty-two') is None
    True
    """

    def __init__(self, decoder, fallback_value):
        # type: (Decoder, Any) -> None
        self.verify_is_callable(decoder, 'decoder')
        self.decoder = decoder
        self.fallback_value = fallback_value

    __repr__ = attr_repr('decoder', 'fallback_value')

    def __call__(self, data):
        # type: (Value) -> Value
        try:
            return self.decoder(data)
        except UNRECOVERABLE_EXCEPTIONS:
            raise
        except Exception as exc:
            LOGGER.debug('Decoding failed (%s), so the fallback value %s is used.',
                         make_exc_ascii_str(exc), display_value(self.fallback_value))
            return self.fallback_value


class ObjectDecoder(BaseDecoder):

    """
    A decoder that makes a record of a fixed shape from an object
    (mapping), by applying the respective field decoder to each of the
    declared fields.

    Constructor args/kwargs:

        `field_decoders` (positional-only):
            A mapping of field names (`str`) to `Decoder`-compliant
            objects.

        `output_factory` (keyword-only; default: `dict`):
            A callable that takes the decoded fields as keyword
            arguments and returns the resultant record (e.g., a
            data class or a `typing.NamedTuple` subclass).

    Absent fields are decoded as `MISSING`. Extra (not declared) input
    items are ignored. If any field decoder fails, `FieldInvalidError`
    is raised (no partial record is returned).

    >>> decoder = ObjectDecoder({
    ...     'name': PredicateDecoder(lambda x: isinstance(x, str)),
    ...     'age': PredicateDecoder(lambda x: isinstance(x, int)),
    ... })
    >>> decoder({'name': 'Tony', 'age': 44, 'hobby': 'bonsai'})
    {'name': 'Tony', 'age': 44}
    >>> decoder({'name': 'Tony'})
    Traceback (most recent call last):
      ...
    begood.exceptions.FieldInvalidError: [age] invalid field (assertion failed on <missing> (missing))
    >>> decoder(['Tony', 44])
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: expected an object, got ['Tony', 44] (list)
    """

    def __init__(self,
                 field_decoders,        # type: FieldDecoders
                 /,
                 *,
                 output_factory=dict,   # type: Callable[..., Value]
                 ):
        if not isinstance(field_decoders, Mapping):
            raise TypeError('field_decoders={!a} is not a mapping'.format(field_decoders))
        self.field_decoders = dict(field_decoders)
        for name, decoder in self.field_decoders.items():
            if not isinstance(name, str):
                raise TypeError('field name {!a} is not a str'.format(name))
            self.verify_is_callable(decoder, 'decoder of field {!a}'.format(name))
        self.verify_is_callable(output_factory, 'output factory')
        self.output_factory = output_factory

    __repr__ = attr_repr('field_decoders', 'output_factory')

    def __call__(self, data):
        # type: (Value) -> Value
        self.verify_is_object(data)
        decoded_fields = {}
        for name, decoder in self.field_decoders.items():
            with DecodingError.sublocation(name):
                try:
                    decoded_fields[name] = decoder(data.get(name, MISSING))
                except UNRECOVERABLE_EXCEPTIONS:
                    raise
                except Exception as exc:
                    raise FieldInvalidError(name, exc) from exc
        return self.output_factory(**decoded_fields)


class ArrayDecoder(BaseCollectionDecoder):

    """
    A collection decoder for arrays (see: `begood.guards.is_array()`)
    whose output is a new `list` (the order of elements is preserved).

    >>> be_str = PredicateDecoder(lambda x: isinstance(x, str))
    >>> ArrayDecoder(be_str)(['1', '2', 3])
    ['1', '2']
    >>> ArrayDecoder(be_str, invalidate='all')(['1', '2', 3])
    Traceback (most recent call last):
      ...
    begood.exceptions.ElementInvalidError: [2] invalid element (assertion failed on 3 (int))
    >>> ArrayDecoder(be_str, {'min_size': 3})(['1', '2', 3])
    Traceback (most recent call last):
      ...
    begood.exceptions.SizeViolationError: array length less than 3 (only 2 valid elements)
    """

    size_description = 'array length'

    def verify_input(self, data):
        self.verify_is_array(data)

    def generate_located_elements(self, data):
        return enumerate(data)

    def assemble_output(self, decoded_items):
        return [value for _index, value in decoded_items]


class DictDecoder(BaseCollectionDecoder):

    """
    A collection decoder for objects (see: `begood.guards.is_object()`)
    whose keys are strings; its output is a new `dict`.

    >>> be_str = PredicateDecoder(lambda x: isinstance(x, str))
    >>> DictDecoder(be_str)({'x': '1', 'y': '2', 'z': 3})
    {'x': '1', 'y': '2'}
    >>> DictDecoder(be_str)({'x': '1', 2: '2'})
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: expected a string key, got 2 (int)
    """

    size_description = 'dict size'

    def verify_input(self, data):
        self.verify_is_object(data)
        for key in data:
            if not isinstance(key, str):
                raise ShapeMismatchError.for_value(key, 'expected a string key, got')

    def generate_located_elements(self, data):
        return iter(data.items())

    def assemble_output(self, decoded_items):
        return dict(decoded_items)


class PipelineDecoder(BaseDecoder):

    """
    A decoder that applies the component decoders one after another,
    each to the result of the previous one.

    >>> PipelineDecoder(str.strip, int)('  42 ')
    42
    >>> PipelineDecoder()('anything')
    'anything'
    """

    def __init__(self, *component_decoders):
        # type: (Decoder) -> None
        for decoder in component_decoders:
            self.verify_is_callable(decoder, 'component decoder')
        self.component_decoders = component_decoders

    __repr__ = attr_repr('component_decoders')

    def __call__(self, data):
        # type: (Value) -> Value
        for decoder in self.component_decoders:
            data = decoder(data)
        return data


class ItemGettingDecoder(BaseDecoder):

    """
    A decoder that returns the item of the given key from the input
    object (mapping), or the element of the given index from the input
    array -- or `MISSING` if there is no such item/element or the input
    is neither an object nor an array. It never fails.

    >>> get_name = ItemGettingDecoder('name')
    >>> get_name({'name': 'Tony'})
    'Tony'
    >>> get_name({'surname': 'Johnson'})
    <missing>
    >>> get_name('...')
    <missing>

    An `int` key is an array index (negative ones are *not* counted
    from the end: they just do not exist):

    >>> get_first = ItemGettingDecoder(0)
    >>> get_first(['a', 'b'])
    'a'
    >>> get_first([])
    <missing>
    >>> ItemGettingDecoder(-1)(['a', 'b'])
    <missing>
    >>> ItemGettingDecoder('0')(['a', 'b'])
    <missing>
    """

    def __init__(self, key):
        # type: (NameOrIndex) -> None
        if not isinstance(key, (str, int)) or isinstance(key, bool):
            raise TypeError('key {!a} is neither a name (`str`) nor an '
                            'index (`int`)'.format(key))
        self.key = key

    __repr__ = attr_repr('key')

    def __call__(self, data):
        # type: (Value) -> Value
        if is_object(data):
            return data.get(self.key, MISSING)
        if is_array(data) and isinstance(self.key, int) and 0 <= self.key < len(data):
            return data[self.key]
        return MISSING


class _MembershipPredicate(object):

    # Membership means: the same type and an equal value (so, e.g.,
    # neither `False` nor `0.0` is a member of `(0, 1)`).

    def __init__(self, values):
        self.values = tuple(values)

    __repr__ = attr_repr('values')

    def __call__(self, value):
        value_type = type(value)
        return any(type(v) is value_type and v == value
                   for v in self.values)



#
# Public factory functions
#

def be(predicate: Predicate) -> PredicateDecoder:
    """
    Lift the given predicate (a one-argument callable returning a truth
    value) to a decoder: if the predicate is satisfied by the input
    data, the decoder returns the data intact; otherwise, it raises
    `ShapeMismatchError` (a subclass of `TypeError`).

    >>> be_str = be(lambda x: isinstance(x, str))
    >>> be_str('twenty')
    'twenty'
    >>> be_str(20)
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: assertion failed on 20 (int)
    """
    return PredicateDecoder(predicate)


def fallback(fallback_value: Any) -> Callable[[Decoder], FallbackDecoder]:
    """
    Make a decorator which wraps any decoder, so that -- instead of
    failing -- it returns `fallback_value`.

    Failure means *any* exception (not only `DecodingError`) raised by
    the wrapped decoder, except `MemoryError` and `RecursionError`
    (those always propagate). This is the only failure-recovery point:
    unless wrapped this way, any decoder's failure propagates (in
    particular, making the whole enclosing object decoder fail).

    >>> be_str = be(lambda x: isinstance(x, str))
    >>> or_none = fallback(None)
    >>> or_none(be_str)('Bob')
    'Bob'
    >>> or_none(be_str)(37) is None
    True

    It can also be used as a function decorator:

    >>> @fallback(0)
    ... def decode_int(data):
    ...     return int(data)
    ...
    >>> decode_int('12'), decode_int('twelve')
    (12, 0)
    """
    def decorator(decoder: Decoder) -> FallbackDecoder:
        return FallbackDecoder(decoder, fallback_value)
    return decorator


or_ = fallback


be_object = be(is_object)

be_array = be(is_array)


def be_object_of(field_decoders: FieldDecoders,
                 /,
                 *,
                 output_factory: Callable[..., Value] = dict) -> ObjectDecoder:
    """
    Make a decoder of objects of the shape defined by the given mapping
    of field names to field decoders (see: `ObjectDecoder`).

    >>> be_str = be(lambda x: isinstance(x, str))
    >>> be_int = be(lambda x: isinstance(x, int))
    >>> decode_person = be_object_of({'name': be_str, 'age': fallback(0)(be_int)})
    >>> decode_person({'name': 'Bob', 'age': 37})
    {'name': 'Bob', 'age': 37}
    >>> decode_person({'name': 'Bob', 'age': 'of Empires'})
    {'name': 'Bob', 'age': 0}
    """
    return ObjectDecoder(field_decoders, output_factory=output_factory)


def be_array_of(element_decoder: Decoder,
                options: Union[None, CollectionOptions, Mapping[str, Any]] = None,
                /,
                **option_kwargs) -> ArrayDecoder:
    """
    Make a decoder of arrays whose elements are decoded with the given
    element decoder (see: `ArrayDecoder` and `BaseCollectionDecoder`).

    >>> be_int = be(lambda x: isinstance(x, int))
    >>> be_array_of(be_int)(['1', '2', 3, 4])
    [3, 4]
    >>> be_array_of(be_int, min_size=3)(['1', '2', 3, 4])
    Traceback (most recent call last):
      ...
    begood.exceptions.SizeViolationError: array length less than 3 (only 2 valid elements)
    """
    return ArrayDecoder(element_decoder, options, **option_kwargs)


def be_dict_of(element_decoder: Decoder,
               options: Union[None, CollectionOptions, Mapping[str, Any]] = None,
               /,
               **option_kwargs) -> DictDecoder:
    """
    Make a decoder of string-keyed objects (dicts) whose values are
    decoded with the given element decoder (see: `DictDecoder` and
    `BaseCollectionDecoder`).

    >>> be_int = be(lambda x: isinstance(x, int))
    >>> be_dict_of(be_int)({'one': '1', 'three': 3, 'four': 4})
    {'three': 3, 'four': 4}
    >>> be_dict_of(be_int, invalidate='all')({'one': '1', 'three': 3})
    Traceback (most recent call last):
      ...
    begood.exceptions.ElementInvalidError: [one] invalid element (assertion failed on '1' (str))
    """
    return DictDecoder(element_decoder, options, **option_kwargs)


def pipe(*decoders: Decoder) -> PipelineDecoder:
    """
    Compose the given decoders, left to right (see: `PipelineDecoder`).

    >>> be_str = be(lambda x: isinstance(x, str))
    >>> decode_disclaimer = fallback(None)(pipe(get('disclaimer'), be_str))
    >>> decode_disclaimer({'disclaimer': 'Must is a four-letter word'})
    'Must is a four-letter word'
    >>> decode_disclaimer({'disclaimer': 7}) is None
    True
    """
    return PipelineDecoder(*decoders)


def get(key: NameOrIndex) -> ItemGettingDecoder:
    """
    Make a decoder that picks the item of the given key from the input
    object, or the element of the given index from the input array
    (see: `ItemGettingDecoder`).
    """
    return ItemGettingDecoder(key)


def be_in(values: Iterable[Value]) -> PredicateDecoder:
    """
    Make a decoder that accepts only the given values (a member must
    be of the same type as, and equal to, one of them).

    >>> be_trial = be_in(['started', 'error'])
    >>> be_trial('error')
    'error'
    >>> be_trial('fugue')
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: assertion failed on 'fugue' (str)

    >>> be_in([0, 1])(False)
    Traceback (most recent call last):
      ...
    begood.exceptions.ShapeMismatchError: assertion failed on False (bool)
    """
    return PredicateDecoder(_MembershipPredicate(values))
