# Copyright (c) 2020-2026 NASK. All rights reserved.

"""
This package provides simple and flexible *decoding* of untrusted,
loosely-typed data (e.g., deserialized JSON): composable *decoders*
either produce values of the expected shape or fail explicitly --
never silently passing malformed data through.

A few motivating examples:

>>> from begood import be, be_array_of, be_dict_of, be_object_of, fallback
>>> be_str = be(lambda x: isinstance(x, str))
>>> be_number = be(lambda x: isinstance(x, (int, float)) and not isinstance(x, bool))

>>> decode_artist = be_object_of({'name': be_str, 'albums': be_number})
>>> decode_input = be_object_of({
...     'id': be_number,
...     'animals': be_array_of(be_str),
...     'artists': be_array_of(fallback('<NULL>')(decode_artist)),
...     'links': be_dict_of(be_str, invalidate='all'),
... })

>>> decode_input({
...     'id': 3,
...     'animals': ['Cat', 'Dog', 'Siren', 9.1],
...     'artists': [{'name': 'Alice', 'albums': 27}, {'name': 'Chuck'}],
...     'links': {'Alidade': 'https://en.wikipedia.org/wiki/Alidade'},
...     'ignored': 'whatever',
... }) == {
...     'id': 3,
...     'animals': ['Cat', 'Dog', 'Siren'],
...     'artists': [{'name': 'Alice', 'albums': 27}, '<NULL>'],
...     'links': {'Alidade': 'https://en.wikipedia.org/wiki/Alidade'},
... }
True

>>> decode_input({
...     'id': 4,
...     'animals': [],
...     'artists': [],
...     'links': {'Alidade': 42},
... })
Traceback (most recent call last):
  ...
begood.exceptions.FieldInvalidError: [links.Alidade] invalid field (assertion failed on 42 (int))
"""

from begood.log_helpers import install_null_handler

install_null_handler()

from begood.class_helpers import MISSING
from begood.decoders import (
    BaseDecoder,
    BaseCollectionDecoder,
    PredicateDecoder,
    FallbackDecoder,
    ObjectDecoder,
    ArrayDecoder,
    DictDecoder,
    PipelineDecoder,
    ItemGettingDecoder,

    be,
    fallback,
    or_,
    be_object,
    be_array,
    be_object_of,
    be_array_of,
    be_dict_of,
    pipe,
    get,
    be_in,
)
from begood.exceptions import (
    UNRECOVERABLE_EXCEPTIONS,
    DecodingError,
    ShapeMismatchError,
    ElementInvalidError,
    SizeViolationError,
    FieldInvalidError,
)
from begood.guards import (
    is_object,
    is_array,
)
from begood.interfaces import Decoder
from begood.options import (
    INVALIDATE_SINGLE,
    INVALIDATE_ALL,
    CollectionOptions,
)


__all__ = [
    'MISSING',

    'BaseDecoder',
    'BaseCollectionDecoder',
    'PredicateDecoder',
    'FallbackDecoder',
    'ObjectDecoder',
    'ArrayDecoder',
    'DictDecoder',
    'PipelineDecoder',
    'ItemGettingDecoder',

    'be',
    'fallback',
    'or_',
    'be_object',
    'be_array',
    'be_object_of',
    'be_array_of',
    'be_dict_of',
    'pipe',
    'get',
    'be_in',

    'UNRECOVERABLE_EXCEPTIONS',
    'DecodingError',
    'ShapeMismatchError',
    'ElementInvalidError',
    'SizeViolationError',
    'FieldInvalidError',

    'is_object',
    'is_array',

    'Decoder',

    'INVALIDATE_SINGLE',
    'INVALIDATE_ALL',
    'CollectionOptions',
]
