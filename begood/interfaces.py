# Copyright (c) 2020-2026 NASK. All rights reserved.

"""
This submodule contains static typing stuff (defining a few abstract
interfaces) used throughout the `begood` package (and, possibly, also
in any modules that make use of the stuff provided by the package).

Note: generally, the static typing stuff does *not* affect the runtime
semantics, in particular, does *not* provide runtime type checks.

TL;DR: take a look at the definitions of `Decoder`, `Predicate`
and `FieldDecoders`.

***

The purpose of the static typing stuff is twofold:

* to provide a part of the code's (self-)documentation;
* to provide PEP-484/PEP-544-based type hints for external static
  analysis tools (such as [mypy](https://mypy.readthedocs.io) or
  those built into PyCharm...).

***

For some object `x` and some abstract interface `Z`, the following
statements are equivalent to each other:

* "`x` is an (implicit) instance of `Z`",
* "`x` supports `Z`",
* "`x` is a `Z`-compliant object".

Note that the class of `x` does *not* have to be an *explicit* subclass
of `Z` (i.e., does *not* have to inherit from `Z`, whether directly or
indirectly).
"""

from collections.abc import (
    Callable,
    Mapping,
)
from typing import (
    Any,
    Protocol,
    TypeVar,
    Union,
)


#
# Interfaces/static types related to decoded data
#

Value = Any

Name = str
NameOrIndex = Union[Name, int]


#
# Basic interfaces/static types of decoders
#

_OutValue_co = TypeVar('_OutValue_co', covariant=True)

class Decoder(Protocol[_OutValue_co]):

    """
    TL;DR: defines an abstract interface of an object that meets the
    following requirements:

    * is a callable that takes one positional argument (the untrusted,
      loosely-typed input data);
    * either returns the decoded value or raises an exception;
    * is stateless and concurrency-safe (in particular, thread-safe).

    For example, any function that accepts one positional argument may
    be treated as a `Decoder`-compliant object.

    Also, any *instances* of the classes defined in the `.decoders`
    submodule are `Decoder`-compliant objects.

    ***

    An additional, **important**, expectation is that a `Decoder` is
    a callable that is stateless and concurrency-safe, in the sense
    that it can be called multiple times and each call is independent
    of other calls -- whether of earlier ones, or later ones, or
    concurrent ones...

    ***

    A decoder signals that the input data are wrong by raising an
    exception -- preferably a `begood.exceptions.DecodingError`
    (e.g., a `ShapeMismatchError`); though *any* exception (except
    those listed in `begood.exceptions.UNRECOVERABLE_EXCEPTIONS`) is
    treated, by the library machinery (`fallback()` and collection
    decoders), as a decoding failure.

    ***

    Note: `.decoders.BaseDecoder` is a base class that provides a
    framework that makes implementing the `Decoder` interface more
    convenient. It is, therefore, *possible but not required* that a
    `Decoder`-compliant object is an instance of a subclass of
    `.decoders.BaseDecoder`.
    """

    def __call__(self, data, /):
        # type: (Value) -> _OutValue_co
        raise NotImplementedError


Predicate = Callable[[Value], Any]

FieldDecoders = Mapping[Name, Decoder]
