# Copyright (c) 2020-2026 NASK. All rights reserved.

import dataclasses
from typing import Literal


INVALIDATE_SINGLE = 'single'
INVALIDATE_ALL = 'all'

InvalidatePolicy = Literal['single', 'all']


@dataclasses.dataclass(frozen=True)
class CollectionOptions:

    """
    The (immutable) configuration of a collection decoder
    (see: `be_array_of()` and `be_dict_of()`).

    Fields:

        `invalidate` (default: `'single'`):
            What to invalidate when the element decoder fails for an
            element:

            * `'single'` (`INVALIDATE_SINGLE`) -- just that element (it
              is omitted, and the decoding of the collection continues);
            * `'all'` (`INVALIDATE_ALL`) -- the whole collection (the
              decoding of the collection fails immediately).

        `min_size` (default: `0`):
            The minimum number of *successfully decoded* elements; if
            there are fewer of them, the decoding of the collection
            fails.

    >>> CollectionOptions()
    CollectionOptions(invalidate='single', min_size=0)
    >>> CollectionOptions(invalidate='all', min_size=3)
    CollectionOptions(invalidate='all', min_size=3)

    >>> CollectionOptions(invalidate='some')
    Traceback (most recent call last):
      ...
    ValueError: invalidate='some' is not one of: 'single', 'all'
    >>> CollectionOptions(min_size=-1)
    Traceback (most recent call last):
      ...
    ValueError: min_size=-1 is negative
    >>> CollectionOptions(min_size='3')
    Traceback (most recent call last):
      ...
    TypeError: min_size='3' is not an int
    """

    invalidate: InvalidatePolicy = INVALIDATE_SINGLE
    min_size: int = 0

    def __post_init__(self):
        if self.invalidate not in (INVALIDATE_SINGLE, INVALIDATE_ALL):
            raise ValueError('invalidate={!a} is not one of: {!a}, {!a}'.format(
                self.invalidate,
                INVALIDATE_SINGLE,
                INVALIDATE_ALL))
        if not isinstance(self.min_size, int) or isinstance(self.min_size, bool):
            raise TypeError('min_size={!a} is not an int'.format(self.min_size))
        if self.min_size < 0:
            raise ValueError('min_size={!a} is negative'.format(self.min_size))

    @property
    def invalidates_all(self) -> bool:
        return self.invalidate == INVALIDATE_ALL
