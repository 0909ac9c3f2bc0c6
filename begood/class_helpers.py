# Copyright (c) 2013-2026 NASK. All rights reserved.


def attr_repr(*attr_names):
    """
    Make a __repr__() implementation based on given attribute names.

    Any number of positional args:
        Names of instance attributes and/or class attributes.

    Returns:
        A function being the requested __repr__() implementation.

    >>> class A(object):
    ...    __repr__ = attr_repr('x', 'y')
    ...    x = 1
    ...    def __init__(self):
    ...        self.y = 'qwerty'
    >>> a = A()
    >>> a
    <A x=1, y='qwerty'>
    """
    format_repr = ('<{0.__class__.__qualname__} ' +
                   ', '.join('%s={0.%s!r}' % (name, name)
                             for name in attr_names) +
                   '>').format
    format_repr_fallback = object.__repr__

    def __repr__(self):
        # noinspection PyBroadException
        try:
            return format_repr(self)
        except Exception:
            return format_repr_fallback(self)

    return __repr__



class __MissingImpl:

    """
    `MISSING` is a singleton object whose truth value is false; it
    represents the lack of an item in a mapping (it is what a field
    decoder gets when the input object does not contain such a field).

    Unlike `None` (which is what a JSON `null` is deserialized to),
    `MISSING` never appears in deserialized data.

    >>> MISSING
    <missing>
    >>> bool(MISSING)
    False
    >>> MISSING is MISSING
    True
    >>> MISSING == None
    False
    >>> type(MISSING)() is MISSING
    True
    >>> import copy
    >>> copy.deepcopy(MISSING) is MISSING
    True
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return '<missing>'

    def __reduce__(self):
        return 'MISSING'

MISSING = __MissingImpl()
