# Copyright (c) 2020-2026 NASK. All rights reserved.

import sys

from begood.class_helpers import MISSING


#: The maximum length of the *display form* of a value (see:
#: `display_value()`), including the cut indicator.
MAX_DISPLAY_LENGTH = 200

CUT_INDICATOR = '[...]'


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only `str`.

    This function does its best to obtain a string representation
    (possibly `str`-like or `bytes`-like converted to `str`, though
    `repr()` can also be used as the last-resort fallback) and then
    escapes any non-ASCII characters -- *not raising* any
    encoding/decoding exceptions.

    >>> ascii_str('')
    ''
    >>> ascii_str(b'')
    ''
    >>> ascii_str('Ala ma kota\nA kot?\n2=2 ')   # pure ASCII str => unchanged
    'Ala ma kota\nA kot?\n2=2 '
    >>> ascii_str(b'Ala ma kota\nA kot?\n2=2 ')
    'Ala ma kota\nA kot?\n2=2 '

    >>> ascii_str('Ech, ale błąd!')       # non-pure-ASCII-str => escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'Ech, ale b\xc5\x82\xc4\x85d!')   # UTF-8 bytes => decoded + escaped
    'Ech, ale b\\u0142\\u0105d!'

    >>> ascii_str(ValueError('Ech, ale błąd!'))
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(42)
    '42'

    >>> class Nasty(object):
    ...     def __str__(self): raise ValueError
    ...     def __repr__(self): return u'really nasŧy!!!'
    ...
    >>> ascii_str(Nasty())
    'really nas\\u0167y!!!'
    """
    if isinstance(obj, str):
        s = obj
    else:
        if isinstance(obj, memoryview):
            obj = bytes(obj)
        if isinstance(obj, (bytes, bytearray)):
            s = obj.decode('utf-8', 'surrogateescape')
        else:
            try:
                s = str(obj)
            except ValueError:
                s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def make_exc_ascii_str(exc=None):
    r"""
    Generate an ASCII-only string representing the (given) exception.

    Args:
        `exc`:
            The given exception instance or a tuple whose length is not
            less than 2 and whose first two items are: the exception
            type and instance (value).  If not given or `None` it will
            be retrieved automatically with `sys.exc_info()`.

    Returns:
        A textual representation (coerced to be an ASCII-only `str`
        instance) of the exception, containing the name of its class
        and, typically, also its normal `str()`-representation.  If
        `exc` was not given (or given as `None`) and auto-retrieval
        failed then the `'Unknown exception (if any)'` string is
        returned.

    >>> make_exc_ascii_str(RuntimeError('whoops!'))
    'RuntimeError: whoops!'
    >>> make_exc_ascii_str((RuntimeError, RuntimeError('whoops!')))
    'RuntimeError: whoops!'
    >>> make_exc_ascii_str((RuntimeError, None))
    'RuntimeError'
    >>> make_exc_ascii_str(ValueError('Zaż\xf3łć!'))
    'ValueError: Za\\u017c\\xf3\\u0142\\u0107!'

    >>> try:
    ...     raise RuntimeError('whoops!')
    ... except Exception:
    ...     exc_string = make_exc_ascii_str()
    ...
    >>> exc_string
    'RuntimeError: whoops!'

    >>> make_exc_ascii_str()
    'Unknown exception (if any)'
    """
    if exc is None or isinstance(exc, tuple):
        if exc is None:
            exc = sys.exc_info()[:2]
        assert isinstance(exc, tuple)
        exc_type, exc = exc[:2]
        if exc is None and exc_type is not None:
            # Note: to be consistent with standard error displays
            # we use the exc type's `__name__`, not `__qualname__`.
            return ascii_str(exc_type.__name__)
    if exc is None:
        return 'Unknown exception (if any)'
    return '{}: {}'.format(ascii_str(type(exc).__name__), ascii_str(exc))


def type_tag(value):
    """
    Get the runtime type tag of the given value, i.e., the name of its
    type (or `'missing'` for the `MISSING` marker).

    >>> type_tag('20')
    'str'
    >>> type_tag(None)
    'NoneType'
    >>> type_tag([1, 2])
    'list'
    >>> type_tag(MISSING)
    'missing'
    """
    if value is MISSING:
        return 'missing'
    return ascii_str(type(value).__qualname__)


def display_value(value, max_length=None):
    """
    Get the *display form* of the given value: its ASCII-only `repr()`
    (so any textual value is quoted), cut if longer than `max_length`
    (default: `MAX_DISPLAY_LENGTH`).

    >>> display_value('20')
    "'20'"
    >>> display_value(20)
    '20'
    >>> display_value('Ech, ale błąd!')
    "'Ech, ale b\\\\u0142\\\\u0105d!'"
    >>> display_value(list(range(100)), max_length=20)
    '[0, 1, 2, 3, 4,[...]'
    """
    if max_length is None:
        max_length = MAX_DISPLAY_LENGTH
    try:
        displayed = ascii(value)
    except Exception:
        displayed = object.__repr__(value)
    if len(displayed) > max_length:
        displayed = displayed[:max(max_length - len(CUT_INDICATOR), 0)] + CUT_INDICATOR
    return displayed


def describe_value(value):
    """
    Get a human-readable description of the given value: its display
    form followed by its type tag in parentheses.

    >>> describe_value('20')
    "'20' (str)"
    >>> describe_value(None)
    'None (NoneType)'
    >>> describe_value({'a': 1})
    "{'a': 1} (dict)"
    """
    return '{} ({})'.format(display_value(value), type_tag(value))
