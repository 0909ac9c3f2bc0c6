# Copyright (c) 2020-2026 NASK. All rights reserved.

import collections
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from begood import MISSING
from begood.guards import (
    is_array,
    is_object,
)


@expand
class TestGuards(unittest.TestCase):

    @foreach(
        param({}, is_object=True, is_array=False),
        param({'a': 1}, is_object=True, is_array=False),
        param(collections.OrderedDict(a=1), is_object=True, is_array=False),
        param([], is_object=False, is_array=True),
        param([1, 'two'], is_object=False, is_array=True),
        param((1, 2), is_object=False, is_array=True),
        param(range(3), is_object=False, is_array=True),
        param('abc', is_object=False, is_array=False),
        param('', is_object=False, is_array=False),
        param(b'abc', is_object=False, is_array=False),
        param(bytearray(b'abc'), is_object=False, is_array=False),
        param({1, 2}, is_object=False, is_array=False),
        param(None, is_object=False, is_array=False),
        param(MISSING, is_object=False, is_array=False),
        param(0, is_object=False, is_array=False),
        param(3.14, is_object=False, is_array=False),
        param(False, is_object=False, is_array=False),
        param(iter([1, 2]), is_object=False, is_array=False),
        param(len, is_object=False, is_array=False),
    )
    def test_is_object_and_is_array(self, value, **expected):
        self.assertIs(is_object(value), expected['is_object'])
        self.assertIs(is_array(value), expected['is_array'])
